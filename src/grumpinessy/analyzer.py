"""
Analysis Entry Points.

Wires configuration, checks, the tree walker and a reporter together.

A walker and its checks hold per-tree state, so one walker must not be used
for two trees at the same time. Analyzing trees in parallel means building
one walker per worker with `build_walker`.
"""

import logging
from typing import List, Optional

from pydantic import BaseModel, Field

from grumpinessy.checks import MembersOrderCheck, get_check_class
from grumpinessy.checks.base import BaseCheck
from grumpinessy.config import AnalyzerConfig
from grumpinessy.diagnostics import CollectingReporter, Diagnostic, Reporter
from grumpinessy.errors import ConfigError
from grumpinessy.syntax import SyntaxNode
from grumpinessy.walker import CheckFailure, TreeWalker

logger = logging.getLogger(__name__)


class AnalysisResult(BaseModel):
  """
  Outcome of analyzing a single tree.
  """

  diagnostics: List[Diagnostic] = Field(default_factory=list, description="Violations, in report order.")
  failures: List[CheckFailure] = Field(default_factory=list, description="Checks that aborted on the tree.")

  @property
  def success(self) -> bool:
    """
    True if every check completed on the tree.
    """
    return not self.failures

  @property
  def has_violations(self) -> bool:
    return len(self.diagnostics) > 0


def get_check(name: str, config: AnalyzerConfig, reporter: Optional[Reporter] = None) -> BaseCheck:
  """
  Instantiates a registered check with its configured options.

  Args:
      name: Registry name of the check.
      config: The analyzer configuration.
      reporter: Sink receiving the check's diagnostics.

  Returns:
      BaseCheck: The ready-to-use check.

  Raises:
      ConfigError: If no check is registered under `name`.
  """
  cls = get_check_class(name)
  if cls is None:
    raise ConfigError(f"Unknown check: '{name}'")
  if issubclass(cls, MembersOrderCheck):
    try:
      table = config.member_order.to_table()
    except ValueError as e:
      raise ConfigError(str(e)) from e
    return cls(reporter, table=table)
  return cls(reporter)


def build_walker(config: Optional[AnalyzerConfig] = None, reporter: Optional[Reporter] = None) -> TreeWalker:
  """
  Builds a walker running every enabled check.

  Args:
      config: The analyzer configuration (defaults to all checks, default order).
      reporter: Sink receiving diagnostics of all checks.

  Returns:
      TreeWalker: A walker for one tree at a time.
  """
  config = config or AnalyzerConfig()
  checks = [get_check(name, config, reporter) for name in config.checks]
  logger.debug("Enabled checks: %s", ", ".join(check.name for check in checks))
  return TreeWalker(checks)


def analyze_tree(root: SyntaxNode, config: Optional[AnalyzerConfig] = None) -> AnalysisResult:
  """
  Runs the enabled checks over one tree and collects the results.

  Args:
      root: Root of the syntax tree.
      config: The analyzer configuration.

  Returns:
      AnalysisResult: Diagnostics and check failures for the tree.
  """
  reporter = CollectingReporter()
  walker = build_walker(config, reporter)
  failures = walker.process(root)
  return AnalysisResult(diagnostics=reporter.diagnostics, failures=failures)
