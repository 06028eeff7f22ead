"""
Tree Walker.

This module provides `TreeWalker`, the traversal driver that feeds a syntax
tree to a set of checks. Each check receives `visit_token` for the node kinds
it subscribes to before the node's children are traversed, and `leave_token`
after all of them have been.

A check that raises `UnsupportedNodeError` has hit a wiring defect. The walker
logs the failure, records it as a `CheckFailure`, and stops dispatching to
that check for the rest of the current tree. The remaining checks are not
affected.
"""

import logging
from typing import Dict, Iterable, List, Set

from pydantic import BaseModel, Field

from grumpinessy.checks.base import BaseCheck
from grumpinessy.enums import TokenType
from grumpinessy.errors import UnsupportedNodeError
from grumpinessy.syntax import SyntaxNode

logger = logging.getLogger(__name__)


class CheckFailure(BaseModel):
  """
  Record of a check that aborted on a tree.
  """

  check: str = Field(..., description="Registry name of the failed check.")
  message: str = Field(..., description="Description of the contract violation.")
  line: int = Field(0, description="Line of the node that caused the failure.")
  column: int = Field(0, description="Column of the node that caused the failure.")


class TreeWalker:
  """
  Depth-first traversal driver for a fixed set of checks.

  Attributes:
      checks (List[BaseCheck]): Checks in registration order.
  """

  def __init__(self, checks: Iterable[BaseCheck]):
    self.checks: List[BaseCheck] = list(checks)
    self._subscriptions: Dict[TokenType, List[BaseCheck]] = {}
    for check in self.checks:
      for kind in check.tokens:
        self._subscriptions.setdefault(kind, []).append(check)
    self._failed: Set[int] = set()
    self._failures: List[CheckFailure] = []

  def process(self, root: SyntaxNode) -> List[CheckFailure]:
    """
    Runs all checks over one tree.

    Args:
        root: Root of the tree to analyze.

    Returns:
        List[CheckFailure]: Checks that aborted on this tree (empty when all completed).
    """
    self._failed = set()
    self._failures = []

    for check in self.checks:
      self._call(check, check.begin_tree, root)

    # Explicit stack of (node, leaving) pairs to avoid recursion limits on deep trees.
    stack = [(root, False)]
    while stack:
      node, leaving = stack.pop()
      if leaving:
        self._notify(node, leave=True)
        continue
      self._notify(node, leave=False)
      stack.append((node, True))
      stack.extend((child, False) for child in reversed(node.children))

    for check in self.checks:
      self._call(check, check.finish_tree, root)

    return list(self._failures)

  def _notify(self, node: SyntaxNode, leave: bool) -> None:
    for check in self._subscriptions.get(node.kind, ()):
      callback = check.leave_token if leave else check.visit_token
      self._call(check, callback, node)

  def _call(self, check: BaseCheck, callback, node: SyntaxNode) -> None:
    if id(check) in self._failed:
      return
    try:
      callback(node)
    except UnsupportedNodeError as e:
      self._failed.add(id(check))
      failed_at = e.node
      logger.error("Check '%s' aborted: %s", check.name, e)
      self._failures.append(CheckFailure(check=check.name, message=str(e), line=failed_at.line, column=failed_at.column))
