"""
Base Check Protocol and Registry.

Every style check subclasses `BaseCheck` and declares the node kinds it wants
to see in its class-level `tokens` tuple. A traversal driver (see
`grumpinessy.walker`) then calls, per tree:

1.  `begin_tree(root)` once, before any node is visited.
2.  `visit_token(node)` for each subscribed node, before its children.
3.  `leave_token(node)` for each subscribed node, after its children.
4.  `finish_tree(root)` once, after the whole tree has been traversed.

Checks are registered by name with the `register_check` decorator so they can
be enabled from configuration.
"""

from typing import Any, Dict, List, Optional, Tuple, Type

from grumpinessy.diagnostics import Diagnostic, Reporter
from grumpinessy.enums import TokenType
from grumpinessy.syntax import SyntaxNode


class BaseCheck:
  """
  Abstract style check.

  Attributes:
      name (str): Registry name, assigned by `register_check`.
      tokens (Tuple[TokenType, ...]): Node kinds this check subscribes to.
  """

  name: str = ""
  tokens: Tuple[TokenType, ...] = ()

  def __init__(self, reporter: Optional[Reporter] = None):
    self.reporter = reporter

  def begin_tree(self, root: SyntaxNode) -> None:
    """Resets tree-scoped state. Stateless checks need not override this."""

  def visit_token(self, node: SyntaxNode) -> None:
    """Called for each subscribed node before its children are processed."""

  def leave_token(self, node: SyntaxNode) -> None:
    """Called for each subscribed node after its children are processed."""

  def finish_tree(self, root: SyntaxNode) -> None:
    """Called once the whole tree has been traversed."""

  def log(self, node: SyntaxNode, key: str, *args: Any) -> None:
    """
    Reports a violation anchored at `node`.

    Args:
        node: The node the diagnostic points at.
        key: The message key.
        *args: Positional message arguments.
    """
    if self.reporter is None:
      raise RuntimeError(f"Check '{self.name}' has no reporter attached")
    self.reporter.report(Diagnostic(line=node.line, column=node.column, key=key, args=args, check=self.name))


_CHECK_REGISTRY: Dict[str, Type[BaseCheck]] = {}


def register_check(name: str):
  def wrapper(cls):
    cls.name = name
    _CHECK_REGISTRY[name] = cls
    return cls

  return wrapper


def available_checks() -> List[str]:
  """
  Returns the names of all registered checks, in registration order.

  Returns:
      List[str]: Check names.
  """
  return list(_CHECK_REGISTRY.keys())


def get_check_class(name: str) -> Optional[Type[BaseCheck]]:
  return _CHECK_REGISTRY.get(name)
