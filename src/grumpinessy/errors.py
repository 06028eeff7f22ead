"""
Exception hierarchy for grumpinessy.

Style violations are never exceptions; they are reported as diagnostics.
Exceptions are reserved for defects in wiring, configuration or input.
"""

from grumpinessy.syntax import SyntaxNode


class GrumpinessyError(Exception):
  """Base class for all errors raised by this package."""


class UnsupportedNodeError(GrumpinessyError):
  """
  Raised when a check is handed a node kind it cannot classify.

  This signals a subscription defect: the traversal driver routed a kind to a
  check that does not handle it.

  Attributes:
      node (SyntaxNode): The offending node.
  """

  def __init__(self, node: SyntaxNode, context: str = "Unknown syntax node"):
    self.node = node
    super().__init__(f"{context}: {node.kind.value}: {node.text!r} at {node.line}:{node.column}")


class ConfigError(GrumpinessyError):
  """Raised when analyzer configuration is invalid."""


class TreeLoadError(GrumpinessyError):
  """Raised when a serialized syntax tree cannot be loaded."""
