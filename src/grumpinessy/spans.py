"""
Source Span Utilities.

Pure helpers computing the source range covered by a node and all of its
descendants. A node's own position is only where its first token starts, so
the extent of a subtree is found by folding `cover` over the positions of
every node in it. The fold runs over `SyntaxNode.walk`, which uses an explicit
stack, so arbitrarily deep subtrees are fine.
"""

from dataclasses import dataclass
from functools import reduce

from grumpinessy.syntax import SyntaxNode


@dataclass(frozen=True, order=True)
class Location:
  """
  A (line, column) position, ordered by line then column.
  """

  line: int
  column: int

  @staticmethod
  def of(node: SyntaxNode) -> "Location":
    return Location(node.line, node.column)


@dataclass(frozen=True)
class CodeSpan:
  """
  The range between two locations, both inclusive.
  """

  start: Location
  end: Location

  def cover(self, other: "CodeSpan") -> "CodeSpan":
    """
    Returns the smallest span containing both spans.

    Args:
        other: The span to merge with.

    Returns:
        CodeSpan: Component-wise (min start, max end).
    """
    return CodeSpan(min(self.start, other.start), max(self.end, other.end))


@dataclass(frozen=True)
class LineSpan:
  """
  Line-only projection of a span.
  """

  start: int
  end: int

  def cover(self, other: "LineSpan") -> "LineSpan":
    return LineSpan(min(self.start, other.start), max(self.end, other.end))

  @property
  def is_multiline(self) -> bool:
    return self.start < self.end


def get_code_span(node: SyntaxNode) -> CodeSpan:
  """
  Computes the bounding span of a node and all of its descendants.

  Args:
      node: Root of the subtree.

  Returns:
      CodeSpan: The covering span.
  """
  location = Location.of(node)
  return reduce(
    lambda span, descendant: span.cover(CodeSpan(Location.of(descendant), Location.of(descendant))),
    node.walk(),
    CodeSpan(location, location),
  )


def get_line_span(node: SyntaxNode) -> LineSpan:
  """
  Computes the first and last line touched by a node's subtree.

  Args:
      node: Root of the subtree.

  Returns:
      LineSpan: The covering line range.
  """
  return reduce(
    lambda span, descendant: span.cover(LineSpan(descendant.line, descendant.line)),
    node.walk(),
    LineSpan(node.line, node.line),
  )


def is_multiline_node(node: SyntaxNode) -> bool:
  """Whether the subtree rooted at `node` spans more than one line."""
  return get_line_span(node).is_multiline
