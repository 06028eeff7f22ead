"""
Syntax Tree Model.

Checks consume trees of `SyntaxNode` objects produced elsewhere (typically by
an external parser, see `grumpinessy.ingestion`). A node carries its kind, the
text of the token it starts with, its position, and links to its parent and
children. Checks only read trees; nothing in this package mutates a tree after
it has been built.

Position conventions:
    - `line` is 1-based and `column` is 0-based.
    - A `METHOD_CALL` node is positioned at its opening parenthesis.
    - Brace-delimited statement bodies are `SLIST` nodes.
"""

from typing import Iterator, List, Optional, Sequence

from grumpinessy.enums import TokenType


class SyntaxNode:
  """
  A node of a parsed syntax tree.

  Children passed to the constructor are adopted: their `parent` link is set
  to the new node.

  Attributes:
      kind (TokenType): The node kind.
      text (str): Token text (identifier name, keyword, punctuation).
      line (int): 1-based source line.
      column (int): 0-based source column.
      parent (Optional[SyntaxNode]): Enclosing node, None for the root.
  """

  __slots__ = ("kind", "text", "line", "column", "parent", "_children", "_index")

  def __init__(
    self,
    kind: TokenType,
    line: int,
    column: int = 0,
    children: Optional[Sequence["SyntaxNode"]] = None,
    text: str = "",
  ):
    self.kind = kind
    self.text = text
    self.line = line
    self.column = column
    self.parent: Optional["SyntaxNode"] = None
    self._index = 0
    self._children: List["SyntaxNode"] = []
    for child in children or ():
      self.append(child)

  def append(self, child: "SyntaxNode") -> "SyntaxNode":
    """
    Attaches a child node as the last child. Used while building a tree.

    Args:
        child: The node to adopt.

    Returns:
        The adopted child.
    """
    child.parent = self
    child._index = len(self._children)
    self._children.append(child)
    return child

  @property
  def children(self) -> Sequence["SyntaxNode"]:
    """Children in source order."""
    return tuple(self._children)

  @property
  def first_child(self) -> Optional["SyntaxNode"]:
    return self._children[0] if self._children else None

  @property
  def next_sibling(self) -> Optional["SyntaxNode"]:
    """
    The node following this one under the same parent, if any.
    """
    if self.parent is None:
      return None
    siblings = self.parent._children
    if self._index + 1 < len(siblings):
      return siblings[self._index + 1]
    return None

  def iter_children(self) -> Iterator["SyntaxNode"]:
    return iter(self._children)

  def find_first_token(self, kind: TokenType) -> Optional["SyntaxNode"]:
    """
    Finds the first direct child of the given kind.

    Args:
        kind: The node kind to look for.

    Returns:
        The first matching child, or None.
    """
    for child in self._children:
      if child.kind == kind:
        return child
    return None

  def walk(self) -> Iterator["SyntaxNode"]:
    """Yields this node and all of its descendants in pre-order."""
    stack = [self]
    while stack:
      node = stack.pop()
      yield node
      stack.extend(reversed(node._children))

  def __repr__(self) -> str:
    label = f" {self.text!r}" if self.text else ""
    return f"SyntaxNode({self.kind.value}{label} @ {self.line}:{self.column})"
