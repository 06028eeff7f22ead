"""
Tests for the SyntaxNode tree model.
"""

from grumpinessy.enums import TokenType
from grumpinessy.syntax import SyntaxNode
from tests.trees import n


def test_children_are_adopted():
  child = SyntaxNode(TokenType.IDENT, 1, text="x")
  parent = SyntaxNode(TokenType.EXPR, 1, children=[child])
  assert child.parent is parent
  assert parent.first_child is child
  assert parent.parent is None


def test_next_sibling():
  a, b = n("IDENT", 1, text="a"), n("IDENT", 1, text="b")
  parent = n("ELIST", 1, 0, a, b)
  assert a.next_sibling is b
  assert b.next_sibling is None
  assert parent.next_sibling is None


def test_find_first_token_only_looks_at_children():
  nested = n("DOT", 1, 0, n("IDENT", 1), n("IDENT", 1))
  root = n("IMPORT", 1, 0, nested, n("SEMI", 1))
  assert root.find_first_token(TokenType.DOT) is nested
  assert root.find_first_token(TokenType.IDENT) is None


def test_walk_is_pre_order():
  root = n("EXPR", 1, 0, n("DOT", 1, 0, n("IDENT", 1, text="a"), n("IDENT", 1, text="b")), n("SEMI", 1))
  kinds = [node.kind.value for node in root.walk()]
  assert kinds == ["EXPR", "DOT", "IDENT", "IDENT", "SEMI"]


def test_children_tuple_is_read_only_view():
  root = n("EXPR", 1, 0, n("IDENT", 1))
  assert isinstance(root.children, tuple)
  assert len(root.children) == 1


def test_repr_mentions_kind_and_position():
  node = n("IDENT", 3, 7, text="value")
  assert repr(node) == "SyntaxNode(IDENT 'value' @ 3:7)"


def test_next_sibling_in_long_list():
  items = [n("IDENT", 1, column, text=f"a{column}") for column in range(500)]
  n("ELIST", 1, 0, *items)
  assert all(a.next_sibling is b for a, b in zip(items, items[1:]))
  assert items[-1].next_sibling is None
