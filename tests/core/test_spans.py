"""
Tests for span computation over subtrees.
"""

import sys

from grumpinessy.spans import CodeSpan, LineSpan, Location, get_code_span, get_line_span, is_multiline_node
from tests.trees import n


def test_location_ordering():
  assert Location(1, 9) < Location(2, 0)
  assert Location(2, 1) > Location(2, 0)


def test_leaf_span_is_its_position():
  span = get_code_span(n("IDENT", 4, 2))
  assert span == CodeSpan(Location(4, 2), Location(4, 2))


def test_span_covers_descendants():
  """The parent position need not be the earliest one (e.g. DOT sits after its receiver)."""
  root = n("DOT", 1, 5, n("IDENT", 1, 0), n("METHOD_CALL", 2, 3, n("RPAREN", 3, 1)))
  span = get_code_span(root)
  assert span.start == Location(1, 0)
  assert span.end == Location(3, 1)


def test_cover_is_component_wise():
  a = CodeSpan(Location(2, 0), Location(3, 0))
  b = CodeSpan(Location(1, 4), Location(2, 8))
  assert a.cover(b) == CodeSpan(Location(1, 4), Location(3, 0))


def test_line_span():
  root = n("EXPR", 2, 0, n("IDENT", 2), n("IDENT", 5))
  assert get_line_span(root) == LineSpan(2, 5)
  assert is_multiline_node(root)


def test_single_line_subtree():
  root = n("EXPR", 2, 0, n("IDENT", 2, 4), n("IDENT", 2, 9))
  assert not is_multiline_node(root)
  assert not LineSpan(7, 7).is_multiline


def test_deep_subtree_does_not_recurse():
  depth = sys.getrecursionlimit() + 50
  node = n("IDENT", depth + 1, 0)
  for line in range(depth, 0, -1):
    node = n("PLUS", line, 0, node)
  assert get_line_span(node) == LineSpan(1, depth + 1)
  assert get_code_span(node).end == Location(depth + 1, 0)
