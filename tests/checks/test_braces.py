"""
Tests for IfElseSameBracesCheck and NecessaryBracesCheck.
"""

import pytest

from grumpinessy.checks.braces import IfElseSameBracesCheck, NecessaryBracesCheck
from grumpinessy.errors import UnsupportedNodeError
from tests.trees import block, else_stmt, expr, if_stmt, loop, n, run_check


def same_braces(root):
  return run_check(IfElseSameBracesCheck(), root)


def necessary_braces(root):
  return run_check(NecessaryBracesCheck(), root)


# --- if/else brace consistency ---


def test_braced_if_with_bare_else():
  """`if (x) { y(); } else z();`"""
  root = if_stmt(1, block(1, 1, expr(1)), else_stmt(1, expr(1)))
  diagnostics = same_braces(root)
  assert [d.key for d in diagnostics] == ["if.else.should.both.have.braces"]


def test_bare_if_with_braced_else():
  root = if_stmt(1, expr(2), else_stmt(3, block(3, 5, expr(4))))
  diagnostics = same_braces(root)
  assert len(diagnostics) == 1
  # Anchored at the else keyword
  assert diagnostics[0].line == 3


def test_neither_braced():
  root = if_stmt(1, expr(1), else_stmt(1, expr(1)))
  assert same_braces(root) == []


def test_both_braced():
  root = if_stmt(1, block(1, 3, expr(2)), else_stmt(3, block(3, 5, expr(4))))
  assert same_braces(root) == []


def test_else_if_uses_nested_if_braces():
  """`if (x) { } else if (y) { }` compares against the nested if's block."""
  nested = if_stmt(3, block(3, 5, expr(4)))
  root = if_stmt(1, block(1, 3, expr(2)), else_stmt(3, nested))
  assert same_braces(root) == []


def test_else_if_without_braces_after_braced_if():
  nested = if_stmt(3, expr(4))
  root = if_stmt(1, block(1, 3, expr(2)), else_stmt(3, nested))
  assert len(same_braces(root)) == 1


def test_else_if_chain_checks_each_pair():
  """`if (a) x(); else if (b) y(); else { z(); }` flags only the last pair."""
  inner = if_stmt(2, expr(2), else_stmt(3, block(3, 3, expr(3))))
  root = if_stmt(1, expr(1), else_stmt(2, inner))
  diagnostics = same_braces(root)
  assert len(diagnostics) == 1
  assert diagnostics[0].line == 3


def test_empty_else_is_contract_violation():
  check = IfElseSameBracesCheck()
  with pytest.raises(UnsupportedNodeError):
    check.visit_token(n("LITERAL_ELSE", 1))


# --- mandatory braces ---


def test_multiline_if_body_without_braces():
  root = if_stmt(1, expr(2, 3))
  diagnostics = necessary_braces(root)
  assert [d.key for d in diagnostics] == ["braces.are.mandatory.for.multiline"]
  # Anchored at the body
  assert diagnostics[0].line == 2


def test_single_line_body_on_next_line_is_exempt():
  root = if_stmt(1, expr(2))
  assert necessary_braces(root) == []


def test_multiline_braced_body_is_fine():
  root = if_stmt(1, block(1, 4, expr(2, 3)))
  assert necessary_braces(root) == []


def test_multiline_else_body_without_braces():
  root = if_stmt(1, block(1, 1), else_stmt(2, expr(2, 4)))
  diagnostics = necessary_braces(root)
  assert len(diagnostics) == 1
  assert diagnostics[0].line == 2


def test_else_if_is_not_a_body():
  """The nested if spans several lines but is not itself a body needing braces."""
  nested = if_stmt(3, block(3, 6, expr(4, 5)))
  root = if_stmt(1, block(1, 3), else_stmt(3, nested))
  assert necessary_braces(root) == []


@pytest.mark.parametrize("kind", ["LITERAL_FOR", "LITERAL_WHILE"])
def test_multiline_loop_body_without_braces(kind):
  root = loop(kind, 1, expr(2, 3))
  assert len(necessary_braces(root)) == 1


@pytest.mark.parametrize("kind", ["LITERAL_FOR", "LITERAL_WHILE"])
def test_single_line_loop_body(kind):
  root = loop(kind, 1, expr(1))
  assert necessary_braces(root) == []


def test_nested_statement_body_spanning_lines():
  """`for (...)\\n if (x) {\\n ...\\n }` needs braces around the if."""
  inner = if_stmt(2, block(2, 4, expr(3)))
  root = loop("LITERAL_FOR", 1, inner)
  diagnostics = necessary_braces(root)
  assert len(diagnostics) == 1
  assert diagnostics[0].line == 2


def test_unsubscribed_kind_is_contract_violation():
  check = NecessaryBracesCheck()
  with pytest.raises(UnsupportedNodeError):
    check.visit_token(n("LITERAL_DO", 1))
