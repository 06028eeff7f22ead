"""
Tests for the node kind vocabulary.
"""

import pytest

from grumpinessy.enums import TokenType


def test_builtin_kinds_are_known():
  assert TokenType("LITERAL_VOID") is TokenType.LITERAL_VOID
  assert TokenType.SINGLE_LINE_COMMENT.is_known
  assert TokenType.LAMBDA == "LAMBDA"


def test_opaque_kind_is_cached():
  kind = TokenType("YIELD_PATTERN_V2")
  assert kind is TokenType("YIELD_PATTERN_V2")
  assert kind.value == kind.name == "YIELD_PATTERN_V2"
  assert not kind.is_known
  assert kind not in (TokenType.IDENT, TokenType.DOT)


@pytest.mark.parametrize("value", ["not a kind", "", "1ST", 7])
def test_non_identifier_rejected(value):
  with pytest.raises(ValueError):
    TokenType(value)
