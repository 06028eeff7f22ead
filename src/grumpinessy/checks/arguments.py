"""
Argument Line-Break Check.

Once an argument or parameter list is not written on a single line, every
item must sit on its own line, starting on the line after the opening
parenthesis, and the closing parenthesis must come after the last item's line.
"""

from typing import Optional

from grumpinessy.checks.base import BaseCheck, register_check
from grumpinessy.enums import TokenType
from grumpinessy.errors import UnsupportedNodeError
from grumpinessy.syntax import SyntaxNode

_PARAMETER_LISTS = {
  TokenType.METHOD_CALL: TokenType.ELIST,
  TokenType.LITERAL_NEW: TokenType.ELIST,
  TokenType.METHOD_DEF: TokenType.PARAMETERS,
  TokenType.CTOR_DEF: TokenType.PARAMETERS,
  TokenType.RECORD_DEF: TokenType.RECORD_COMPONENTS,
}


def _paren_line(node: SyntaxNode, paren: TokenType) -> int:
  # Method calls sit at their own "(" and parameterless records have no parens.
  token = node.find_first_token(paren)
  return node.line if token is None else token.line


@register_check("method_call_line_breaks")
class MethodCallLineBreaksCheck(BaseCheck):
  """
  Enforces one argument per line in multi-line calls and declarations.
  """

  tokens = tuple(_PARAMETER_LISTS)

  def visit_token(self, node: SyntaxNode) -> None:
    left_line = _paren_line(node, TokenType.LPAREN)
    right_line = _paren_line(node, TokenType.RPAREN)
    if left_line == right_line:
      return

    expected_line = left_line + 1
    parameters = self._get_parameters(node)
    parameter = parameters.first_child if parameters is not None else None
    while parameter is not None:
      if parameter.line < expected_line:
        self.log(node, "multiple.arguments.on.one.line", parameter.line, expected_line, left_line, right_line)
        return
      expected_line = parameter.line + 1
      parameter = parameter.next_sibling
      if parameter is not None and parameter.kind == TokenType.COMMA:
        expected_line = parameter.line + 1
        parameter = parameter.next_sibling

    if right_line < expected_line:
      rparen = node.find_first_token(TokenType.RPAREN)
      self.log(rparen or node, "multiple.arguments.on.one.line", right_line, expected_line, left_line, right_line)

  def _get_parameters(self, node: SyntaxNode) -> Optional[SyntaxNode]:
    list_kind = _PARAMETER_LISTS.get(node.kind)
    if list_kind is None:
      raise UnsupportedNodeError(node, "Unsupported syntax")
    return node.find_first_token(list_kind)
