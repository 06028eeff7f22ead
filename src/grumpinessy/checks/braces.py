"""
Brace Usage Checks.

- `IfElseSameBracesCheck`: an `if` and its alternative either both use braces
  or neither does.
- `NecessaryBracesCheck`: a statement body that spans several lines must be
  wrapped in braces. Single-line bodies are exempt.
"""

from grumpinessy.checks.base import BaseCheck, register_check
from grumpinessy.enums import TokenType
from grumpinessy.errors import UnsupportedNodeError
from grumpinessy.spans import is_multiline_node
from grumpinessy.syntax import SyntaxNode


def _has_braces(node: SyntaxNode) -> bool:
  return node.find_first_token(TokenType.SLIST) is not None


@register_check("if_else_same_braces")
class IfElseSameBracesCheck(BaseCheck):
  """
  Flags `else` branches whose brace usage differs from their `if`.

  For `else if`, the nested `if`'s own body is compared, not the `else`.
  """

  tokens = (TokenType.LITERAL_ELSE,)

  def visit_token(self, node: SyntaxNode) -> None:
    if_node = node.parent
    first = node.first_child
    if if_node is None or first is None:
      raise UnsupportedNodeError(node, "Malformed else branch")

    alternative = first if first.kind == TokenType.LITERAL_IF else node
    if _has_braces(if_node) != _has_braces(alternative):
      self.log(node, "if.else.should.both.have.braces")


@register_check("necessary_braces")
class NecessaryBracesCheck(BaseCheck):
  """
  Flags multi-line `if`/`else`/`for`/`while` bodies lacking braces.
  """

  tokens = (
    TokenType.LITERAL_IF,
    TokenType.LITERAL_ELSE,
    TokenType.LITERAL_FOR,
    TokenType.LITERAL_WHILE,
  )

  def visit_token(self, node: SyntaxNode) -> None:
    body = self._get_body(node)
    if body is None:
      return

    is_else_if = node.kind == TokenType.LITERAL_ELSE and body.kind == TokenType.LITERAL_IF
    if not is_else_if and body.kind != TokenType.SLIST and is_multiline_node(body):
      self.log(body, "braces.are.mandatory.for.multiline")

  def _get_body(self, node: SyntaxNode):
    if node.kind in (TokenType.LITERAL_IF, TokenType.LITERAL_FOR, TokenType.LITERAL_WHILE):
      rparen = node.find_first_token(TokenType.RPAREN)
      if rparen is None:
        raise UnsupportedNodeError(node, "Statement without closing parenthesis")
      return rparen.next_sibling
    elif node.kind == TokenType.LITERAL_ELSE:
      return node.first_child
    raise UnsupportedNodeError(node, "Unsupported node type")
