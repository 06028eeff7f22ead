"""
Method Call Chain Line-Break Check.

Inspects chains of dot-qualified method calls (`a.b().c().d()`), looking at
most three links deep from every call:

1.  Two links: when the chain is broken across lines, a multi-line first call
    must itself start on its own line, so it is visually separated from the
    rest of the chain.
2.  Three links: either every link is on its own line or none is. Collapsing
    exactly two adjacent links onto one line is flagged.
"""

from typing import List, Optional

from grumpinessy.checks.base import BaseCheck, register_check
from grumpinessy.enums import TokenType
from grumpinessy.spans import get_code_span
from grumpinessy.syntax import SyntaxNode

_MAX_CHAIN = 3


def _is_method_call(node: SyntaxNode) -> bool:
  return node.kind == TokenType.METHOD_CALL


def _has_dot(node: SyntaxNode) -> bool:
  return node.find_first_token(TokenType.DOT) is not None


def _get_dot_line(call: SyntaxNode) -> int:
  return call.find_first_token(TokenType.DOT).line


def _get_target(call: SyntaxNode) -> Optional[SyntaxNode]:
  """Returns the receiver of a dot-qualified call."""
  dot = call.find_first_token(TokenType.DOT)
  return None if dot is None else dot.first_child


def _is_multiline_call(call: SyntaxNode) -> bool:
  dot = call.find_first_token(TokenType.DOT)
  rparen = call.find_first_token(TokenType.RPAREN)
  return dot is not None and rparen is not None and dot.line != rparen.line


def collect_chain(node: Optional[SyntaxNode]) -> List[SyntaxNode]:
  """
  Collects up to three calls of a chain, outermost first.

  Args:
      node: The outermost call.

  Returns:
      List[SyntaxNode]: The calls, each the receiver of the one before.
  """
  calls: List[SyntaxNode] = []
  while node is not None and _is_method_call(node) and _has_dot(node) and len(calls) < _MAX_CHAIN:
    calls.append(node)
    node = _get_target(node)
  return calls


@register_check("method_call_chain_line_breaks")
class MethodCallChainLineBreaksCheck(BaseCheck):
  tokens = (TokenType.METHOD_CALL,)

  def visit_token(self, node: SyntaxNode) -> None:
    calls = collect_chain(node)

    if len(calls) == 2 and _get_dot_line(calls[0]) != _get_dot_line(calls[1]):
      call = calls[1]
      dot = call.find_first_token(TokenType.DOT)
      span = get_code_span(_get_target(call))
      if _is_multiline_call(call) and span.end.line == dot.line:
        self.log(call, "line.break.is.required.complex.first.method.call.in.chain")

    if len(calls) < _MAX_CHAIN:
      return

    lines = [_get_dot_line(call) for call in calls]
    if lines[0] == lines[1] and lines[1] != lines[2]:
      self.log(calls[0], "multiple.method.calls.in.chain.on.same.line")
    if lines[0] != lines[1] and lines[1] == lines[2]:
      self.log(calls[1], "multiple.method.calls.in.chain.on.same.line")
