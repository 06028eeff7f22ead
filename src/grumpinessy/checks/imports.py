"""
Import Hierarchy Check.

A compilation unit must not import from a package that strictly encloses its
own package: code in `a.b.c` may import from `a.b.c.d` or `a.x`, but not
from `a.b` or `a`.
"""

from typing import List, Optional

from grumpinessy.checks.base import BaseCheck, register_check
from grumpinessy.diagnostics import Reporter
from grumpinessy.enums import TokenType
from grumpinessy.syntax import SyntaxNode

_NAME_KINDS = (TokenType.DOT, TokenType.IDENT)


def dotted_name(node: SyntaxNode) -> str:
  """
  Reconstructs the dotted name spelled by a `DOT`/`IDENT` subtree.

  `a.b.c` is represented as DOT(DOT(IDENT a, IDENT b), IDENT c).

  Args:
      node: A `DOT` or `IDENT` node.

  Returns:
      str: The dotted name, e.g. "a.b.c".
  """
  parts: List[str] = []
  stack = [node]
  while stack:
    current = stack.pop()
    if current.kind == TokenType.IDENT:
      parts.append(current.text)
    else:
      stack.extend(reversed([child for child in current.iter_children() if child.kind in _NAME_KINDS]))
  return ".".join(parts)


def read_enclosed_dot(node: SyntaxNode) -> str:
  """
  Reads the dotted name held by `node`'s first `DOT` child, or its `IDENT`.

  For a package declaration this is the package name. Applied to the `DOT` of
  an import, it yields the qualifier, i.e. the imported name without its final
  simple name.
  """
  dot = node.find_first_token(TokenType.DOT)
  if dot is not None:
    return dotted_name(dot)
  ident = node.find_first_token(TokenType.IDENT)
  return ident.text if ident is not None else ""


@register_check("no_imports_of_higher_packages")
class NoImportsOfHigherPackagesCheck(BaseCheck):
  tokens = (TokenType.IMPORT, TokenType.PACKAGE_DEF)

  def __init__(self, reporter: Optional[Reporter] = None):
    super().__init__(reporter)
    self.package_name: Optional[str] = None

  def begin_tree(self, root: SyntaxNode) -> None:
    self.package_name = None

  def visit_token(self, node: SyntaxNode) -> None:
    if node.kind == TokenType.PACKAGE_DEF:
      self.package_name = read_enclosed_dot(node)
    elif node.kind == TokenType.IMPORT:
      dot = node.find_first_token(TokenType.DOT)
      if dot is None:
        return
      imported_package = read_enclosed_dot(dot)
      if self.package_name is not None and self.package_name.startswith(imported_package + "."):
        self.log(node, "import.of.higher.package", imported_package, self.package_name)
