"""
Style Checks Package.

Importing this package registers every built-in check.

Modules:
    - ``base``: The check protocol and registry.
    - ``braces``: Brace consistency between `if`/`else`, and mandatory braces for multi-line bodies.
    - ``member_order``: Configurable ordering of class members.
    - ``call_chain``: Line breaks in method call chains.
    - ``arguments``: One argument per line in multi-line argument lists.
    - ``imports``: Imports from enclosing packages.
"""

from grumpinessy.checks.base import BaseCheck, available_checks, get_check_class, register_check
from grumpinessy.checks.braces import IfElseSameBracesCheck, NecessaryBracesCheck
from grumpinessy.checks.member_order import MembersOrderCheck, OrdinalTable
from grumpinessy.checks.call_chain import MethodCallChainLineBreaksCheck
from grumpinessy.checks.arguments import MethodCallLineBreaksCheck
from grumpinessy.checks.imports import NoImportsOfHigherPackagesCheck

__all__ = [
  "BaseCheck",
  "available_checks",
  "get_check_class",
  "register_check",
  "IfElseSameBracesCheck",
  "NecessaryBracesCheck",
  "MembersOrderCheck",
  "OrdinalTable",
  "MethodCallChainLineBreaksCheck",
  "MethodCallLineBreaksCheck",
  "NoImportsOfHigherPackagesCheck",
]
