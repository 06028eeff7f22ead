"""
Member Ordering Check.

This module provides `MembersOrderCheck`, which verifies that the members of
every class body appear in a configured order of categories (static
variables first, then static initializers, and so on).

Each member is classified into a `MemberClassification`, a pair of a static
flag and a `MemberKind`. An `OrdinalTable` maps each of the nine possible
classifications to an integer rank. Within one body, ranks must never
decrease from one member to the next. Equal ranks are always accepted.

Nested bodies (inner classes, anonymous classes, enum constant bodies) are
checked independently: entering a body pushes the enclosing body's state on a
stack, and leaving it restores that state.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from grumpinessy.checks.base import BaseCheck, register_check
from grumpinessy.diagnostics import Reporter
from grumpinessy.enums import MemberKind, TokenType
from grumpinessy.errors import UnsupportedNodeError
from grumpinessy.syntax import SyntaxNode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberClassification:
  """
  Ordering category of a class body member.
  """

  is_static: bool
  kind: MemberKind

  def __str__(self) -> str:
    if self.kind == MemberKind.CONSTRUCTOR:
      return "constructor"
    if self.kind == MemberKind.CLASS:
      if self.is_static:
        return "static nested class or nested interface, nested enum or nested record"
      return "inner class"
    prefix = "static " if self.is_static else ""
    return prefix + self.kind.value


STATIC_VARIABLE = MemberClassification(True, MemberKind.VARIABLE)
STATIC_INITIALIZER = MemberClassification(True, MemberKind.INITIALIZER)
STATIC_METHOD = MemberClassification(True, MemberKind.METHOD)
INSTANCE_VARIABLE = MemberClassification(False, MemberKind.VARIABLE)
CONSTRUCTOR = MemberClassification(False, MemberKind.CONSTRUCTOR)
INSTANCE_INITIALIZER = MemberClassification(False, MemberKind.INITIALIZER)
INSTANCE_METHOD = MemberClassification(False, MemberKind.METHOD)
INNER_CLASS = MemberClassification(False, MemberKind.CLASS)
STATIC_NESTED_CLASS = MemberClassification(True, MemberKind.CLASS)

# Declaration order of the configurable slots.
SLOTS = (
  STATIC_VARIABLE,
  STATIC_INITIALIZER,
  STATIC_METHOD,
  INSTANCE_VARIABLE,
  CONSTRUCTOR,
  INSTANCE_INITIALIZER,
  INSTANCE_METHOD,
  INNER_CLASS,
  STATIC_NESTED_CLASS,
)

_MEMBER_KINDS: Dict[TokenType, MemberKind] = {
  TokenType.CLASS_DEF: MemberKind.CLASS,
  TokenType.INTERFACE_DEF: MemberKind.CLASS,
  TokenType.ANNOTATION_DEF: MemberKind.CLASS,
  TokenType.ENUM_DEF: MemberKind.CLASS,
  TokenType.RECORD_DEF: MemberKind.CLASS,
  TokenType.INSTANCE_INIT: MemberKind.INITIALIZER,
  TokenType.STATIC_INIT: MemberKind.INITIALIZER,
  TokenType.CTOR_DEF: MemberKind.CONSTRUCTOR,
  TokenType.COMPACT_CTOR_DEF: MemberKind.CONSTRUCTOR,
  TokenType.METHOD_DEF: MemberKind.METHOD,
  TokenType.VARIABLE_DEF: MemberKind.VARIABLE,
}

# Declarations that are static regardless of modifiers.
_ALWAYS_STATIC = frozenset(
  {
    TokenType.INTERFACE_DEF,
    TokenType.ANNOTATION_DEF,
    TokenType.ENUM_DEF,
    TokenType.RECORD_DEF,
    TokenType.STATIC_INIT,
  }
)
_NEVER_STATIC = frozenset({TokenType.INSTANCE_INIT, TokenType.CTOR_DEF, TokenType.COMPACT_CTOR_DEF})
# Declarations forced static when declared directly in an interface or annotation body.
_FORCEABLE = frozenset({TokenType.CLASS_DEF, TokenType.VARIABLE_DEF})
_FORCING_PARENTS = frozenset({TokenType.INTERFACE_DEF, TokenType.ANNOTATION_DEF})


class OrdinalTable:
  """
  Configurable ranking of member classifications.

  Every one of the nine `SLOTS` must be assigned a rank. Several slots may
  share a rank, in which case members of those categories can be freely
  interleaved.
  """

  def __init__(self, ranks: Dict[MemberClassification, int]):
    missing = [str(slot) for slot in SLOTS if slot not in ranks]
    if missing:
      raise ValueError(f"No ordinal assigned for: {', '.join(missing)}")
    self._ranks = {slot: int(ranks[slot]) for slot in SLOTS}

  @classmethod
  def default(cls) -> "OrdinalTable":
    return cls({slot: position for position, slot in enumerate(SLOTS, start=1)})

  def rank(self, classification: MemberClassification) -> int:
    return self._ranks[classification]

  def describe(self) -> str:
    """
    Produces a human-readable description of the configured order.

    Slots sharing a rank are joined with " or ", and rank groups are joined
    with "; then " in ascending rank order.

    Returns:
        str: e.g. "static variable; then static initializer or static method; then ..."
    """
    groups: Dict[int, List[str]] = {}
    for slot in SLOTS:
      groups.setdefault(self._ranks[slot], []).append(str(slot))
    return "; then ".join(" or ".join(groups[rank]) for rank in sorted(groups))


@dataclass(frozen=True)
class ScopeFrame:
  """
  Saved state of an enclosing body while a nested body is being checked.
  """

  previous: Optional[MemberClassification]
  parent_forces_static: bool


class _OrderState:
  """
  Per-tree traversal state of the ordering check.
  """

  def __init__(self):
    self.stack: List[ScopeFrame] = []
    self.previous: Optional[MemberClassification] = None
    self.parent_forces_static = False

  def enter_body(self, body: SyntaxNode) -> None:
    self.stack.append(ScopeFrame(self.previous, self.parent_forces_static))
    self.previous = None
    parent = body.parent
    self.parent_forces_static = parent is not None and parent.kind in _FORCING_PARENTS

  def leave_body(self) -> None:
    frame = self.stack.pop()
    self.previous = frame.previous
    self.parent_forces_static = frame.parent_forces_static

  def classify(self, node: SyntaxNode) -> MemberClassification:
    return MemberClassification(self.is_static(node), member_kind(node))

  def is_static(self, node: SyntaxNode) -> bool:
    if node.kind in _ALWAYS_STATIC:
      return True
    if node.kind in _NEVER_STATIC:
      return False
    if node.kind in _FORCEABLE:
      return self.parent_forces_static or has_static_modifier(node)
    if node.kind == TokenType.METHOD_DEF:
      return has_static_modifier(node)
    raise UnsupportedNodeError(node)


def member_kind(node: SyntaxNode) -> MemberKind:
  """
  Maps a declaration node to its member kind.

  Args:
      node: A member declaration.

  Returns:
      MemberKind: The syntactic category.

  Raises:
      UnsupportedNodeError: If the node is not a member declaration.
  """
  kind = _MEMBER_KINDS.get(node.kind)
  if kind is None:
    raise UnsupportedNodeError(node)
  return kind


def has_static_modifier(node: SyntaxNode) -> bool:
  modifiers = node.find_first_token(TokenType.MODIFIERS)
  return modifiers is not None and modifiers.find_first_token(TokenType.LITERAL_STATIC) is not None


@register_check("members_order")
class MembersOrderCheck(BaseCheck):
  """
  Verifies declaration order of members within each class body.

  Attributes:
      table (OrdinalTable): The configured ranking, fixed at construction.
      order (str): Human-readable description of `table`, used in messages.
  """

  tokens = (
    TokenType.CLASS_DEF,
    TokenType.INTERFACE_DEF,
    TokenType.ANNOTATION_DEF,
    TokenType.ENUM_DEF,
    TokenType.RECORD_DEF,
    TokenType.INSTANCE_INIT,
    TokenType.STATIC_INIT,
    TokenType.CTOR_DEF,
    TokenType.COMPACT_CTOR_DEF,
    TokenType.METHOD_DEF,
    TokenType.VARIABLE_DEF,
    TokenType.OBJBLOCK,
  )

  def __init__(self, reporter: Optional[Reporter] = None, table: Optional[OrdinalTable] = None):
    super().__init__(reporter)
    self.table = table or OrdinalTable.default()
    self.order = self.table.describe()
    self._state = _OrderState()

  def begin_tree(self, root: SyntaxNode) -> None:
    self._state = _OrderState()

  def visit_token(self, node: SyntaxNode) -> None:
    state = self._state
    if node.kind == TokenType.OBJBLOCK:
      state.enter_body(node)
      return

    parent = node.parent
    if parent is None or parent.kind != TokenType.OBJBLOCK:
      return

    current = state.classify(node)
    previous = state.previous
    if previous is not None and self.table.rank(previous) > self.table.rank(current):
      self.log(node, "wrong.member.order", str(previous), str(current), self.order)
    state.previous = current

  def leave_token(self, node: SyntaxNode) -> None:
    if node.kind == TokenType.OBJBLOCK:
      self._state.leave_body()

  def finish_tree(self, root: SyntaxNode) -> None:
    if self._state.stack:
      logger.debug("Tree finished with %d unclosed member scopes", len(self._state.stack))
