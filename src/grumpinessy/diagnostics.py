"""
Diagnostics and Reporting.

Checks create a `Diagnostic` for every violation and hand it straight to a
`Reporter`. The reporter decides what happens next (collect, print, ...).

Message keys are stable identifiers; `MESSAGES` holds default English
templates with positional `{0}`-style placeholders for the diagnostic args.
"""

from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field

from grumpinessy.spans import Location

MESSAGES: Dict[str, str] = {
  "if.else.should.both.have.braces": "'if' and 'else' should both use braces, or neither should.",
  "braces.are.mandatory.for.multiline": "Braces are mandatory for a body spanning multiple lines.",
  "wrong.member.order": "Wrong member order: {1} should not follow {0}. Expected order: {2}.",
  "line.break.is.required.complex.first.method.call.in.chain": (
    "Line break is required before a chain that follows a multi-line first method call."
  ),
  "multiple.method.calls.in.chain.on.same.line": (
    "Multiple method calls of a chain on the same line; break every call or none."
  ),
  "multiple.arguments.on.one.line": (
    "Multiple arguments on one line: found line {0}, expected line {1} or later "
    "(parentheses at lines {2}-{3})."
  ),
  "import.of.higher.package": "Import of higher package {0} from package {1}.",
}


class Diagnostic(BaseModel):
  """
  A single style violation.
  """

  model_config = ConfigDict(frozen=True)

  line: int = Field(..., description="1-based line of the offending node.")
  column: int = Field(..., description="0-based column of the offending node.")
  key: str = Field(..., description="Message key identifying the violation.")
  args: Tuple[Any, ...] = Field(default=(), description="Positional message arguments.")
  check: str = Field(default="", description="Registry name of the reporting check.")

  @property
  def location(self) -> Location:
    return Location(self.line, self.column)

  @property
  def message(self) -> str:
    """
    Renders the default English message for this diagnostic.

    Returns:
        str: The formatted message, or the raw key if no template exists.
    """
    template = MESSAGES.get(self.key)
    if template is None:
      return self.key
    return template.format(*self.args)


class Reporter:
  """
  Sink for diagnostics. Subclasses decide how diagnostics are consumed.
  """

  def report(self, diagnostic: Diagnostic) -> None:
    raise NotImplementedError


class CollectingReporter(Reporter):
  """
  Reporter that keeps every diagnostic in memory, in report order.
  """

  def __init__(self):
    self.diagnostics: List[Diagnostic] = []

  def report(self, diagnostic: Diagnostic) -> None:
    self.diagnostics.append(diagnostic)

  def clear(self) -> None:
    self.diagnostics = []

  @property
  def keys(self) -> List[str]:
    """Message keys of the collected diagnostics, for quick inspection."""
    return [d.key for d in self.diagnostics]
