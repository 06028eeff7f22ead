"""
CLI Command Handlers Facade.

Re-exports handlers from `grumpinessy.cli.handlers` so the dispatcher and
tests have a single import location.
"""

from grumpinessy.cli.handlers.check import handle_check
from grumpinessy.cli.handlers.list_checks import handle_list_checks

__all__ = [
  "handle_check",
  "handle_list_checks",
]
