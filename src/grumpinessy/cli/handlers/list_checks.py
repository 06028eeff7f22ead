"""
List-Checks Command Handler.

Displays the registered checks and the node kinds each one subscribes to.
"""

from rich.table import Table

from grumpinessy.checks import available_checks, get_check_class
from grumpinessy.utils.console import console


def handle_list_checks() -> int:
  """
  Prints a table of registered checks.

  Returns:
      int: Exit code (always 0).
  """
  table = Table(title="Registered Checks")
  table.add_column("Name", style="bold")
  table.add_column("Class")
  table.add_column("Node Kinds")

  for name in available_checks():
    cls = get_check_class(name)
    kinds = ", ".join(kind.value for kind in cls.tokens)
    table.add_row(name, cls.__name__, kinds)

  console.print(table)
  return 0
