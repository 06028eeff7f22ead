from .check import handle_check
from .list_checks import handle_list_checks

__all__ = [
  "handle_check",
  "handle_list_checks",
]
