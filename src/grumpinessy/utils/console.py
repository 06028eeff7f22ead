"""
Console Output and Logging.

All user-facing output goes through one Rich console. Standard `logging`
records are rendered on that same console by a `RichHandler`, so library
modules simply use `logging.getLogger(__name__)` and the CLI uses the
`log_*` helpers below.

The console is held by a proxy so that the destination can be swapped at
runtime (a recording console in tests, stderr while the CLI writes JSON to
stdout) without stale references or duplicated handlers.
"""

import logging
from contextlib import contextmanager
from typing import Any, Iterator

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

# Between INFO and WARNING
SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme(
  {
    "logging.level.success": "green",
    "info": "dim cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
    "path": "bold blue",
    "key": "bold magenta",
  }
)


class _ConsoleProxy:
  """
  Forwards output to the active Rich console and keeps the root logger's
  `RichHandler` attached to it.
  """

  def __init__(self) -> None:
    self._backend: Console = Console(theme=_THEME)
    self._configure_logging()

  def set_backend(self, new_console: Console) -> None:
    self._backend = new_console
    self._configure_logging()

  @property
  def backend(self) -> Console:
    return self._backend

  def _configure_logging(self) -> None:
    # Exactly one RichHandler, bound to the current backend.
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
      if isinstance(handler, RichHandler):
        root_logger.removeHandler(handler)

    rich_handler = RichHandler(
      console=self._backend,
      show_time=False,
      omit_repeated_times=False,
      show_path=False,
      markup=True,
      rich_tracebacks=True,
    )

    if root_logger.level == logging.NOTSET or root_logger.level > logging.INFO:
      root_logger.setLevel(logging.INFO)
    root_logger.addHandler(rich_handler)

  def print(self, *args: Any, **kwargs: Any) -> None:
    self._backend.print(*args, **kwargs)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


console = _ConsoleProxy()


def set_console(new_console: Console) -> None:
  """
  Routes console output and log records to `new_console`.

  Args:
      new_console (Console): The Rich console to use from now on.
  """
  console.set_backend(new_console)


@contextmanager
def stderr_console() -> Iterator[Console]:
  """
  Temporarily sends all console and logging output to stderr.

  Used while stdout carries machine-readable output.

  Yields:
      Console: The stderr console in use.
  """
  previous = console.backend
  err_console = Console(theme=_THEME, stderr=True)
  console.set_backend(err_console)
  try:
    yield err_console
  finally:
    console.set_backend(previous)


def set_verbosity(verbose: bool) -> None:
  """
  Switches the root logger between INFO and DEBUG.

  Args:
      verbose (bool): True to show debug output.
  """
  logging.getLogger().setLevel(logging.DEBUG if verbose else logging.INFO)


def log_info(msg: str) -> None:
  """
  Logs at INFO level. `msg` may contain Rich markup.
  """
  logging.info(msg, extra={"markup": True})


def log_success(msg: str) -> None:
  logging.log(SUCCESS_LEVEL_NUM, msg, extra={"markup": True})


def log_warning(msg: str) -> None:
  logging.warning(msg, extra={"markup": True})


def log_error(msg: str) -> None:
  logging.error(msg, extra={"markup": True})
