"""
Tests for console routing and the logging helpers.
"""

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from grumpinessy.utils.console import (
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
  set_console,
  set_verbosity,
  stderr_console,
)


@pytest.fixture(autouse=True)
def restore_backend():
  previous = console.backend
  yield
  set_console(previous)
  set_verbosity(False)


def rich_handlers():
  return [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]


def test_log_records_reach_injected_console():
  capture = Console(record=True, width=200)
  set_console(capture)

  log_info("Checking 3 file(s)")
  log_success("No violations found.")

  output = capture.export_text()
  assert "Checking 3 file(s)" in output
  assert "SUCCESS" in output
  assert console.backend is capture


def test_print_goes_to_backend():
  capture = Console(record=True, width=200)
  set_console(capture)
  console.print("[path]A.json:1:0:[/path] message")
  assert capture.export_text().strip() == "A.json:1:0: message"


def test_stderr_console_keeps_stdout_clean(capsys):
  previous = console.backend
  with stderr_console() as err_console:
    assert console.backend is err_console
    log_warning("Found 2 violation(s).")
    log_error("Failed to load B.json")

  captured = capsys.readouterr()
  assert captured.out == ""
  assert "Found 2 violation(s)." in captured.err
  assert "Failed to load B.json" in captured.err
  assert console.backend is previous


def test_stderr_console_restores_after_error():
  previous = console.backend
  with pytest.raises(RuntimeError):
    with stderr_console():
      raise RuntimeError("boom")
  assert console.backend is previous
  assert rich_handlers()[0].console is previous


def test_single_handler_after_swaps():
  set_console(Console(record=True))
  with stderr_console():
    set_console(Console(record=True))
  assert len(rich_handlers()) == 1


def test_verbosity_switch():
  set_verbosity(True)
  assert logging.getLogger().level == logging.DEBUG
  set_verbosity(False)
  assert logging.getLogger().level == logging.INFO


def test_attributes_fall_through_to_backend():
  set_console(Console(width=123))
  assert console.width == 123
