"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Global registry isolation to prevent tests with custom checks from leaking.
- A recording console for CLI output assertions.
"""

import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'grumpinessy' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

# Force load of the built-in checks so they form the "clean state" baseline.
import grumpinessy.checks  # noqa: E402
from grumpinessy.checks.base import _CHECK_REGISTRY  # noqa: E402
from grumpinessy.utils.console import console, set_console  # noqa: E402


@pytest.fixture(autouse=True)
def isolate_check_registry():
  """
  Ensures that checks registered by a test do not leak into other tests.
  """
  original_registry = _CHECK_REGISTRY.copy()
  yield
  _CHECK_REGISTRY.clear()
  _CHECK_REGISTRY.update(original_registry)


@pytest.fixture
def recording_console():
  """Routes console and logging output into a recording console for the test."""
  previous = console.backend
  capture = Console(record=True, width=300, force_terminal=False)
  set_console(capture)
  yield capture
  set_console(previous)
