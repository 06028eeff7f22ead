"""
Main Entry Point for grumpinessy CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `grumpinessy.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from grumpinessy import __version__
from grumpinessy.cli import commands
from grumpinessy.config import parse_cli_key_values
from grumpinessy.errors import ConfigError
from grumpinessy.utils.console import log_error, set_verbosity


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Parses arguments via argparse and calls the appropriate handler function.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="grumpinessy: Style checks for brace-delimited syntax trees")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CHECK ---
  cmd_check = subparsers.add_parser("check", help="Run style checks over serialized syntax trees")
  cmd_check.add_argument("path", type=Path, help="Tree document (JSON) or directory of documents")
  cmd_check.add_argument(
    "--checks",
    nargs="+",
    default=None,
    help="Checks to run (default: from pyproject.toml, or all registered checks)",
  )
  cmd_check.add_argument(
    "--set",
    dest="settings",
    nargs="*",
    help="Member order settings in key=value format (e.g. static_method_ordinal=2)",
  )
  cmd_check.add_argument(
    "--format",
    dest="output_format",
    choices=["text", "json"],
    default="text",
    help="Output format (default: text)",
  )

  # --- Command: LIST-CHECKS ---
  subparsers.add_parser("list-checks", help="Show registered checks")

  args = parser.parse_args(argv)
  set_verbosity(args.verbose)

  if args.command == "check":
    try:
      settings = parse_cli_key_values(args.settings)
    except ConfigError as e:
      log_error(str(e))
      return 2
    return commands.handle_check(args.path, args.checks, settings, args.output_format)

  elif args.command == "list-checks":
    return commands.handle_list_checks()

  return 0


if __name__ == "__main__":
  sys.exit(main())
