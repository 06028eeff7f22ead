"""
Check Command Handler.

Runs the enabled checks over serialized syntax trees and prints the
diagnostics, either as text lines or as a JSON document.

In JSON mode stdout carries only the document below, and log output is sent
to stderr::

    {
      "diagnostics": [{"file": ..., "line": ..., "column": ..., "check": ...,
                       "key": ..., "args": [...], "message": ...}],
      "errors": [{"file": ..., "check": null | "<name>", "line": ..., "column": ...,
                  "message": ...}]
    }

Exit codes:
    0: No violations.
    1: At least one violation was reported.
    2: A tree could not be loaded, the configuration is invalid, or a check aborted.
"""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.markup import escape

from grumpinessy.analyzer import AnalysisResult, analyze_tree
from grumpinessy.config import AnalyzerConfig
from grumpinessy.errors import ConfigError, TreeLoadError
from grumpinessy.ingestion import load_tree
from grumpinessy.utils.console import console, log_error, log_info, log_success, log_warning, stderr_console

EXIT_CLEAN = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def collect_tree_files(path: Path) -> List[Path]:
  """
  Resolves the input path to the list of tree documents to analyze.

  Args:
      path: A JSON file, or a directory searched recursively for `*.json`.

  Returns:
      List[Path]: Sorted file paths.
  """
  if path.is_file():
    return [path]
  return sorted(path.rglob("*.json"))


def handle_check(
  path: Path,
  checks: Optional[List[str]] = None,
  settings: Optional[Dict[str, Any]] = None,
  output_format: str = "text",
) -> int:
  """
  Analyzes one tree document or a directory of them.

  Args:
      path: Input file or directory.
      checks: Names of the checks to run (default: from config, or all).
      settings: Member order overrides in key=value form, already parsed.
      output_format: "text" or "json".

  Returns:
      int: Exit code.
  """
  if output_format == "json":
    with stderr_console():
      return _run(path, checks, settings, json_mode=True)
  return _run(path, checks, settings, json_mode=False)


def _run(path: Path, checks: Optional[List[str]], settings: Optional[Dict[str, Any]], json_mode: bool) -> int:
  errors: List[Dict[str, Any]] = []
  results: Dict[Path, AnalysisResult] = {}

  if not path.exists():
    log_error(f"Path not found: {escape(str(path))}")
    errors.append(_error_entry(path, f"Path not found: {path}"))
    return _finish(results, errors, json_mode)

  search_dir = path if path.is_dir() else path.parent
  try:
    config = AnalyzerConfig.load(search_path=search_dir, checks=checks, overrides=settings)
  except ConfigError as e:
    log_error(escape(str(e)))
    errors.append(_error_entry(path, str(e)))
    return _finish(results, errors, json_mode)

  files = collect_tree_files(path)
  log_info(f"Checking {len(files)} file(s) with {len(config.checks)} check(s)...")

  for f in files:
    try:
      root = load_tree(f)
    except TreeLoadError as e:
      log_error(f"Failed to load {escape(f.name)}: {escape(str(e))}")
      errors.append(_error_entry(f, str(e)))
      continue
    result = analyze_tree(root, config)
    results[f] = result
    for failure in result.failures:
      log_error(f"{escape(str(f))}: check '{failure.check}' aborted: {escape(failure.message)}")
      errors.append(_error_entry(f, failure.message, failure.check, failure.line, failure.column))

  return _finish(results, errors, json_mode)


def _finish(results: Dict[Path, AnalysisResult], errors: List[Dict[str, Any]], json_mode: bool) -> int:
  if json_mode:
    print(json.dumps({"diagnostics": _diagnostics_json(results), "errors": errors}, indent=2))
  else:
    _print_text(results)

  violations = sum(len(r.diagnostics) for r in results.values())
  if errors:
    log_error(f"{len(errors)} file(s) or check(s) could not be processed.")
    return EXIT_ERROR
  if violations:
    log_warning(f"Found {violations} violation(s).")
    return EXIT_VIOLATIONS
  log_success("No violations found.")
  return EXIT_CLEAN


def _print_text(results: Dict[Path, AnalysisResult]) -> None:
  for f, result in results.items():
    for d in result.diagnostics:
      location = escape(f"{f}:{d.line}:{d.column}:")
      console.print(f"[path]{location}[/path] [key]\\[{d.check}][/key] {escape(d.message)}")


def _error_entry(
  f: Path,
  message: str,
  check: Optional[str] = None,
  line: int = 0,
  column: int = 0,
) -> Dict[str, Any]:
  return {"file": str(f), "check": check, "line": line, "column": column, "message": message}


def _diagnostics_json(results: Dict[Path, AnalysisResult]) -> List[Dict[str, Any]]:
  output = []
  for f, result in results.items():
    for d in result.diagnostics:
      output.append(
        {
          "file": str(f),
          "line": d.line,
          "column": d.column,
          "check": d.check,
          "key": d.key,
          "args": list(d.args),
          "message": d.message,
        }
      )
  return output
