"""
Runtime Configuration Store.

Settings are read from the `[tool.grumpinessy]` table of the nearest
`pyproject.toml` and can be overridden from the command line.

Example:

.. code-block:: toml

    [tool.grumpinessy]
    checks = ["members_order", "necessary_braces"]

    [tool.grumpinessy.member_order]
    static_method_ordinal = 2
    static_initializer_ordinal = 2
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from grumpinessy.checks import available_checks
from grumpinessy.checks.member_order import (
  CONSTRUCTOR,
  INNER_CLASS,
  INSTANCE_INITIALIZER,
  INSTANCE_METHOD,
  INSTANCE_VARIABLE,
  STATIC_INITIALIZER,
  STATIC_METHOD,
  STATIC_NESTED_CLASS,
  STATIC_VARIABLE,
  OrdinalTable,
)
from grumpinessy.errors import ConfigError

logger = logging.getLogger(__name__)

TOOL_SECTION = "grumpinessy"


class MemberOrderSettings(BaseModel):
  """
  Ranks of the nine member categories. Lower ranks must come first.
  """

  model_config = ConfigDict(extra="forbid")

  static_variable_ordinal: int = Field(1, description="Rank of static variables.")
  static_initializer_ordinal: int = Field(2, description="Rank of static initializer blocks.")
  static_method_ordinal: int = Field(3, description="Rank of static methods.")
  instance_variable_ordinal: int = Field(4, description="Rank of instance variables.")
  constructor_ordinal: int = Field(5, description="Rank of constructors.")
  instance_initializer_ordinal: int = Field(6, description="Rank of instance initializer blocks.")
  instance_method_ordinal: int = Field(7, description="Rank of instance methods.")
  inner_class_ordinal: int = Field(8, description="Rank of inner (non-static) classes.")
  static_nested_class_ordinal: int = Field(
    9, description="Rank of static nested classes, nested interfaces, enums and records."
  )

  def to_table(self) -> OrdinalTable:
    """
    Builds the ordinal table used by the member ordering check.

    Returns:
        OrdinalTable: One rank per member category.
    """
    return OrdinalTable(
      {
        STATIC_VARIABLE: self.static_variable_ordinal,
        STATIC_INITIALIZER: self.static_initializer_ordinal,
        STATIC_METHOD: self.static_method_ordinal,
        INSTANCE_VARIABLE: self.instance_variable_ordinal,
        CONSTRUCTOR: self.constructor_ordinal,
        INSTANCE_INITIALIZER: self.instance_initializer_ordinal,
        INSTANCE_METHOD: self.instance_method_ordinal,
        INNER_CLASS: self.inner_class_ordinal,
        STATIC_NESTED_CLASS: self.static_nested_class_ordinal,
      }
    )


class AnalyzerConfig(BaseModel):
  """
  Global configuration container for an analysis run.
  """

  checks: List[str] = Field(default_factory=available_checks, description="Names of the enabled checks.")
  member_order: MemberOrderSettings = Field(default_factory=MemberOrderSettings)

  @field_validator("checks")
  @classmethod
  def validate_checks(cls, v: List[str]) -> List[str]:
    """
    Ensures every enabled check is registered.

    Args:
        v (List[str]): Requested check names.

    Returns:
        List[str]: The names, normalized and de-duplicated in order.

    Raises:
        ValueError: If a check name is unknown.
    """
    known = available_checks()
    cleaned: List[str] = []
    for name in v:
      name = name.strip().lower()
      if name not in known:
        raise ValueError(f"Unknown check: '{name}'. Available checks: {known}")
      if name not in cleaned:
        cleaned.append(name)
    return cleaned

  @classmethod
  def load(
    cls,
    search_path: Optional[Path] = None,
    checks: Optional[List[str]] = None,
    overrides: Optional[Dict[str, Any]] = None,
  ) -> "AnalyzerConfig":
    """
    Loads configuration from pyproject.toml and overrides with CLI arguments.

    Args:
        search_path (Optional[Path]): Directory to start searching for TOML config.
        checks (Optional[List[str]]): Override for the enabled checks.
        overrides (Optional[Dict]): Member order settings given as key=value on the CLI.

    Returns:
        AnalyzerConfig: The fully resolved configuration object.

    Raises:
        ConfigError: If the merged settings are invalid.
    """
    start_dir = search_path or Path.cwd()
    toml_config, toml_dir = _load_toml_settings(start_dir)
    if toml_dir:
      logger.debug("Using configuration from %s", toml_dir / "pyproject.toml")

    data: Dict[str, Any] = {}

    final_checks = checks or toml_config.get("checks")
    if final_checks:
      data["checks"] = final_checks

    toml_order = toml_config.get("member_order", {})
    cli_order = overrides or {}
    data["member_order"] = {**toml_order, **cli_order}

    try:
      return cls.model_validate(data)
    except ValidationError as e:
      raise ConfigError(f"Invalid configuration: {e}") from e


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the directory and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.

  Raises:
      ConfigError: If the nearest pyproject.toml is not valid TOML.
  """
  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Cannot parse {toml_path}: {e}") from e

      tool_section = data.get("tool", {})
      return tool_section.get(TOOL_SECTION, {}), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Types are inferred (int, bool, or string).

  Args:
      items (Optional[List[str]]): List of raw CLI strings directly from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.

  Raises:
      ConfigError: If an item is not in key=value form.
  """
  if not items:
    return {}

  config: Dict[str, Any] = {}
  for item in items:
    if "=" not in item:
      raise ConfigError(f"Invalid setting '{item}'. Expected 'key=value'.")

    key, val_str = item.split("=", 1)
    key = key.strip()
    val_str = val_str.strip()

    final_val: Any = val_str
    if val_str.lower() == "true":
      final_val = True
    elif val_str.lower() == "false":
      final_val = False
    else:
      try:
        final_val = int(val_str)
      except ValueError:
        pass

    config[key] = final_val

  return config
