"""
Tests for the configuration layer.

Verifies:
1.  Defaults enable every registered check with the default member order.
2.  `[tool.grumpinessy]` in the nearest pyproject.toml is honoured.
3.  CLI overrides win over TOML values.
4.  Invalid settings surface as ConfigError.
"""

import pytest

from grumpinessy.checks import available_checks
from grumpinessy.checks.member_order import OrdinalTable
from grumpinessy.config import AnalyzerConfig, MemberOrderSettings, parse_cli_key_values
from grumpinessy.errors import ConfigError


def write_pyproject(directory, body):
  (directory / "pyproject.toml").write_text(body, encoding="utf-8")


def test_defaults(tmp_path):
  config = AnalyzerConfig.load(search_path=tmp_path)
  assert config.checks == available_checks()
  assert config.member_order == MemberOrderSettings()


def test_default_settings_build_default_table():
  table = MemberOrderSettings().to_table()
  assert table.describe() == OrdinalTable.default().describe()


def test_toml_settings(tmp_path):
  write_pyproject(
    tmp_path,
    """
[tool.grumpinessy]
checks = ["members_order", "necessary_braces"]

[tool.grumpinessy.member_order]
static_method_ordinal = 2
""",
  )
  config = AnalyzerConfig.load(search_path=tmp_path)
  assert config.checks == ["members_order", "necessary_braces"]
  assert config.member_order.static_method_ordinal == 2
  assert config.member_order.static_initializer_ordinal == 2


def test_toml_found_in_parent_directory(tmp_path):
  write_pyproject(tmp_path, '[tool.grumpinessy]\nchecks = ["if_else_same_braces"]\n')
  nested = tmp_path / "src" / "pkg"
  nested.mkdir(parents=True)
  config = AnalyzerConfig.load(search_path=nested)
  assert config.checks == ["if_else_same_braces"]


def test_cli_overrides_win(tmp_path):
  write_pyproject(tmp_path, "[tool.grumpinessy.member_order]\nconstructor_ordinal = 1\n")
  config = AnalyzerConfig.load(
    search_path=tmp_path,
    checks=["members_order"],
    overrides={"constructor_ordinal": 3},
  )
  assert config.checks == ["members_order"]
  assert config.member_order.constructor_ordinal == 3


def test_check_names_are_normalized():
  config = AnalyzerConfig(checks=[" Members_Order", "members_order"])
  assert config.checks == ["members_order"]


def test_unknown_check(tmp_path):
  with pytest.raises(ConfigError, match="Unknown check"):
    AnalyzerConfig.load(search_path=tmp_path, checks=["no_such_check"])


def test_unknown_member_order_key(tmp_path):
  with pytest.raises(ConfigError):
    AnalyzerConfig.load(search_path=tmp_path, overrides={"getter_ordinal": 3})


def test_non_integer_ordinal(tmp_path):
  with pytest.raises(ConfigError):
    AnalyzerConfig.load(search_path=tmp_path, overrides={"constructor_ordinal": "first"})


def test_invalid_toml(tmp_path):
  write_pyproject(tmp_path, "[tool.grumpinessy\n")
  with pytest.raises(ConfigError, match="Cannot parse"):
    AnalyzerConfig.load(search_path=tmp_path)


def test_parse_cli_key_values():
  parsed = parse_cli_key_values(["constructor_ordinal=3", "flag=true", "name = value "])
  assert parsed == {"constructor_ordinal": 3, "flag": True, "name": "value"}


def test_parse_cli_key_values_empty():
  assert parse_cli_key_values(None) == {}


def test_parse_cli_key_values_rejects_bare_words():
  with pytest.raises(ConfigError, match="key=value"):
    parse_cli_key_values(["constructor_ordinal"])
