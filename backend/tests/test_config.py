"""Tests for YAML config loading, local overlay and environment overrides."""
from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from rrdecoder import config as config_module
from rrdecoder.config import FormatConfig, load_config
from rrdecoder.formatting import IntegerFormat, TalkgroupFormatPolicy


@pytest.fixture(autouse=True)
def no_env(monkeypatch):
    monkeypatch.setattr(config_module, "os_environ_items", lambda: [])


def test_missing_file_uses_defaults(tmp_path: Path) -> None:
    config = load_config(str(tmp_path / "rrdecoder.yaml"))

    assert config.format.to_policy() == TalkgroupFormatPolicy()
    assert config.logging.level == "info"
    assert config.catalog.path is None
    assert config.config_dir == str(tmp_path.resolve())


def test_example_config(config_dir: Path) -> None:
    config = load_config(str(config_dir / "rrdecoder.yaml"))
    assert config.catalog.path == "catalog.yaml"
    assert config.format.ltr == "formatted"


def test_load_config_overlays_local_file(tmp_path: Path) -> None:
    base_path = tmp_path / "rrdecoder.yaml"
    local_path = tmp_path / "rrdecoder.local.yaml"

    base_path.write_text(yaml.safe_dump({
        "format": {"apco25": "decimal", "ltr": "decimal"},
        "catalog": {"path": "catalog.yaml"},
    }), encoding="utf-8")
    local_path.write_text(yaml.safe_dump({
        "format": {"apco25": "hexadecimal"},
    }), encoding="utf-8")

    config = load_config(str(base_path))

    assert config.format.apco25 == "hexadecimal"
    assert config.format.ltr == "decimal"
    assert config.catalog.path == "catalog.yaml"


def test_environment_overrides(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(config_module, "os_environ_items", lambda: [
        ("RRDECODER__FORMAT__FIXED_WIDTH", "true"),
        ("RRDECODER__LOGGING__LEVEL", "debug"),
        ("RRDECODER__SERVER__PORT", "8080"),
        ("RRDECODER__BAD", "x"),
        ("OTHER__FORMAT__LTR", "decimal"),
    ])

    config = load_config(str(tmp_path / "rrdecoder.yaml"))

    assert config.format.fixed_width is True
    assert config.logging.level == "debug"
    assert config.format.ltr == "formatted"


def test_non_mapping_root_raises(tmp_path: Path) -> None:
    path = tmp_path / "rrdecoder.yaml"
    path.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(str(path))


def test_non_mapping_section_raises(tmp_path: Path) -> None:
    path = tmp_path / "rrdecoder.yaml"
    path.write_text("format: decimal\n", encoding="utf-8")
    with pytest.raises(ValueError, match="format"):
        load_config(str(path))


def test_to_policy_parses_names() -> None:
    policy = FormatConfig(apco25="HEXADECIMAL", mpt1327="decimal", passport="bogus",
                          fixed_width=True).to_policy()

    assert policy.apco25 == IntegerFormat.HEXADECIMAL
    assert policy.mpt1327 == IntegerFormat.DECIMAL
    assert policy.passport == IntegerFormat.DECIMAL
    assert policy.fixed_width is True


@pytest.mark.parametrize("raw,expected", [
    ("true", True),
    ("False", False),
    ("12", 12),
    ("-3", -3),
    ("hexadecimal", "hexadecimal"),
])
def test_coerce_env_value(raw, expected) -> None:
    assert config_module.coerce_env_value(raw) == expected


def test_invalid_yaml_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "rrdecoder.yaml"
    path.write_text("format: [decimal\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Failed to parse config"):
        load_config(str(path))


def test_invalid_local_overlay_raises_value_error(tmp_path: Path) -> None:
    (tmp_path / "rrdecoder.local.yaml").write_text("catalog: {path: [\n", encoding="utf-8")
    with pytest.raises(ValueError, match="rrdecoder.local.yaml"):
        load_config(str(tmp_path / "rrdecoder.yaml"))


def test_unknown_key_in_file_raises_value_error(tmp_path: Path) -> None:
    path = tmp_path / "rrdecoder.yaml"
    path.write_text("format:\n  radix: hex\n", encoding="utf-8")
    with pytest.raises(ValueError, match="format"):
        load_config(str(path))


def test_unknown_key_from_environment_raises_value_error(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(config_module, "os_environ_items", lambda: [
        ("RRDECODER__FORMAT__RADIX", "hex"),
    ])
    with pytest.raises(ValueError, match="radix"):
        load_config(str(tmp_path / "rrdecoder.yaml"))


@pytest.mark.parametrize("raw,expected", [
    ("'no'", False),
    ("'off'", False),
    ("'yes'", True),
    ("true", True),
    ("false", False),
    ("0", False),
])
def test_fixed_width_flag_values(tmp_path: Path, raw, expected) -> None:
    path = tmp_path / "rrdecoder.yaml"
    path.write_text(f"format:\n  fixed_width: {raw}\n", encoding="utf-8")

    policy = load_config(str(path)).format.to_policy()

    assert policy.fixed_width is expected


def test_fixed_width_rejects_ambiguous_value(tmp_path: Path) -> None:
    path = tmp_path / "rrdecoder.yaml"
    path.write_text("format:\n  fixed_width: sometimes\n", encoding="utf-8")
    with pytest.raises(ValueError, match="fixed_width|boolean"):
        load_config(str(path))


def test_fixed_width_from_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setattr(config_module, "os_environ_items", lambda: [
        ("RRDECODER__FORMAT__FIXED_WIDTH", "no"),
    ])
    assert load_config(str(tmp_path / "rrdecoder.yaml")).format.fixed_width is False


@pytest.mark.parametrize("value,expected", [
    (True, True),
    (0, False),
    ("On", True),
    (" FALSE ", False),
])
def test_parse_bool(value, expected) -> None:
    assert config_module.parse_bool(value) is expected


@pytest.mark.parametrize("value", ["maybe", 2, 1.5, None])
def test_parse_bool_rejects(value) -> None:
    with pytest.raises(ValueError):
        config_module.parse_bool(value)
