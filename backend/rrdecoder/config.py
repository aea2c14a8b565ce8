from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TypeVar

import yaml

from .formatting import IntegerFormat, TalkgroupFormatPolicy


@dataclass
class FormatConfig:
    """Talkgroup display preferences, one integer format per protocol."""
    apco25: str = IntegerFormat.DECIMAL.value
    ltr: str = IntegerFormat.FORMATTED.value
    mpt1327: str = IntegerFormat.FORMATTED.value
    passport: str = IntegerFormat.DECIMAL.value
    # Zero-pad decimal/hex values to a fixed width
    fixed_width: bool = False

    def __post_init__(self) -> None:
        self.fixed_width = parse_bool(self.fixed_width)

    def to_policy(self) -> TalkgroupFormatPolicy:
        return TalkgroupFormatPolicy(
            apco25=IntegerFormat.parse(self.apco25, IntegerFormat.DECIMAL),
            ltr=IntegerFormat.parse(self.ltr, IntegerFormat.FORMATTED),
            mpt1327=IntegerFormat.parse(self.mpt1327, IntegerFormat.FORMATTED),
            passport=IntegerFormat.parse(self.passport, IntegerFormat.DECIMAL),
            fixed_width=self.fixed_width,
        )


@dataclass
class LoggingConfig:
    level: str = "info"


@dataclass
class CatalogConfig:
    # Catalog YAML, relative paths resolve against the config file directory
    path: str | None = None


@dataclass
class AppConfig:
    format: FormatConfig = field(default_factory=FormatConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    # Directory of the loaded config file (for resolving relative paths)
    config_dir: str | None = None


_Section = TypeVar("_Section", FormatConfig, LoggingConfig, CatalogConfig)

_SECTIONS = ("format", "logging", "catalog")

_TRUE_WORDS = frozenset({"true", "yes", "on", "1"})
_FALSE_WORDS = frozenset({"false", "no", "off", "0", ""})


def parse_bool(value: Any) -> bool:
    """Interpret a YAML or environment flag; anything ambiguous is rejected."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise ValueError(f"Expected a boolean, got {value!r}")


def _read_yaml(path: Path) -> dict[str, Any]:
    """Load one config document; a missing file contributes nothing."""
    if not path.is_file():
        return {}
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise ValueError(f"Failed to parse config {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config root must be a mapping: {path}")
    return data


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    # Nested sections merge key by key, scalars in the override win
    for key, value in override.items():
        current = base.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            _merge(current, value)
        else:
            base[key] = value
    return base


def local_config_path(path: Path) -> Path:
    # rrdecoder.yaml -> rrdecoder.local.yaml
    return path.with_name(f"{path.stem}.local{path.suffix}")


ENV_PREFIX = "RRDECODER__"


def _apply_env(raw: dict[str, Any]) -> None:
    # RRDECODER__FORMAT__APCO25=hexadecimal sets raw["format"]["apco25"]
    for name, value in os_environ_items():
        if not name.startswith(ENV_PREFIX):
            continue
        parts = name[len(ENV_PREFIX):].lower().split("__")
        if len(parts) != 2 or parts[0] not in _SECTIONS:
            continue
        section, key = parts
        target = raw.setdefault(section, {})
        if isinstance(target, dict):
            target[key] = coerce_env_value(value)


def load_config(path_str: str) -> AppConfig:
    """Load the YAML config, its local overlay and environment overrides.

    Raises ValueError for unreadable YAML, non-mapping sections, unknown keys
    and values of the wrong kind.
    """
    path = Path(path_str)
    raw = _merge(_read_yaml(path), _read_yaml(local_config_path(path)))
    _apply_env(raw)

    return AppConfig(
        format=_build(FormatConfig, raw, "format"),
        logging=_build(LoggingConfig, raw, "logging"),
        catalog=_build(CatalogConfig, raw, "catalog"),
        config_dir=str(path.resolve().parent),
    )


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    data = raw.get(name) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return data


def _build(cls: type[_Section], raw: dict[str, Any], name: str) -> _Section:
    data = _section(raw, name)
    try:
        return cls(**data)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Invalid config section '{name}': {exc}") from exc


def coerce_env_value(val: str) -> Any:
    """Environment values are strings; turn flags and numbers into YAML-like types."""
    word = val.strip().lower()
    if word in ("true", "false"):
        return word == "true"
    if word.isdigit() or (word[:1] == "-" and word[1:].isdigit()):
        return int(word)
    return val


def os_environ_items() -> list[tuple[str, str]]:
    # Patched by tests
    return list(os.environ.items())
