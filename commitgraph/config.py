"""Configuration: read/write the commitgraph INI file and expose typed graph settings."""

from __future__ import annotations

import configparser
import io
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .constants import CONFIG_ENV_VAR, CONFIG_FILENAME, DEFAULT_ABBREV, FORMAT_ASCII, OUTPUT_FORMATS
from .errors import InvalidConfigKeyError, InvalidConfigValueError
from .util import read_text_safe, write_text_atomic

PathLike = Union[str, Path]

_BOOLEAN_STATES = configparser.ConfigParser.BOOLEAN_STATES


@dataclass(frozen=True)
class GraphSettings:
    """Typed view of the [graph] section."""
    format: str = FORMAT_ASCII
    head: bool = True
    abbrev: int = DEFAULT_ABBREV
    page_size: int = 0


def default_config_path() -> Path:
    """$COMMITGRAPH_CONFIG if set, else ~/.commitgraph.ini."""
    env = os.environ.get(CONFIG_ENV_VAR)
    if env:
        return Path(env)
    return Path.home() / CONFIG_FILENAME


def _resolve(path: Optional[PathLike]) -> Path:
    return Path(path) if path is not None else default_config_path()


def _parse_key(key: str) -> tuple[str, str]:
    """Return (section, option). Raises InvalidConfigKeyError if key invalid."""
    parts = key.split(".")
    if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
        raise InvalidConfigKeyError(f"invalid config key: {key!r} (expected section.option)")
    return parts[0].strip(), parts[1].strip()


def read_config(path: Optional[PathLike] = None) -> configparser.ConfigParser:
    """Read config file. Return empty parser if file missing or unreadable. Does not raise."""
    cfg = configparser.ConfigParser()
    content = read_text_safe(_resolve(path))
    if content:
        try:
            cfg.read_string(content)
        except configparser.Error:
            return configparser.ConfigParser()
    return cfg


def write_config(cfg: configparser.ConfigParser, path: Optional[PathLike] = None) -> None:
    """Write config file atomically."""
    buf = io.StringIO()
    cfg.write(buf)
    write_text_atomic(_resolve(path), buf.getvalue())


def get_value(key: str, path: Optional[PathLike] = None) -> Optional[str]:
    """Get config value for key (section.option). Return None if missing."""
    section, option = _parse_key(key)
    cfg = read_config(path)
    if cfg.has_section(section) and cfg.has_option(section, option):
        return cfg.get(section, option)
    return None


def set_value(key: str, value: str, path: Optional[PathLike] = None) -> None:
    """Set config value. Creates section if needed."""
    section, option = _parse_key(key)
    cfg = read_config(path)
    if not cfg.has_section(section):
        cfg.add_section(section)
    cfg.set(section, option, value)
    write_config(cfg, path)


def unset_value(key: str, path: Optional[PathLike] = None) -> bool:
    """Remove config option. Remove section if empty. Return True if something removed."""
    section, option = _parse_key(key)
    cfg = read_config(path)
    if not cfg.has_section(section) or not cfg.has_option(section, option):
        return False
    cfg.remove_option(section, option)
    if not cfg.options(section):
        cfg.remove_section(section)
    write_config(cfg, path)
    return True


def list_values(path: Optional[PathLike] = None) -> list[tuple[str, str]]:
    """Return [(key, value), ...] sorted by key (section.option)."""
    cfg = read_config(path)
    result: list[tuple[str, str]] = []
    for section in sorted(cfg.sections()):
        for option in sorted(cfg.options(section)):
            result.append((f"{section}.{option}", cfg.get(section, option)))
    return result


def _to_bool(key: str, value: str) -> bool:
    try:
        return _BOOLEAN_STATES[value.strip().lower()]
    except KeyError:
        raise InvalidConfigValueError(f"{key}: expected a boolean, got {value!r}") from None


def _to_count(key: str, value: str) -> int:
    try:
        n = int(value.strip())
    except ValueError:
        raise InvalidConfigValueError(f"{key}: expected an integer, got {value!r}") from None
    if n < 0:
        raise InvalidConfigValueError(f"{key}: must be >= 0, got {n}")
    return n


def load_settings(path: Optional[PathLike] = None) -> GraphSettings:
    """Read graph.format, graph.head, graph.abbrev and graph.page-size, with defaults."""
    cfg = read_config(path)
    defaults = GraphSettings()
    if not cfg.has_section("graph"):
        return defaults
    section = cfg["graph"]

    fmt = section.get("format", defaults.format).strip().lower()
    if fmt not in OUTPUT_FORMATS:
        raise InvalidConfigValueError(
            f"graph.format: expected one of {', '.join(OUTPUT_FORMATS)}, got {fmt!r}"
        )
    head = defaults.head
    if "head" in section:
        head = _to_bool("graph.head", section["head"])
    abbrev = defaults.abbrev
    if "abbrev" in section:
        abbrev = _to_count("graph.abbrev", section["abbrev"])
    page_size = defaults.page_size
    if "page-size" in section:
        page_size = _to_count("graph.page-size", section["page-size"])
    return GraphSettings(format=fmt, head=head, abbrev=abbrev, page_size=page_size)
