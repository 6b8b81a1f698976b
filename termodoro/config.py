"""Application configuration loaded from a TOML file."""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field, fields


class ConfigError(Exception):
    """Raised when a configuration file cannot be decoded."""


@dataclass
class Keys:
    """Key bindings for the application, each a list of key names."""

    force_quit: list[str] = field(default_factory=list)
    exit: list[str] = field(default_factory=list)
    help: list[str] = field(default_factory=list)
    up: list[str] = field(default_factory=list)
    down: list[str] = field(default_factory=list)
    left: list[str] = field(default_factory=list)
    right: list[str] = field(default_factory=list)


@dataclass
class Config:
    debug_mode: bool = True
    keys: Keys | None = None


def default_keys() -> Keys:
    """Return the built-in key bindings."""
    return Keys(["ctrl+c"], ["esc"], ["?"], ["w"], ["s"], ["a"], ["d"])


def get_config(path: str | os.PathLike[str]) -> Config:
    """Load the configuration at ``path``; a missing file yields the defaults."""
    config = Config()
    try:
        with open(path, "rb") as fh:
            document = tomllib.load(fh)
    except FileNotFoundError:
        return config
    except (OSError, tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"decoding toml file: {exc}") from exc

    config.debug_mode = document.get("debug_mode", True)
    if not isinstance(config.debug_mode, bool):
        raise ConfigError("decoding toml file: 'debug_mode' must be a boolean")
    if "keys" not in document:
        return config

    table = document["keys"]
    if not isinstance(table, dict):
        raise ConfigError("decoding toml file: 'keys' must be a table")
    config.keys = Keys()
    for name in (f.name for f in fields(Keys) if f.name in table):
        value = table[name]
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigError(f"decoding toml file: 'keys.{name}' must be an array of strings")
        setattr(config.keys, name, list(value))
    return config