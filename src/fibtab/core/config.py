"""Reindent configuration — YAML file, then environment, then CLI flags."""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml

from fibtab.ladder import DEFAULT_MULTIPLIER, Ladder

_logger = logging.getLogger(__name__)

# Searched in order under the target root.
CONFIG_FILENAMES = (".fibtab.yaml", ".fibtab.yml", "fibtab.yaml")

ENV_PREFIX = "FIBTAB_"


class ConfigError(ValueError):
    """Raised for unreadable or invalid configuration."""


def _parse_bool(value: Any, *, key: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            return True
        if lowered in ("false", "0", "no", "off", ""):
            return False
    raise ConfigError(f"{key}: expected a boolean, got {value!r}")


def _parse_int(value: Any, *, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key}: expected an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigError(f"{key}: expected an integer, got {value!r}") from None


def _parse_str_tuple(value: Any, *, key: str) -> tuple[str, ...]:
    if isinstance(value, str):
        items = [v.strip() for v in value.split(",")]
    elif isinstance(value, (list, tuple)):
        items = [str(v).strip() for v in value]
    else:
        raise ConfigError(f"{key}: expected a list of strings, got {value!r}")
    return tuple(v for v in items if v)


def _normalize_exts(exts: tuple[str, ...]) -> tuple[str, ...]:
    return tuple(e.lower() if e.startswith(".") else f".{e.lower()}" for e in exts)


@dataclass(frozen=True)
class ReindentConfig:
    """Immutable reindent configuration.

    Can be loaded from ``.fibtab.yaml`` or constructed programmatically.
    """

    multiplier: int = DEFAULT_MULTIPLIER
    skip_blank_lines: bool = False
    create_backups: bool = True
    include_exts: tuple[str, ...] = (".py",)
    exclude_dirs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if self.multiplier < 1:
            raise ConfigError(f"multiplier: must be >= 1, got {self.multiplier}")

    @property
    def ladder(self) -> Ladder:
        return Ladder(multiplier=self.multiplier)

    # ── constructors ────────────────────────────────────────────────

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], *, source: str = "config") -> "ReindentConfig":
        """Build a config from a plain mapping, rejecting unknown keys."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(str(k) for k in set(data) - known)
        if unknown:
            raise ConfigError(f"{source}: unknown option(s): {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            kwargs[key] = _coerce(key, value, source=source)
        return cls(**kwargs)

    @classmethod
    def from_yaml(cls, path: Path) -> "ReindentConfig":
        """Load configuration from a YAML file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"{path}: cannot read config: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"{path}: invalid YAML: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{path}: top level must be a mapping")
        return cls.from_mapping(data, source=str(path))

    @classmethod
    def discover(cls, root: Path) -> "ReindentConfig":
        """Load the first config file found under *root*, else defaults."""
        base = root if root.is_dir() else root.parent
        for name in CONFIG_FILENAMES:
            candidate = base / name
            if candidate.is_file():
                _logger.info("Using config %s", candidate)
                return cls.from_yaml(candidate)
        return cls()

    # ── overrides ───────────────────────────────────────────────────

    def with_env(self, environ: Mapping[str, str] | None = None) -> "ReindentConfig":
        """Apply ``FIBTAB_<OPTION>`` environment overrides."""
        env = os.environ if environ is None else environ
        changes: dict[str, Any] = {}
        for f in dataclasses.fields(self):
            env_key = ENV_PREFIX + f.name.upper()
            if env_key in env:
                changes[f.name] = _coerce(f.name, env[env_key], source=env_key)
        return self.replace(**changes)

    def replace(self, **changes: Any) -> "ReindentConfig":
        """Return a copy with every non-None value in *changes* applied."""
        applied = {k: v for k, v in changes.items() if v is not None}
        if not applied:
            return self
        return dataclasses.replace(self, **applied)


def _coerce(key: str, value: Any, *, source: str) -> Any:
    label = f"{source}: {key}" if source != key else key
    if key == "multiplier":
        return _parse_int(value, key=label)
    if key in ("skip_blank_lines", "create_backups"):
        return _parse_bool(value, key=label)
    if key == "include_exts":
        return _normalize_exts(_parse_str_tuple(value, key=label))
    if key == "exclude_dirs":
        return _parse_str_tuple(value, key=label)
    raise ConfigError(f"{label}: unknown option")


def load_config(
    root: Path,
    *,
    config_path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> ReindentConfig:
    """Resolve the effective config for *root*: file, then environment."""
    if config_path is not None:
        base = ReindentConfig.from_yaml(config_path)
    else:
        base = ReindentConfig.discover(root)
    return base.with_env(environ)
