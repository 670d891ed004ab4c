"""Configuration loading for typecensus (.typecensus.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .analysis.canonical import CORE_LIBRARIES, FOREIGN_LIBRARIES, RESERVED_NAMESPACES
from .errors import ConfigError

CONFIG_FILENAME = ".typecensus.yml"
LIBRARY_INDEX_ENV = "TYPECENSUS_LIBRARY_INDEX"

DEFAULT_SCAFFOLDING_NAMESPACES = ("__laertes_array", "laertes_rt")


@dataclass
class TypeCensusConfig:
    """Represents the settings defined in .typecensus.yml."""

    root: Path
    crate_name: str = "main"
    strict_parse: bool = True
    core_libraries: List[str] = field(default_factory=lambda: list(CORE_LIBRARIES))
    foreign_libraries: List[str] = field(default_factory=lambda: list(FOREIGN_LIBRARIES))
    foreign_prefixes: List[str] = field(default_factory=list)
    reserved_namespaces: List[str] = field(default_factory=lambda: list(RESERVED_NAMESPACES))
    scaffolding_namespaces: List[str] = field(
        default_factory=lambda: list(DEFAULT_SCAFFOLDING_NAMESPACES)
    )
    library_index: Optional[Path] = None
    exclude_paths: List[str] = field(default_factory=list)

    def classifier_prefixes(self) -> List[str]:
        """Return the foreign prefixes, derived from the foreign libraries when unset."""
        if self.foreign_prefixes:
            return list(self.foreign_prefixes)
        return [f"{library}::" for library in self.foreign_libraries]


def load_config(config_path: Path) -> TypeCensusConfig:
    """Load configuration from disk."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        config = TypeCensusConfig(root=root)
    else:
        data = _read_config(config_file)
        if not isinstance(data, dict):
            raise ConfigError(f"{config_file.name} must contain a mapping at the root")
        config = _build_config(root, data)

    override = os.environ.get(LIBRARY_INDEX_ENV)
    if override:
        config.library_index = Path(override).expanduser()
    return config


def resolve_library_index(config: TypeCensusConfig) -> Optional[Path]:
    """Return the absolute library index path, or None when none is configured."""
    if config.library_index is None:
        return None
    path = config.library_index
    if not path.is_absolute():
        path = config.root / path
    if not path.is_file():
        raise ConfigError(f"Library index not found: {path}")
    return path


def _build_config(root: Path, data: Dict[str, Any]) -> TypeCensusConfig:
    config = TypeCensusConfig(root=root)

    crate_name = _as_str(data.get("crate_name"))
    if crate_name:
        config.crate_name = crate_name

    strict = _as_bool(data.get("strict_parse"))
    if strict is not None:
        config.strict_parse = strict

    for key in (
        "core_libraries",
        "foreign_libraries",
        "foreign_prefixes",
        "reserved_namespaces",
        "scaffolding_namespaces",
    ):
        if key in data:
            value = data.get(key)
            if value is not None and not isinstance(value, (str, list)):
                raise ConfigError(f"'{key}' must be a list of strings")
            setattr(config, key, _as_str_list(value))

    if not config.core_libraries:
        raise ConfigError("'core_libraries' must name at least one library")

    index = _as_str(data.get("library_index"))
    if index:
        config.library_index = Path(index).expanduser()

    config.exclude_paths = _as_str_list(data.get("exclude_paths"))
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.suffix not in (".yml", ".yaml"):
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "LIBRARY_INDEX_ENV",
    "TypeCensusConfig",
    "load_config",
    "resolve_library_index",
]
