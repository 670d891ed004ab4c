"""Registry of resolvable libraries and their public definition paths."""

from __future__ import annotations

from collections import defaultdict
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional, Sequence, Set, Tuple

import yaml

from ..errors import LibraryIndexError
from ..logging import get_logger
from .stdlib import PRIMITIVE_TYPES, STANDARD_DEFINITIONS, STANDARD_PRELUDE

_LOGGER = get_logger("frontend.library_index")

DefPath = Tuple[str, ...]


def split_path(path: str) -> DefPath:
    return tuple(segment for segment in path.strip().split("::") if segment)


class LibraryIndex:
    """Answers which external paths resolve and where they are defined.

    Indexed libraries (the standard library crates) know their module
    members, so glob imports from them only bind listed names. Any other
    registered library, such as a foreign-ABI crate, is an open namespace:
    every path below its root resolves to itself.
    """

    def __init__(
        self,
        libraries: Iterable[str] = ("std", "alloc", "core", "libc"),
        *,
        indexed_libraries: Iterable[str] = ("std", "alloc", "core"),
        definitions: Mapping[str, Sequence[str]] = STANDARD_DEFINITIONS,
        prelude: Mapping[str, str] = STANDARD_PRELUDE,
    ) -> None:
        self._libraries: Set[str] = set(libraries)
        self._indexed: Set[str] = set(indexed_libraries)
        self._public: Dict[DefPath, DefPath] = {}
        self._members: Dict[DefPath, Set[str]] = defaultdict(set)
        self._prelude: Dict[str, DefPath] = {}
        self.add_definitions(definitions)
        self.add_prelude(prelude)

    @property
    def libraries(self) -> Tuple[str, ...]:
        return tuple(sorted(self._libraries))

    def register(self, library: str) -> None:
        self._libraries.add(library)

    def has_library(self, name: str) -> bool:
        return name in self._libraries

    def add_definitions(self, definitions: Mapping[str, Sequence[str]]) -> None:
        for defining, public_paths in definitions.items():
            target = split_path(defining)
            if len(target) < 2:
                raise LibraryIndexError(f"Definition path is too short: {defining!r}")
            for public in (defining, *public_paths):
                key = split_path(public)
                if len(key) < 2:
                    raise LibraryIndexError(f"Public path is too short: {public!r}")
                self._public[key] = target
                self._members[key[:-1]].add(key[-1])

    def add_prelude(self, prelude: Mapping[str, str]) -> None:
        for name, defining in prelude.items():
            self._prelude[name] = split_path(defining)

    def canonical(self, path: Sequence[str]) -> Optional[DefPath]:
        """Return the defining path for an absolute external path, if resolvable."""
        key = tuple(path)
        if len(key) < 2 or key[0] not in self._libraries:
            return None
        return self._public.get(key, key)

    def primitive(self, path: Sequence[str]) -> Optional[str]:
        """Return the primitive named by a path such as ``core::primitive::u8``."""
        key = tuple(path)
        if len(key) != 3 or key[0] not in self._indexed or key[1] != "primitive":
            return None
        return key[2] if key[2] in PRIMITIVE_TYPES else None

    def prelude(self, name: str) -> Optional[DefPath]:
        return self._prelude.get(name)

    def exports(self, module: Sequence[str], name: str) -> bool:
        """Return True when a glob import of ``module`` binds ``name``."""
        key = tuple(module)
        if not key or key[0] not in self._libraries:
            return False
        if key[0] not in self._indexed:
            return True
        return name in self._members.get(key, ())


def load_index_extension(path: Path) -> Tuple[Dict[str, Tuple[str, ...]], Dict[str, str]]:
    """Read a YAML file with extra ``definitions`` and ``prelude`` entries."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise LibraryIndexError(f"Failed to read library index {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise LibraryIndexError(f"Failed to parse library index {path}: {exc}") from exc

    if data is None:
        return {}, {}
    if not isinstance(data, dict):
        raise LibraryIndexError(f"{path.name} must contain a mapping at the root")

    definitions: Dict[str, Tuple[str, ...]] = {}
    raw_definitions = data.get("definitions") or {}
    if not isinstance(raw_definitions, dict):
        raise LibraryIndexError("'definitions' must be a mapping")
    for defining, public in raw_definitions.items():
        if public is None:
            public = []
        elif isinstance(public, str):
            public = [public]
        if not isinstance(public, list):
            raise LibraryIndexError(f"Public paths for {defining!r} must be a list")
        definitions[str(defining)] = tuple(str(item) for item in public)

    raw_prelude = data.get("prelude") or {}
    if not isinstance(raw_prelude, dict):
        raise LibraryIndexError("'prelude' must be a mapping")
    prelude = {str(name): str(target) for name, target in raw_prelude.items()}

    return definitions, prelude


def build_library_index(
    core_libraries: Sequence[str],
    foreign_libraries: Sequence[str],
    extension: Path | None = None,
) -> LibraryIndex:
    """Create the index used by the front end, applying an optional extension file."""
    index = LibraryIndex(libraries=core_libraries, indexed_libraries=core_libraries)
    for library in foreign_libraries:
        index.register(library)
    _LOGGER.debug("Registered libraries: %s", ", ".join(index.libraries))
    if extension is not None:
        definitions, prelude = load_index_extension(extension)
        index.add_definitions(definitions)
        index.add_prelude(prelude)
        _LOGGER.debug(
            "Loaded %d definitions and %d prelude names from %s",
            len(definitions),
            len(prelude),
            extension,
        )
    return index


__all__ = ["LibraryIndex", "build_library_index", "load_index_extension", "split_path"]
