"""Exception hierarchy for typecensus."""

from __future__ import annotations

from typing import Optional, Tuple


class TypeCensusError(RuntimeError):
    """Base class for errors raised by typecensus."""


class ConfigError(TypeCensusError):
    """Raised when the configuration file cannot be parsed."""


class LibraryIndexError(TypeCensusError):
    """Raised when a library index extension file is malformed."""


class UnitParseError(TypeCensusError):
    """Raised when a compilation unit cannot be parsed."""

    def __init__(self, unit: str, position: Optional[Tuple[int, int]] = None) -> None:
        self.unit = unit
        self.position = position
        location = f" at line {position[0] + 1}, column {position[1] + 1}" if position else ""
        super().__init__(f"Failed to parse {unit}{location}")


__all__ = ["ConfigError", "LibraryIndexError", "TypeCensusError", "UnitParseError"]
