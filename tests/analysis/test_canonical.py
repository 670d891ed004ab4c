"""Tests for typecensus.analysis.canonical."""

from __future__ import annotations

import pytest

from typecensus.analysis.canonical import TypeCanonicalizer, is_structural
from typecensus.models import ResolvedDefinition


@pytest.mark.parametrize(
    ("definition", "expected"),
    [
        (ResolvedDefinition("alloc", ("vec", "Vec")), "alloc::vec::Vec"),
        (ResolvedDefinition("core", ("option", "Option")), "core::option::Option"),
        (
            ResolvedDefinition("std", ("collections", "hash", "map", "HashMap")),
            "std::collections::hash::map::HashMap",
        ),
        (ResolvedDefinition("libc", ("c_int",)), "libc::c_int"),
        (ResolvedDefinition("std", ("os", "raw", "c_int")), None),
        (ResolvedDefinition("core", ("ffi", "c_void")), None),
        (ResolvedDefinition("serde", ("Serialize",)), None),
        (ResolvedDefinition("main", ("Point",), local=True, kind="struct"), None),
    ],
)
def test_canonicalize_applies_inclusion_policy(definition, expected) -> None:
    assert TypeCanonicalizer().canonicalize(definition) == expected


def test_local_definitions_are_dropped_even_when_named_like_std() -> None:
    canonicalizer = TypeCanonicalizer()
    definition = ResolvedDefinition("std", ("string", "String"), local=True)
    assert canonicalizer.canonicalize(definition) is None


def test_foreign_libraries_are_configurable() -> None:
    canonicalizer = TypeCanonicalizer(foreign_libraries=())
    assert canonicalizer.canonicalize(ResolvedDefinition("libc", ("c_int",))) is None

    canonicalizer = TypeCanonicalizer(foreign_libraries=("winapi",))
    assert canonicalizer.canonicalize(ResolvedDefinition("winapi", ("DWORD",))) == "winapi::DWORD"


def test_reserved_namespace_requires_segment_boundary() -> None:
    canonicalizer = TypeCanonicalizer()
    definition = ResolvedDefinition("core", ("ffi_helpers", "Thing"))
    assert canonicalizer.canonicalize(definition) == "core::ffi_helpers::Thing"


def test_is_structural() -> None:
    assert is_structural("primitive::ref")
    assert not is_structural("core::primitive::u8")
