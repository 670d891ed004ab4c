"""Tests for typecensus.analysis.classifier."""

from __future__ import annotations

from typecensus.analysis.classifier import (
    EMPTY,
    FOREIGN,
    MIXED,
    NATIVE,
    ForeignClassifier,
    categorize,
)


def test_is_foreign_uses_namespace_prefix() -> None:
    classifier = ForeignClassifier()
    assert classifier.is_foreign("libc::c_int")
    assert classifier.is_foreign("libc::FILE")
    assert not classifier.is_foreign("core::option::Option")
    assert not classifier.is_foreign("libcore::Thing")
    assert classifier.is_native("primitive::ref")


def test_structural_labels_are_never_foreign() -> None:
    classifier = ForeignClassifier(prefixes=["primitive"])
    assert not classifier.is_foreign("primitive::slice")


def test_prefixes_are_normalised() -> None:
    classifier = ForeignClassifier(prefixes=["winapi"])
    assert classifier.prefixes == ("winapi::",)
    assert classifier.is_foreign("winapi::DWORD")
    assert not classifier.is_foreign("libc::c_int")


def test_partition_and_category() -> None:
    classifier = ForeignClassifier()
    labels = {"libc::c_int", "primitive::ref", "alloc::vec::Vec"}

    native, foreign = classifier.partition(labels)

    assert native == {"primitive::ref", "alloc::vec::Vec"}
    assert foreign == {"libc::c_int"}
    assert classifier.category(labels) == MIXED
    assert classifier.category({"libc::c_int"}) == FOREIGN
    assert classifier.category({"primitive::str"}) == NATIVE
    assert classifier.category(set()) == EMPTY


def test_categorize_names_partitioned_labels() -> None:
    assert categorize(frozenset({"primitive::ref"}), frozenset({"libc::c_int"})) == MIXED
    assert categorize(frozenset(), frozenset({"libc::c_int"})) == FOREIGN
    assert categorize(frozenset({"primitive::ref"}), frozenset()) == NATIVE
    assert categorize(frozenset(), frozenset()) == EMPTY
