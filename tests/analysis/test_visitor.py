"""Tests for typecensus.analysis.visitor."""

from __future__ import annotations

from typecensus.analysis.visitor import TypeReferenceVisitor
from typecensus.models import (
    FunctionSignature,
    NeverType,
    OtherType,
    PathType,
    ReferenceType,
    Resolution,
    ResolvedDefinition,
    SliceType,
    TraitRef,
    TupleType,
)


def _std(*path: str, crate: str = "std") -> PathType:
    return PathType(Resolution.of(ResolvedDefinition(crate, tuple(path))))


def _prim(name: str) -> PathType:
    return PathType(Resolution.primitive_type(name))


def _signature(*parameters, return_type=None, bounds=(), generic_types=()) -> FunctionSignature:
    return FunctionSignature(
        name="f",
        def_path=("f",),
        parameters=list(parameters),
        return_type=return_type,
        bounds=list(bounds),
        generic_types=list(generic_types),
    )


def test_reference_to_str_yields_ref_and_str() -> None:
    visitor = TypeReferenceVisitor()
    labels = visitor.collect(_signature(ReferenceType(_prim("str"))))
    assert labels == {"primitive::ref", "primitive::str"}


def test_slice_of_named_type_includes_element_label() -> None:
    visitor = TypeReferenceVisitor()
    vec = _std("vec", "Vec", crate="alloc")
    labels = visitor.collect(_signature(SliceType(vec)))
    assert labels == {"primitive::slice", "alloc::vec::Vec"}


def test_reserved_foreign_alias_is_dropped_but_structure_kept() -> None:
    visitor = TypeReferenceVisitor()
    c_int = _std("os", "raw", "c_int")
    labels = visitor.collect(_signature(ReferenceType(c_int)))
    assert labels == {"primitive::ref"}


def test_never_return_type() -> None:
    visitor = TypeReferenceVisitor()
    assert visitor.collect(_signature(return_type=NeverType())) == {"primitive::never"}


def test_tuple_label_requires_two_elements() -> None:
    visitor = TypeReferenceVisitor()
    string = _std("string", "String", crate="alloc")

    single = visitor.collect(_signature(TupleType((string,))))
    unit = visitor.collect(_signature(TupleType(())))
    pair = visitor.collect(_signature(TupleType((_prim("i32"), string))))

    assert single == {"alloc::string::String"}
    assert unit == frozenset()
    assert pair == {"primitive::tuple", "alloc::string::String"}


def test_generic_arguments_are_visited_but_definitions_are_not_followed() -> None:
    visitor = TypeReferenceVisitor()
    local = ResolvedDefinition("main", ("Point",), local=True, kind="struct")
    option = PathType(
        Resolution.of(ResolvedDefinition("core", ("option", "Option"))),
        arguments=(PathType(Resolution.of(local)),),
    )
    labels = visitor.collect(_signature(option))
    assert labels == {"core::option::Option"}


def test_other_primitives_and_errors_add_nothing() -> None:
    visitor = TypeReferenceVisitor()
    unresolved = PathType(Resolution.error(), arguments=(_prim("str"),), text="Missing<str>")
    labels = visitor.collect(_signature(_prim("u8"), _prim("bool"), unresolved))
    assert labels == {"primitive::str"}


def test_other_type_children_and_bounds_are_walked() -> None:
    visitor = TypeReferenceVisitor()
    display = TraitRef(Resolution.of(ResolvedDefinition("core", ("fmt", "Display"))))
    pointer = OtherType(children=(_std("ffi", "c_void", crate="core"), _prim("u8")), text="*mut u8")
    trait_object = OtherType(bounds=(display,), text="dyn Display")
    array = OtherType(children=(_std("string", "String", crate="alloc"),), text="[String; 4]")

    labels = visitor.collect(_signature(pointer, trait_object, array))
    assert labels == {"core::fmt::Display", "alloc::string::String"}


def test_bounds_and_generic_types_contribute() -> None:
    visitor = TypeReferenceVisitor()
    iterator = TraitRef(
        Resolution.of(ResolvedDefinition("core", ("iter", "traits", "iterator", "Iterator"))),
        arguments=(_std("string", "String", crate="alloc"),),
    )
    unresolved_bound = TraitRef(Resolution.error(), arguments=(_prim("str"),))
    const_type = _prim("usize")
    labels = visitor.collect(
        _signature(bounds=(iterator, unresolved_bound), generic_types=(const_type,))
    )
    assert labels == {
        "core::iter::traits::iterator::Iterator",
        "alloc::string::String",
        "primitive::str",
    }


def test_foreign_library_labels_are_kept() -> None:
    visitor = TypeReferenceVisitor()
    labels = visitor.collect(_signature(_std("c_int", crate="libc")))
    assert labels == {"libc::c_int"}


def test_collect_deduplicates_and_ignores_order() -> None:
    visitor = TypeReferenceVisitor()
    vec = _std("vec", "Vec", crate="alloc")
    first = visitor.collect(_signature(ReferenceType(vec), vec, return_type=SliceType(vec)))
    second = visitor.collect(_signature(SliceType(vec), vec, return_type=ReferenceType(vec)))
    assert first == second == {"primitive::ref", "primitive::slice", "alloc::vec::Vec"}


def test_empty_signature_has_no_labels() -> None:
    visitor = TypeReferenceVisitor()
    assert visitor.collect(_signature()) == frozenset()
