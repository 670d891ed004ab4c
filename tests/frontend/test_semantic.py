"""Tests for the semantic resolution front end."""

from __future__ import annotations

import textwrap
from typing import Dict, FrozenSet

import pytest

from typecensus.analysis import TypeReferenceVisitor
from typecensus.errors import UnitParseError
from typecensus.frontend import SemanticResolutionFrontend
from typecensus.models import ResolutionKind


def _labels(source: str) -> Dict[str, FrozenSet[str]]:
    frontend = SemanticResolutionFrontend()
    visitor = TypeReferenceVisitor()
    unit = frontend.resolve(textwrap.dedent(source))
    return {signature.name: visitor.collect(signature) for signature in unit.functions}


def test_reference_to_str() -> None:
    labels = _labels("fn f(x: &str) {}")
    assert labels == {"f": {"primitive::ref", "primitive::str"}}


def test_prelude_types_map_to_defining_crates() -> None:
    labels = _labels("fn f(v: Vec<u8>) -> Option<String> { None }")
    assert labels["f"] == {"alloc::vec::Vec", "core::option::Option", "alloc::string::String"}


def test_imported_facade_path_is_canonicalized() -> None:
    labels = _labels(
        """
        use std::collections::HashMap;

        fn f(m: &HashMap<String, i32>) {}
        """
    )
    assert labels["f"] == {
        "primitive::ref",
        "std::collections::hash::map::HashMap",
        "alloc::string::String",
    }


def test_foreign_library_paths_resolve() -> None:
    labels = _labels(
        """
        pub unsafe fn f(x: libc::c_int) -> *mut libc::FILE {
            todo!()
        }
        """
    )
    assert labels["f"] == {"libc::c_int", "libc::FILE"}


def test_extern_crate_alias() -> None:
    labels = _labels(
        """
        extern crate libc as c;

        fn f(x: c::c_int) {}
        """
    )
    assert labels["f"] == {"libc::c_int"}


def test_reserved_foreign_aliases_yield_nothing() -> None:
    labels = _labels(
        """
        use std::os::raw::c_int;

        fn f(x: c_int, p: *const std::ffi::c_void) {}
        """
    )
    assert labels["f"] == frozenset()


def test_local_items_shadow_the_prelude() -> None:
    labels = _labels(
        """
        struct String;

        fn f(s: String) {}
        """
    )
    assert labels["f"] == frozenset()


def test_unregistered_crates_do_not_resolve() -> None:
    labels = _labels("fn f(x: serde_json::Value) {}")
    assert labels["f"] == frozenset()


def test_renamed_import() -> None:
    labels = _labels(
        """
        use std::vec::Vec as Buffer;

        fn f(b: Buffer<u8>) {}
        """
    )
    assert labels["f"] == {"alloc::vec::Vec"}


def test_structural_forms() -> None:
    labels = _labels(
        """
        fn pair(x: (i32, String), y: (u8,), z: &[u8]) -> ! {
            loop {}
        }
        """
    )
    assert labels["pair"] == {
        "primitive::tuple",
        "alloc::string::String",
        "primitive::ref",
        "primitive::slice",
        "primitive::never",
    }


def test_generic_bounds_where_clauses_and_const_params() -> None:
    labels = _labels(
        """
        use std::fmt::Display;

        fn show<T: Display + Clone, const N: usize>(items: [T; N]) -> String
        where
            T: Into<String>,
        {
            todo!()
        }
        """
    )
    assert labels["show"] == {
        "core::fmt::Display",
        "core::clone::Clone",
        "core::convert::Into",
        "alloc::string::String",
    }


def test_impl_and_dyn_traits_are_bounds() -> None:
    labels = _labels(
        """
        fn iter(it: impl Iterator<Item = u32>) -> Box<dyn Fn(&str) -> bool> {
            todo!()
        }
        """
    )
    assert labels["iter"] == {
        "core::iter::traits::iterator::Iterator",
        "alloc::boxed::Box",
        "core::ops::function::Fn",
        "primitive::ref",
        "primitive::str",
    }


def test_type_relative_paths_stay_unresolved() -> None:
    labels = _labels(
        """
        use std::ops::Add;

        fn sum<T: Add>(a: T) -> T::Output {
            todo!()
        }
        """
    )
    assert labels["sum"] == {"core::ops::arith::Add"}


def test_qualified_associated_type() -> None:
    labels = _labels(
        """
        fn first<I: Iterator>(it: I) -> <I as Iterator>::Item {
            todo!()
        }
        """
    )
    assert labels["first"] == {
        "core::iter::traits::iterator::Iterator",
        "core::iter::traits::iterator::Iterator::Item",
    }


def test_modules_and_relative_paths() -> None:
    frontend = SemanticResolutionFrontend()
    unit = frontend.resolve(
        textwrap.dedent(
            """
            mod shapes {
                pub struct Circle;

                pub fn area(c: &Circle) -> f64 {
                    0.0
                }

                pub mod inner {
                    pub fn widen(c: super::Circle, v: crate::shapes::Circle) -> Box<super::Circle> {
                        todo!()
                    }
                }
            }
            """
        )
    )
    visitor = TypeReferenceVisitor()

    paths = {signature.name: signature.def_path for signature in unit.functions}
    assert paths == {"area": ("shapes", "area"), "widen": ("shapes", "inner", "widen")}

    widen = next(signature for signature in unit.functions if signature.name == "widen")
    circle = widen.parameters[0]
    assert circle.resolution.kind is ResolutionKind.DEF
    assert circle.resolution.definition.is_local()
    assert circle.resolution.definition.path == ("shapes", "Circle")
    assert visitor.collect(widen) == {"alloc::boxed::Box"}


def test_glob_imports_from_local_and_std_modules() -> None:
    labels = _labels(
        """
        mod types {
            pub struct Meters;
        }

        use types::*;
        use std::collections::*;

        fn f(m: Meters, v: Vec<u8>, t: BTreeMap<u8, u8>) {}
        """
    )
    assert labels["f"] == {"alloc::vec::Vec", "alloc::collections::btree::map::BTreeMap"}


def test_nested_functions_are_collected() -> None:
    labels = _labels(
        """
        fn outer() -> i32 {
            struct Local;

            fn inner(x: Local, y: &[u8]) {}

            0
        }
        """
    )
    assert labels == {"outer": frozenset(), "inner": {"primitive::ref", "primitive::slice"}}


def test_cfg_test_items_are_stripped() -> None:
    labels = _labels(
        """
        fn kept(x: &str) {}

        #[cfg(test)]
        mod tests {
            fn helper(v: Vec<u8>) {}
        }

        #[cfg(test)]
        fn dropped() {}
        """
    )
    assert set(labels) == {"kept"}


def test_methods_are_not_free_functions() -> None:
    labels = _labels(
        """
        struct Counter;

        impl Counter {
            fn get(&self) -> u32 {
                0
            }
        }

        fn make() -> Counter {
            Counter
        }
        """
    )
    assert set(labels) == {"make"}


def test_strict_front_end_rejects_syntax_errors() -> None:
    frontend = SemanticResolutionFrontend()
    with pytest.raises(UnitParseError) as excinfo:
        frontend.resolve("fn broken(x: &str {\n", name="broken.rs")
    assert excinfo.value.unit == "broken.rs"
    assert "broken.rs" in str(excinfo.value)


def test_lenient_front_end_marks_unit_partial() -> None:
    frontend = SemanticResolutionFrontend(strict=False)
    unit = frontend.resolve(
        textwrap.dedent(
            """
            fn good(x: &str) {}

            fn broken(x: &str {
            """
        )
    )
    assert unit.partial is True
    assert "good" in {signature.name for signature in unit.functions}


def test_primitive_module_paths_are_primitives() -> None:
    labels = _labels("fn f(x: &std::primitive::str, n: core::primitive::u8) {}")
    assert labels == {"f": {"primitive::ref", "primitive::str"}}


def test_primitive_module_import_is_a_primitive() -> None:
    labels = _labels(
        """
        use core::primitive::str as Text;

        fn f(x: &Text) {}
        """
    )
    assert labels == {"f": {"primitive::ref", "primitive::str"}}


def test_module_named_like_a_primitive_does_not_hide_it() -> None:
    labels = _labels(
        """
        mod str {
            pub struct Shadow;
        }

        fn f(x: &str, y: str::Shadow) {}
        """
    )
    assert labels == {"f": {"primitive::ref", "primitive::str"}}
