"""Bundled definition paths for the Rust standard library facade.

Keys are defining paths as the compiler reports them (owning crate first);
values are the additional public paths that re-export the same definition.
A definition is always reachable through its own defining path as well.
"""

from __future__ import annotations

from typing import Dict, Tuple

STANDARD_DEFINITIONS: Dict[str, Tuple[str, ...]] = {
    # core::option / core::result
    "core::option::Option": ("std::option::Option",),
    "core::result::Result": ("std::result::Result",),
    # markers
    "core::marker::Copy": ("std::marker::Copy",),
    "core::marker::Send": ("std::marker::Send",),
    "core::marker::Sized": ("std::marker::Sized",),
    "core::marker::Sync": ("std::marker::Sync",),
    "core::marker::Unpin": ("std::marker::Unpin",),
    "core::marker::PhantomData": ("std::marker::PhantomData",),
    "core::marker::PhantomPinned": ("std::marker::PhantomPinned",),
    # operators
    "core::ops::drop::Drop": ("core::ops::Drop", "std::ops::Drop"),
    "core::ops::function::Fn": ("core::ops::Fn", "std::ops::Fn"),
    "core::ops::function::FnMut": ("core::ops::FnMut", "std::ops::FnMut"),
    "core::ops::function::FnOnce": ("core::ops::FnOnce", "std::ops::FnOnce"),
    "core::ops::arith::Add": ("core::ops::Add", "std::ops::Add"),
    "core::ops::arith::Sub": ("core::ops::Sub", "std::ops::Sub"),
    "core::ops::arith::Mul": ("core::ops::Mul", "std::ops::Mul"),
    "core::ops::arith::Div": ("core::ops::Div", "std::ops::Div"),
    "core::ops::arith::Rem": ("core::ops::Rem", "std::ops::Rem"),
    "core::ops::arith::Neg": ("core::ops::Neg", "std::ops::Neg"),
    "core::ops::arith::AddAssign": ("core::ops::AddAssign", "std::ops::AddAssign"),
    "core::ops::arith::SubAssign": ("core::ops::SubAssign", "std::ops::SubAssign"),
    "core::ops::bit::Not": ("core::ops::Not", "std::ops::Not"),
    "core::ops::bit::BitAnd": ("core::ops::BitAnd", "std::ops::BitAnd"),
    "core::ops::bit::BitOr": ("core::ops::BitOr", "std::ops::BitOr"),
    "core::ops::bit::BitXor": ("core::ops::BitXor", "std::ops::BitXor"),
    "core::ops::bit::Shl": ("core::ops::Shl", "std::ops::Shl"),
    "core::ops::bit::Shr": ("core::ops::Shr", "std::ops::Shr"),
    "core::ops::deref::Deref": ("core::ops::Deref", "std::ops::Deref"),
    "core::ops::deref::DerefMut": ("core::ops::DerefMut", "std::ops::DerefMut"),
    "core::ops::index::Index": ("core::ops::Index", "std::ops::Index"),
    "core::ops::index::IndexMut": ("core::ops::IndexMut", "std::ops::IndexMut"),
    "core::ops::range::Range": ("core::ops::Range", "std::ops::Range"),
    "core::ops::range::RangeInclusive": ("core::ops::RangeInclusive", "std::ops::RangeInclusive"),
    "core::ops::range::RangeFrom": ("core::ops::RangeFrom", "std::ops::RangeFrom"),
    "core::ops::range::RangeTo": ("core::ops::RangeTo", "std::ops::RangeTo"),
    "core::ops::range::RangeBounds": ("core::ops::RangeBounds", "std::ops::RangeBounds"),
    # comparison, conversion, defaults
    "core::clone::Clone": ("std::clone::Clone",),
    "core::cmp::PartialEq": ("std::cmp::PartialEq",),
    "core::cmp::Eq": ("std::cmp::Eq",),
    "core::cmp::PartialOrd": ("std::cmp::PartialOrd",),
    "core::cmp::Ord": ("std::cmp::Ord",),
    "core::cmp::Ordering": ("std::cmp::Ordering",),
    "core::cmp::Reverse": ("std::cmp::Reverse",),
    "core::convert::AsRef": ("std::convert::AsRef",),
    "core::convert::AsMut": ("std::convert::AsMut",),
    "core::convert::From": ("std::convert::From",),
    "core::convert::Into": ("std::convert::Into",),
    "core::convert::TryFrom": ("std::convert::TryFrom",),
    "core::convert::TryInto": ("std::convert::TryInto",),
    "core::convert::Infallible": ("std::convert::Infallible",),
    "core::default::Default": ("std::default::Default",),
    "core::any::Any": ("std::any::Any",),
    "core::any::TypeId": ("std::any::TypeId",),
    "core::error::Error": ("std::error::Error",),
    "core::hash::Hash": ("std::hash::Hash",),
    "core::hash::Hasher": ("std::hash::Hasher",),
    "core::hash::BuildHasher": ("std::hash::BuildHasher",),
    "core::borrow::Borrow": ("std::borrow::Borrow",),
    "core::borrow::BorrowMut": ("std::borrow::BorrowMut",),
    # iterators
    "core::iter::traits::iterator::Iterator": ("core::iter::Iterator", "std::iter::Iterator"),
    "core::iter::traits::collect::IntoIterator": (
        "core::iter::IntoIterator",
        "std::iter::IntoIterator",
    ),
    "core::iter::traits::collect::FromIterator": (
        "core::iter::FromIterator",
        "std::iter::FromIterator",
    ),
    "core::iter::traits::collect::Extend": ("core::iter::Extend", "std::iter::Extend"),
    "core::iter::traits::double_ended::DoubleEndedIterator": (
        "core::iter::DoubleEndedIterator",
        "std::iter::DoubleEndedIterator",
    ),
    "core::iter::traits::exact_size::ExactSizeIterator": (
        "core::iter::ExactSizeIterator",
        "std::iter::ExactSizeIterator",
    ),
    "core::iter::adapters::peekable::Peekable": ("core::iter::Peekable", "std::iter::Peekable"),
    "core::slice::iter::Iter": ("core::slice::Iter", "std::slice::Iter"),
    "core::slice::iter::IterMut": ("core::slice::IterMut", "std::slice::IterMut"),
    "core::str::iter::Chars": ("core::str::Chars", "std::str::Chars"),
    "core::str::traits::FromStr": ("core::str::FromStr", "std::str::FromStr"),
    "core::str::error::Utf8Error": ("core::str::Utf8Error", "std::str::Utf8Error"),
    # formatting
    "core::fmt::Display": ("std::fmt::Display",),
    "core::fmt::Debug": ("std::fmt::Debug",),
    "core::fmt::Formatter": ("std::fmt::Formatter",),
    "core::fmt::Result": ("std::fmt::Result",),
    "core::fmt::Write": ("std::fmt::Write",),
    "core::fmt::Arguments": ("std::fmt::Arguments",),
    "core::fmt::Error": ("std::fmt::Error",),
    # memory and pointers
    "core::cell::Cell": ("std::cell::Cell",),
    "core::cell::RefCell": ("std::cell::RefCell",),
    "core::cell::UnsafeCell": ("std::cell::UnsafeCell",),
    "core::cell::Ref": ("std::cell::Ref",),
    "core::cell::RefMut": ("std::cell::RefMut",),
    "core::ptr::non_null::NonNull": ("core::ptr::NonNull", "std::ptr::NonNull"),
    "core::mem::manually_drop::ManuallyDrop": (
        "core::mem::ManuallyDrop",
        "std::mem::ManuallyDrop",
    ),
    "core::mem::maybe_uninit::MaybeUninit": ("core::mem::MaybeUninit", "std::mem::MaybeUninit"),
    "core::pin::Pin": ("std::pin::Pin",),
    "core::num::wrapping::Wrapping": ("core::num::Wrapping", "std::num::Wrapping"),
    "core::num::error::ParseIntError": ("core::num::ParseIntError", "std::num::ParseIntError"),
    "core::time::Duration": ("std::time::Duration",),
    "core::sync::atomic::AtomicBool": ("std::sync::atomic::AtomicBool",),
    "core::sync::atomic::AtomicUsize": ("std::sync::atomic::AtomicUsize",),
    "core::sync::atomic::AtomicIsize": ("std::sync::atomic::AtomicIsize",),
    "core::sync::atomic::AtomicU32": ("std::sync::atomic::AtomicU32",),
    "core::sync::atomic::AtomicU64": ("std::sync::atomic::AtomicU64",),
    "core::sync::atomic::AtomicI32": ("std::sync::atomic::AtomicI32",),
    "core::sync::atomic::AtomicPtr": ("std::sync::atomic::AtomicPtr",),
    "core::sync::atomic::Ordering": ("std::sync::atomic::Ordering",),
    # foreign-interop aliases; excluded from labels by the reserved namespaces
    "core::ffi::c_void": ("std::ffi::c_void", "std::os::raw::c_void"),
    "core::ffi::c_char": ("std::ffi::c_char", "std::os::raw::c_char"),
    "core::ffi::c_schar": ("std::ffi::c_schar", "std::os::raw::c_schar"),
    "core::ffi::c_uchar": ("std::ffi::c_uchar", "std::os::raw::c_uchar"),
    "core::ffi::c_short": ("std::ffi::c_short", "std::os::raw::c_short"),
    "core::ffi::c_ushort": ("std::ffi::c_ushort", "std::os::raw::c_ushort"),
    "core::ffi::c_int": ("std::ffi::c_int", "std::os::raw::c_int"),
    "core::ffi::c_uint": ("std::ffi::c_uint", "std::os::raw::c_uint"),
    "core::ffi::c_long": ("std::ffi::c_long", "std::os::raw::c_long"),
    "core::ffi::c_ulong": ("std::ffi::c_ulong", "std::os::raw::c_ulong"),
    "core::ffi::c_longlong": ("std::ffi::c_longlong", "std::os::raw::c_longlong"),
    "core::ffi::c_ulonglong": ("std::ffi::c_ulonglong", "std::os::raw::c_ulonglong"),
    "core::ffi::c_float": ("std::ffi::c_float", "std::os::raw::c_float"),
    "core::ffi::c_double": ("std::ffi::c_double", "std::os::raw::c_double"),
    "core::ffi::c_str::CStr": ("core::ffi::CStr", "std::ffi::CStr"),
    "core::ffi::va_list::VaList": ("core::ffi::VaList", "std::ffi::VaList"),
    "core::ffi::va_list::VaListImpl": ("core::ffi::VaListImpl", "std::ffi::VaListImpl"),
    # alloc
    "alloc::boxed::Box": ("std::boxed::Box",),
    "alloc::vec::Vec": ("std::vec::Vec",),
    "alloc::string::String": ("std::string::String",),
    "alloc::string::ToString": ("std::string::ToString",),
    "alloc::borrow::Cow": ("std::borrow::Cow",),
    "alloc::borrow::ToOwned": ("std::borrow::ToOwned",),
    "alloc::rc::Rc": ("std::rc::Rc",),
    "alloc::rc::Weak": ("std::rc::Weak",),
    "alloc::sync::Arc": ("std::sync::Arc",),
    "alloc::sync::Weak": ("std::sync::Weak",),
    "alloc::ffi::c_str::CString": ("alloc::ffi::CString", "std::ffi::CString"),
    "alloc::collections::btree::map::BTreeMap": (
        "alloc::collections::BTreeMap",
        "alloc::collections::btree_map::BTreeMap",
        "std::collections::BTreeMap",
        "std::collections::btree_map::BTreeMap",
    ),
    "alloc::collections::btree::set::BTreeSet": (
        "alloc::collections::BTreeSet",
        "alloc::collections::btree_set::BTreeSet",
        "std::collections::BTreeSet",
        "std::collections::btree_set::BTreeSet",
    ),
    "alloc::collections::vec_deque::VecDeque": (
        "alloc::collections::VecDeque",
        "std::collections::VecDeque",
        "std::collections::vec_deque::VecDeque",
    ),
    "alloc::collections::linked_list::LinkedList": (
        "alloc::collections::LinkedList",
        "std::collections::LinkedList",
        "std::collections::linked_list::LinkedList",
    ),
    "alloc::collections::binary_heap::BinaryHeap": (
        "alloc::collections::BinaryHeap",
        "std::collections::BinaryHeap",
        "std::collections::binary_heap::BinaryHeap",
    ),
    # std proper
    "std::collections::hash::map::HashMap": (
        "std::collections::HashMap",
        "std::collections::hash_map::HashMap",
    ),
    "std::collections::hash::set::HashSet": (
        "std::collections::HashSet",
        "std::collections::hash_set::HashSet",
    ),
    "std::ffi::os_str::OsStr": ("std::ffi::OsStr",),
    "std::ffi::os_str::OsString": ("std::ffi::OsString",),
    "std::io::error::Error": ("std::io::Error",),
    "std::io::error::ErrorKind": ("std::io::ErrorKind",),
    "std::io::error::Result": ("std::io::Result",),
    "std::io::Read": (),
    "std::io::Write": (),
    "std::io::BufRead": (),
    "std::io::Seek": (),
    "std::io::buffered::bufreader::BufReader": ("std::io::BufReader",),
    "std::io::buffered::bufwriter::BufWriter": ("std::io::BufWriter",),
    "std::fs::File": (),
    "std::path::Path": (),
    "std::path::PathBuf": (),
    "std::process::ExitCode": (),
    "std::process::Command": (),
    "std::sync::mutex::Mutex": ("std::sync::Mutex",),
    "std::sync::mutex::MutexGuard": ("std::sync::MutexGuard",),
    "std::sync::rwlock::RwLock": ("std::sync::RwLock",),
    "std::sync::mpsc::Sender": (),
    "std::sync::mpsc::Receiver": (),
    "std::thread::JoinHandle": (),
    "std::time::Instant": (),
    "std::time::SystemTime": (),
    "std::net::tcp::TcpStream": ("std::net::TcpStream",),
    "std::net::tcp::TcpListener": ("std::net::TcpListener",),
}

# Names the 2021 edition prelude brings into every module, in the type namespace.
STANDARD_PRELUDE: Dict[str, str] = {
    "Copy": "core::marker::Copy",
    "Send": "core::marker::Send",
    "Sized": "core::marker::Sized",
    "Sync": "core::marker::Sync",
    "Unpin": "core::marker::Unpin",
    "Drop": "core::ops::drop::Drop",
    "Fn": "core::ops::function::Fn",
    "FnMut": "core::ops::function::FnMut",
    "FnOnce": "core::ops::function::FnOnce",
    "Box": "alloc::boxed::Box",
    "ToOwned": "alloc::borrow::ToOwned",
    "Clone": "core::clone::Clone",
    "PartialEq": "core::cmp::PartialEq",
    "PartialOrd": "core::cmp::PartialOrd",
    "Eq": "core::cmp::Eq",
    "Ord": "core::cmp::Ord",
    "AsRef": "core::convert::AsRef",
    "AsMut": "core::convert::AsMut",
    "Into": "core::convert::Into",
    "From": "core::convert::From",
    "TryFrom": "core::convert::TryFrom",
    "TryInto": "core::convert::TryInto",
    "Default": "core::default::Default",
    "Iterator": "core::iter::traits::iterator::Iterator",
    "Extend": "core::iter::traits::collect::Extend",
    "IntoIterator": "core::iter::traits::collect::IntoIterator",
    "FromIterator": "core::iter::traits::collect::FromIterator",
    "DoubleEndedIterator": "core::iter::traits::double_ended::DoubleEndedIterator",
    "ExactSizeIterator": "core::iter::traits::exact_size::ExactSizeIterator",
    "Option": "core::option::Option",
    "Result": "core::result::Result",
    "String": "alloc::string::String",
    "ToString": "alloc::string::ToString",
    "Vec": "alloc::vec::Vec",
}

PRIMITIVE_TYPES = frozenset(
    {
        "bool",
        "char",
        "str",
        "f32",
        "f64",
        "i8",
        "i16",
        "i32",
        "i64",
        "i128",
        "isize",
        "u8",
        "u16",
        "u32",
        "u64",
        "u128",
        "usize",
    }
)

__all__ = ["PRIMITIVE_TYPES", "STANDARD_DEFINITIONS", "STANDARD_PRELUDE"]
