"""Path resolution against module scopes and the library index."""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Hashable, Mapping, Optional, Tuple, Union

from ..models import Resolution, ResolvedDefinition
from .library_index import LibraryIndex
from .scope import ModuleScope, RustPath
from .stdlib import PRIMITIVE_TYPES

GenericScope = Mapping[str, ResolvedDefinition]
_Visiting = FrozenSet[Hashable]


@dataclass(frozen=True)
class _Module:
    scope: ModuleScope


@dataclass(frozen=True)
class _Local:
    definition: ResolvedDefinition


@dataclass(frozen=True)
class _External:
    path: Tuple[str, ...]


@dataclass(frozen=True)
class _Primitive:
    name: str


_Target = Union[_Module, _Local, _External, _Primitive]

_NO_GENERICS: GenericScope = {}


class NameResolver:
    """Resolves type and trait paths the way the compiler's type namespace does.

    Single-segment names are looked up in generic parameters, then the
    lexical chain of scopes (items, explicit imports, globs), then the
    extern prelude, the standard prelude and finally the primitive types.
    """

    def __init__(self, index: LibraryIndex, crate_name: str = "main") -> None:
        self.index = index
        self.crate_name = crate_name

    def resolve(
        self,
        path: RustPath,
        scope: ModuleScope,
        generics: GenericScope = _NO_GENERICS,
    ) -> Resolution:
        return self._to_resolution(self._resolve_target(path, scope, generics, frozenset()))

    def resolve_associated(
        self,
        trait_path: RustPath,
        name: str,
        scope: ModuleScope,
        generics: GenericScope = _NO_GENERICS,
    ) -> Resolution:
        """Resolve ``<T as Trait>::name`` to the associated item of the trait."""
        resolution = self.resolve(trait_path, scope, generics)
        definition = resolution.definition
        if definition is None:
            return Resolution.error()
        return Resolution.of(
            ResolvedDefinition(
                crate=definition.crate,
                path=definition.path + (name,),
                local=definition.local,
                kind="associated",
            )
        )

    def local_definition(self, path: Tuple[str, ...], kind: str) -> ResolvedDefinition:
        return ResolvedDefinition(crate=self.crate_name, path=path, local=True, kind=kind)

    # ------------------------------------------------------------------
    # Internal helpers

    def _resolve_target(
        self,
        path: RustPath,
        scope: ModuleScope,
        generics: GenericScope,
        visiting: _Visiting,
    ) -> Optional[_Target]:
        segments = path.segments
        if not segments:
            return None

        index = 0
        target: Optional[_Target]
        if path.is_global:
            target = self._extern_crate(segments[0], scope)
            index = 1
        elif segments[0] == "crate":
            target = _Module(scope.root())
            index = 1
        elif segments[0] in ("self", "super"):
            module: Optional[ModuleScope] = scope.module()
            while index < len(segments) and segments[index] in ("self", "super"):
                if segments[index] == "super":
                    module = module.parent if module is not None else None
                index += 1
            target = _Module(module) if module is not None else None
        elif segments[0] in generics:
            # `T::Assoc` is type-relative and has no definition of its own.
            if len(segments) > 1:
                return None
            return _Local(generics[segments[0]])
        else:
            target = self._lookup_lexical(segments[0], scope, visiting, len(segments) == 1)
            index = 1

        for segment in segments[index:]:
            if target is None:
                return None
            target = self._descend(target, segment, visiting)
        return target

    def _lookup_lexical(
        self,
        name: str,
        scope: ModuleScope,
        visiting: _Visiting,
        single_segment: bool,
    ) -> Optional[_Target]:
        current: Optional[ModuleScope] = scope
        while current is not None:
            found = self._lookup_in_scope(name, current, visiting)
            if found is not None:
                # Modules are outside the type namespace; `str` falls back to the primitive.
                if single_segment and isinstance(found, _Module) and name in PRIMITIVE_TYPES:
                    return _Primitive(name)
                return found
            current = current.lexical_parent

        external = self._extern_crate(name, scope)
        if external is not None:
            return external
        if not single_segment:
            return None
        prelude = self.index.prelude(name)
        if prelude is not None:
            return _External(prelude)
        if name in PRIMITIVE_TYPES:
            return _Primitive(name)
        return None

    def _lookup_in_scope(
        self, name: str, scope: ModuleScope, visiting: _Visiting
    ) -> Optional[_Target]:
        kind = scope.items.get(name)
        if kind is not None:
            return _Local(self.local_definition(scope.path + (name,), kind))
        module = scope.modules.get(name)
        if module is not None:
            return _Module(module)
        crate = scope.extern_crates.get(name)
        if crate is not None and self.index.has_library(crate):
            return _External((crate,))

        imported = scope.imports.get(name)
        if imported is not None:
            key = (id(scope), name)
            if key not in visiting:
                target = self._resolve_import(imported, scope, visiting | {key})
                if target is not None:
                    return target

        return self._lookup_globs(name, scope, visiting)

    def _lookup_globs(
        self, name: str, scope: ModuleScope, visiting: _Visiting
    ) -> Optional[_Target]:
        externals = []
        for position, glob in enumerate(scope.globs):
            key = (id(scope), "*", position, name)
            if key in visiting:
                continue
            nested = visiting | {key}
            source = self._resolve_import(glob, scope, nested)
            if isinstance(source, _Module):
                found = self._lookup_in_scope(name, source.scope, nested)
                if found is not None:
                    return found
            elif isinstance(source, _External):
                externals.append(source)
        for source in externals:
            if self.index.exports(source.path, name):
                return _External(source.path + (name,))
        return None

    def _resolve_import(
        self, path: RustPath, scope: ModuleScope, visiting: _Visiting
    ) -> Optional[_Target]:
        # Imports resolve from the module they are declared in, without generics.
        return self._resolve_target(path, scope, _NO_GENERICS, visiting)

    def _descend(self, target: _Target, segment: str, visiting: _Visiting) -> Optional[_Target]:
        if isinstance(target, _Module):
            return self._lookup_in_scope(segment, target.scope, visiting)
        if isinstance(target, _External):
            return _External(target.path + (segment,))
        return None

    def _extern_crate(self, name: str, scope: ModuleScope) -> Optional[_Target]:
        crate = scope.root().extern_crates.get(name, name)
        if self.index.has_library(crate):
            return _External((crate,))
        return None

    def _to_resolution(self, target: Optional[_Target]) -> Resolution:
        if isinstance(target, _Local):
            return Resolution.of(target.definition)
        if isinstance(target, _Primitive):
            return Resolution.primitive_type(target.name)
        if isinstance(target, _External):
            primitive = self.index.primitive(target.path)
            if primitive is not None:
                return Resolution.primitive_type(primitive)
            canonical = self.index.canonical(target.path)
            if canonical is None:
                return Resolution.error()
            return Resolution.of(
                ResolvedDefinition(crate=canonical[0], path=canonical[1:], local=False)
            )
        return Resolution.error()


__all__ = ["GenericScope", "NameResolver"]
