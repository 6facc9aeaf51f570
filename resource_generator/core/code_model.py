"""Immutable declaration tree consumed by the printers."""

from dataclasses import dataclass
from typing import Iterator, Optional, Set, Tuple, Union

from .identifiers import SymbolName

STDLIB = 'Swift'
FOUNDATION = 'Foundation'
UIKIT = 'UIKit'
RSWIFT_RESOURCES = 'RswiftResources'


@dataclass(frozen=True)
class TypeReference:
    """
    Reference to a type.

    Attributes:
        name: Type name without module
        module: Defining module, None for the module being generated and
            ``Swift`` for the standard library. Both are never qualified.
        generic_args: Generic arguments, in order
    """
    name: str
    module: Optional[str] = None
    generic_args: Tuple['TypeReference', ...] = ()

    @classmethod
    def parse(cls, raw: str) -> 'TypeReference':
        """Parse ``UIKit.UIView`` style names; no dot means the host module."""
        module, _, name = raw.strip().rpartition('.')
        return cls(name=name, module=module or None)

    @property
    def is_qualified(self) -> bool:
        return self.module is not None and self.module != STDLIB

    def modules(self) -> Set[str]:
        """Modules that must be imported to use this type."""
        result = {self.module} if self.is_qualified else set()
        for arg in self.generic_args:
            result |= arg.modules()
        return result


BUNDLE = TypeReference('Bundle', FOUNDATION)
LOCALE = TypeReference('Locale', FOUNDATION)
STRING = TypeReference('String', STDLIB)
BOOL = TypeReference('Bool', STDLIB)
INT = TypeReference('Int', STDLIB)
DOUBLE = TypeReference('Double', STDLIB)
STRING_ARRAY = TypeReference('[String]', STDLIB)


@dataclass(frozen=True)
class FunctionParameter:
    """Parameter with an external label and an optional local name."""
    name: str
    type_reference: TypeReference
    local_name: Optional[str] = None
    default_value: Optional[str] = None


@dataclass(frozen=True)
class Init:
    """Stored properties set by the memberwise initializer."""
    params: Tuple[FunctionParameter, ...]
    comments: Tuple[str, ...] = ()


@dataclass(frozen=True)
class LetBinding:
    name: SymbolName
    value_code: str
    type_reference: Optional[TypeReference] = None
    comments: Tuple[str, ...] = ()
    is_static: bool = False


@dataclass(frozen=True)
class VarGetter:
    name: SymbolName
    type_reference: TypeReference
    value_code: str
    comments: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Function:
    name: SymbolName
    body: str
    params: Tuple[FunctionParameter, ...] = ()
    return_type: Optional[TypeReference] = None
    comments: Tuple[str, ...] = ()
    throws: bool = False
    is_static: bool = False


Declaration = Union[Init, LetBinding, VarGetter, Function, 'Struct']


@dataclass(frozen=True)
class Struct:
    """
    A struct owning an ordered sequence of declarations.

    Attributes:
        name: Struct name
        members: Child declarations in emission order
        comments: Documentation lines
        protocols: Conformances
        module_references: Modules used by code strings in the body that no
            type reference mentions
    """
    name: SymbolName
    members: Tuple[Declaration, ...] = ()
    comments: Tuple[str, ...] = ()
    protocols: Tuple[TypeReference, ...] = ()
    module_references: Tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return all(isinstance(member, Init) for member in self.members)

    @property
    def structs(self) -> Tuple['Struct', ...]:
        return tuple(m for m in self.members if isinstance(m, Struct))

    def has_function(self, name: str) -> bool:
        return any(isinstance(m, Function) and m.name.raw == name for m in self.members)

    def type_references(self) -> Iterator[TypeReference]:
        """All type references in this struct and its descendants."""
        yield from self.protocols
        for member in self.members:
            if isinstance(member, Struct):
                yield from member.type_references()
            elif isinstance(member, Init):
                yield from (p.type_reference for p in member.params)
            elif isinstance(member, Function):
                yield from (p.type_reference for p in member.params)
                if member.return_type is not None:
                    yield member.return_type
            elif member.type_reference is not None:
                yield member.type_reference

    def modules(self) -> Set[str]:
        """Modules to import, inferred from type references and code strings."""
        result = set(self.module_references)
        for member in self.structs:
            result |= member.modules()
        for reference in self.type_references():
            result |= reference.modules()
        return result

    @property
    def host_type(self) -> TypeReference:
        return TypeReference(self.name.value)

    def bundle_var_getter(self) -> VarGetter:
        """``var image: image { .init(bundle: bundle) }``"""
        return VarGetter(name=self.name, type_reference=self.host_type, value_code='.init(bundle: bundle)')

    def bundle_function(self) -> Function:
        """``func image(bundle: Foundation.Bundle) -> image``"""
        return Function(
            name=self.name,
            params=(FunctionParameter('bundle', BUNDLE),),
            return_type=self.host_type,
            body='.init(bundle: bundle)',
        )

    def let_binding(self) -> LetBinding:
        """``let font = font()``"""
        return LetBinding(name=self.name, value_code=f"{self.name.value}()")


INIT_BUNDLE = Init(params=(FunctionParameter('bundle', BUNDLE),))
INIT_BUNDLE_LOCALE = Init(params=(FunctionParameter('bundle', BUNDLE), FunctionParameter('locale', LOCALE)))
