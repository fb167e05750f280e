"""
Data models and structures for the C# to Kotlin transpiler.

This module contains the dataclass definitions shared by the type-mapping
layer: resolved types as reported by the front-end, member and type symbols
used for interface classification, and diagnostics collected during a run.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar


class TypeKind(Enum):
    """Kind tag carried by every resolved type."""

    PRIMITIVE = auto()
    CLASS = auto()
    STRUCT = auto()
    INTERFACE = auto()
    GENERIC = auto()
    DELEGATE = auto()
    ARRAY = auto()
    ENUM = auto()
    ERROR = auto()
    UNKNOWN = auto()


class MemberKind(Enum):
    """Kind of a declared member."""

    METHOD = auto()
    PROPERTY = auto()
    FIELD = auto()


class DiagnosticKind(Enum):
    """Kind of a non-fatal problem found while translating."""

    UNMAPPED_TYPE = auto()
    ERROR_TYPE = auto()


@dataclass(frozen=True)
class SourceLocation:
    """Position of a syntax node in the source document.

    Attributes:
        file: Source file name, if known
        line: 1-based line number, if known
    """

    file: str | None = None
    line: int | None = None

    def __str__(self) -> str:
        parts = []
        if self.file:
            parts.append(f"in {self.file}")
        if self.line:
            parts.append(f"at line {self.line}")
        return " ".join(parts)


# Resolved types


@dataclass(frozen=True)
class ResolvedType:
    """Base for all types resolved by the front-end."""


@dataclass(frozen=True)
class PrimitiveType(ResolvedType):
    """Predefined type, named by its metadata name (Int32, not int)."""

    name: str
    kind: ClassVar[TypeKind] = TypeKind.PRIMITIVE


@dataclass(frozen=True)
class NamedType(ResolvedType):
    """Non-generic class, struct or interface."""

    name: str
    type_kind: TypeKind = TypeKind.CLASS

    @property
    def kind(self) -> TypeKind:
        return self.type_kind

    @property
    def is_struct(self) -> bool:
        return self.type_kind is TypeKind.STRUCT


@dataclass(frozen=True)
class GenericType(ResolvedType):
    """Instantiated generic type such as List<Int32>."""

    name: str
    type_arguments: tuple[ResolvedType, ...]
    type_kind: TypeKind = TypeKind.CLASS
    kind: ClassVar[TypeKind] = TypeKind.GENERIC

    @property
    def is_struct(self) -> bool:
        return self.type_kind is TypeKind.STRUCT


@dataclass(frozen=True)
class DelegateType(ResolvedType):
    """Delegate type, described by its invoke signature."""

    name: str
    parameter_types: tuple[ResolvedType, ...]
    return_type: ResolvedType
    kind: ClassVar[TypeKind] = TypeKind.DELEGATE


@dataclass(frozen=True)
class ArrayType(ResolvedType):
    """Single-dimensional array."""

    element_type: ResolvedType
    kind: ClassVar[TypeKind] = TypeKind.ARRAY


@dataclass(frozen=True)
class EnumType(ResolvedType):
    """Enum type with its members in source declaration order."""

    name: str
    members: tuple[str, ...] = ()
    kind: ClassVar[TypeKind] = TypeKind.ENUM


@dataclass(frozen=True)
class ErrorType(ResolvedType):
    """Type the front-end itself reports as erroneous."""

    name: str = ""
    kind: ClassVar[TypeKind] = TypeKind.ERROR


@dataclass(frozen=True)
class UnknownType(ResolvedType):
    """Type that could not be resolved at all."""

    kind: ClassVar[TypeKind] = TypeKind.UNKNOWN


# Symbols


@dataclass(frozen=True)
class MemberSymbol:
    """Declared method, property or field.

    Attributes:
        name: Member name as declared in the source
        kind: Method, property or field
        containing_type: Name of the type declaring the member
        parameter_types: Metadata names of the parameter types (methods only)
        explicit_interface: Interface this member explicitly implements, if any
    """

    name: str
    kind: MemberKind
    containing_type: str
    parameter_types: tuple[str, ...] = ()
    explicit_interface: str | None = None

    def has_signature_of(self, other: "MemberSymbol") -> bool:
        """Check whether this member can implement `other`."""
        return (
            self.name == other.name
            and self.kind is other.kind
            and self.parameter_types == other.parameter_types
        )


@dataclass
class TypeSymbol:
    """Declared type in the symbol graph.

    Attributes:
        name: Type name
        kind: Class, struct, interface or enum
        interfaces: Directly implemented (or, for interfaces, extended) interfaces
        base_type: Name of the base class, if any
        members: Declared members
    """

    name: str
    kind: TypeKind = TypeKind.CLASS
    interfaces: list[str] = field(default_factory=list)
    base_type: str | None = None
    members: list[MemberSymbol] = field(default_factory=list)


@dataclass(frozen=True)
class Diagnostic:
    """Non-fatal problem recorded during translation."""

    kind: DiagnosticKind
    message: str
    location: SourceLocation | None = None

    def __str__(self) -> str:
        if self.location and str(self.location):
            return f"{self.kind.name}: {self.message} {self.location}"
        return f"{self.kind.name}: {self.message}"
