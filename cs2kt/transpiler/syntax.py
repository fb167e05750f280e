"""
Syntax node model handed to the translator by the front-end.

Nodes compare and hash by identity, so the front-end can bind each node to
its own symbol the way a semantic model does.
"""

from dataclasses import dataclass, field

from cs2kt.transpiler.models import SourceLocation, TypeKind


@dataclass(eq=False)
class SyntaxNode:
    """Base for all syntax nodes."""

    location: SourceLocation | None = field(default=None, kw_only=True)


@dataclass(eq=False)
class TypeSyntax(SyntaxNode):
    """Type reference as written in the source (e.g. 'List<int>')."""

    text: str


@dataclass(eq=False)
class ArrayTypeSyntax(TypeSyntax):
    """Array type reference (e.g. 'string[]')."""

    element_type: TypeSyntax


@dataclass(eq=False)
class ParameterSyntax(SyntaxNode):
    """Parameter with an optional declared type (lambdas may omit it)."""

    identifier: str
    type: TypeSyntax | None = None


@dataclass(eq=False)
class FieldDeclaration(SyntaxNode):
    name: str
    type: TypeSyntax
    modifiers: list[str] = field(default_factory=list)


@dataclass(eq=False)
class PropertyDeclaration(SyntaxNode):
    name: str
    type: TypeSyntax
    has_setter: bool = False
    modifiers: list[str] = field(default_factory=list)


@dataclass(eq=False)
class MethodDeclaration(SyntaxNode):
    name: str
    return_type: TypeSyntax
    parameters: list[ParameterSyntax] = field(default_factory=list)
    modifiers: list[str] = field(default_factory=list)


MemberDeclaration = FieldDeclaration | PropertyDeclaration | MethodDeclaration


@dataclass(eq=False)
class TypeDeclaration(SyntaxNode):
    """Class, struct, interface or enum declaration.

    Attributes:
        name: Declared type name
        kind: CLASS, STRUCT, INTERFACE or ENUM
        base_list: Base class and implemented interfaces, in source order
        members: Field, property and method declarations
        enum_members: Enum member names in declaration order
    """

    name: str
    kind: TypeKind = TypeKind.CLASS
    base_list: list[TypeSyntax] = field(default_factory=list)
    members: list[MemberDeclaration] = field(default_factory=list)
    enum_members: list[str] = field(default_factory=list)


@dataclass(eq=False)
class NamespaceDeclaration(SyntaxNode):
    name: str
    types: list[TypeDeclaration] = field(default_factory=list)


@dataclass(eq=False)
class CompilationUnit(SyntaxNode):
    """Root of a translated document."""

    namespaces: list[NamespaceDeclaration] = field(default_factory=list)
