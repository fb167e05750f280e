"""
In-memory front-end adapter.

SymbolGraph implements the SymbolResolver protocol over explicit tables:
syntax nodes bound to resolved types or declared symbols, and declared type
symbols with their interfaces, base types and members. The loader fills it
from a front-end dump; tests build it directly.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from cs2kt.transpiler.models import (
    ArrayType,
    MemberSymbol,
    ResolvedType,
    TypeSymbol,
)
from cs2kt.transpiler.syntax import ArrayTypeSyntax, SyntaxNode, TypeSyntax


@dataclass
class SymbolGraph:
    """Symbol tables of one translation unit."""

    types: dict[str, TypeSymbol] = field(default_factory=dict)
    type_bindings: dict[TypeSyntax, ResolvedType] = field(default_factory=dict)
    error_references: set[TypeSyntax] = field(default_factory=set)
    declarations: dict[SyntaxNode, MemberSymbol] = field(default_factory=dict)

    # --- Building ---

    def add_type(self, symbol: TypeSymbol) -> TypeSymbol:
        self.types[symbol.name] = symbol
        return symbol

    def bind_type(self, syntax: TypeSyntax, resolved: ResolvedType) -> None:
        self.type_bindings[syntax] = resolved

    def mark_error(self, syntax: TypeSyntax) -> None:
        """Record that the front-end reports the reference as an error type."""
        self.error_references.add(syntax)

    def bind_declaration(self, declaration: SyntaxNode, symbol: MemberSymbol) -> None:
        self.declarations[declaration] = symbol

    # --- SymbolResolver ---

    def resolve_type(self, syntax: TypeSyntax) -> ResolvedType | None:
        resolved = self.type_bindings.get(syntax)
        if resolved is None and isinstance(syntax, ArrayTypeSyntax):
            element = self.resolve_type(syntax.element_type)
            if element is not None:
                return ArrayType(element)
        return resolved

    def resolve_error(self, syntax: TypeSyntax) -> bool:
        return syntax in self.error_references

    def declared_symbol(self, declaration: SyntaxNode) -> MemberSymbol | None:
        return self.declarations.get(declaration)

    def interface_members_of(self, type_name: str) -> Sequence[MemberSymbol]:
        members: list[MemberSymbol] = []
        for interface in self.all_interfaces(type_name):
            symbol = self.types.get(interface)
            if symbol is not None:
                members.extend(symbol.members)
        return members

    def implementation_of(
        self, interface_member: MemberSymbol, type_name: str
    ) -> MemberSymbol | None:
        """Find the implementing member, most derived type first.

        On each type an explicit implementation of the member's interface
        wins over an implicit member with the same signature.
        """
        for symbol in self._base_chain(type_name):
            implicit = None
            for member in symbol.members:
                if not member.has_signature_of(interface_member):
                    continue
                if member.explicit_interface == interface_member.containing_type:
                    return member
                if member.explicit_interface is None and implicit is None:
                    implicit = member
            if implicit is not None:
                return implicit
        return None

    # --- Queries ---

    def all_interfaces(self, type_name: str) -> list[str]:
        """Interfaces of a type over the transitive closure, in discovery order."""
        result: list[str] = []
        seen: set[str] = set()
        pending = [
            interface
            for symbol in self._base_chain(type_name)
            for interface in symbol.interfaces
        ]
        while pending:
            interface = pending.pop(0)
            if interface in seen:
                continue
            seen.add(interface)
            result.append(interface)
            symbol = self.types.get(interface)
            if symbol is not None:
                pending.extend(symbol.interfaces)
        return result

    def _base_chain(self, type_name: str) -> Iterator[TypeSymbol]:
        visited: set[str] = set()
        current: str | None = type_name
        while current is not None and current not in visited:
            visited.add(current)
            symbol = self.types.get(current)
            if symbol is None:
                return
            yield symbol
            current = symbol.base_type
