"""Core interfaces for the transpiler system.

This module defines the narrow boundary between the translation core and
the external front-end that parses C# and resolves symbols, plus the
interface of the tree walker driven by the translation driver.
"""

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol

from cs2kt.transpiler.models import MemberSymbol, ResolvedType
from cs2kt.transpiler.syntax import SyntaxNode, TypeSyntax

if TYPE_CHECKING:
    from cs2kt.transpiler.driver import TranslationContext


class SymbolResolver(Protocol):
    """Read-only view of the front-end's semantic model."""

    def resolve_type(self, syntax: TypeSyntax) -> ResolvedType | None:
        """Resolve a type reference.

        Args:
            syntax: Type reference as written in the source

        Returns:
            The resolved type, or None when no symbol exists for it
        """
        ...

    def resolve_error(self, syntax: TypeSyntax) -> bool:
        """Check whether the front-end reports the reference as an error type."""
        ...

    def declared_symbol(self, declaration: SyntaxNode) -> MemberSymbol | None:
        """Get the symbol declared by a member declaration."""
        ...

    def interface_members_of(self, type_name: str) -> Sequence[MemberSymbol]:
        """Get the members of every interface the type implements.

        Args:
            type_name: Name of the implementing type

        Returns:
            Members over the transitive closure of implemented interfaces
        """
        ...

    def implementation_of(
        self, interface_member: MemberSymbol, type_name: str
    ) -> MemberSymbol | None:
        """Find the member of `type_name` that implements `interface_member`."""
        ...


class TreeWalker(Protocol):
    """Walks a syntax tree, writing translated text through the context."""

    def walk(self, root: Any, context: "TranslationContext") -> None: ...
