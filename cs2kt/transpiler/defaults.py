"""Default values for C# types, rendered as Kotlin expressions."""

from cs2kt.transpiler.models import (
    EnumType,
    GenericType,
    NamedType,
    PrimitiveType,
    ResolvedType,
)
from cs2kt.transpiler.syntax import TypeSyntax
from cs2kt.transpiler.type_translator import TypeTranslator


class DefaultValueResolver:
    """Produces the Kotlin expression for a type's zero value.

    Only types whose default is a trivial literal or a nullary construction
    are covered; for everything else the resolver returns None and the caller
    decides what to emit.
    """

    def __init__(self, translator: TypeTranslator):
        self.translator = translator

    def default_value_of(self, resolved: ResolvedType) -> str | None:
        match resolved:
            case PrimitiveType(name=name) | NamedType(name=name) if (
                self.translator.tables.default_literal(name) is not None
            ):
                return self.translator.tables.default_literal(name)

            case EnumType(name=name, members=members) if members:
                # First member in declaration order, not lowest value
                enum_name = self.translator.tables.translate_name(name)
                return f"{enum_name}.{members[0]}"

            case NamedType() | GenericType() if resolved.is_struct:
                # Approximates the all-fields-zeroed value with a nullary call
                return f"{self.translator.render(resolved)}()"

        return None

    def default_value_of_syntax(self, syntax: TypeSyntax) -> str | None:
        """Default value for a type reference; None when it does not resolve."""
        resolved = self.translator.resolver.resolve_type(syntax)
        if resolved is None:
            return None
        return self.default_value_of(resolved)
