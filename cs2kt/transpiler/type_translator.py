"""Translation of resolved C# types into Kotlin type expressions.

The translator is total: every input the front-end can produce maps to a
non-empty Kotlin type expression. Types that cannot be translated render as
the error or unknown sentinel and are recorded as diagnostics; translation
never raises for them.
"""

from enum import Enum, auto

from loguru import logger

from cs2kt.transpiler.core.interfaces import SymbolResolver
from cs2kt.transpiler.models import (
    ArrayType,
    DelegateType,
    Diagnostic,
    DiagnosticKind,
    EnumType,
    ErrorType,
    GenericType,
    NamedType,
    PrimitiveType,
    ResolvedType,
    SourceLocation,
    UnknownType,
)
from cs2kt.transpiler.syntax import ArrayTypeSyntax, TypeSyntax
from cs2kt.transpiler.type_mappings import (
    ERROR_TYPE_SENTINEL,
    UNKNOWN_TYPE_SENTINEL,
    TypeMappingTables,
)


class TypeContext(Enum):
    """Position a type expression is rendered in."""

    TYPE = auto()  # Declarations, parameters, type arguments
    ARRAY_CONSTRUCTOR = auto()  # Array literal construction (arrayOf<T>)


class TypeTranslator:
    """Converts resolved types and type syntax into Kotlin type expressions."""

    def __init__(
        self,
        resolver: SymbolResolver,
        tables: TypeMappingTables | None = None,
        diagnostics: list[Diagnostic] | None = None,
    ):
        self.resolver = resolver
        self.tables = tables or TypeMappingTables()
        self.diagnostics: list[Diagnostic] = (
            diagnostics if diagnostics is not None else []
        )
        self._recording = True

    def translate(
        self, resolved: ResolvedType, context: TypeContext = TypeContext.TYPE
    ) -> str:
        """Translate a resolved type.

        Args:
            resolved: Type reported by the front-end
            context: Whether an outermost array renders as a type or a constructor

        Returns:
            Kotlin type expression, never empty
        """
        return self._translate(resolved, context, None)

    def render(
        self, resolved: ResolvedType, context: TypeContext = TypeContext.TYPE
    ) -> str:
        """Translate a type that was already reported, without new diagnostics.

        Used when a fragment repeats a type the caller has translated before,
        such as the constructor call of a struct default value.
        """
        self._recording = False
        try:
            return self._translate(resolved, context, None)
        finally:
            self._recording = True

    def translate_syntax(
        self, syntax: TypeSyntax, context: TypeContext = TypeContext.TYPE
    ) -> str:
        """Translate a type reference as written in the source.

        Array syntax is translated structurally; anything else is resolved
        through the front-end first.
        """
        if isinstance(syntax, ArrayTypeSyntax):
            element = self.translate_syntax(syntax.element_type)
            return _render_array(element, context)

        resolved = self.resolver.resolve_type(syntax)
        if resolved is None:
            if self.resolver.resolve_error(syntax):
                return self._report(
                    DiagnosticKind.ERROR_TYPE,
                    f"Type '{syntax.text}' is erroneous",
                    syntax.location,
                )
            return self._report(
                DiagnosticKind.UNMAPPED_TYPE,
                f"No symbol for type '{syntax.text}'",
                syntax.location,
            )
        return self._translate(resolved, context, syntax.location)

    def _translate(
        self,
        resolved: ResolvedType,
        context: TypeContext,
        location: SourceLocation | None,
    ) -> str:
        match resolved:
            case ArrayType(element_type=element_type):
                element = self._translate(element_type, TypeContext.TYPE, location)
                return _render_array(element, context)

            case DelegateType(parameter_types=params, return_type=return_type):
                args = ", ".join(
                    self._translate(p, TypeContext.TYPE, location) for p in params
                )
                ret = self._translate(return_type, TypeContext.TYPE, location)
                return f"({args}) -> {ret}"

            case GenericType(name=name, type_arguments=type_arguments):
                container = self.tables.translate_generic_container(name)
                args = ", ".join(
                    self._translate(a, TypeContext.TYPE, location)
                    for a in type_arguments
                )
                return f"{container}<{args}>"

            case PrimitiveType(name=name) | NamedType(name=name) | EnumType(name=name):
                return self.tables.translate_name(name)

            case ErrorType(name=name):
                return self._report(
                    DiagnosticKind.ERROR_TYPE,
                    f"Type '{name}' is erroneous" if name else "Erroneous type",
                    location,
                )

            case UnknownType():
                return self._report(
                    DiagnosticKind.UNMAPPED_TYPE, "Unresolved type", location
                )

        return self._report(
            DiagnosticKind.UNMAPPED_TYPE,
            f"Unsupported type {type(resolved).__name__}",
            location,
        )

    def _report(
        self, kind: DiagnosticKind, message: str, location: SourceLocation | None
    ) -> str:
        if self._recording:
            diagnostic = Diagnostic(kind, message, location)
            self.diagnostics.append(diagnostic)
            logger.warning(str(diagnostic))
        if kind is DiagnosticKind.ERROR_TYPE:
            return ERROR_TYPE_SENTINEL
        return UNKNOWN_TYPE_SENTINEL


def _render_array(element: str, context: TypeContext) -> str:
    if context is TypeContext.ARRAY_CONSTRUCTOR:
        return f"arrayOf<{element}>"
    return f"Array<{element}>"
