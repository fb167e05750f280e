"""Tests for the type translator."""

import pytest

from cs2kt.transpiler.frontend import SymbolGraph
from cs2kt.transpiler.models import (
    ArrayType,
    DelegateType,
    DiagnosticKind,
    EnumType,
    ErrorType,
    GenericType,
    NamedType,
    PrimitiveType,
    SourceLocation,
    TypeKind,
    UnknownType,
)
from cs2kt.transpiler.syntax import ArrayTypeSyntax, TypeSyntax
from cs2kt.transpiler.type_mappings import (
    ERROR_TYPE_SENTINEL,
    UNKNOWN_TYPE_SENTINEL,
    TypeMappingTables,
)
from cs2kt.transpiler.type_translator import TypeContext, TypeTranslator

INT = PrimitiveType("Int32")
STRING = PrimitiveType("String")
BOOL = PrimitiveType("Boolean")


class TestTranslateResolvedType:
    """Tests for translating resolved types."""

    @pytest.mark.parametrize(
        "resolved",
        [
            INT,
            NamedType("Point", TypeKind.STRUCT),
            GenericType("List", (INT,)),
            DelegateType("Handler", (INT,), BOOL),
            ArrayType(STRING),
            EnumType("Color", ("Red", "Green", "Blue")),
            ErrorType("Missing"),
            UnknownType(),
        ],
        ids=lambda t: type(t).__name__,
    )
    def test_every_kind_translates_to_non_empty_text(self, translator, resolved):
        """Test that the translator is total over all type kinds."""
        assert translator.translate(resolved)

    def test_primitive(self, translator):
        """Test that primitives go through the name table."""
        assert translator.translate(INT) == "Int"
        assert translator.translate(PrimitiveType("Void")) == "Unit"

    def test_named_type_identity(self, translator):
        """Test that user-defined names pass through."""
        assert translator.translate(NamedType("MyCustomClass")) == "MyCustomClass"

    def test_named_type_mapped(self, translator):
        """Test that well-known named types are mapped."""
        assert translator.translate(NamedType("TimeSpan", TypeKind.STRUCT)) == "Duration"

    def test_enum(self, translator):
        """Test that enums translate to their name."""
        assert translator.translate(EnumType("Color", ("Red",))) == "Color"

    def test_generic(self, translator):
        """Test generic container and argument translation."""
        assert translator.translate(GenericType("List", (INT,))) == "MutableList<Int>"

    def test_nested_generic(self, translator):
        """Test that recursion preserves nesting."""
        nested = GenericType("List", (GenericType("List", (STRING,)),))
        assert translator.translate(nested) == "MutableList<MutableList<String>>"

    def test_generic_with_several_arguments(self, translator):
        """Test multi-argument generics."""
        dictionary = GenericType("ConcurrentDictionary", (STRING, PrimitiveType("Object")))
        assert translator.translate(dictionary) == "ConcurrentHashMap<String, Any>"

    def test_delegate(self, translator):
        """Test delegate rendering as a function type."""
        handler = DelegateType("Handler", (INT, STRING), BOOL)
        assert translator.translate(handler) == "(Int, String) -> Boolean"

    def test_delegate_without_parameters(self, translator):
        """Test a parameterless delegate returning void."""
        action = DelegateType("Action", (), PrimitiveType("Void"))
        assert translator.translate(action) == "() -> Unit"

    def test_delegate_with_generic_parameter(self, translator):
        """Test that delegate parameter types are translated recursively."""
        callback = DelegateType("Callback", (GenericType("List", (INT,)),), INT)
        assert translator.translate(callback) == "(MutableList<Int>) -> Int"

    def test_array_in_type_position(self, translator):
        """Test array rendering in declarations."""
        assert translator.translate(ArrayType(INT)) == "Array<Int>"

    def test_array_in_constructor_position(self, translator):
        """Test array rendering for array literal construction."""
        result = translator.translate(ArrayType(INT), TypeContext.ARRAY_CONSTRUCTOR)
        assert result == "arrayOf<Int>"

    def test_array_constructor_applies_to_outermost_array_only(self, translator):
        """Test that element arrays stay array types."""
        jagged = ArrayType(ArrayType(STRING))
        result = translator.translate(jagged, TypeContext.ARRAY_CONSTRUCTOR)
        assert result == "arrayOf<Array<String>>"

    def test_array_of_generic(self, translator):
        """Test arrays of generic types."""
        result = translator.translate(ArrayType(GenericType("List", (INT,))))
        assert result == "Array<MutableList<Int>>"

    def test_error_type_sentinel(self, translator):
        """Test the error sentinel and its diagnostic."""
        assert translator.translate(ErrorType("Missing")) == ERROR_TYPE_SENTINEL
        assert translator.diagnostics[0].kind is DiagnosticKind.ERROR_TYPE

    def test_unknown_type_sentinel(self, translator):
        """Test the unknown sentinel and its diagnostic."""
        assert translator.translate(UnknownType()) == UNKNOWN_TYPE_SENTINEL
        assert translator.diagnostics[0].kind is DiagnosticKind.UNMAPPED_TYPE

    def test_sentinel_inside_generic(self, translator):
        """Test that an unresolved argument does not hide the container."""
        result = translator.translate(GenericType("List", (UnknownType(),)))
        assert result == f"MutableList<{UNKNOWN_TYPE_SENTINEL}>"

    def test_custom_tables(self):
        """Test that extended tables drive the mapping."""
        tables = TypeMappingTables().extended(
            names={"DateTime": "Instant"},
            generic_containers={"Dictionary": "MutableMap"},
        )
        translator = TypeTranslator(SymbolGraph(), tables)
        resolved = GenericType("Dictionary", (STRING, NamedType("DateTime")))
        assert translator.translate(resolved) == "MutableMap<String, Instant>"

    def test_translation_is_repeatable(self, translator):
        """Test that translating twice gives the same text."""
        resolved = DelegateType("Handler", (GenericType("List", (INT,)),), BOOL)
        assert translator.translate(resolved) == translator.translate(resolved)


class TestTranslateSyntax:
    """Tests for translating type references through the resolver."""

    def test_resolved_reference(self, translator, type_ref):
        """Test a reference bound to a symbol."""
        ref = type_ref("List<int>", GenericType("List", (INT,)))
        assert translator.translate_syntax(ref) == "MutableList<Int>"
        assert translator.diagnostics == []

    def test_unresolved_reference_is_unknown(self, translator, type_ref):
        """Test a reference with no symbol and no front-end error."""
        ref = type_ref("Mystery")
        assert translator.translate_syntax(ref) == UNKNOWN_TYPE_SENTINEL
        assert len(translator.diagnostics) == 1
        assert translator.diagnostics[0].kind is DiagnosticKind.UNMAPPED_TYPE
        assert "Mystery" in translator.diagnostics[0].message

    def test_erroneous_reference_is_error(self, translator, type_ref):
        """Test a reference the front-end flags as erroneous."""
        ref = type_ref("Missing", error=True)
        assert translator.translate_syntax(ref) == ERROR_TYPE_SENTINEL
        assert translator.diagnostics[0].kind is DiagnosticKind.ERROR_TYPE

    def test_diagnostic_carries_location(self, translator):
        """Test that the reference's location is recorded."""
        ref = TypeSyntax("Mystery", location=SourceLocation("Foo.cs", 12))
        translator.translate_syntax(ref)
        assert translator.diagnostics[0].location == SourceLocation("Foo.cs", 12)
        assert "at line 12" in str(translator.diagnostics[0])

    def test_array_syntax(self, translator, type_ref):
        """Test that array syntax is translated from its element reference."""
        ref = ArrayTypeSyntax("string[]", type_ref("string", STRING))
        assert translator.translate_syntax(ref) == "Array<String>"
        result = translator.translate_syntax(ref, TypeContext.ARRAY_CONSTRUCTOR)
        assert result == "arrayOf<String>"

    def test_array_syntax_with_unresolved_element(self, translator, type_ref):
        """Test that an unresolved element keeps the array shape."""
        ref = ArrayTypeSyntax("Mystery[]", type_ref("Mystery"))
        assert translator.translate_syntax(ref) == f"Array<{UNKNOWN_TYPE_SENTINEL}>"

    def test_shared_diagnostics_list(self, graph, type_ref):
        """Test that diagnostics go to the list the caller provides."""
        diagnostics = []
        translator = TypeTranslator(graph, diagnostics=diagnostics)
        translator.translate_syntax(type_ref("Mystery"))
        assert len(diagnostics) == 1
