"""Tests for the transpiler errors module."""

import pytest

from cs2kt.transpiler.errors import TranspilerError
from cs2kt.transpiler.models import SourceLocation
from cs2kt.transpiler.syntax import ParameterSyntax


def test_transpiler_error_message():
    """Test that TranspilerError keeps the message."""
    with pytest.raises(TranspilerError) as excinfo:
        raise TranspilerError("Test error message")

    assert "Test error message" in str(excinfo.value)
    assert excinfo.value.message == "Test error message"


def test_transpiler_error_inheritance():
    """Test that TranspilerError inherits from Exception."""
    error = TranspilerError("Test")

    assert isinstance(error, Exception)
    assert issubclass(TranspilerError, Exception)


def test_transpiler_error_with_node_location():
    """Test that the node's location is appended to the message."""
    node = ParameterSyntax("", location=SourceLocation("/src/Foo.cs", 42))

    error = TranspilerError("Parameter without identifier", node)

    assert str(error) == "Parameter without identifier in Foo.cs at line 42"
    assert error.file_path == "/src/Foo.cs"
    assert error.lineno == 42
    assert error.node is node


def test_transpiler_error_without_location():
    """Test the message of an error with no location at all."""
    error = TranspilerError("Broken")

    assert str(error) == "Broken"


def test_with_node():
    """Test re-attaching an error to another node."""
    original = TranspilerError("Broken")
    node = ParameterSyntax("x", location=SourceLocation("Foo.cs", 3))

    moved = original.with_node(node)

    assert moved is not original
    assert moved.message == "Broken"
    assert moved.lineno == 3
