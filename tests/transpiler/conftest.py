"""
Pytest configuration and shared fixtures for transpiler tests.

This module contains fixtures that are shared across multiple test modules.
"""

from collections.abc import Callable

import pytest

from cs2kt.transpiler.frontend import SymbolGraph
from cs2kt.transpiler.models import (
    MemberKind,
    MemberSymbol,
    ResolvedType,
    TypeKind,
    TypeSymbol,
)
from cs2kt.transpiler.syntax import TypeSyntax
from cs2kt.transpiler.type_translator import TypeTranslator


@pytest.fixture
def graph():
    """Fixture providing a symbol graph with a small interface hierarchy.

    IGreeter extends IClosable; Greeter implements IGreeter; LoudGreeter
    derives from Greeter and explicitly implements IClosable.Close.
    """
    graph = SymbolGraph()

    graph.add_type(
        TypeSymbol(
            name="IClosable",
            kind=TypeKind.INTERFACE,
            members=[MemberSymbol("Close", MemberKind.METHOD, "IClosable")],
        )
    )
    graph.add_type(
        TypeSymbol(
            name="IGreeter",
            kind=TypeKind.INTERFACE,
            interfaces=["IClosable"],
            members=[
                MemberSymbol("Greet", MemberKind.METHOD, "IGreeter", ("String",)),
                MemberSymbol("Name", MemberKind.PROPERTY, "IGreeter"),
            ],
        )
    )
    graph.add_type(
        TypeSymbol(
            name="Greeter",
            interfaces=["IGreeter"],
            members=[
                MemberSymbol("Greet", MemberKind.METHOD, "Greeter", ("String",)),
                MemberSymbol("Greet", MemberKind.METHOD, "Greeter", ("Int32",)),
                MemberSymbol("Name", MemberKind.PROPERTY, "Greeter"),
                MemberSymbol("Close", MemberKind.METHOD, "Greeter"),
                MemberSymbol("Helper", MemberKind.METHOD, "Greeter"),
            ],
        )
    )
    graph.add_type(
        TypeSymbol(
            name="LoudGreeter",
            base_type="Greeter",
            interfaces=["IClosable"],
            members=[
                MemberSymbol(
                    "Close",
                    MemberKind.METHOD,
                    "LoudGreeter",
                    explicit_interface="IClosable",
                ),
                MemberSymbol("Name", MemberKind.FIELD, "LoudGreeter"),
            ],
        )
    )
    return graph


@pytest.fixture
def translator(graph):
    """Fixture providing a type translator over the sample graph."""
    return TypeTranslator(graph)


@pytest.fixture
def type_ref(graph) -> Callable[..., TypeSyntax]:
    """Fixture providing a factory for type references bound in the graph."""

    def make(
        text: str, resolved: ResolvedType | None = None, error: bool = False
    ) -> TypeSyntax:
        syntax = TypeSyntax(text)
        if resolved is not None:
            graph.bind_type(syntax, resolved)
        if error:
            graph.mark_error(syntax)
        return syntax

    return make
