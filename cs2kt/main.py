"""Command line interface for cs2kt.

This module provides a command-line interface for translating front-end dumps
of C# source files into Kotlin.
"""

import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any, Optional, TypeVar, cast

import typer
from loguru import logger

from cs2kt.transpiler import transpile_result
from cs2kt.transpiler.config import TranslatorConfig
from cs2kt.transpiler.driver import TranslationResult
from cs2kt.transpiler.errors import TranspilerError
from cs2kt.transpiler.loader import load_file
from cs2kt.transpiler.models import MemberKind
from cs2kt.transpiler.syntax import MethodDeclaration
from cs2kt.transpiler.type_translator import TypeTranslator

# Define type variables for TypedCallable
F = TypeVar("F", bound=Callable[..., Any])


# TypedCommand decorator helper
def typed_command(app_command: Any) -> Callable[[F], F]:
    """Wrap typer command with proper typing for mypy."""

    def decorator(func: F) -> F:
        return cast(F, app_command(func))

    return decorator


app = typer.Typer(
    name="cs2kt",
    help="Translate C# declarations to Kotlin. Commands: translate, types.",
    add_completion=False,
)

CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="YAML file extending the type mapping tables"
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Show debug logging")


def _configure_logging(verbose: bool) -> None:
    """Route loguru output to stderr at the requested level."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def _load_config(config_file: Path | None) -> TranslatorConfig:
    if config_file is None:
        return TranslatorConfig()
    try:
        return TranslatorConfig.from_file(config_file)
    except TranspilerError as e:
        logger.error(f"Invalid configuration: {e}")
        raise typer.Exit(1) from e


def _translate_dump(dump_file: Path, config: TranslatorConfig) -> TranslationResult:
    """Translate a dump file, mapping failures to exit code 1."""
    try:
        return transpile_result(dump_file, config=config)
    except TranspilerError as e:
        logger.error(f"Transpilation error: {e}")
        raise typer.Exit(1) from e


@typed_command(app.command("translate"))
def translate(
    dump_file: Path = typer.Argument(..., help="Front-end dump (YAML or JSON)"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Kotlin file to write (stdout when omitted)"
    ),
    config_file: Optional[Path] = CONFIG_OPTION,
    strict: bool = typer.Option(
        False, "--strict", help="Fail if any type could not be translated"
    ),
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Translate a front-end dump to Kotlin source.

    Example: cs2kt translate Messages.yaml -o Messages.kt
    """
    _configure_logging(verbose)
    result = _translate_dump(dump_file, _load_config(config_file))

    if output is None:
        typer.echo(result.code, nl=False)
    else:
        logger.info(f"Writing Kotlin code to {output}...")
        with open(output, "w") as f:
            f.write(result.code)
        logger.info(f"Kotlin code written to {output}")

    if strict and result.has_untranslated_types:
        logger.error(f"{len(result.diagnostics)} type(s) could not be translated")
        raise typer.Exit(1)


@typed_command(app.command("types"))
def list_types(
    dump_file: Path = typer.Argument(..., help="Front-end dump (YAML or JSON)"),
    config_file: Optional[Path] = CONFIG_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """List each declared member with its translated Kotlin type."""
    _configure_logging(verbose)
    config = _load_config(config_file)
    try:
        unit, graph = load_file(dump_file)
    except TranspilerError as e:
        logger.error(f"Failed to load dump: {e}")
        raise typer.Exit(1) from e

    translator = TypeTranslator(graph, config.tables)
    for namespace in unit.namespaces:
        for type_decl in namespace.types:
            for member in type_decl.members:
                symbol = graph.declared_symbol(member)
                kind = symbol.kind if symbol else MemberKind.FIELD
                if isinstance(member, MethodDeclaration):
                    type_text = translator.translate_syntax(member.return_type)
                else:
                    type_text = translator.translate_syntax(member.type)
                typer.echo(
                    f"{type_decl.name}.{member.name}\t{kind.name.lower()}\t{type_text}"
                )


if __name__ == "__main__":
    app()
