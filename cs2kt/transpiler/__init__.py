"""
Translation of C# declarations to Kotlin.

This module provides the top-level interface of the transpiler: it accepts
a front-end dump (a file path or an already parsed mapping) or a syntax tree
with its resolver, and returns the translated Kotlin document.
"""

from pathlib import Path
from typing import Any

from loguru import logger

from cs2kt.transpiler.config import TranslatorConfig
from cs2kt.transpiler.core.interfaces import SymbolResolver, TreeWalker
from cs2kt.transpiler.driver import TranslationDriver, TranslationResult
from cs2kt.transpiler.errors import TranspilerError
from cs2kt.transpiler.loader import load_document, load_file
from cs2kt.transpiler.syntax import CompilationUnit


def _resolve_input(
    source: str | Path | dict[str, Any] | CompilationUnit,
    resolver: SymbolResolver | None,
) -> tuple[CompilationUnit, SymbolResolver]:
    """Turn the accepted input forms into a tree and its resolver.

    Args:
        source: Dump path, parsed dump, or syntax tree
        resolver: Resolver for a syntax tree input

    Returns:
        Tuple of (compilation unit, symbol resolver)

    Raises:
        TranspilerError: If the input form is not supported
    """
    if isinstance(source, CompilationUnit):
        if resolver is None:
            raise TranspilerError("A syntax tree input requires a symbol resolver")
        return source, resolver
    if resolver is not None:
        raise TranspilerError("A resolver can only be given with a syntax tree input")
    if isinstance(source, dict):
        return load_document(source)
    if isinstance(source, (str, Path)):
        return load_file(source)
    raise TranspilerError(f"Unsupported input type: {type(source).__name__}")


def transpile_result(
    source: str | Path | dict[str, Any] | CompilationUnit,
    resolver: SymbolResolver | None = None,
    config: TranslatorConfig | None = None,
    walker: TreeWalker | None = None,
) -> TranslationResult:
    """Translate C# to Kotlin, returning the code and the diagnostics.

    Args:
        source: Front-end dump path, parsed dump mapping, or syntax tree
        resolver: Symbol resolver, required for (and only for) a syntax tree
        config: Translator configuration (default tables when omitted)
        walker: Tree walker (declaration walker when omitted)

    Returns:
        Translation result with the Kotlin code and untranslated-type diagnostics

    Raises:
        TranspilerError: If the input is malformed

    Examples:
        # Translate a front-end dump file
        result = transpile_result("RestartStatistics.yaml")

        # Translate a tree produced by another front-end
        result = transpile_result(unit, resolver=my_semantic_model)
    """
    root, symbol_resolver = _resolve_input(source, resolver)
    logger.debug(f"Transpiling {len(root.namespaces)} namespace(s)")
    driver = TranslationDriver(symbol_resolver, walker=walker, config=config)
    return driver.translate(root)


def transpile(
    source: str | Path | dict[str, Any] | CompilationUnit,
    resolver: SymbolResolver | None = None,
    config: TranslatorConfig | None = None,
    walker: TreeWalker | None = None,
) -> str:
    """Translate C# to Kotlin and return the Kotlin document.

    Untranslatable types appear in the output as the '**error type**' and
    '**unknown type**' sentinels; use `transpile_result` to inspect them.
    """
    return transpile_result(source, resolver, config, walker).code


__all__ = [
    "TranslationDriver",
    "TranslationResult",
    "TranslatorConfig",
    "TranspilerError",
    "transpile",
    "transpile_result",
]
