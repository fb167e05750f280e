"""Identifier and modifier helpers for Kotlin output."""

from collections.abc import Iterable

from cs2kt.transpiler.constants import KOTLIN_HARD_KEYWORDS, READ_ONLY_MODIFIERS


def kotlin_package_name(namespace: str) -> str:
    """Kotlin package name for a C# namespace ('Proto.Remote' -> 'proto.remote')."""
    return namespace.lower()


def to_camel_case(name: str) -> str:
    """Lowercase the first character ('FailureCount' -> 'failureCount')."""
    if not name:
        return name
    return name[0].lower() + name[1:]


def escape_identifier(name: str) -> str:
    """Backtick-quote identifiers that are Kotlin hard keywords."""
    if name in KOTLIN_HARD_KEYWORDS:
        return f"`{name}`"
    return name


def field_is_read_only(modifiers: Iterable[str]) -> bool:
    return any(m in READ_ONLY_MODIFIERS for m in modifiers)
