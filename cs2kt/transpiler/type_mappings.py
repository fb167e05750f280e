"""C# to Kotlin type mappings and default-value literals."""

from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from loguru import logger

# Sentinels for types that cannot be translated
ERROR_TYPE_SENTINEL = "**error type**"
UNKNOWN_TYPE_SENTINEL = "**unknown type**"

# Primitive and well-known type names (metadata names, not keywords)
NAME_MAP: Dict[str, str] = {
    "Void": "Unit",
    "TimeSpan": "Duration",
    "Object": "Any",
    "Int32": "Int",
    "Int64": "Long",
    "Int16": "Short",
    "Byte": "Byte",
    "Single": "Float",
    "Double": "Double",
    "Char": "Char",
    "Boolean": "Boolean",
    "String": "String",
    "ArgumentException": "IllegalArgumentException",
}

# Generic container names, translated independently of their arguments
GENERIC_CONTAINER_MAP: Dict[str, str] = {
    "ConcurrentQueue": "ConcurrentLinkedQueue",
    "ConcurrentDictionary": "ConcurrentHashMap",
    "List": "MutableList",
    "Set": "MutableSet",
    "Stack": "Stack",
}

# Types whose default value is a trivial literal
DEFAULT_VALUE_LITERALS: Dict[str, str] = {
    "Int64": "0",
    "Int32": "0",
    "Boolean": "false",
    "String": '""',
}

# Metadata names of the C# predefined types, keyed by keyword
PRIMITIVE_KEYWORDS: Dict[str, str] = {
    "void": "Void",
    "object": "Object",
    "int": "Int32",
    "long": "Int64",
    "short": "Int16",
    "byte": "Byte",
    "float": "Single",
    "double": "Double",
    "char": "Char",
    "bool": "Boolean",
    "string": "String",
}


def translate_name(name: str, table: Optional[Mapping[str, str]] = None) -> str:
    """Translate a primitive or well-known type name.

    Names without an entry are returned unchanged.
    """
    table = NAME_MAP if table is None else table
    translated = table.get(name)
    if translated is None:
        logger.debug(f"No name mapping for '{name}', passing through")
        return name
    return translated


def translate_generic_container(
    name: str, table: Optional[Mapping[str, str]] = None
) -> str:
    """Translate a generic container name, identity when unmapped."""
    table = GENERIC_CONTAINER_MAP if table is None else table
    return table.get(name, name)


@dataclass(frozen=True)
class TypeMappingTables:
    """Bundle of the mapping tables used by one translator.

    The module-level tables are the defaults; extend them with data through
    `extended` rather than by editing translator logic.
    """

    names: Mapping[str, str] = field(default_factory=lambda: dict(NAME_MAP))
    generic_containers: Mapping[str, str] = field(
        default_factory=lambda: dict(GENERIC_CONTAINER_MAP)
    )
    default_values: Mapping[str, str] = field(
        default_factory=lambda: dict(DEFAULT_VALUE_LITERALS)
    )

    def extended(
        self,
        names: Optional[Mapping[str, str]] = None,
        generic_containers: Optional[Mapping[str, str]] = None,
        default_values: Optional[Mapping[str, str]] = None,
    ) -> "TypeMappingTables":
        """Return a copy with extra (or overriding) entries."""
        return TypeMappingTables(
            names={**self.names, **(names or {})},
            generic_containers={
                **self.generic_containers,
                **(generic_containers or {}),
            },
            default_values={**self.default_values, **(default_values or {})},
        )

    def translate_name(self, name: str) -> str:
        return translate_name(name, self.names)

    def translate_generic_container(self, name: str) -> str:
        return translate_generic_container(name, self.generic_containers)

    def default_literal(self, name: str) -> Optional[str]:
        return self.default_values.get(name)
