"""Translator configuration.

Mapping tables can be extended from a YAML file:

    names:
      DateTime: Instant
    generic_containers:
      Dictionary: MutableMap
    default_values:
      Double: "0.0"
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from cs2kt.transpiler.errors import TranspilerError
from cs2kt.transpiler.type_mappings import TypeMappingTables

_TABLE_SECTIONS = ("names", "generic_containers", "default_values")


@dataclass(frozen=True)
class TranslatorConfig:
    """Configuration for one translator.

    Attributes:
        tables: Type-name, generic-container and default-value tables
        lowercase_package: Lowercase namespaces when emitting package names
    """

    tables: TypeMappingTables = field(default_factory=TypeMappingTables)
    lowercase_package: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TranslatorConfig":
        """Build a configuration extending the built-in tables.

        Raises:
            TranspilerError: If a table section is not a mapping or an option
                has the wrong type
        """
        sections: dict[str, dict[str, str]] = {}
        for section in _TABLE_SECTIONS:
            entries = data.get(section) or {}
            if not isinstance(entries, dict):
                raise TranspilerError(f"Config section '{section}' must be a mapping")
            sections[section] = {str(k): str(v) for k, v in entries.items()}
            if entries:
                logger.debug(f"Extending {section} with {list(entries)}")

        lowercase_package = data.get("lowercase_package", True)
        if not isinstance(lowercase_package, bool):
            raise TranspilerError(
                f"Config option 'lowercase_package' must be a boolean, "
                f"got {lowercase_package!r}"
            )

        return cls(
            tables=TypeMappingTables().extended(**sections),
            lowercase_package=lowercase_package,
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "TranslatorConfig":
        """Load a configuration from a YAML file.

        Raises:
            TranspilerError: If the file cannot be read or parsed
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise TranspilerError(f"Failed to load config {path}: {e}") from e
        if not isinstance(data, dict):
            raise TranspilerError(f"Config {path} must contain a mapping")
        return cls.from_dict(data)
