"""
Exceptions and error handling for the C# to Kotlin transpiler.

This module defines the exception raised for fatal problems during translation.
Non-fatal problems (unmapped or erroneous types) never raise; they are reported
as sentinel text plus a Diagnostic record instead.
"""

import os
from typing import Any, Optional


class TranspilerError(Exception):
    """Exception raised for errors during C# to Kotlin translation.

    Raised for malformed input the translator cannot express (for example a
    parameter without an identifier) and for unreadable front-end dumps.
    Location information is taken from the node's `location` attribute when
    present.

    Examples:
        >>> raise TranspilerError("Parameter without identifier")
        TranspilerError: Parameter without identifier
    """

    def __init__(self, message: str, node: Optional[Any] = None):
        """Initialize the exception with a message and optional syntax node.

        Args:
            message: The error message
            node: Optional syntax node where the error occurred
        """
        self.message = message
        self.node = node
        self.file_path = None
        self.lineno = None

        location = getattr(node, "location", None) if node is not None else None
        if location is not None:
            self.file_path = location.file
            self.lineno = location.line

        location_info = ""
        if self.file_path:
            location_info = f" in {os.path.basename(self.file_path)}"
        if self.lineno:
            location_info += f" at line {self.lineno}"

        super().__init__(f"{message}{location_info}")

    def with_node(self, node: Any) -> "TranspilerError":
        """Create a new TranspilerError with the same message but a different node.

        Args:
            node: Syntax node to associate with the error

        Returns:
            A new TranspilerError instance with the updated node
        """
        return TranspilerError(self.message, node)
