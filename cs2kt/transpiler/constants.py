"""
Constants for the C# to Kotlin transpiler.

Output formatting units and the modifier keywords the walker inspects.
"""

# One indentation unit of generated Kotlin code
INDENT = "    "

# Line terminator of generated Kotlin code
NEWLINE = "\n"

# C# modifiers that make a field immutable
READ_ONLY_MODIFIERS = frozenset({"readonly", "const"})

# C# modifiers copied to Kotlin declarations as-is
VISIBILITY_MODIFIERS = {
    "private": "private",
    "protected": "protected",
    "internal": "internal",
}

# Kotlin keywords that need backticks when used as identifiers
KOTLIN_HARD_KEYWORDS = frozenset(
    {
        "as",
        "break",
        "class",
        "continue",
        "do",
        "else",
        "false",
        "for",
        "fun",
        "if",
        "in",
        "interface",
        "is",
        "null",
        "object",
        "package",
        "return",
        "super",
        "this",
        "throw",
        "true",
        "try",
        "typealias",
        "typeof",
        "val",
        "var",
        "when",
        "while",
    }
)
