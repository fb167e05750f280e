from cs2kt.transpiler import (
    TranslationDriver,
    TranslationResult,
    TranslatorConfig,
    TranspilerError,
    transpile,
    transpile_result,
)

__version__ = "0.1.0"


__all__ = [
    "TranslationDriver",
    "TranslationResult",
    "TranslatorConfig",
    "TranspilerError",
    "transpile",
    "transpile_result",
]
