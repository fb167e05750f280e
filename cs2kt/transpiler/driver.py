"""Translation driver.

Creates the per-run state, hands the tree to a walker and returns the text
the walker emitted. No state survives a run, so translating the same tree
twice produces identical output.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from cs2kt.transpiler.config import TranslatorConfig
from cs2kt.transpiler.core.interfaces import SymbolResolver, TreeWalker
from cs2kt.transpiler.defaults import DefaultValueResolver
from cs2kt.transpiler.emitter import IndentedEmitter
from cs2kt.transpiler.members import MemberClassifier
from cs2kt.transpiler.models import Diagnostic
from cs2kt.transpiler.parameters import format_parameter_list
from cs2kt.transpiler.syntax import ParameterSyntax
from cs2kt.transpiler.type_translator import TypeTranslator


@dataclass
class TranslationResult:
    """Result of one translation run."""

    code: str
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def has_untranslated_types(self) -> bool:
        return bool(self.diagnostics)


@dataclass
class TranslationContext:
    """Components and emitter state of a single run.

    Attributes:
        emitter: Output buffer with indentation depth
        types: Type translator
        defaults: Default-value resolver
        members: Interface-implementation classifier
        resolver: Front-end symbol resolver
        config: Translator configuration
        diagnostics: Non-fatal problems found so far
    """

    emitter: IndentedEmitter
    types: TypeTranslator
    defaults: DefaultValueResolver
    members: MemberClassifier
    resolver: SymbolResolver
    config: TranslatorConfig
    diagnostics: list[Diagnostic]

    @classmethod
    def create(
        cls, resolver: SymbolResolver, config: TranslatorConfig
    ) -> "TranslationContext":
        diagnostics: list[Diagnostic] = []
        types = TypeTranslator(resolver, config.tables, diagnostics)
        return cls(
            emitter=IndentedEmitter(),
            types=types,
            defaults=DefaultValueResolver(types),
            members=MemberClassifier(resolver),
            resolver=resolver,
            config=config,
            diagnostics=diagnostics,
        )

    def format_parameters(self, parameters: Sequence[ParameterSyntax]) -> str:
        return format_parameter_list(parameters, self.types)


class TranslationDriver:
    """Entry point running a walker over a syntax tree."""

    def __init__(
        self,
        resolver: SymbolResolver,
        walker: TreeWalker | None = None,
        config: TranslatorConfig | None = None,
    ):
        if walker is None:
            from cs2kt.transpiler.walker import DeclarationWalker

            walker = DeclarationWalker()
        self.resolver = resolver
        self.walker = walker
        self.config = config or TranslatorConfig()

    def translate(self, root: Any) -> TranslationResult:
        """Walk `root` with fresh state and collect output and diagnostics."""
        context = TranslationContext.create(self.resolver, self.config)
        logger.debug(f"Translating {type(root).__name__}")
        self.walker.walk(root, context)
        result = TranslationResult(context.emitter.getvalue(), context.diagnostics)
        if result.diagnostics:
            count = len(result.diagnostics)
            logger.info(f"Translation finished with {count} untranslated type(s)")
        return result

    def run(self, root: Any) -> str:
        """Walk `root` and return the translated document."""
        return self.translate(root).code
