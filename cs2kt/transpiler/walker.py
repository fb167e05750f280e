"""Declaration-level tree walker producing Kotlin source.

Translates namespaces, type declarations and member signatures. Method
bodies are emitted empty: statements and expressions are not translated.
"""

from typing import Any

from loguru import logger

from cs2kt.transpiler.constants import VISIBILITY_MODIFIERS
from cs2kt.transpiler.driver import TranslationContext
from cs2kt.transpiler.errors import TranspilerError
from cs2kt.transpiler.models import GenericType, NamedType, TypeKind
from cs2kt.transpiler.naming import (
    escape_identifier,
    field_is_read_only,
    kotlin_package_name,
    to_camel_case,
)
from cs2kt.transpiler.syntax import (
    CompilationUnit,
    FieldDeclaration,
    MemberDeclaration,
    MethodDeclaration,
    NamespaceDeclaration,
    PropertyDeclaration,
    TypeDeclaration,
    TypeSyntax,
)

_TYPE_KEYWORDS = {
    TypeKind.CLASS: "class",
    TypeKind.STRUCT: "class",
    TypeKind.INTERFACE: "interface",
    TypeKind.ENUM: "enum class",
}


class DeclarationWalker:
    """Walks compilation units, namespaces and type declarations."""

    def walk(self, root: Any, context: TranslationContext) -> None:
        match root:
            case CompilationUnit(namespaces=namespaces):
                for i, namespace in enumerate(namespaces):
                    if i > 0:
                        context.emitter.newline()
                    self.walk(namespace, context)

            case NamespaceDeclaration():
                self._walk_namespace(root, context)

            case TypeDeclaration():
                self._walk_type(root, context)

            case FieldDeclaration() | PropertyDeclaration() | MethodDeclaration():
                self._walk_member(root, None, context)

            case _:
                raise TranspilerError(
                    f"Unsupported syntax node: {type(root).__name__}", root
                )

    def _walk_namespace(
        self, node: NamespaceDeclaration, context: TranslationContext
    ) -> None:
        emitter = context.emitter
        package = node.name
        if package:
            if context.config.lowercase_package:
                package = kotlin_package_name(package)
            emitter.indented_write_line(f"package {package}")
        for i, type_decl in enumerate(node.types):
            # Global namespace has no package line to separate from
            if package or i > 0:
                emitter.newline()
            self._walk_type(type_decl, context)

    def _walk_type(self, node: TypeDeclaration, context: TranslationContext) -> None:
        keyword = _TYPE_KEYWORDS.get(node.kind)
        if keyword is None:
            raise TranspilerError(
                f"Unsupported type declaration kind {node.kind.name}", node
            )
        logger.debug(f"Walking {keyword} {node.name}")

        emitter = context.emitter
        header = f"{keyword} {node.name}"
        bases = [self._base_type(base, context) for base in node.base_list]
        if bases:
            header += f" : {', '.join(bases)}"
        emitter.indented_write_line(f"{header} {{")

        with emitter.indented():
            if node.kind is TypeKind.ENUM:
                self._walk_enum_members(node, context)
            for i, member in enumerate(node.members):
                if isinstance(member, MethodDeclaration) and i > 0:
                    emitter.newline()
                self._walk_member(member, node, context)

        emitter.indented_write_line("}")

    def _base_type(self, base: TypeSyntax, context: TranslationContext) -> str:
        translated = context.types.translate_syntax(base)
        resolved = context.resolver.resolve_type(base)
        # Superclasses are called as constructors, interfaces are not
        if (
            isinstance(resolved, (NamedType, GenericType))
            and resolved.type_kind is TypeKind.CLASS
        ):
            return f"{translated}()"
        return translated

    def _walk_enum_members(
        self, node: TypeDeclaration, context: TranslationContext
    ) -> None:
        names = node.enum_members
        for i, name in enumerate(names):
            separator = "," if i < len(names) - 1 else ""
            context.emitter.indented_write_line(f"{name}{separator}")

    def _walk_member(
        self,
        node: MemberDeclaration,
        owner: TypeDeclaration | None,
        context: TranslationContext,
    ) -> None:
        in_interface = owner is not None and owner.kind is TypeKind.INTERFACE
        match node:
            case FieldDeclaration():
                self._walk_field(node, context)
            case PropertyDeclaration():
                self._walk_property(node, in_interface, context)
            case MethodDeclaration():
                self._walk_method(node, in_interface, context)

    def _walk_field(self, node: FieldDeclaration, context: TranslationContext) -> None:
        keyword = "val" if field_is_read_only(node.modifiers) else "var"
        name = escape_identifier(to_camel_case(node.name))
        line = (
            f"{_visibility(node.modifiers)}{keyword} {name} : "
            f"{context.types.translate_syntax(node.type)}"
        )
        default = context.defaults.default_value_of_syntax(node.type)
        if default is not None:
            line += f" = {default}"
        context.emitter.indented_write_line(line)

    def _walk_property(
        self, node: PropertyDeclaration, in_interface: bool, context: TranslationContext
    ) -> None:
        keyword = "var" if node.has_setter else "val"
        name = escape_identifier(to_camel_case(node.name))
        prefix = _visibility(node.modifiers)
        symbol = context.resolver.declared_symbol(node)
        if symbol is not None and context.members.is_interface_property(symbol):
            prefix += "override "
        line = f"{prefix}{keyword} {name} : {context.types.translate_syntax(node.type)}"
        if not in_interface:
            default = context.defaults.default_value_of_syntax(node.type)
            if default is not None:
                line += f" = {default}"
        context.emitter.indented_write_line(line)

    def _walk_method(
        self, node: MethodDeclaration, in_interface: bool, context: TranslationContext
    ) -> None:
        emitter = context.emitter
        prefix = _visibility(node.modifiers)
        symbol = context.resolver.declared_symbol(node)
        if symbol is not None and context.members.is_interface_method(symbol):
            prefix += "override "
        name = escape_identifier(to_camel_case(node.name))
        params = context.format_parameters(node.parameters)
        return_type = context.types.translate_syntax(node.return_type)
        signature = f"{prefix}fun {name}({params}) : {return_type}"

        if in_interface:
            emitter.indented_write_line(signature)
            return
        emitter.indented_write_line(f"{signature} {{")
        emitter.indented_write_line("}")


def _visibility(modifiers: list[str]) -> str:
    for modifier in modifiers:
        if modifier in VISIBILITY_MODIFIERS:
            return f"{VISIBILITY_MODIFIERS[modifier]} "
    return ""
