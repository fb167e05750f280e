"""
Loading of front-end dumps.

A dump is a YAML (or JSON) document describing one C# source file after
parsing and symbol resolution. Type references are written as C# type
strings and resolved here against the primitive keywords, a small set of
well-known framework types, the declared types and the `externals` table:

    file: Messages.cs
    namespace: Proto.Remote
    externals:
      PID: class
      IMessage: {kind: interface, members: [{method: Handle, parameters: [int]}]}
      Missing: error
    types:
      - name: RemoteWatch
        kind: class
        bases: [IMessage]
        members:
          - {property: Watcher, type: PID}
          - {method: Handle, returns: void, parameters: [{name: x, type: int}]}

Names listed as `error` are reported as erroneous types; names found nowhere
have no symbol at all.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from loguru import logger

from cs2kt.transpiler.errors import TranspilerError
from cs2kt.transpiler.frontend import SymbolGraph
from cs2kt.transpiler.models import (
    ArrayType,
    DelegateType,
    EnumType,
    ErrorType,
    GenericType,
    MemberKind,
    MemberSymbol,
    NamedType,
    PrimitiveType,
    ResolvedType,
    SourceLocation,
    TypeKind,
    TypeSymbol,
    UnknownType,
)
from cs2kt.transpiler.syntax import (
    ArrayTypeSyntax,
    CompilationUnit,
    FieldDeclaration,
    MemberDeclaration,
    MethodDeclaration,
    NamespaceDeclaration,
    ParameterSyntax,
    PropertyDeclaration,
    TypeDeclaration,
    TypeSyntax,
)
from cs2kt.transpiler.type_mappings import PRIMITIVE_KEYWORDS

_KIND_NAMES = {
    "class": TypeKind.CLASS,
    "struct": TypeKind.STRUCT,
    "interface": TypeKind.INTERFACE,
    "enum": TypeKind.ENUM,
    "delegate": TypeKind.DELEGATE,
    "error": TypeKind.ERROR,
}

# Framework types known without being declared in the dump
_FRAMEWORK_TYPES: dict[str, TypeKind] = {
    "TimeSpan": TypeKind.STRUCT,
    "DateTime": TypeKind.STRUCT,
    "Guid": TypeKind.STRUCT,
    "Nullable": TypeKind.STRUCT,
    "KeyValuePair": TypeKind.STRUCT,
    "Exception": TypeKind.CLASS,
    "ArgumentException": TypeKind.CLASS,
    "ArgumentNullException": TypeKind.CLASS,
    "Type": TypeKind.CLASS,
    "List": TypeKind.CLASS,
    "Dictionary": TypeKind.CLASS,
    "HashSet": TypeKind.CLASS,
    "Set": TypeKind.CLASS,
    "Stack": TypeKind.CLASS,
    "Queue": TypeKind.CLASS,
    "ConcurrentQueue": TypeKind.CLASS,
    "ConcurrentDictionary": TypeKind.CLASS,
    "Task": TypeKind.CLASS,
    "IEnumerable": TypeKind.INTERFACE,
    "IList": TypeKind.INTERFACE,
    "IDictionary": TypeKind.INTERFACE,
    "IDisposable": TypeKind.INTERFACE,
}

# Framework delegates; Func's last type argument is its return type
_FRAMEWORK_DELEGATES = {"Action", "Func"}

_DECLARABLE_KINDS = (TypeKind.CLASS, TypeKind.STRUCT, TypeKind.INTERFACE, TypeKind.ENUM)

_TOKEN_RE = re.compile(r"\s*(?:(\w+(?:\.\w+)*)|(.))")


@dataclass
class _Entity:
    """Type known to the loader by name."""

    kind: TypeKind
    enum_members: tuple[str, ...] = ()
    delegate_parameters: tuple[str, ...] = ()
    delegate_return: str = "void"


@dataclass
class _ParsedType:
    syntax: TypeSyntax
    resolved: ResolvedType | None
    canonical: str


class _DumpLoader:
    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.file = data.get("file")
        self.graph = SymbolGraph()
        self.entities: dict[str, _Entity] = {}
        self.delegates: dict[str, DelegateType] = {}
        self.pending_delegates: set[str] = set()

    def load(self) -> tuple[CompilationUnit, SymbolGraph]:
        self._collect_entities()
        self._collect_external_symbols()
        namespaces = []
        for ns in self._namespaces():
            types = [self._type_declaration(t) for t in ns.get("types") or []]
            namespaces.append(
                NamespaceDeclaration(
                    _require(ns, "name", "namespace"),
                    types,
                    location=self._location(ns),
                )
            )
        unit = CompilationUnit(
            namespaces=namespaces,
            location=SourceLocation(self.file, None) if self.file else None,
        )
        logger.debug(
            f"Loaded {len(namespaces)} namespace(s), {len(self.graph.types)} type(s)"
        )
        return unit, self.graph

    # --- Entities ---

    def _namespaces(self) -> list[dict[str, Any]]:
        if "namespaces" in self.data:
            return list(self.data["namespaces"] or [])
        return [
            {"name": self.data.get("namespace", ""), "types": self.data.get("types")}
        ]

    def _all_type_entries(self) -> list[dict[str, Any]]:
        return [t for ns in self._namespaces() for t in ns.get("types") or []]

    def _collect_entities(self) -> None:
        for name, entry in (self.data.get("externals") or {}).items():
            if isinstance(entry, str):
                entry = {"kind": entry}
            self.entities[name] = self._entity(entry, name)
        for entry in self._all_type_entries():
            name = _require(entry, "name", "type")
            self.entities[name] = self._entity(entry, name)

    def _entity(self, entry: dict[str, Any], name: str) -> _Entity:
        kind_name = entry.get("kind", "class")
        kind = _KIND_NAMES.get(kind_name)
        if kind is None:
            raise TranspilerError(f"Unknown kind '{kind_name}' for type {name}")
        return _Entity(
            kind=kind,
            enum_members=tuple(entry.get("enum_members") or ()),
            delegate_parameters=tuple(entry.get("parameters") or ()),
            delegate_return=entry.get("returns", "void"),
        )

    def _collect_external_symbols(self) -> None:
        for name, entry in (self.data.get("externals") or {}).items():
            if isinstance(entry, str) or self.entities[name].kind not in (
                TypeKind.CLASS,
                TypeKind.STRUCT,
                TypeKind.INTERFACE,
            ):
                continue
            symbol = TypeSymbol(
                name=name,
                kind=self.entities[name].kind,
                interfaces=list(entry.get("interfaces") or []),
                base_type=entry.get("base"),
            )
            symbol.members = [
                self._external_member(m, name) for m in entry.get("members") or []
            ]
            self.graph.add_type(symbol)

    def _external_member(self, entry: dict[str, Any], owner: str) -> MemberSymbol:
        kind, name = _member_kind(entry)
        parameters = tuple(
            self._parse(p if isinstance(p, str) else _require(p, "type", name))
            .canonical
            for p in entry.get("parameters") or []
        )
        return MemberSymbol(
            name=name,
            kind=kind,
            containing_type=owner,
            parameter_types=parameters,
            explicit_interface=entry.get("explicit"),
        )

    # --- Declarations ---

    def _type_declaration(self, entry: dict[str, Any]) -> TypeDeclaration:
        name = entry["name"]
        kind = self.entities[name].kind
        if kind not in _DECLARABLE_KINDS:
            raise TranspilerError(f"Type {name} cannot be declared as {kind.name}")

        base_list = [self._parse(b, entry).syntax for b in entry.get("bases") or []]
        interfaces = []
        base_type = None
        for base in base_list:
            resolved = self.graph.resolve_type(base)
            if not isinstance(resolved, (NamedType, GenericType)):
                continue
            if resolved.type_kind is TypeKind.INTERFACE:
                interfaces.append(resolved.name)
            elif resolved.type_kind is TypeKind.CLASS:
                base_type = resolved.name

        symbol = self.graph.add_type(
            TypeSymbol(name=name, kind=kind, interfaces=interfaces, base_type=base_type)
        )
        members = [self._member(m, symbol) for m in entry.get("members") or []]
        return TypeDeclaration(
            name,
            kind,
            base_list,
            members,
            list(self.entities[name].enum_members),
            location=self._location(entry),
        )

    def _member(self, entry: dict[str, Any], owner: TypeSymbol) -> MemberDeclaration:
        kind, name = _member_kind(entry)
        location = self._location(entry)
        modifiers = list(entry.get("modifiers") or [])
        declaration: MemberDeclaration
        parameter_types: tuple[str, ...] = ()

        if kind is MemberKind.METHOD:
            parameters = []
            for p in entry.get("parameters") or []:
                if isinstance(p, str):
                    p = {"name": p}
                type_syntax = None
                if p.get("type") is not None:
                    parsed = self._parse(p["type"], p)
                    type_syntax = parsed.syntax
                    parameter_types += (parsed.canonical,)
                parameters.append(
                    ParameterSyntax(
                        p.get("name") or "", type_syntax, location=self._location(p)
                    )
                )
            returns = self._parse(entry.get("returns", "void"), entry).syntax
            declaration = MethodDeclaration(
                name, returns, parameters, modifiers, location=location
            )
        elif kind is MemberKind.PROPERTY:
            declaration = PropertyDeclaration(
                name,
                self._parse(_require(entry, "type", name), entry).syntax,
                bool(entry.get("setter", False)),
                modifiers,
                location=location,
            )
        else:
            declaration = FieldDeclaration(
                name,
                self._parse(_require(entry, "type", name), entry).syntax,
                modifiers,
                location=location,
            )

        symbol = MemberSymbol(
            name=name,
            kind=kind,
            containing_type=owner.name,
            parameter_types=parameter_types,
            explicit_interface=entry.get("explicit"),
        )
        owner.members.append(symbol)
        self.graph.bind_declaration(declaration, symbol)
        return declaration

    def _location(self, entry: dict[str, Any]) -> SourceLocation | None:
        line = entry.get("line") if isinstance(entry, dict) else None
        if line is None and not self.file:
            return None
        return SourceLocation(self.file, line)

    # --- Type references ---

    def _parse(self, text: str, entry: dict[str, Any] | None = None) -> _ParsedType:
        tokens = _tokenize(str(text))
        location = self._location(entry) if entry is not None else None
        parsed, rest = self._parse_tokens(tokens, location)
        if rest:
            raise TranspilerError(f"Unexpected '{''.join(rest)}' in type '{text}'")
        return parsed

    def _parse_tokens(
        self, tokens: list[str], location: SourceLocation | None
    ) -> tuple[_ParsedType, list[str]]:
        if not tokens or not re.match(r"\w", tokens[0]):
            raise TranspilerError(f"Expected a type name in '{''.join(tokens)}'")
        name, rest = tokens[0], tokens[1:]
        arguments: list[_ParsedType] = []
        if rest[:1] == ["<"]:
            rest = rest[1:]
            while True:
                argument, rest = self._parse_tokens(rest, location)
                arguments.append(argument)
                if rest[:1] == [","]:
                    rest = rest[1:]
                    continue
                if rest[:1] != [">"]:
                    raise TranspilerError(f"Unclosed type arguments after '{name}'")
                rest = rest[1:]
                break

        parsed = self._named(name, arguments, location)
        while rest[:1] in (["["], ["?"]):
            if rest[0] == "?":
                text = f"{parsed.syntax.text}?"
                parsed = self._named("Nullable", [parsed], location, text=text)
                rest = rest[1:]
                continue
            if rest[1:2] != ["]"]:
                raise TranspilerError(f"Unclosed array rank after '{name}'")
            rest = rest[2:]
            parsed = self._array(parsed, location)
        return parsed, rest

    def _array(
        self, element: _ParsedType, location: SourceLocation | None
    ) -> _ParsedType:
        syntax = ArrayTypeSyntax(
            f"{element.syntax.text}[]", element.syntax, location=location
        )
        resolved = None
        if element.resolved is not None:
            resolved = ArrayType(element.resolved)
            self.graph.bind_type(syntax, resolved)
        return _ParsedType(syntax, resolved, f"{element.canonical}[]")

    def _argument_type(self, argument: _ParsedType) -> ResolvedType:
        if argument.resolved is not None:
            return argument.resolved
        if self.graph.resolve_error(argument.syntax):
            return ErrorType(argument.canonical)
        return UnknownType()

    def _named(
        self,
        name: str,
        arguments: list[_ParsedType],
        location: SourceLocation | None,
        text: str | None = None,
    ) -> _ParsedType:
        if text is None:
            text = name
            if arguments:
                text += f"<{', '.join(a.syntax.text for a in arguments)}>"
        syntax = TypeSyntax(text, location=location)

        simple = _plain_name(name)
        metadata = PRIMITIVE_KEYWORDS.get(simple, simple)
        canonical = metadata
        if arguments:
            canonical += f"<{', '.join(a.canonical for a in arguments)}>"

        entity = self.entities.get(metadata)
        if entity is not None and entity.kind is TypeKind.ERROR:
            self.graph.mark_error(syntax)
            return _ParsedType(syntax, None, canonical)

        resolved = self._resolve(metadata, arguments, entity)
        if resolved is not None:
            self.graph.bind_type(syntax, resolved)
        return _ParsedType(syntax, resolved, canonical)

    def _resolve(
        self, name: str, arguments: list[_ParsedType], entity: _Entity | None
    ) -> ResolvedType | None:
        argument_types = tuple(self._argument_type(a) for a in arguments)

        if entity is None:
            if name in PRIMITIVE_KEYWORDS.values():
                return PrimitiveType(name)
            if name in _FRAMEWORK_DELEGATES:
                return _framework_delegate(name, argument_types)
            kind = _FRAMEWORK_TYPES.get(name)
            if kind is None:
                return None
            entity = _Entity(kind)

        if entity.kind is TypeKind.ENUM:
            return EnumType(name, entity.enum_members)
        if entity.kind is TypeKind.DELEGATE:
            return self._delegate(name, entity)
        if arguments:
            return GenericType(name, argument_types, entity.kind)
        return NamedType(name, entity.kind)

    def _delegate(self, name: str, entity: _Entity) -> ResolvedType:
        """Resolve a declared delegate's signature once per dump.

        A delegate referring to itself in its own signature resolves to its
        name at the inner reference.
        """
        if name in self.delegates:
            return self.delegates[name]
        if name in self.pending_delegates:
            return NamedType(name, TypeKind.DELEGATE)

        self.pending_delegates.add(name)
        try:
            delegate = DelegateType(
                name,
                tuple(
                    self._argument_type(self._parse(p))
                    for p in entity.delegate_parameters
                ),
                self._argument_type(self._parse(entity.delegate_return)),
            )
        finally:
            self.pending_delegates.discard(name)
        self.delegates[name] = delegate
        return delegate


def _framework_delegate(
    name: str, arguments: tuple[ResolvedType, ...]
) -> DelegateType:
    if name == "Func" and arguments:
        return DelegateType(name, arguments[:-1], arguments[-1])
    return DelegateType(name, arguments, PrimitiveType("Void"))


def _tokenize(text: str) -> list[str]:
    tokens = []
    for match in _TOKEN_RE.finditer(text):
        token = match.group(1) or match.group(2)
        if token and not token.isspace():
            tokens.append(token)
    return tokens


def _plain_name(name: str) -> str:
    """Strip namespace and type arguments ('System.String' -> 'String')."""
    return name.split("<", 1)[0].rsplit(".", 1)[-1]


def _member_kind(entry: dict[str, Any]) -> tuple[MemberKind, str]:
    for key, kind in (
        ("method", MemberKind.METHOD),
        ("property", MemberKind.PROPERTY),
        ("field", MemberKind.FIELD),
    ):
        if key in entry:
            return kind, str(entry[key])
    raise TranspilerError(
        f"Member entry must name a method, property or field: {entry}"
    )


def _require(entry: dict[str, Any], key: str, what: str) -> Any:
    if key not in entry:
        raise TranspilerError(f"Missing '{key}' for {what}")
    return entry[key]


def load_document(data: dict[str, Any]) -> tuple[CompilationUnit, SymbolGraph]:
    """Build a syntax tree and its symbol graph from a parsed dump.

    Args:
        data: Parsed front-end dump

    Returns:
        Tuple of (compilation unit, symbol graph)

    Raises:
        TranspilerError: If the dump is malformed
    """
    if not isinstance(data, dict):
        raise TranspilerError("Front-end dump must be a mapping")
    return _DumpLoader(data).load()


def load_file(path: str | Path) -> tuple[CompilationUnit, SymbolGraph]:
    """Load a YAML or JSON front-end dump from disk.

    Raises:
        TranspilerError: If the file cannot be read or is malformed
    """
    logger.debug(f"Loading front-end dump {path}")
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise TranspilerError(f"Failed to load {path}: {e}") from e
    if isinstance(data, dict) and "file" not in data:
        data["file"] = Path(path).name
    return load_document(data)
