import logging
from typing import Final

from pydantic import BaseModel, ConfigDict
from tree_sitter import Node as TSNode

from assert_analyzer.models.symbols import (
    AttributeSymbol,
    MethodSymbol,
    ParameterKind,
    ParameterSymbol,
    TypeSymbol,
)
from assert_analyzer.services.ts_parser.source_file import SourceFile

logger = logging.getLogger(__name__)

PROPERTY_DECORATORS: Final[set[str]] = {"property", "cached_property"}
ACCESSOR_DECORATORS: Final[set[str]] = {"setter", "getter", "deleter"}
DEFAULT_PARAMETER_TYPES: Final[set[str]] = {"default_parameter", "typed_default_parameter"}


class _Declaration(BaseModel):
    member: MethodSymbol | AttributeSymbol
    is_overload: bool = False


class TypeCollector(BaseModel):
    """Collect class declarations of a source file as type symbols."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source: SourceFile

    def collect(self) -> list[TypeSymbol]:
        """Build a type symbol for every class in the file, nested ones included."""

        types: list[TypeSymbol] = []
        for class_node in self.source.iter_nodes("class_definition"):
            name_node = class_node.child_by_field_name("name")
            body = class_node.child_by_field_name("body")
            if name_node is None or body is None:
                continue
            type_name = self.source.snippet(name_node)
            types.append(TypeSymbol(name=type_name, members=self._collect_members(type_name, body)))
        return types

    def _collect_members(
        self, type_name: str, body: TSNode
    ) -> list[MethodSymbol | AttributeSymbol]:
        declarations: list[_Declaration] = []
        for statement in body.named_children:
            declarations.extend(self._declarations_for(type_name, statement))

        overloaded: set[str] = {d.member.name for d in declarations if d.is_overload}
        return [
            d.member
            for d in declarations
            if d.is_overload or d.member.name not in overloaded
        ]

    def _declarations_for(self, type_name: str, statement: TSNode) -> list[_Declaration]:
        if statement.type == "function_definition":
            return [self._method_declaration(type_name, statement, decorators=[])]

        if statement.type == "decorated_definition":
            definition = statement.child_by_field_name("definition")
            if definition is None or definition.type != "function_definition":
                return []
            decorators: list[str] = [
                self._decorator_name(child)
                for child in statement.named_children
                if child.type == "decorator"
            ]
            if any(d in ACCESSOR_DECORATORS for d in decorators):
                return []
            return [self._method_declaration(type_name, definition, decorators)]

        if statement.type == "expression_statement":
            return [
                _Declaration(member=AttributeSymbol(name=name, containing_type=type_name))
                for name in self._assigned_names(statement)
            ]

        return []

    def _method_declaration(
        self, type_name: str, function: TSNode, decorators: list[str]
    ) -> _Declaration:
        name_node = function.child_by_field_name("name")
        name: str = self.source.snippet(name_node) if name_node is not None else ""

        if any(d in PROPERTY_DECORATORS for d in decorators):
            return _Declaration(member=AttributeSymbol(name=name, containing_type=type_name))

        parameters_node = function.child_by_field_name("parameters")
        parameters: list[ParameterSymbol] = (
            self._parameters(parameters_node, implicit_first="staticmethod" not in decorators)
            if parameters_node is not None
            else []
        )
        return _Declaration(
            member=MethodSymbol(name=name, containing_type=type_name, parameters=parameters),
            is_overload="overload" in decorators,
        )

    def _decorator_name(self, decorator: TSNode) -> str:
        """Last dotted segment of a decorator, ignoring call arguments."""

        expression = decorator.named_children[0] if decorator.named_children else None
        if expression is None:
            return ""
        if expression.type == "call":
            expression = expression.child_by_field_name("function") or expression
        return self.source.snippet(expression).rsplit(".", 1)[-1].strip()

    def _parameters(self, parameters_node: TSNode, implicit_first: bool) -> list[ParameterSymbol]:
        raw: list[tuple[str, ParameterKind, bool]] = []
        kind = ParameterKind.POSITIONAL_OR_KEYWORD

        for child in parameters_node.named_children:
            if child.type == "positional_separator":
                raw = [
                    (n, ParameterKind.POSITIONAL_ONLY if k.accepts_positional else k, d)
                    for n, k, d in raw
                ]
                continue
            if child.type == "keyword_separator":
                kind = ParameterKind.KEYWORD_ONLY
                continue

            target = child
            if child.type == "typed_parameter" and child.named_children:
                target = child.named_children[0]

            if target.type == "list_splat_pattern":
                raw.append((self._pattern_name(target), ParameterKind.VAR_POSITIONAL, False))
                kind = ParameterKind.KEYWORD_ONLY
            elif target.type == "dictionary_splat_pattern":
                raw.append((self._pattern_name(target), ParameterKind.VAR_KEYWORD, False))
            elif child.type in DEFAULT_PARAMETER_TYPES:
                name_node = child.child_by_field_name("name")
                if name_node is not None:
                    raw.append((self.source.snippet(name_node), kind, True))
            elif target.type == "identifier":
                raw.append((self.source.snippet(target), kind, False))

        if implicit_first and raw and raw[0][1].accepts_positional:
            raw = raw[1:]

        return [
            ParameterSymbol(name=name, position=position, kind=param_kind, has_default=has_default)
            for position, (name, param_kind, has_default) in enumerate(raw)
        ]

    def _pattern_name(self, pattern: TSNode) -> str:
        for child in pattern.named_children:
            if child.type == "identifier":
                return self.source.snippet(child)
        return ""

    def _assigned_names(self, statement: TSNode) -> list[str]:
        names: list[str] = []
        for child in statement.named_children:
            if child.type != "assignment":
                continue
            left = child.child_by_field_name("left")
            if left is not None and left.type == "identifier":
                names.append(self.source.snippet(left))
        return names
