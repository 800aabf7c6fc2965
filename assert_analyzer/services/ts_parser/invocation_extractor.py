import logging
from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict
from tree_sitter import Node as TSNode

from assert_analyzer.models.invocation import (
    Argument,
    ArgumentUnpacking,
    Invocation,
    MemberAccess,
)
from assert_analyzer.services.ts_parser.source_file import SourceFile

logger = logging.getLogger(__name__)


class InvocationExtractor(BaseModel):
    """Turn every call expression of a source file into an `Invocation`."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    source: SourceFile

    def extract(self) -> list[Invocation]:
        aliases = self._import_aliases()
        invocations = [
            self._invocation(node, aliases) for node in self.source.iter_nodes("call")
        ]
        logger.debug("Extracted %d calls from %s", len(invocations), self.source.path)
        return invocations

    def _invocation(self, call: TSNode, aliases: dict[str, str]) -> Invocation:
        function = call.child_by_field_name("function")
        callee: MemberAccess | None = None
        if function is not None and function.type == "attribute":
            callee = self._member_access(function, aliases)

        return Invocation(
            callee=callee,
            arguments=self._arguments(call.child_by_field_name("arguments")),
            location=self.source.location(call),
            text=self.source.snippet(call),
        )

    def _member_access(self, attribute: TSNode, aliases: dict[str, str]) -> MemberAccess | None:
        receiver = attribute.child_by_field_name("object")
        member = attribute.child_by_field_name("attribute")
        if receiver is None or member is None:
            return None

        receiver_name: str | None = None
        if receiver.type == "identifier":
            name = self.source.snippet(receiver)
            receiver_name = aliases.get(name, name)
        elif receiver.type == "attribute":
            last = receiver.child_by_field_name("attribute")
            receiver_name = self.source.snippet(last) if last is not None else None

        return MemberAccess(
            receiver=self.source.snippet(receiver),
            receiver_name=receiver_name,
            member=self.source.snippet(member),
        )

    def _arguments(self, arguments: TSNode | None) -> list[Argument] | None:
        if arguments is None:
            return None
        if arguments.type == "generator_expression":
            return [Argument(expression=self.source.snippet(arguments))]
        return list(self._iter_arguments(arguments))

    def _iter_arguments(self, argument_list: TSNode) -> Iterator[Argument]:
        for child in argument_list.named_children:
            if child.type == "comment":
                continue
            if child.type == "keyword_argument":
                name = child.child_by_field_name("name")
                value = child.child_by_field_name("value")
                yield Argument(
                    name=self.source.snippet(name) if name is not None else None,
                    expression=self.source.snippet(value) if value is not None else "",
                )
            elif child.type == "list_splat":
                yield Argument(
                    expression=self.source.snippet(child),
                    unpacking=ArgumentUnpacking.ITERABLE,
                )
            elif child.type == "dictionary_splat":
                yield Argument(
                    expression=self.source.snippet(child),
                    unpacking=ArgumentUnpacking.MAPPING,
                )
            else:
                yield Argument(expression=self.source.snippet(child))

    def _import_aliases(self) -> dict[str, str]:
        """Map names bound by `import ... as ...` to the imported name."""

        aliases: dict[str, str] = {}
        for statement_type in ("import_statement", "import_from_statement"):
            for statement in self.source.iter_nodes(statement_type):
                for imported in statement.children_by_field_name("name"):
                    if imported.type != "aliased_import":
                        continue
                    original = imported.child_by_field_name("name")
                    alias = imported.child_by_field_name("alias")
                    if original is None or alias is None:
                        continue
                    aliases[self.source.snippet(alias)] = (
                        self.source.snippet(original).rsplit(".", 1)[-1]
                    )
        return aliases
