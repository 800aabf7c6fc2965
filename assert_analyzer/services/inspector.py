import logging
from collections.abc import Sequence
from functools import reduce
from typing import NamedTuple

from pydantic import BaseModel

from assert_analyzer.models.descriptors import DESCRIPTORS_BY_KIND
from assert_analyzer.models.diagnostic import Diagnostic, DiagnosticKind
from assert_analyzer.models.invocation import Argument, Invocation
from assert_analyzer.models.symbols import MethodSymbol, Symbol
from assert_analyzer.services.symbol_resolver import SymbolResolver

logger = logging.getLogger(__name__)


class _ArgumentWalk(NamedTuple):
    named_region_entered: bool = False
    message_satisfied: bool = False


class AssertionCallInspector(BaseModel):
    """Decide whether a call to an assertion method lacks a failure message.

    The inspector holds no per-call state; one instance can serve any number
    of invocations, from any thread.
    """

    assert_type_name: str = "Assert"
    message_parameter: str = "message"

    def has_message_overload(self, siblings: Sequence[Symbol]) -> bool:
        """Whether any sibling member is a method taking the message parameter."""

        return any(
            isinstance(member, MethodSymbol)
            and member.find_parameter(self.message_parameter) is not None
            for member in siblings
        )

    def message_argument_supplied(
        self, arguments: Sequence[Argument] | None, message_index: int
    ) -> bool:
        """Whether the call passes a value for the message parameter.

        Args:
            arguments: Call arguments in source order; None is walked as empty.
            message_index: Position of the message parameter in the overload.

        Returns:
            True if the message is passed by name anywhere, or positionally at
            `message_index` before any keyword argument.
        """

        def step(walk: _ArgumentWalk, item: tuple[int, Argument]) -> _ArgumentWalk:
            index, argument = item
            entered = walk.named_region_entered or argument.is_named
            satisfied = (
                walk.message_satisfied
                or argument.name == self.message_parameter
                or (index == message_index and not entered)
            )
            return _ArgumentWalk(entered, satisfied)

        walk = reduce(step, enumerate(arguments or []), _ArgumentWalk())
        return walk.message_satisfied

    def classify(
        self,
        invocation: Invocation,
        method: MethodSymbol | None,
        siblings: Sequence[Symbol],
    ) -> DiagnosticKind | None:
        """Classify a resolved assertion call.

        Args:
            invocation: The call under inspection.
            method: Overload the call was bound to, None if unresolved.
            siblings: Members of the containing type sharing the method name.

        Returns:
            The kind of diagnostic to report, or None if the call is fine or
            the rule does not apply.
        """

        if invocation.callee is None or method is None:
            return None
        if method.containing_type != self.assert_type_name:
            return None

        message_param = method.find_parameter(self.message_parameter)
        if message_param is None:
            if self.has_message_overload(siblings):
                return DiagnosticKind.OVERLOAD_WITH_MESSAGE_AVAILABLE
            return None

        if self.message_argument_supplied(invocation.arguments, message_param.position):
            return None
        return DiagnosticKind.MESSAGE_PARAMETER_OMITTED

    def inspect(
        self, invocation: Invocation, resolver: SymbolResolver
    ) -> Diagnostic | None:
        """Resolve and classify one call, producing at most one diagnostic."""

        if invocation.callee is None:
            return None

        method = resolver.resolve_method_symbol(invocation)
        if method is None:
            return None

        siblings = resolver.get_members_by_name(method.containing_type, method.name)
        kind = self.classify(invocation, method, siblings)
        if kind is None:
            return None

        logger.debug(
            "%s at %s:%d", kind, invocation.location.file_path, invocation.location.line_start
        )
        return Diagnostic.create(DESCRIPTORS_BY_KIND[kind], invocation.location, method.name)
