from collections.abc import Callable, Sequence

import pytest

from assert_analyzer.models.base import SourceLocation
from assert_analyzer.models.descriptors import DIAGNOSTIC_ID
from assert_analyzer.models.diagnostic import DiagnosticKind, DiagnosticSeverity
from assert_analyzer.models.invocation import Argument, Invocation
from assert_analyzer.models.symbols import AttributeSymbol, MethodSymbol, Symbol
from assert_analyzer.services.inspector import AssertionCallInspector
from assert_analyzer.services.symbol_resolver import SymbolResolver


class StubResolver:
    """Resolver returning a fixed overload and a fixed sibling set."""

    def __init__(self, method: MethodSymbol | None, siblings: Sequence[Symbol] = ()) -> None:
        self.method = method
        self.siblings = list(siblings)
        self.member_queries: list[tuple[str, str]] = []

    def resolve_method_symbol(self, invocation: Invocation) -> MethodSymbol | None:
        return self.method

    def get_members_by_name(self, containing_type: str, name: str) -> Sequence[Symbol]:
        self.member_queries.append((containing_type, name))
        return self.siblings


@pytest.fixture
def inspector() -> AssertionCallInspector:
    return AssertionCallInspector()


def test_stub_resolver__satisfies_protocol() -> None:
    assert isinstance(StubResolver(None), SymbolResolver)


def test_inspect__on_overload_without_message_and_sibling_with_message__reports_overload(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
) -> None:
    resolved = method_factory("AreEqual", "expected", "actual")
    sibling = method_factory("AreEqual", "expected", "actual", "message")
    resolver = StubResolver(resolved, [resolved, sibling])

    diagnostic = inspector.inspect(call_factory("AreEqual", "expected", "actual"), resolver)

    assert diagnostic is not None
    assert diagnostic.kind == DiagnosticKind.OVERLOAD_WITH_MESSAGE_AVAILABLE
    assert diagnostic.id == DIAGNOSTIC_ID
    assert diagnostic.severity == DiagnosticSeverity.WARNING
    assert diagnostic.method_name == "AreEqual"
    assert "'AreEqual'" in diagnostic.reason
    assert resolver.member_queries == [("Assert", "AreEqual")]


def test_inspect__on_all_positional_arguments_up_to_message__reports_nothing(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
) -> None:
    resolved = method_factory("AreEqual", "expected", "actual", "message")
    resolver = StubResolver(resolved, [resolved])

    call = call_factory("AreEqual", "expected", "actual", '"m"')

    assert inspector.inspect(call, resolver) is None


def test_inspect__on_defaulted_message_not_passed__reports_omitted(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
) -> None:
    resolved = method_factory("AreEqual", "expected", "actual", "message=")
    resolver = StubResolver(resolved, [resolved])

    diagnostic = inspector.inspect(call_factory("AreEqual", "expected", "actual"), resolver)

    assert diagnostic is not None
    assert diagnostic.kind == DiagnosticKind.MESSAGE_PARAMETER_OMITTED
    assert diagnostic.file.as_posix() == "test_sample.py"
    assert diagnostic.line_number == 3
    assert diagnostic.location.column == 5


def test_inspect__on_all_named_arguments_with_message__reports_nothing(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
) -> None:
    resolved = method_factory("AreEqual", "expected", "actual", "message=")
    resolver = StubResolver(resolved, [resolved])

    call = call_factory("AreEqual", expected="x", actual="y", message='"m"')

    assert inspector.inspect(call, resolver) is None


def test_inspect__on_method_without_any_message_overload__reports_nothing(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
) -> None:
    resolved = method_factory("IsTrue", "condition")
    resolver = StubResolver(resolved, [resolved])

    assert inspector.inspect(call_factory("IsTrue", "condition"), resolver) is None


def test_inspect__on_bare_function_call__reports_nothing_without_resolving(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
) -> None:
    resolver = StubResolver(method_factory("AreEqual", "expected", "actual", "message="))
    call = Invocation(
        callee=None,
        arguments=[Argument(expression="x")],
        location=SourceLocation(file_path="test_sample.py", line_start=1, line_end=1),
    )

    assert inspector.inspect(call, resolver) is None
    assert resolver.member_queries == []


def test_inspect__on_unresolved_method__reports_nothing(
    inspector: AssertionCallInspector,
    call_factory: Callable[..., Invocation],
) -> None:
    assert inspector.inspect(call_factory("AreEqual", "x"), StubResolver(None)) is None


@pytest.mark.parametrize("type_name", ["Checker", "assert", "AssertHelper", "MyAssert"])
def test_inspect__on_type_not_named_exactly_assert__reports_nothing(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
    type_name: str,
) -> None:
    resolved = method_factory("AreEqual", "expected", "actual", type_name=type_name)
    sibling = method_factory("AreEqual", "expected", "actual", "message", type_name=type_name)
    resolver = StubResolver(resolved, [resolved, sibling])

    call = call_factory("AreEqual", "x", "y", receiver=type_name)

    assert inspector.inspect(call, resolver) is None


def test_inspect__on_message_overload_resolved__ignores_siblings(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
) -> None:
    resolved = method_factory("AreEqual", "expected", "actual", "message=")
    other = method_factory("AreEqual", "expected", "actual")
    resolver = StubResolver(resolved, [other, resolved])

    diagnostic = inspector.inspect(call_factory("AreEqual", "x", "y"), resolver)

    assert diagnostic is not None
    assert diagnostic.kind == DiagnosticKind.MESSAGE_PARAMETER_OMITTED


def test_inspect__on_identical_inputs__is_idempotent(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
) -> None:
    resolved = method_factory("AreEqual", "expected", "actual", "message=")
    resolver = StubResolver(resolved, [resolved])
    call = call_factory("AreEqual", "x", "y")

    assert inspector.inspect(call, resolver) == inspector.inspect(call, resolver)


def test_classify__on_attribute_sibling_named_like_method__is_not_an_overload(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
) -> None:
    resolved = method_factory("AreEqual", "expected", "actual")
    attribute = AttributeSymbol(name="AreEqual", containing_type="Assert")

    kind = inspector.classify(call_factory("AreEqual", "x", "y"), resolved, [resolved, attribute])

    assert kind is None


def test_classify__on_absent_argument_list__reports_omitted(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
) -> None:
    resolved = method_factory("Fail", "message=")
    call = call_factory("Fail").model_copy(update={"arguments": None})

    kind = inspector.classify(call, resolved, [resolved])

    assert kind == DiagnosticKind.MESSAGE_PARAMETER_OMITTED


def test_classify__on_single_argument_when_message_is_first__reports_nothing(
    inspector: AssertionCallInspector,
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
) -> None:
    resolved = method_factory("Fail", "message")

    assert inspector.classify(call_factory("Fail", '"boom"'), resolved, [resolved]) is None


def test_classify__on_custom_message_parameter_name__uses_configured_name(
    method_factory: Callable[..., MethodSymbol],
    call_factory: Callable[..., Invocation],
) -> None:
    inspector = AssertionCallInspector(message_parameter="msg")
    resolved = method_factory("AreEqual", "expected", "actual", "msg=")

    assert inspector.classify(call_factory("AreEqual", "x", "y"), resolved, [resolved]) == (
        DiagnosticKind.MESSAGE_PARAMETER_OMITTED
    )
    assert inspector.classify(call_factory("AreEqual", "x", "y", msg='"m"'), resolved, [resolved]) is None


@pytest.mark.parametrize(
    ("arguments", "expected"),
    [
        ([], False),
        ([Argument(expression="a"), Argument(expression="b")], False),
        ([Argument(expression="a"), Argument(expression="b"), Argument(expression="c")], True),
        ([Argument(name="message", expression="m")], True),
        ([Argument(expression="a"), Argument(name="message", expression="m")], True),
        (
            [
                Argument(expression="a"),
                Argument(name="actual", expression="b"),
                Argument(expression="c"),
            ],
            False,
        ),
        (
            [
                Argument(name="expected", expression="a"),
                Argument(name="actual", expression="b"),
                Argument(name="message", expression="m"),
            ],
            True,
        ),
        (
            [
                Argument(expression="a"),
                Argument(expression="b"),
                Argument(name="other", expression="c"),
            ],
            False,
        ),
    ],
)
def test_message_argument_supplied__walks_positions_and_names(
    inspector: AssertionCallInspector, arguments: list[Argument], expected: bool
) -> None:
    assert inspector.message_argument_supplied(arguments, message_index=2) is expected


def test_message_argument_supplied__on_none__is_false(inspector: AssertionCallInspector) -> None:
    assert inspector.message_argument_supplied(None, message_index=0) is False
