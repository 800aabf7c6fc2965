from collections.abc import Callable

import pytest

from assert_analyzer.models.base import SourceLocation
from assert_analyzer.models.invocation import Argument, Invocation, MemberAccess
from assert_analyzer.models.symbols import MethodSymbol, ParameterSymbol

collect_ignore = ["data"]


def make_method(name: str, *params: str, type_name: str = "Assert") -> MethodSymbol:
    """Build a method symbol; a trailing `=` marks a defaulted parameter."""

    return MethodSymbol(
        name=name,
        containing_type=type_name,
        parameters=[
            ParameterSymbol(
                name=p.rstrip("="), position=i, has_default=p.endswith("=")
            )
            for i, p in enumerate(params)
        ],
    )


def make_call(
    member: str, *args: str, receiver: str = "Assert", **kwargs: str
) -> Invocation:
    """Build an `Assert.member(*args, **kwargs)` invocation."""

    arguments = [Argument(expression=a) for a in args]
    arguments.extend(Argument(name=k, expression=v) for k, v in kwargs.items())
    return Invocation(
        callee=MemberAccess(receiver=receiver, receiver_name=receiver, member=member),
        arguments=arguments,
        location=SourceLocation(file_path="test_sample.py", line_start=3, line_end=3, column=5),
        text=f"{receiver}.{member}(...)",
    )


@pytest.fixture
def method_factory() -> Callable[..., MethodSymbol]:
    return make_method


@pytest.fixture
def call_factory() -> Callable[..., Invocation]:
    return make_call
