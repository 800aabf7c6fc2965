from enum import StrEnum

from pydantic import BaseModel, Field

from assert_analyzer.models.base import SourceLocation


class ArgumentUnpacking(StrEnum):
    """How an argument expression is spread into the call."""

    NONE = "none"
    ITERABLE = "iterable"
    MAPPING = "mapping"


class Argument(BaseModel):
    """A single argument passed at a call site."""

    name: str | None = Field(
        default=None, description="Explicit parameter name for keyword arguments"
    )
    expression: str = Field(..., description="Source text of the argument value")
    unpacking: ArgumentUnpacking = Field(
        default=ArgumentUnpacking.NONE, description="Star or double-star unpacking"
    )

    @property
    def is_named(self) -> bool:
        return self.name is not None


class MemberAccess(BaseModel):
    """The `receiver.member` part of a call expression."""

    receiver: str = Field(..., description="Source text of the receiver expression")
    receiver_name: str | None = Field(
        default=None,
        description="Type name the receiver refers to, if it is a plain or dotted name",
    )
    member: str = Field(..., description="Name of the accessed member")


class Invocation(BaseModel):
    """Represents a call expression found in the analyzed source."""

    callee: MemberAccess | None = Field(
        default=None, description="Member access being called, None for bare calls"
    )
    arguments: list[Argument] | None = Field(
        default=None, description="Ordered arguments, None when no list was parsed"
    )
    location: SourceLocation = Field(..., description="Span of the whole call")
    text: str = Field(default="", description="Source text of the call")
