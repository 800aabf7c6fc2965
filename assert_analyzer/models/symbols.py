from enum import StrEnum
from typing import Literal, TypeAlias

from pydantic import BaseModel, Field


class ParameterKind(StrEnum):
    """Python parameter kinds, mirroring `inspect.Parameter`."""

    POSITIONAL_ONLY = "positional_only"
    POSITIONAL_OR_KEYWORD = "positional_or_keyword"
    VAR_POSITIONAL = "var_positional"
    KEYWORD_ONLY = "keyword_only"
    VAR_KEYWORD = "var_keyword"

    @property
    def accepts_positional(self) -> bool:
        return self in (ParameterKind.POSITIONAL_ONLY, ParameterKind.POSITIONAL_OR_KEYWORD)

    @property
    def accepts_keyword(self) -> bool:
        return self in (ParameterKind.POSITIONAL_OR_KEYWORD, ParameterKind.KEYWORD_ONLY)

    @property
    def is_variadic(self) -> bool:
        return self in (ParameterKind.VAR_POSITIONAL, ParameterKind.VAR_KEYWORD)


class ParameterSymbol(BaseModel):
    name: str = Field(..., description="Parameter name")
    position: int = Field(..., ge=0, description="Zero-based index in the parameter list")
    kind: ParameterKind = Field(default=ParameterKind.POSITIONAL_OR_KEYWORD)
    has_default: bool = Field(default=False, description="Whether a default is declared")

    @property
    def is_required(self) -> bool:
        return not self.has_default and not self.kind.is_variadic


class MethodSymbol(BaseModel):
    """A single overload of a method declared on a type."""

    kind: Literal["method"] = "method"
    name: str = Field(..., description="Method name")
    containing_type: str = Field(..., description="Name of the declaring type")
    parameters: list[ParameterSymbol] = Field(default_factory=list)

    def find_parameter(self, name: str) -> ParameterSymbol | None:
        """Return the first parameter called `name`, if any."""

        return next((p for p in self.parameters if p.name == name), None)


class AttributeSymbol(BaseModel):
    """A non-callable member such as a property or class attribute."""

    kind: Literal["attribute"] = "attribute"
    name: str
    containing_type: str


Symbol: TypeAlias = MethodSymbol | AttributeSymbol


class TypeSymbol(BaseModel):
    name: str = Field(..., description="Type name")
    members: list[MethodSymbol | AttributeSymbol] = Field(default_factory=list)

    def members_named(self, name: str) -> list[MethodSymbol | AttributeSymbol]:
        return [m for m in self.members if m.name == name]
