from pathlib import Path
from typing import Generic, Self, TypeVar

from pydantic import BaseModel, Field, model_validator


class SourceLocation(BaseModel):
    """Span of a syntax node inside a source file."""

    file_path: Path = Field(..., description="Path to the source file")
    line_start: int = Field(..., ge=1, description="Starting line of the span")
    line_end: int = Field(..., ge=1, description="Ending line of the span")
    column: int = Field(default=1, ge=1, description="Starting column of the span")

    @model_validator(mode="after")
    def validate_line_range(self) -> Self:
        """Ensure line_end is not before line_start."""

        if self.line_end < self.line_start:
            raise ValueError("line_end must be greater than or equal to line_start")
        return self


class StaticAnalyzerIssue(BaseModel):
    file: Path
    line_number: int
    reason: str


T = TypeVar("T", bound=StaticAnalyzerIssue)


class StaticAnalyzerReport(BaseModel, Generic[T]):
    issues: list[T]
