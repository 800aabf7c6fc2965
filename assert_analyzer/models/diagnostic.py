from enum import StrEnum

from pydantic import BaseModel, Field

from assert_analyzer.models.base import (
    SourceLocation,
    StaticAnalyzerIssue,
    StaticAnalyzerReport,
)


class DiagnosticKind(StrEnum):
    """Ways an assertion call can fail to carry a failure message."""

    MESSAGE_PARAMETER_OMITTED = "message_parameter_omitted"
    OVERLOAD_WITH_MESSAGE_AVAILABLE = "overload_with_message_available"


class DiagnosticSeverity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"


class DiagnosticDescriptor(BaseModel):
    """Static description of a reportable rule."""

    id: str = Field(..., description="Stable diagnostic identifier")
    kind: DiagnosticKind
    title: str
    message_format: str = Field(
        ..., description="Message template, formatted with the method name"
    )
    category: str
    severity: DiagnosticSeverity = DiagnosticSeverity.WARNING
    is_enabled_by_default: bool = True
    description: str = ""

    def format_message(self, method_name: str) -> str:
        return self.message_format.format(method_name)


class Diagnostic(StaticAnalyzerIssue):
    """A reported assertion call site."""

    id: str
    kind: DiagnosticKind
    severity: DiagnosticSeverity
    method_name: str
    location: SourceLocation

    @classmethod
    def create(
        cls, descriptor: DiagnosticDescriptor, location: SourceLocation, method_name: str
    ) -> "Diagnostic":
        return cls(
            id=descriptor.id,
            kind=descriptor.kind,
            severity=descriptor.severity,
            method_name=method_name,
            location=location,
            file=location.file_path,
            line_number=location.line_start,
            reason=descriptor.format_message(method_name),
        )


class DiagnosticReport(StaticAnalyzerReport[Diagnostic]):
    files_analyzed: int = Field(default=0, ge=0)
    skipped_files: list[str] = Field(default_factory=list)

    def count_by_kind(self) -> dict[DiagnosticKind, int]:
        counts: dict[DiagnosticKind, int] = {kind: 0 for kind in DiagnosticKind}
        for issue in self.issues:
            counts[issue.kind] += 1
        return counts
