from typing import TypedDict

from assert_analyzer.models.diagnostic import DiagnosticReport


class ReportSummary(TypedDict):
    files_analyzed: int
    diagnostics: int
    by_kind: dict[str, int]


class ReportPayload(TypedDict):
    summary: ReportSummary
    diagnostics: list[dict[str, object]]
    skipped_files: list[str]


def report_payload(report: DiagnosticReport) -> ReportPayload:
    """Flatten a report into plain rows suitable for JSON or YAML dumping."""

    rows: list[dict[str, object]] = []
    for diagnostic in report.issues:
        location = diagnostic.location
        rows.append(
            {
                "id": diagnostic.id,
                "kind": str(diagnostic.kind),
                "severity": str(diagnostic.severity),
                "method": diagnostic.method_name,
                "message": diagnostic.reason,
                "file": location.file_path.as_posix(),
                "line": location.line_start,
                "end_line": location.line_end,
                "column": location.column,
            }
        )

    return {
        "summary": {
            "files_analyzed": report.files_analyzed,
            "diagnostics": len(report.issues),
            "by_kind": {str(k): v for k, v in report.count_by_kind().items()},
        },
        "diagnostics": rows,
        "skipped_files": list(report.skipped_files),
    }
