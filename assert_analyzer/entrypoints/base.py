from enum import Enum
from pathlib import Path

from assert_analyzer.config import AnalyzerConfig
from assert_analyzer.loaders.json_loader import JsonLoader
from assert_analyzer.loaders.yaml_loader import YamlLoader
from assert_analyzer.models.diagnostic import Diagnostic, DiagnosticReport
from assert_analyzer.models.symbols import TypeSymbol
from assert_analyzer.repositories.symbol_catalog import SymbolCatalogRepository
from assert_analyzer.services.analyzer import AssertAnalyzerService


class ReportFormat(Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


def analyze_path(
    path: Path, config: AnalyzerConfig | None = None, catalog: Path | None = None
) -> DiagnosticReport:
    """Analyze a file or project directory.

    Args:
        path: Python file or directory to scan.
        config: Analyzer settings; environment-backed defaults when omitted.
        catalog: Optional YAML catalog of externally declared assertion types.

    Returns:
        Report with every diagnostic found.

    Raises:
        ValueError: If the path or catalog is invalid.
    """
    try:
        resolved_path = path.resolve()
    except (OSError, RuntimeError) as e:
        raise ValueError(f"Invalid path: {path} - {e}") from e

    catalog_types: list[TypeSymbol] = (
        SymbolCatalogRepository(catalog).load() if catalog is not None else []
    )
    service = AssertAnalyzerService(
        target=resolved_path,
        config=config or AnalyzerConfig(),
        catalog_types=catalog_types,
    )
    return service.run()


def format_diagnostic(diagnostic: Diagnostic) -> str:
    location = diagnostic.location
    return (
        f"{location.file_path.as_posix()}:{location.line_start}:{location.column}: "
        f"{diagnostic.severity} {diagnostic.id}: {diagnostic.reason}"
    )


def render_report(report: DiagnosticReport, report_format: ReportFormat) -> str:
    if report_format == ReportFormat.JSON:
        return JsonLoader().dumps(report)
    if report_format == ReportFormat.YAML:
        return YamlLoader().dumps(report)
    return "\n".join(format_diagnostic(d) for d in report.issues)


def write_report(report: DiagnosticReport, report_format: ReportFormat, output: Path) -> None:
    if report_format == ReportFormat.JSON:
        JsonLoader(output).load(report)
    elif report_format == ReportFormat.YAML:
        YamlLoader(output).load(report)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(render_report(report, report_format) + "\n", encoding="utf-8")
