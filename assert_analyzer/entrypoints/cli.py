from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from assert_analyzer.config import AnalyzerConfig
from assert_analyzer.models.descriptors import SUPPORTED_DIAGNOSTICS
from .base import ReportFormat, analyze_path, render_report, write_report

app = typer.Typer(
    name="assert-analyzer",
    add_completion=False,
    no_args_is_help=True,
    help="Find assertion calls that do not pass a failure message.",
)


@app.callback()
def configure_logging(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log progress to stderr."),
    ] = False,
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command("check")
def check(
    path: Annotated[
        Path,
        typer.Argument(
            help="Python file or project directory to scan.",
            exists=True,
            file_okay=True,
            dir_okay=True,
            readable=True,
            resolve_path=True,
        ),
    ],
    report_format: Annotated[
        ReportFormat,
        typer.Option(
            "--format",
            "-f",
            case_sensitive=False,
            help="Report format (text, json or yaml).",
        ),
    ] = ReportFormat.TEXT,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the report to this file instead of stdout.",
            file_okay=True,
            dir_okay=False,
            writable=True,
            resolve_path=True,
        ),
    ] = None,
    catalog: Annotated[
        Optional[Path],
        typer.Option(
            "--catalog",
            help="YAML catalog declaring assertion types not found in the sources.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    type_name: Annotated[
        str,
        typer.Option(
            "--type-name",
            help="Exact name of the assertion type.",
            envvar="ASSERT_ANALYZER_TYPE_NAME",
            show_default=True,
        ),
    ] = "Assert",
    message_parameter: Annotated[
        str,
        typer.Option(
            "--message-parameter",
            help="Name of the failure message parameter.",
            envvar="ASSERT_ANALYZER_MESSAGE_PARAMETER",
            show_default=True,
        ),
    ] = "message",
    on_error: Annotated[
        str,
        typer.Option(
            "--on-error",
            help="What to do with unreadable files: raise or skip.",
            envvar="ASSERT_ANALYZER_ON_ERROR",
            show_default=True,
        ),
    ] = "raise",
    strict: Annotated[
        bool,
        typer.Option(
            "--strict/--no-strict",
            help="Exit with status 1 when any diagnostic is reported.",
        ),
    ] = False,
) -> None:
    """Scan PATH and report assertion calls without a failure message.

    Args:
        path: File or directory to scan.
        report_format: Output format.
        output: Optional destination file.
        catalog: Optional YAML catalog of assertion types.
        type_name: Name of the assertion type.
        message_parameter: Name of the message parameter.
        on_error: Error policy for unreadable files.
        strict: Whether diagnostics fail the command.
    """
    try:
        config = AnalyzerConfig(
            assert_type_name=type_name,
            message_parameter=message_parameter,
            on_error=on_error,  # type: ignore[arg-type]
        )
        report = analyze_path(path, config=config, catalog=catalog)
    except ValueError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from e

    if output is not None:
        write_report(report, report_format, output)
        typer.secho(f"Report written to {output}", fg=typer.colors.GREEN, err=True)
    else:
        rendered = render_report(report, report_format)
        if rendered:
            typer.echo(rendered)

    color = typer.colors.YELLOW if report.issues else typer.colors.GREEN
    typer.secho(
        f"{len(report.issues)} diagnostics in {report.files_analyzed} files",
        fg=color,
        err=True,
    )
    if strict and report.issues:
        raise typer.Exit(code=1)


@app.command("rules")
def rules() -> None:
    """List the diagnostics this analyzer can report."""
    for descriptor in SUPPORTED_DIAGNOSTICS:
        typer.secho(
            f"{descriptor.id} [{descriptor.kind}] ({descriptor.severity}, {descriptor.category})",
            bold=True,
        )
        typer.echo(f"  {descriptor.title}")
        typer.echo(f"  {descriptor.description}")


def main() -> None:
    """Entry point for executing the Typer application."""
    app()


if __name__ == "__main__":
    main()
