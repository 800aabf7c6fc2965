from __future__ import annotations

import json
import logging
from pathlib import Path

from assert_analyzer.loaders._serialization import report_payload
from assert_analyzer.models.diagnostic import DiagnosticReport

logger = logging.getLogger(__name__)


class JsonLoader:
    """Persist a diagnostic report as JSON.

    The output JSON schema is a single object with three keys:
    - "summary": counts of analyzed files and diagnostics per kind
    - "diagnostics": list of diagnostic dictionaries
    - "skipped_files": files that could not be parsed

    Example:
    {
      "summary": {"files_analyzed": 3, "diagnostics": 1, "by_kind": {...}},
      "diagnostics": [{"id": "AssertsAnalyzer", "file": "...", "line": 4, ...}],
      "skipped_files": []
    }
    """

    def __init__(self, output_path: str | Path | None = None, indent: int = 2) -> None:
        """Create a JSON loader.

        Args:
            output_path: Target file path for `load`; not needed for `dumps`.
            indent: Indentation level for pretty-printing JSON.
        """
        self.output_path: Path | None = Path(output_path) if output_path is not None else None
        self.indent: int = indent

    def dumps(self, report: DiagnosticReport) -> str:
        return json.dumps(report_payload(report), ensure_ascii=False, indent=self.indent)

    def load(self, report: DiagnosticReport) -> None:
        """Write the report to the configured JSON file."""
        if self.output_path is None:
            raise ValueError("No output path configured")
        if self.output_path.parent and not self.output_path.parent.exists():
            self.output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with self.output_path.open("w", encoding="utf-8") as f:
                f.write(self.dumps(report))
        except OSError:
            logger.exception("Failed to write report JSON to %s", self.output_path)
            raise
