import logging
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from assert_analyzer.config import AnalyzerConfig
from assert_analyzer.models.diagnostic import Diagnostic, DiagnosticReport
from assert_analyzer.models.symbols import TypeSymbol
from assert_analyzer.services.inspector import AssertionCallInspector
from assert_analyzer.services.symbol_resolver import SymbolResolver, TypeCatalogResolver
from assert_analyzer.services.ts_parser.invocation_extractor import InvocationExtractor
from assert_analyzer.services.ts_parser.source_file import SourceFile
from assert_analyzer.services.ts_parser.type_collector import TypeCollector

logger = logging.getLogger(__name__)


class AssertAnalyzerService(BaseModel):
    """Run the assertion-message rule over a file or a project directory."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    target: Path
    config: AnalyzerConfig = Field(default_factory=AnalyzerConfig)
    catalog_types: list[TypeSymbol] = Field(default_factory=list)

    @property
    def inspector(self) -> AssertionCallInspector:
        return AssertionCallInspector(
            assert_type_name=self.config.assert_type_name,
            message_parameter=self.config.message_parameter,
        )

    def discover_files(self) -> list[Path]:
        """Collect the Python files to analyze.

        Returns:
            Sorted list of Python files under the target.

        Raises:
            ValueError: If the target does not exist.
        """
        if not self.target.exists():
            raise ValueError(f"Path does not exist: {self.target}")
        if self.target.is_file():
            return [self.target]

        files: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(self.target):
            dirnames[:] = [
                name for name in dirnames if name not in self.config.exclude_dir_names
            ]
            for filename in filenames:
                if not filename.endswith(".py"):
                    continue
                candidate = Path(dirpath) / filename
                if candidate.is_file():
                    files.append(candidate)
        return sorted(files)

    def parse_files(self, files: list[Path]) -> tuple[list[SourceFile], list[str]]:
        """Parse files, honoring `config.on_error` for unreadable ones.

        Returns:
            Tuple of (parsed sources, display paths of skipped files).
        """
        sources: list[SourceFile] = []
        skipped: list[str] = []
        for path in files:
            try:
                sources.append(SourceFile.from_path(path, root=self.target))
            except ValueError:
                if self.config.on_error == "raise":
                    raise
                logger.exception("Skipping %s", path)
                skipped.append(path.as_posix())
        return sources, skipped

    def build_resolver(self, sources: list[SourceFile]) -> TypeCatalogResolver:
        """Create a resolver from the catalog and every class declared in `sources`."""

        resolver = TypeCatalogResolver(self.catalog_types)
        for source in sources:
            for type_symbol in TypeCollector(source=source).collect():
                resolver.register(type_symbol)
        logger.debug("Resolver knows %d types", len(resolver.type_names))
        return resolver

    def analyze_file(self, source: SourceFile, resolver: SymbolResolver) -> list[Diagnostic]:
        inspector = self.inspector
        diagnostics: list[Diagnostic] = []
        for invocation in InvocationExtractor(source=source).extract():
            diagnostic = inspector.inspect(invocation, resolver)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return diagnostics

    def run(self) -> DiagnosticReport:
        files = self.discover_files()
        sources, skipped = self.parse_files(files)
        resolver = self.build_resolver(sources)

        diagnostics: list[Diagnostic] = []
        for source in sources:
            if source.has_errors:
                logger.warning("Syntax errors in %s, results may be incomplete", source.path)
            diagnostics.extend(self.analyze_file(source, resolver))

        logger.info(
            "Analyzed %d files, %d diagnostics", len(sources), len(diagnostics)
        )
        return DiagnosticReport(
            issues=diagnostics, files_analyzed=len(sources), skipped_files=skipped
        )
