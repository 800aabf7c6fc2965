from pathlib import Path

import pytest

from assert_analyzer.models.diagnostic import DiagnosticKind
from assert_analyzer.models.symbols import AttributeSymbol, MethodSymbol
from assert_analyzer.repositories.symbol_catalog import SymbolCatalogRepository
from assert_analyzer.services.analyzer import AssertAnalyzerService
from tests.consts import SAMPLE_CATALOG_FILE


def test_load__on_sample_catalog__builds_overloads_and_attributes() -> None:
    (assert_type,) = SymbolCatalogRepository(SAMPLE_CATALOG_FILE).load()

    assert assert_type.name == "Assert"
    that = [m for m in assert_type.members_named("that") if isinstance(m, MethodSymbol)]
    assert [[(p.name, p.has_default) for p in m.parameters] for m in that] == [
        [("actual", False)],
        [("actual", False), ("message", True)],
    ]
    assert assert_type.members_named("default_timeout") == [
        AttributeSymbol(name="default_timeout", containing_type="Assert")
    ]


def test_load__on_empty_file__returns_no_types(tmp_path: Path) -> None:
    catalog = tmp_path / "empty.yaml"
    catalog.write_text("", encoding="utf-8")

    assert SymbolCatalogRepository(catalog).load() == []


@pytest.mark.parametrize(
    "content",
    ["types: [", "types:\n  - methods: []\n", "types: 3\n"],
)
def test_load__on_malformed_catalog__raises_value_error(tmp_path: Path, content: str) -> None:
    catalog = tmp_path / "bad.yaml"
    catalog.write_text(content, encoding="utf-8")

    with pytest.raises(ValueError, match="bad.yaml"):
        SymbolCatalogRepository(catalog).load()


def test_load__on_missing_file__raises_value_error(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="Failed to read"):
        SymbolCatalogRepository(tmp_path / "missing.yaml").load()


def test_catalog_types__resolve_calls_without_source_declarations(tmp_path: Path) -> None:
    (tmp_path / "test_catalog.py").write_text(
        "Assert.that(result)\n"
        'Assert.that(result, "result should be truthy")\n'
        "Assert.is_none(result)\n",
        encoding="utf-8",
    )

    report = AssertAnalyzerService(
        target=tmp_path,
        catalog_types=SymbolCatalogRepository(SAMPLE_CATALOG_FILE).load(),
    ).run()

    assert [(d.line_number, d.kind) for d in report.issues] == [
        (1, DiagnosticKind.OVERLOAD_WITH_MESSAGE_AVAILABLE)
    ]
