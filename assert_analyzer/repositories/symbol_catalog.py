from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from assert_analyzer.models.symbols import (
    AttributeSymbol,
    MethodSymbol,
    ParameterKind,
    ParameterSymbol,
    TypeSymbol,
)

logger = logging.getLogger(__name__)


class CatalogParameter(BaseModel):
    name: str
    default: bool = False
    kind: ParameterKind = ParameterKind.POSITIONAL_OR_KEYWORD


class CatalogMethod(BaseModel):
    name: str
    parameters: list[CatalogParameter | str] = Field(default_factory=list)


class CatalogType(BaseModel):
    name: str
    methods: list[CatalogMethod] = Field(default_factory=list)
    attributes: list[str] = Field(default_factory=list)


class SymbolCatalog(BaseModel):
    types: list[CatalogType] = Field(default_factory=list)


class SymbolCatalogRepository:
    """Read assertion type declarations from a YAML catalog.

    The catalog describes types the scanned sources use but do not declare,
    for example assertion helpers from an installed library:

        types:
          - name: Assert
            methods:
              - name: are_equal
                parameters: [expected, actual]
              - name: are_equal
                parameters:
                  - expected
                  - actual
                  - {name: message, default: true}
            attributes: [default_timeout]

    Each entry under `methods` is one overload.
    """

    def __init__(self, catalog_path: str | Path) -> None:
        self.catalog_path: Path = Path(catalog_path)

    def load(self) -> list[TypeSymbol]:
        """Parse the catalog into type symbols.

        Returns:
            Declared types in file order.

        Raises:
            ValueError: If the file cannot be read or does not match the schema.
        """
        try:
            raw = yaml.safe_load(self.catalog_path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as e:
            raise ValueError(f"Failed to read symbol catalog {self.catalog_path}: {e}") from e

        try:
            catalog = SymbolCatalog.model_validate(raw or {})
        except ValidationError as e:
            raise ValueError(f"Invalid symbol catalog {self.catalog_path}: {e}") from e

        types = [self._to_type_symbol(entry) for entry in catalog.types]
        logger.debug("Loaded %d types from %s", len(types), self.catalog_path)
        return types

    def _to_type_symbol(self, entry: CatalogType) -> TypeSymbol:
        members: list[MethodSymbol | AttributeSymbol] = [
            MethodSymbol(
                name=method.name,
                containing_type=entry.name,
                parameters=[
                    self._to_parameter(param, position)
                    for position, param in enumerate(method.parameters)
                ],
            )
            for method in entry.methods
        ]
        members.extend(
            AttributeSymbol(name=name, containing_type=entry.name) for name in entry.attributes
        )
        return TypeSymbol(name=entry.name, members=members)

    def _to_parameter(self, param: CatalogParameter | str, position: int) -> ParameterSymbol:
        if isinstance(param, str):
            param = CatalogParameter(name=param)
        return ParameterSymbol(
            name=param.name,
            position=position,
            kind=param.kind,
            has_default=param.default,
        )
