import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

OnError = Literal["raise", "skip"]

DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset(
    {
        "__pycache__",
        ".git",
        ".venv",
        "venv",
        ".mypy_cache",
        ".pytest_cache",
        ".tox",
        "node_modules",
    }
)


class AnalyzerConfig(BaseModel):
    model_config = ConfigDict(validate_default=True)

    assert_type_name: str = Field(
        default_factory=lambda: os.getenv("ASSERT_ANALYZER_TYPE_NAME", "Assert")
    )
    message_parameter: str = Field(
        default_factory=lambda: os.getenv("ASSERT_ANALYZER_MESSAGE_PARAMETER", "message")
    )
    on_error: OnError = Field(
        default_factory=lambda: os.getenv("ASSERT_ANALYZER_ON_ERROR", "raise")  # type: ignore[arg-type,return-value]
    )
    exclude_dir_names: set[str] = Field(default_factory=lambda: set(DEFAULT_EXCLUDED_DIRS))
