import logging
import os
from pathlib import Path
from typing import Any

import tree_sitter_python as tspython
from pydantic import BaseModel, ConfigDict, PrivateAttr
from tree_sitter import Language, Node as TSNode, Parser, Tree

from assert_analyzer.models.base import SourceLocation

logger = logging.getLogger(__name__)

PY_LANGUAGE = Language(tspython.language())


class SourceFile(BaseModel):
    """A parsed Python source file."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    path: Path
    source: bytes
    __tree: Tree = PrivateAttr()

    def model_post_init(self, context: Any) -> None:
        self.__tree = Parser(PY_LANGUAGE).parse(self.source)
        return super().model_post_init(context)

    @classmethod
    def from_path(cls, path: Path, root: Path | None = None) -> "SourceFile":
        """Read and parse a Python file.

        Args:
            path: File to read.
            root: Optional project root; stored paths are made relative to it.

        Returns:
            The parsed source file.

        Raises:
            ValueError: If the path is not a readable UTF-8 Python file.
        """
        if not path.exists():
            raise ValueError(f"File does not exist: {path}")
        if not path.is_file():
            raise ValueError(f"Path is not a file: {path}")
        if path.suffix != ".py":
            raise ValueError(f"File is not a Python file: {path}")

        try:
            source = path.read_bytes()
            source.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ValueError(f"Failed to read file {path}: {e}") from e

        logger.debug("Parsed %s (%d bytes)", path, len(source))
        return cls(path=_display_path_for(path, root), source=source)

    @classmethod
    def from_text(cls, text: str, path: Path = Path("<string>")) -> "SourceFile":
        return cls(path=path, source=text.encode("utf-8"))

    @property
    def root_node(self) -> TSNode:
        return self.__tree.root_node

    @property
    def has_errors(self) -> bool:
        return self.__tree.root_node.has_error

    def snippet(self, node: TSNode) -> str:
        """Extract the source code snippet for a given Tree-sitter node."""
        return self.source[node.start_byte : node.end_byte].decode("utf-8")

    def location(self, node: TSNode) -> SourceLocation:
        return SourceLocation(
            file_path=self.path,
            line_start=node.start_point[0] + 1,
            line_end=node.end_point[0] + 1,
            column=node.start_point[1] + 1,
        )

    def iter_nodes(self, node_type: str) -> list[TSNode]:
        """Collect all nodes of `node_type` in document order."""

        found: list[TSNode] = []
        stack: list[TSNode] = [self.root_node]
        while stack:
            current = stack.pop()
            if current.type == node_type:
                found.append(current)
            stack.extend(reversed(current.children))
        return found


def _display_path_for(path: Path, root: Path | None) -> Path:
    """Normalize file paths relative to the project root."""

    if root is None:
        return Path(path.as_posix())

    absolute_path: Path = path.resolve()
    root_path: Path = root.resolve()
    if root_path.is_file():
        root_path = root_path.parent
    try:
        return Path(absolute_path.relative_to(root_path).as_posix())
    except ValueError:
        return Path(os.path.relpath(absolute_path.as_posix(), root_path.as_posix()))
