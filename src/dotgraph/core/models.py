"""Data models and enums for dotgraph."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, field_validator


class GraphType(str, Enum):
    """Kinds of graph a Graph can be serialized as."""

    DIGRAPH = "digraph"
    GRAPH = "graph"
    SUBGRAPH = "subgraph"


class RendererConfig(BaseModel):
    """Configuration for invoking the GraphViz renderer."""

    path: Path | None = None  # directory containing the executable; None means $PATH
    engine: str = "dot"

    @field_validator("path", mode="before")
    @classmethod
    def _resolve_path(cls, value: str | Path | None) -> Path | None:
        if value is None or str(value) == "":
            return None
        return Path(value).expanduser().resolve()

    @property
    def executable(self) -> str:
        """Return the executable to run, qualified with ``path`` if set."""
        if self.path is None:
            return self.engine
        return str(self.path / self.engine)
