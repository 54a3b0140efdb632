"""Exceptions raised by the dotgraph object model and renderer."""

from __future__ import annotations


class GraphVizError(Exception):
    """Base class for all dotgraph errors."""


class AttributeNotFound(GraphVizError, KeyError):
    """Raised when reading an attribute that was never set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f'Attribute with name "{name}" was not found')

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class InvalidArgument(GraphVizError, ValueError):
    """Raised when a graph receives an unsupported argument, e.g. an unknown type."""


class UnrecognizedAccessor(GraphVizError, AttributeError):
    """Raised for a dynamic accessor that is neither a getter nor a setter."""


class RenderError(GraphVizError, RuntimeError):
    """Raised when the GraphViz renderer fails.

    Attributes:
        output: Combined stdout/stderr of the renderer process.
        returncode: Exit code of the process, or None if it never started.
    """

    def __init__(self, output: str, returncode: int | None = None):
        self.output = output
        self.returncode = returncode
        super().__init__(f"GraphViz error: {output}")
