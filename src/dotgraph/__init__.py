"""dotgraph - build GraphViz DOT graphs in Python.

An object model of graphs, subgraphs, nodes and edges carrying GraphViz
attributes, serialized to DOT and optionally rendered with GraphViz.
"""

from .core import (
    Attribute,
    AttributeNotFound,
    Edge,
    Graph,
    GraphType,
    GraphVizError,
    InvalidArgument,
    Node,
    RenderError,
    RendererConfig,
    UnrecognizedAccessor,
)

__version__ = "1.0.0"
__all__ = [
    "Attribute",
    "AttributeNotFound",
    "Edge",
    "Graph",
    "GraphType",
    "GraphVizError",
    "InvalidArgument",
    "Node",
    "RenderError",
    "RendererConfig",
    "UnrecognizedAccessor",
]
