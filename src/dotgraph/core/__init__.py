"""Core dotgraph object model."""

from .attribute import Attribute, AttributeStore, escape
from .edge import Edge
from .exceptions import (
    AttributeNotFound,
    GraphVizError,
    InvalidArgument,
    RenderError,
    UnrecognizedAccessor,
)
from .graph import Graph
from .models import GraphType, RendererConfig
from .node import Node

__all__ = [
    "Attribute",
    "AttributeNotFound",
    "AttributeStore",
    "Edge",
    "Graph",
    "GraphType",
    "GraphVizError",
    "InvalidArgument",
    "Node",
    "RenderError",
    "RendererConfig",
    "UnrecognizedAccessor",
    "escape",
]
