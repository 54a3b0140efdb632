"""Visualization module for graph building and rendering."""

from .graph_builder import GraphBuilder
from .renderer import GraphRenderer

__all__ = ["GraphBuilder", "GraphRenderer"]
