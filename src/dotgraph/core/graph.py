"""GraphViz graph (main graph or subgraph)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from .attribute import AttributeStore, escape
from .edge import Edge
from .exceptions import InvalidArgument
from .models import GraphType, RendererConfig
from .node import Node

logger = logging.getLogger(__name__)


class Graph(AttributeStore):
    """Represents a GraphViz graph (main graph or subgraph).

    When a subgraph's name is prefixed with ``cluster_`` GraphViz groups its
    contents and draws a border around them. Otherwise it is a logical
    container to place defaults in.
    """

    def __init__(self) -> None:
        super().__init__()
        self._name = "G"
        self._type = GraphType.DIGRAPH
        self._strict = False
        self._config = RendererConfig()
        self._graphs: Dict[str, Graph] = {}
        self._nodes: Dict[str, Node] = {}
        self._edges: List[Edge] = []

    @classmethod
    def create(cls, name: str = "G", directional: bool = True) -> "Graph":
        """Factory method to instantiate a Graph for fluent chaining.

        Args:
            name: The name for this graph.
            directional: Whether this is a directed or undirected graph.

        Returns:
            New Graph instance.
        """
        graph = cls()
        graph.set_name(name).set_type(GraphType.DIGRAPH if directional else GraphType.GRAPH)
        return graph

    def set_path(self, path: Union[str, Path, None]) -> "Graph":
        """Set the directory to execute ``dot`` from.

        Only needed if GraphViz is not on the ``PATH``. An empty value
        restores the default lookup; a directory that does not exist is
        ignored.

        Args:
            path: Directory containing the GraphViz executables.
        """
        if not path:
            self._config = RendererConfig(engine=self._config.engine)
            return self

        if not Path(path).expanduser().exists():
            logger.warning(f"GraphViz path does not exist, keeping previous: {path}")
            return self

        self._config = RendererConfig(path=path, engine=self._config.engine)
        return self

    def get_path(self) -> Optional[Path]:
        return self._config.path

    def set_name(self, name: str) -> "Graph":
        self._name = name
        return self

    def get_name(self) -> str:
        return self._name

    def set_type(self, graph_type: Union[str, GraphType]) -> "Graph":
        """Set the type for this graph.

        Args:
            graph_type: A GraphType or one of "digraph", "graph", "subgraph".

        Raises:
            InvalidArgument: If graph_type is not a known graph type.
        """
        try:
            self._type = GraphType(graph_type)
        except ValueError:
            raise InvalidArgument('Type must be "digraph", "graph", or "subgraph".') from None
        return self

    def get_type(self) -> str:
        return self._type.value

    def set_strict(self, is_strict: bool) -> "Graph":
        """Set whether multiple edges between the same pair of nodes are disallowed."""
        self._strict = is_strict
        return self

    def is_strict(self) -> bool:
        return self._strict

    def add_graph(self, graph: "Graph") -> "Graph":
        """Add a subgraph; its type is changed to subgraph.

        Subgraphs are indexed by name, so adding a second subgraph with the
        same name replaces the first.
        """
        graph.set_type(GraphType.SUBGRAPH)
        self._graphs[graph.get_name()] = graph
        return self

    def has_graph(self, name: str) -> bool:
        return name in self._graphs

    def get_graph(self, name: str) -> "Graph":
        """Return the subgraph with the given name.

        Raises:
            KeyError: If there is no such subgraph; check has_graph() first.
        """
        return self._graphs[name]

    def get_graphs(self) -> Dict[str, "Graph"]:
        return dict(self._graphs)

    def set_node(self, node: Node) -> "Graph":
        """Set a node, indexed by its name, replacing any node with that name."""
        self._nodes[node.get_name()] = node
        return self

    def get_nodes(self) -> Dict[str, Node]:
        return dict(self._nodes)

    def find_node(self, name: str) -> Optional[Node]:
        """Find a node in this graph or, depth-first, in any of its subgraphs.

        Returns:
            The first matching node, or None.
        """
        if name in self._nodes:
            return self._nodes[name]

        for graph in self._graphs.values():
            node = graph.find_node(name)
            if node is not None:
                return node

        return None

    def __setitem__(self, name: str, node: Node) -> None:
        # Unlike set_node() the key need not match the node's name
        self._nodes[name] = node

    def __getitem__(self, name: str) -> Node:
        return self._nodes[name]

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def link(self, edge: Edge) -> "Graph":
        """Register an edge on this graph.

        The endpoints are not required to belong to this graph.
        """
        self._edges.append(edge)
        return self

    def get_edges(self) -> List[Edge]:
        return list(self._edges)

    def export(self, output_format: str, filename: Union[str, Path]) -> "Graph":
        """Export this graph to an image using GraphViz.

        This is the only method that requires GraphViz to be installed.

        Args:
            output_format: GraphViz output format, e.g. "png", "svg" or "pdf".
            filename: Path to write to.

        Raises:
            RenderError: If GraphViz failed or could not be executed.
        """
        from ..visualization.renderer import GraphRenderer

        GraphRenderer(self._config).render(self.to_string(), filename, output_format)
        return self

    def save(self, filename: Union[str, Path]) -> Path:
        """Save the DOT source of this graph; GraphViz is not needed."""
        from ..visualization.renderer import GraphRenderer

        return GraphRenderer(self._config).save_dot_file(self.to_string(), filename)

    def to_string(self) -> str:
        """Generate the DOT source for this graph.

        GraphViz is not used here; it is safe to call without it installed.
        Edges use ``--`` when this graph is undirected and ``->`` otherwise.
        """
        return self._render(directed=self._type != GraphType.GRAPH)

    def _render(self, directed: bool) -> str:
        lines = [graph._render(directed) for graph in self._graphs.values()]
        lines.extend(attribute.to_string() for attribute in self._attributes.values())
        lines.extend(edge.to_string(directed) for edge in self._edges)
        lines.extend(node.to_string() for node in self._nodes.values())
        content = "\n".join(lines)

        strict = "strict " if self._strict else ""
        return f'{strict}{self._type.value} "{escape(self._name)}" {{\n{content}\n}}'

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Graph({self._name!r}, type={self._type.value!r})"
