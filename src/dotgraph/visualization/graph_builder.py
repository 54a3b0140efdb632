"""Building dotgraph graphs from NetworkX graphs."""

import logging
from typing import Any, Dict, Hashable, Optional, Set

import networkx as nx

from ..core.edge import Edge
from ..core.graph import Graph
from ..core.node import Node

logger = logging.getLogger(__name__)


class GraphBuilder:
    """Builds a dotgraph Graph from a NetworkX graph.

    Node, edge and graph data dictionaries become GraphViz attributes, in
    the order the keys appear in the data.
    """

    def __init__(self, name: Optional[str] = None, strict: bool = False):
        """Initialize graph builder.

        Args:
            name: Name of the resulting graph. Defaults to the NetworkX
                graph's ``name``, or "G" when it has none.
            strict: Whether the resulting graph is strict.
        """
        self.name = name
        self.strict = strict
        self.nodes: Dict[Hashable, Node] = {}

    def build_graph(
        self,
        graph: nx.Graph,
        subgraphs: Optional[Dict[str, Dict[str, Any]]] = None,
    ) -> Graph:
        """Build a Graph from a NetworkX graph.

        Args:
            graph: NetworkX graph; directed graphs become digraphs.
            subgraphs: Optional subgraph definitions, keyed by subgraph name.
                The ``nodes`` entry lists node ids to move into the subgraph;
                all other entries become subgraph attributes.

        Returns:
            The built Graph.
        """
        name = self.name or graph.graph.get("name") or "G"
        logger.info(f"Building graph '{name}' from NetworkX graph")

        result = Graph.create(name, directional=graph.is_directed())
        result.set_strict(self.strict)

        for key, value in graph.graph.items():
            if key != "name":
                result.set_attribute(key, value)

        self.nodes.clear()
        for node_id, node_data in graph.nodes(data=True):
            node = Node(str(node_id))
            for key, value in node_data.items():
                node.set_attribute(key, value)
            self.nodes[node_id] = node

        placed = self._create_subgraphs(result, subgraphs or {})

        for node_id, node in self.nodes.items():
            if node_id not in placed:
                result.set_node(node)

        for source, target, edge_data in graph.edges(data=True):
            edge = Edge(self.nodes[source], self.nodes[target])
            for key, value in edge_data.items():
                edge.set_attribute(key, value)
            result.link(edge)

        logger.info(
            f"Built graph with {graph.number_of_nodes()} nodes and {graph.number_of_edges()} edges",
        )
        return result

    def _create_subgraphs(
        self,
        result: Graph,
        subgraphs: Dict[str, Dict[str, Any]],
    ) -> Set[Hashable]:
        """Add subgraphs to ``result`` and return the ids of the nodes placed in them."""
        placed: Set[Hashable] = set()

        for subgraph_name, subgraph_data in subgraphs.items():
            subgraph = Graph.create(subgraph_name)

            for key, value in subgraph_data.items():
                if key != "nodes":
                    subgraph.set_attribute(key, value)

            for node_id in subgraph_data.get("nodes", []):
                if node_id not in self.nodes:
                    logger.debug(f"Skipping unknown node '{node_id}' in subgraph '{subgraph_name}'")
                    continue
                if node_id in placed:
                    continue
                subgraph.set_node(self.nodes[node_id])
                placed.add(node_id)

            result.add_graph(subgraph)

        return placed
