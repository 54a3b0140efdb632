"""GraphViz edge."""

from __future__ import annotations

from .attribute import AttributeStore, escape
from .node import Node


class Edge(AttributeStore):
    """A connection between two nodes.

    The edge only references its endpoints; the nodes themselves are owned
    by whichever graph they were set on.
    """

    def __init__(self, from_node: Node, to_node: Node):
        super().__init__()
        self._from = from_node
        self._to = to_node

    @classmethod
    def create(cls, from_node: Node, to_node: Node) -> "Edge":
        """Factory method for fluent construction."""
        return cls(from_node, to_node)

    def get_from(self) -> Node:
        return self._from

    def get_to(self) -> Node:
        return self._to

    def to_string(self, directed: bool = True) -> str:
        """Convert the edge definition to a DOT statement.

        Args:
            directed: Use ``->``; when False the undirected ``--`` is used.
        """
        operator = "->" if directed else "--"
        from_name = escape(self._from.get_name())
        to_name = escape(self._to.get_name())

        return f'"{from_name}" {operator} "{to_name}" [{self._attribute_list()}]'

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Edge({self._from.get_name()!r}, {self._to.get_name()!r})"
