"""GraphViz node."""

from __future__ import annotations

from typing import Optional

from .attribute import AttributeStore, escape


class Node(AttributeStore):
    """A named vertex in a GraphViz graph."""

    def __init__(self, name: str, label: Optional[str] = None):
        """Create a node.

        Args:
            name: Name of the node; used as its identifier in the DOT output.
            label: Optional label, stored as the ``label`` attribute.
        """
        super().__init__()
        self._name = name

        if label is not None:
            self.set_attribute("label", label)

    @classmethod
    def create(cls, name: str, label: Optional[str] = None) -> "Node":
        """Factory method for fluent construction."""
        return cls(name, label)

    def set_name(self, name: str) -> "Node":
        self._name = name
        return self

    def get_name(self) -> str:
        return self._name

    def to_string(self) -> str:
        """Convert the node definition to a DOT statement."""
        return f'"{escape(self._name)}" [{self._attribute_list()}]'

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Node({self._name!r})"
