"""GraphViz attributes and the attribute store shared by nodes, edges and graphs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict

from .exceptions import AttributeNotFound, UnrecognizedAccessor

# Characters escaped by plain slash-escaping
_SLASHED = re.compile(r"""['"\\\x00]""")

# escString: quotes and NUL, plus any backslash that does not start a
# GraphViz escape sequence (\N, \G, \E, \T, \H, \L, \l, \n, \r or \\)
# See http://www.graphviz.org/doc/info/attrs.html#k:escString
_SPECIALS = re.compile(r"""['"\x00]|\\(?![\\NGETHLlnr])""")


def _slash(match: re.Match) -> str:
    char = match.group(0)
    return "\\0" if char == "\x00" else "\\" + char


def escape(text: str) -> str:
    """Backslash-escape quotes, backslashes and NUL characters.

    Used for quoted attribute values and for node, edge and graph names.
    """
    return _SLASHED.sub(_slash, text)


@dataclass(frozen=True)
class Attribute:
    """A single GraphViz attribute."""

    key: str
    value: str

    def get_key(self) -> str:
        return self.key

    def get_value(self) -> str:
        return self.value

    def is_value_in_html(self) -> bool:
        """Check whether the value is an HTML-like label."""
        return self.value.startswith("<")

    def is_value_containing_specials(self) -> bool:
        """Check whether the value needs escString encoding."""
        return "\\" in self.value

    def to_string(self) -> str:
        """Convert the attribute to a GraphViz-compatible ``key=value`` string."""
        key = "URL" if self.key.lower() == "url" else self.key

        if self.is_value_containing_specials():
            value = '"' + _SPECIALS.sub(lambda m: "\\" + m.group(0), self.value) + '"'
        elif self.is_value_in_html():
            value = self.value
        else:
            value = '"' + escape(self.value) + '"'

        return f"{key}={value}"

    def __str__(self) -> str:
        return self.to_string()


class AttributeStore:
    """Mixin holding GraphViz attributes by name.

    Besides ``set_attribute`` and ``get_attribute`` any method named
    ``set<Name>`` or ``get<Name>`` is resolved dynamically, so
    ``node.set_fontsize(12)`` stores the ``fontsize`` attribute and
    ``node.get_fontsize()`` returns it. The attribute name is the part
    after the prefix, lowercased, without a leading underscore.
    """

    def __init__(self) -> None:
        self._attributes: Dict[str, Attribute] = {}

    def set_attribute(self, name: str, value: Any):
        """Set an attribute, replacing any previous value under ``name``.

        Args:
            name: Attribute name, stored as given.
            value: Attribute value; converted to ``str``.

        Returns:
            self, to allow chaining.
        """
        self._attributes[name] = Attribute(name, str(value))
        return self

    def get_attribute(self, name: str) -> Attribute:
        """Return the attribute stored under ``name``.

        Raises:
            AttributeNotFound: If no attribute with that name was set.
        """
        try:
            return self._attributes[name]
        except KeyError:
            raise AttributeNotFound(name) from None

    def has_attribute(self, name: str) -> bool:
        return name in self._attributes

    def get_attributes(self) -> Dict[str, Attribute]:
        """Return a copy of all attributes in insertion order."""
        return dict(self._attributes)

    def _attribute_list(self) -> str:
        return ", ".join(attribute.to_string() for attribute in self._attributes.values())

    def __getattr__(self, name: str) -> Callable[..., Any]:
        # Only called when regular attribute lookup fails
        if name.startswith("_"):
            raise UnrecognizedAccessor(
                f"'{type(self).__name__}' object has no attribute '{name}'",
            )

        prefix, key = name[:3], name[3:]
        if key.startswith("_"):
            key = key[1:]
        key = key.lower()

        if key and prefix == "set":

            def setter(value: Any):
                return self.set_attribute(key, str(value))

            return setter

        if key and prefix == "get":

            def getter() -> Attribute:
                return self.get_attribute(key)

            return getter

        raise UnrecognizedAccessor(f"Method '{name}' not found")
