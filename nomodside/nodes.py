"""
ESTree node model.

Nodes are read-only once built. Every node knows its parent, so
classifiers can answer scope questions by walking upward.

Trees come from two places:
- ESTree JSON dumps produced by any JavaScript parser
- JavaScript source, parsed with esprima
"""
import json
from typing import Any, Iterator, Mapping, Optional

import esprima


class ParseError(ValueError):
    """Input could not be turned into a syntax tree."""


class Node:
    """A single ESTree node."""

    __slots__ = ("type", "parent", "_fields")

    def __init__(self, type: str, fields: dict, parent: Optional["Node"] = None):
        self.type = type
        self.parent = parent
        self._fields = fields

    def get(self, name: str) -> Any:
        """Field value, or None when the node has no such field."""
        return self._fields.get(name)

    def children(self) -> Iterator["Node"]:
        for value in self._fields.values():
            if isinstance(value, Node):
                yield value
            elif isinstance(value, list):
                for item in value:
                    if isinstance(item, Node):
                        yield item

    @property
    def line(self) -> Optional[int]:
        return self._position("line")

    @property
    def column(self) -> Optional[int]:
        return self._position("column")

    def _position(self, key: str) -> Optional[int]:
        start = _member(self._fields.get("loc"), "start")
        value = _member(start, key)
        return value if isinstance(value, int) else None

    def __repr__(self) -> str:
        return f"Node({self.type!r}, line={self.line})"


def _member(value: Any, key: str) -> Any:
    # loc data is a plain mapping in JSON dumps, an object in some parsers
    if value is None:
        return None
    if isinstance(value, Mapping):
        return value.get(key)
    return getattr(value, key, None)


def _is_node_data(value: Any) -> bool:
    return isinstance(value, Mapping) and isinstance(value.get("type"), str)


def _convert(value: Any, parent: Node) -> Any:
    if _is_node_data(value):
        return from_estree(value, parent)
    if isinstance(value, list):
        return [_convert(item, parent) for item in value]
    return value


def from_estree(data: Mapping, parent: Optional[Node] = None) -> Node:
    """
    Build a parent-linked Node tree from an ESTree mapping.

    Mappings with a string "type" key become Nodes. Anything else
    (loc, regex, range) is kept as plain data.
    """
    if not _is_node_data(data):
        raise ParseError("ESTree node must be a mapping with a 'type' string")

    node = Node(data["type"], {}, parent)
    for key, value in data.items():
        if key == "type":
            continue
        node._fields[key] = _convert(value, node)
    return node


def load_estree_json(text: str) -> Node:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid ESTree JSON: {e}") from e

    if not _is_node_data(data):
        raise ParseError("ESTree JSON document must contain a node object")

    return from_estree(data)


def parse_source(source: str, module: bool = False) -> Node:
    """
    Parse JavaScript source into a Node tree.

    Scripts are the default (CommonJS). Pass module=True for ES modules.
    """
    parse = esprima.parseModule if module else esprima.parseScript
    try:
        tree = parse(source, {"loc": True})
    except Exception as e:
        raise ParseError(f"Invalid JavaScript: {e}") from e

    return from_estree(tree.toDict())
