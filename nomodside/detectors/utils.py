"""
Stateless shape matchers for ESTree nodes.

These are pure helper functions, not class methods.
Higher-level detectors compose them as needed.
"""
from typing import Optional

from ..nodes import Node


def _has_type(node: Optional[Node], node_type: str) -> bool:
    return isinstance(node, Node) and node.type == node_type


def is_identifier(node: Optional[Node], name: Optional[str] = None) -> bool:
    """
    Check if node is an identifier, optionally with a specific name.

    Examples:
        foo -> matches is_identifier(node) and is_identifier(node, "foo")
        foo -> does not match is_identifier(node, "bar")
    """
    if not _has_type(node, "Identifier"):
        return False

    return name is None or node.get("name") == name


def is_function_call(node: Optional[Node], function_name: str) -> bool:
    """Check if node is a call of a plain identifier: function_name(...)."""
    if not _has_type(node, "CallExpression"):
        return False

    return is_identifier(node.get("callee"), function_name)


def is_member_expression(
    node: Optional[Node],
    object_name: str,
    property_name: Optional[str] = None,
) -> bool:
    """
    Check if node is a member access on a named object.

    Examples:
        module.exports -> matches ("module", "exports") and ("module",)
        exports.foo    -> matches ("exports",)
        a.b.c          -> does not match ("a", ...) - object is not an identifier
    """
    if not _has_type(node, "MemberExpression"):
        return False

    return (
        is_identifier(node.get("object"), object_name)
        and is_identifier(node.get("property"), property_name)
    )


def is_member_function_call(
    node: Optional[Node],
    object_name: str,
    function_name: str,
) -> bool:
    """Check if node calls a method on a named object: object_name.function_name(...)."""
    if not _has_type(node, "CallExpression"):
        return False

    return is_member_expression(node.get("callee"), object_name, function_name)
