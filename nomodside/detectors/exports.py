"""
Module export detectors.

Assigning to the module's export binding is how a CommonJS module
publishes its API, so it is the one expression allowed at top level.
"""
from typing import Optional

from ..nodes import Node
from .utils import is_identifier, is_member_expression


def is_export_target(node: Optional[Node]) -> bool:
    """
    Detect the module's export binding.

    Matches:
    - module.exports
    - module.exports.name
    - exports
    - exports.name
    """
    if is_identifier(node, "exports"):
        return True

    if is_member_expression(node, "module", "exports"):
        return True

    if is_member_expression(node, "exports"):
        return True

    return (
        isinstance(node, Node)
        and node.type == "MemberExpression"
        and is_member_expression(node.get("object"), "module", "exports")
    )


def is_export_assignment(node: Optional[Node]) -> bool:
    """Detect `<export target> = value`."""
    if not isinstance(node, Node) or node.type != "AssignmentExpression":
        return False

    return is_export_target(node.get("left"))
