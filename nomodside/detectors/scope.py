"""
Scope detector.

Answers one question: is this statement executed unconditionally
when the module is loaded?

Approximation: the nearest ancestor that is not a plain block must be
the module root. Any other ancestor (if, loop, function, class, try)
makes execution conditional or deferred.

Note: this is a single-hop opacity test, not reachability analysis.
Statements inside `if (true) { ... }` are NOT top-level.
"""
from typing import Optional

from ..nodes import Node

MODULE_ROOT = "Program"

# Ancestors that do not change top-level-ness of their contents.
TRANSPARENT_SCOPES = frozenset({"BlockStatement"})


def is_top_level(node: Optional[Node]) -> bool:
    """
    Detect if node sits directly at module top level.

    Returns True if the first non-transparent ancestor is the module root.
    Returns False for nodes without a parent.
    """
    if not isinstance(node, Node):
        return False

    scope = node.parent
    while scope is not None and scope.type in TRANSPARENT_SCOPES:
        scope = scope.parent

    return scope is not None and scope.type == MODULE_ROOT
