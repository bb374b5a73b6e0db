"""
Variable declaration detectors.

Judge a whole VariableDeclaration statement. Every declarator must
match; one failing declarator rejects the statement.

Each detector is a pure function: node -> bool

IMPORTANT: These detectors ignore the binding kind.
Only the rule layer decides that `let`/`var` are never eligible.
"""
from typing import Optional

from ..nodes import Node
from .utils import is_function_call, is_member_function_call

REQUIRE = "require"

SAFE_INITIALIZER_TYPES = frozenset({
    "ArrowFunctionExpression",
    "FunctionExpression",
    "Literal",
    "TemplateLiteral",
})


def _initializers(declaration: Optional[Node]) -> Optional[list]:
    if not isinstance(declaration, Node) or declaration.type != "VariableDeclaration":
        return None

    declarators = declaration.get("declarations")
    if not isinstance(declarators, list):
        return None

    return [
        declarator.get("init") if isinstance(declarator, Node) else None
        for declarator in declarators
    ]


def is_plain_require_call(node: Optional[Node]) -> bool:
    """require('m')"""
    return is_function_call(node, REQUIRE)


def is_selective_require(node: Optional[Node]) -> bool:
    """
    Detect a member picked off a require call.

    Matches:
    - require('m').field
    - require('m').field(...)
    """
    if not isinstance(node, Node):
        return False

    if node.type == "CallExpression":
        node = node.get("callee")
        if not isinstance(node, Node):
            return False

    if node.type != "MemberExpression":
        return False

    return is_plain_require_call(node.get("object"))


def is_commonjs_import(declaration: Optional[Node]) -> bool:
    """
    Detect if every declarator imports a module.

    Matches:
    - const fs = require('fs');
    - const readFile = require('fs').readFile;
    - const a = require('a'), b = require('b').b;
    """
    inits = _initializers(declaration)
    if inits is None:
        return False

    return all(
        is_plain_require_call(init) or is_selective_require(init)
        for init in inits
    )


def is_safe_initializer(node: Optional[Node]) -> bool:
    """
    Detect a value that is built without running user code.

    Matches function literals, literals, template strings,
    Symbol(...) and Object.freeze(...).
    """
    if not isinstance(node, Node):
        return False

    if node.type in SAFE_INITIALIZER_TYPES:
        return True

    return (
        is_function_call(node, "Symbol")
        or is_member_function_call(node, "Object", "freeze")
    )


def is_safe_declaration(declaration: Optional[Node]) -> bool:
    """Detect if every declarator has a side-effect-free initializer."""
    inits = _initializers(declaration)
    if inits is None:
        return False

    return all(is_safe_initializer(init) for init in inits)
