"""
Side-Effect Rule

Reporting policy, keyed by statement type.
Every handler asks the scope detector first; nested statements are
not this rule's concern and are ignored.

Pipeline per node: top-level? → statement policy → report (0 or 1)
"""
from typing import Callable, Dict, Protocol

from .detectors import (
    is_commonjs_import,
    is_export_assignment,
    is_safe_declaration,
    is_top_level,
)
from .nodes import Node

RULE_NAME = "no-module-side-effect"

GENERIC_MESSAGE = "Side effects on the top level of the module are not allowed."
STATEFUL_MESSAGE = (
    "Unexpected variable declaration on the top level of the module"
    " - the module might be stateful."
)

# Always a side effect when executed at load time.
CONTROL_FLOW_STATEMENTS = (
    "IfStatement",
    "ForStatement",
    "ForInStatement",
    "ForOfStatement",
    "WhileStatement",
    "DoWhileStatement",
    "SwitchStatement",
)


class RuleContext(Protocol):
    def report(self, node: Node, message: str) -> None:
        ...


Handler = Callable[[Node], None]
Rule = Callable[[RuleContext], Dict[str, Handler]]


def _default_report(node: Node, context: RuleContext) -> None:
    context.report(node, GENERIC_MESSAGE)


def _check_expression(node: Node, context: RuleContext) -> None:
    if is_export_assignment(node.get("expression")):
        return

    _default_report(node, context)


def _check_declaration(node: Node, context: RuleContext) -> None:
    if node.get("kind") == "const":
        if is_commonjs_import(node) or is_safe_declaration(node):
            return

    context.report(node, STATEFUL_MESSAGE)


def _side_effect_check(
    context: RuleContext,
    callback: Callable[[Node, RuleContext], None] = _default_report,
) -> Handler:
    def check(node: Node) -> None:
        if is_top_level(node):
            callback(node, context)

    return check


def no_module_side_effect(context: RuleContext) -> Dict[str, Handler]:
    """Build the handler table for one traversal."""
    handlers = {
        statement: _side_effect_check(context)
        for statement in CONTROL_FLOW_STATEMENTS
    }
    handlers["ExpressionStatement"] = _side_effect_check(context, _check_expression)
    handlers["VariableDeclaration"] = _side_effect_check(context, _check_declaration)
    return handlers


RULES: Dict[str, Rule] = {
    RULE_NAME: no_module_side_effect,
}
