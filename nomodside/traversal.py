"""
Traversal - host side of the rule interface.

Walks a tree once and hands each node to the handler registered
for its type. Collects whatever the handlers report.
"""
from typing import Dict, Iterator, List, Tuple

from .data_structures import Report
from .nodes import Node
from .rules import RULES, Rule


def walk(root: Node) -> Iterator[Node]:
    """Depth-first pre-order, children in source field order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(list(node.children())))


class ReportCollector:
    """RuleContext that keeps reports in emission order."""

    def __init__(self):
        self.reports: List[Report] = []

    def report(self, node: Node, message: str) -> None:
        self.reports.append(Report(node=node, message=message))


def run_rule(root: Node, rule: Rule) -> List[Report]:
    collector = ReportCollector()
    handlers = rule(collector)

    for node in walk(root):
        handler = handlers.get(node.type)
        if handler is not None:
            handler(node)

    return collector.reports


def run_rules(
    root: Node,
    rules: Dict[str, Rule] = RULES,
) -> List[Tuple[str, Report]]:
    results = []
    for name, rule in rules.items():
        results.extend((name, report) for report in run_rule(root, rule))
    return results
