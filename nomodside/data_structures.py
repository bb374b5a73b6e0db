"""
Data structures for rule output.

All structures are immutable and deterministic.
"""
from dataclasses import dataclass
from typing import Optional

from .nodes import Node


@dataclass(frozen=True)
class Report:
    """A policy violation emitted by a rule, pointing at the offending node."""

    node: Node
    message: str


@dataclass(frozen=True)
class Finding:
    """A report resolved to a position in a file."""

    file_path: str
    line: Optional[int]
    column: Optional[int]
    rule: str
    message: str
    node_type: str

    @property
    def location(self) -> str:
        """path:line:column, dropping the parts that are unknown."""
        parts = [self.file_path]
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        return ":".join(parts)

    def to_dict(self) -> dict:
        return {
            "file": self.file_path,
            "line": self.line,
            "column": self.column,
            "rule": self.rule,
            "message": self.message,
            "nodeType": self.node_type,
        }
