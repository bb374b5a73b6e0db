"""
Reporting Layer

Translate Findings to output text.
One line per finding, then a summary.
"""
import json
from typing import Callable, Dict, List

from .data_structures import Finding


def _line(finding: Finding) -> str:
    return f"{finding.location}  {finding.message}  [{finding.rule}]"


def _summary(findings: List[Finding]) -> str:
    if not findings:
        return "No problems found."
    noun = "problem" if len(findings) == 1 else "problems"
    return f"{len(findings)} {noun} found."


def format_text(findings: List[Finding]) -> str:
    lines = [_line(f) for f in findings]
    if lines:
        lines.append("")
    lines.append(_summary(findings))
    return "\n".join(lines)


def format_json(findings: List[Finding]) -> str:
    return json.dumps([f.to_dict() for f in findings], indent=2)


FORMATTERS: Dict[str, Callable[[List[Finding]], str]] = {
    "text": format_text,
    "json": format_json,
}
