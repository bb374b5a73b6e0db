"""
Orchestrator

Glue layer. Files in, findings out.
No classification logic lives here.
"""
import logging
import os
from pathlib import Path
from typing import Iterable, Iterator, List

from .data_structures import Finding
from .git_history import GitWorkspace
from .nodes import Node, ParseError, load_estree_json, parse_source
from .traversal import run_rules

logger = logging.getLogger(__name__)

SOURCE_SUFFIXES = (".js", ".cjs", ".mjs")
MODULE_SUFFIXES = (".mjs",)
# Either flavour: CommonJS script first, ES module as fallback.
AMBIGUOUS_SUFFIXES = (".js",)
ESTREE_SUFFIX = ".estree.json"

SKIP_DIRS = frozenset({"node_modules", "bower_components"})


def is_supported_file(path: Path) -> bool:
    name = path.name.lower()
    return name.endswith(ESTREE_SUFFIX) or name.endswith(SOURCE_SUFFIXES)


def load_tree(path: Path) -> Node:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Cannot read {path}: {e}") from e

    if path.name.lower().endswith(ESTREE_SUFFIX):
        return load_estree_json(text)

    suffix = path.suffix.lower()
    if suffix not in AMBIGUOUS_SUFFIXES:
        return parse_source(text, module=suffix in MODULE_SUFFIXES)

    try:
        return parse_source(text)
    except ParseError as script_error:
        try:
            root = parse_source(text, module=True)
        except ParseError:
            raise script_error
        logger.debug("Parsed %s as an ES module", path)
        return root


def check_tree(root: Node, file_path: str) -> List[Finding]:
    findings = [
        Finding(
            file_path=file_path,
            line=report.node.line,
            column=report.node.column,
            rule=rule_name,
            message=report.message,
            node_type=report.node.type,
        )
        for rule_name, report in run_rules(root)
    ]
    return sorted(findings, key=lambda f: (f.line or 0, f.column or 0))


def check_file(path: Path, display_path: str | None = None) -> List[Finding]:
    """
    Check a single file.

    Unparsable files are skipped with a warning, never fatal.
    """
    display_path = display_path or str(path)

    try:
        root = load_tree(path)
    except ParseError as e:
        logger.warning("Skipping %s: %s", display_path, e)
        return []

    findings = check_tree(root, display_path)
    logger.debug("Checked %s: %d finding(s)", display_path, len(findings))
    return findings


def iter_source_files(root: Path) -> Iterator[Path]:
    """Supported files under root, sorted. Hidden and vendored dirs are never entered."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(
            d for d in dirnames if not d.startswith(".") and d not in SKIP_DIRS
        )
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if is_supported_file(path):
                yield path


def check_paths(paths: Iterable[Path]) -> List[Finding]:
    findings: List[Finding] = []

    for path in paths:
        path = Path(path)
        if not path.exists():
            raise ValueError(f"Path does not exist: {path}")

        if path.is_dir():
            for file_path in iter_source_files(path):
                findings.extend(check_file(file_path))
        else:
            findings.extend(check_file(path))

    return findings


def check_changed(repo_path: Path, since: str) -> List[Finding]:
    """Check only supported files changed since a git revision."""
    workspace = GitWorkspace(str(repo_path))
    findings: List[Finding] = []

    for rel_path in workspace.changed_files(since):
        path = workspace.top_level / rel_path
        if not is_supported_file(path) or not path.is_file():
            continue
        if any(p in SKIP_DIRS for p in Path(rel_path).parts):
            continue

        findings.extend(check_file(path, display_path=rel_path))

    return findings
