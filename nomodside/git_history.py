"""
Git change extraction.

Handles:
- Repository detection using subprocess (no GitPython dependency)
- Files changed since a revision, including the working tree
- Untracked files that git does not ignore

All operations are read-only and deterministic.
"""

import subprocess
from pathlib import Path
from typing import List, Tuple


class GitWorkspace:
    """Answers "which files changed?" for a Git working tree."""

    def __init__(self, repo_path: str):
        self.repo_path = Path(repo_path).resolve()

        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            cwd=self.repo_path,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        if result.returncode != 0:
            raise ValueError(f"Not a Git repository: {repo_path}")

        self.top_level = Path(result.stdout.strip()).resolve()

    def _run_git(self, args: List[str], check: bool = True) -> Tuple[int, str, str]:
        result = subprocess.run(
            ["git"] + args,
            cwd=self.top_level,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
        )
        if check and result.returncode != 0:
            raise RuntimeError(
                f"Git command failed: {' '.join(args)}\n{result.stderr}"
            )
        return result.returncode, result.stdout, result.stderr

    def changed_files(self, since: str) -> List[str]:
        """
        Files added, copied, modified or renamed since a revision.

        Compares the revision against the working tree, so uncommitted
        edits count. Untracked, non-ignored files are included too.

        Returns paths relative to the repository root, sorted.
        """
        _, diff_output, _ = self._run_git(
            ["diff", "--name-only", "--diff-filter=ACMR", since, "--"]
        )
        _, untracked_output, _ = self._run_git(
            ["ls-files", "--others", "--exclude-standard"]
        )

        paths = set()
        for line in diff_output.splitlines() + untracked_output.splitlines():
            line = line.strip()
            if line:
                paths.add(line)

        return sorted(paths)


def get_changed_files(repo_path: str, since: str) -> List[str]:
    workspace = GitWorkspace(repo_path)
    return workspace.changed_files(since)
