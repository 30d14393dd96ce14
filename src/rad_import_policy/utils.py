"""
Utility functions for project discovery and diagnostics output.
"""

from __future__ import annotations

import sys
from pathlib import Path

# Warning messages already printed during this process
_logged_warnings: set[str] = set()


def warn_once(message: str) -> None:
    """
    Print a warning to stderr unless the same message was printed before.

    Args:
        message: Full warning text
    """
    if message in _logged_warnings:
        return
    _logged_warnings.add(message)
    print(message, file=sys.stderr)


def find_project_root(start_path: Path | None = None) -> Path | None:
    """
    Find the directory whose pyproject.toml holds the policy configuration.

    The nearest pyproject.toml at or above start_path wins, so a workspace
    package with its own [tool.rad-import-policy] table overrides the
    workspace root.

    Args:
        start_path: Directory to start from (default: current directory)

    Returns:
        Directory containing pyproject.toml, or None if there is none up to
        the filesystem root
    """
    current = Path(start_path or Path.cwd()).resolve()
    for candidate in (current, *current.parents):
        if (candidate / "pyproject.toml").is_file():
            return candidate
    return None


def find_lint_target(project_root: Path) -> Path:
    """
    Pick the directory to lint when no paths are given.

    Uses project_root/src when it exists, otherwise the project root itself.

    Args:
        project_root: Root directory of the project

    Returns:
        Directory to lint
    """
    src_dir = project_root / "src"
    if src_dir.is_dir():
        return src_dir
    return project_root
