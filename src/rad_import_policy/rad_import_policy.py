"""
Main entry point for the rad-import-policy package.

This module provides the command-line interface for the package.
It can be invoked via:
- The `rad-import-policy` command (after installation)
- `python -m rad_import_policy`
- Direct import and call to main()
"""

from __future__ import annotations

import sys
from pathlib import Path

from .config import load_config
from .linter import ImportPolicyLinter
from .types import LintResult
from .utils import find_lint_target, find_project_root


def format_result(result: LintResult, display_path: str) -> list[str]:
    """Format one result as `<path>:<line>: <message> [<rule>/<code>]` lines."""
    suffix = " (fixable)" if result.fixable else ""
    return [
        f"{display_path}:{result.line_number}: {d.message} "
        f"[{d.reason_code.rule}/{d.reason_code.value}]{suffix}"
        for d in result.diagnostics
    ]


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the import policy linter.

    Parses command-line arguments, lints (and optionally fixes) every source
    file under the given paths and prints one line per diagnostic.

    Returns:
        0 when no problems remain, 1 when problems remain, 2 on errors
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="Check and fix design-system and workspace package import paths"
    )
    parser.add_argument(
        "paths",
        nargs="*",
        type=Path,
        help="Files or directories to lint (default: project_root/src, or project_root)",
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        help="Root directory of the project (auto-detected from pyproject.toml if not specified)",
    )
    parser.add_argument(
        "--fix",
        action="store_true",
        help="Rewrite fixable imports in place",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        dest="ignore",
        metavar="CODE",
        help="Reason code to ignore (e.g. 'barrelImport'). Can be specified multiple times.",
    )
    parser.add_argument(
        "--exclude-pattern",
        action="append",
        dest="exclude_patterns",
        help="Additional directory/file patterns to skip (e.g. '__fixtures__'). Can be specified multiple times.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only print diagnostics, no summary",
    )

    args = parser.parse_args(argv)

    try:
        if args.project_root:
            project_root = Path(args.project_root).resolve()
        else:
            project_root = find_project_root() or Path.cwd().resolve()

        config = load_config(project_root).with_ignored(args.ignore)
        linter = ImportPolicyLinter(
            project_root, config, exclude_patterns=args.exclude_patterns
        )

        targets = args.paths or [find_lint_target(project_root)]
        files: list[Path] = []
        for target in targets:
            files.extend(linter.find_source_files(Path(target)))

        problems = 0
        fixable = 0
        files_with_problems = 0
        for file_path in files:
            if args.fix:
                before = linter.lint_file(file_path)
                results = linter.fix_file(file_path)
                fixed = sum(1 for r in before if r.fixable) - sum(1 for r in results if r.fixable)
                if fixed > 0 and not args.quiet:
                    print(f"Fixed {fixed} import(s) in {linter.display_path(file_path)}")
            else:
                results = linter.lint_file(file_path)

            if not results:
                continue
            files_with_problems += 1
            for result in results:
                problems += 1
                fixable += int(result.fixable)
                for line in format_result(result, linter.display_path(file_path)):
                    print(line)

        if not args.quiet:
            print(
                f"Found {problems} problem(s) in {files_with_problems} file(s) "
                f"({fixable} fixable)."
            )

        return 1 if problems else 0

    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        import traceback

        traceback.print_exc()
        return 2


if __name__ == "__main__":
    sys.exit(main())
