"""
Import policy linting for files and directory trees.

This module provides the ImportPolicyLinter class which is responsible for:
- Finding all JS/TS/Vue source files in a directory tree
- Extracting import declarations from each file
- Evaluating every declaration against the import policy
- Applying the resulting rewrites back to the source text
"""

from __future__ import annotations

from pathlib import Path

from .config import DEFAULT_CONFIG, PolicyConfig
from .parser import extract_imports
from .reporter import check_import
from .types import Clean, LintResult, ViolationWithFix
from .utils import warn_once

EXCLUDE_PATTERNS = {
    "node_modules",
    ".git",
    "dist",
    "build",
    ".nuxt",
    ".output",
    "coverage",
    ".venv",
    ".turbo",
}


class ImportPolicyLinter:
    """
    Lints and fixes import declarations in JS/TS/Vue sources.

    Attributes:
        project_root: Root directory of the project, used to shorten reported paths
        config: Policy configuration in effect
        exclude_patterns: Directory/file name patterns to skip while searching
    """

    def __init__(
        self,
        project_root: Path,
        config: PolicyConfig | None = None,
        exclude_patterns: list[str] | None = None,
    ) -> None:
        """
        Initialize the linter.

        Args:
            project_root: Root directory of the project
            config: Policy configuration (default: DEFAULT_CONFIG)
            exclude_patterns: Additional patterns to skip (e.g. ['__fixtures__'])
        """
        self.project_root = project_root.resolve()
        self.config = config or DEFAULT_CONFIG
        self.exclude_patterns = (
            EXCLUDE_PATTERNS | set(self.config.exclude) | set(exclude_patterns or [])
        )

    def _is_excluded(self, path: Path) -> bool:
        for part in path.parts:
            if part in self.exclude_patterns:
                return True
            if ".egg-info" in part:
                return True
        return False

    def find_source_files(self, directory: Path) -> list[Path]:
        """
        Recursively find all lintable source files in a directory.

        Args:
            directory: Directory to search

        Returns:
            Sorted list of files whose suffix is one of config.extensions

        Raises:
            FileNotFoundError: If the directory does not exist
        """
        if not directory.exists():
            raise FileNotFoundError(f"Path not found: {directory}")

        if directory.is_file():
            return [directory]

        source_files = []
        for path in directory.rglob("*"):
            if not path.is_file() or path.suffix not in self.config.extensions:
                continue
            if self._is_excluded(path.relative_to(directory)):
                continue
            source_files.append(path)

        return sorted(source_files)

    def lint_text(self, text: str, file_path: Path | None = None) -> list[LintResult]:
        """
        Check every import declaration in a piece of source text.

        Args:
            text: Source text
            file_path: File the text came from, recorded on each result

        Returns:
            One LintResult per declaration that violates the policy
        """
        results = []
        for parsed in extract_imports(text):
            verdict = check_import(parsed.statement, self.config)
            if isinstance(verdict, Clean):
                continue
            results.append(LintResult(parsed=parsed, verdict=verdict, file_path=file_path))
        return results

    def _read(self, file_path: Path) -> str | None:
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            warn_once(f"Warning: Could not read {file_path}: {e}")
            return None

    def lint_file(self, file_path: Path) -> list[LintResult]:
        """
        Check every import declaration in a file.

        Files that cannot be read or decoded produce a warning on stderr and
        no results.

        Args:
            file_path: File to lint

        Returns:
            LintResult objects for the file's violations
        """
        text = self._read(file_path)
        if text is None:
            return []
        return self.lint_text(text, file_path)

    def apply_fixes(self, text: str, results: list[LintResult]) -> str:
        """
        Apply every available rewrite to the text.

        Rewrites that only change the module specifier replace the string
        literal and keep the author's quote character. Barrel splits replace
        the whole declaration with one line per replacement statement.

        Args:
            text: Source text the results were computed from
            results: Results from lint_text on the same text

        Returns:
            The rewritten text
        """
        fixable = [r for r in results if isinstance(r.verdict, ViolationWithFix)]
        fixable.sort(key=lambda r: r.parsed.start, reverse=True)

        limit = len(text)
        for result in fixable:
            parsed = result.parsed
            verdict = result.verdict
            if parsed.end > limit:
                # Overlaps a rewrite that was already applied
                continue

            if verdict.replacement_source is not None:
                literal = f"{parsed.quote}{verdict.replacement_source}{parsed.quote}"
                text = text[: parsed.source_start] + literal + text[parsed.source_end :]
            else:
                replacement = f"\n{parsed.indent}".join(verdict.replacements)
                text = text[: parsed.start] + replacement + text[parsed.end :]
            limit = parsed.start

        return text

    def fix_file(self, file_path: Path) -> list[LintResult]:
        """
        Rewrite a file in place and report what is left.

        Args:
            file_path: File to fix

        Returns:
            Violations remaining after the fix (those with no safe rewrite)
        """
        text = self._read(file_path)
        if text is None:
            return []

        results = self.lint_text(text, file_path)
        fixed = self.apply_fixes(text, results)
        if fixed == text:
            return results

        file_path.write_text(fixed, encoding="utf-8")
        return self.lint_text(fixed, file_path)

    def display_path(self, file_path: Path | None) -> str:
        """Path relative to the project root when possible."""
        if file_path is None:
            return "<text>"
        resolved = file_path.resolve()
        if resolved.is_relative_to(self.project_root):
            return str(resolved.relative_to(self.project_root))
        return str(file_path)
