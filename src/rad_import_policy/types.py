"""
Type definitions for the package.

This module contains the core data structures used throughout the package
for representing import statements, policy diagnostics and the verdicts
produced when an import statement is checked against the policy.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Literal, Union

DEFAULT_IMPORT = "default"
NAMESPACE_IMPORT = "*"


class ReasonCode(Enum):
    """
    Reasons an import statement can violate the policy.

    Attributes:
        BARREL_IMPORT: Named import from the design-system aggregator package
        UI_DEEP_IMPORT: Deep import through the deprecated components/ui/ subpath
        RELATIVE_PACKAGE_IMPORT: Relative path that climbs into a packages/ root
        PACKAGE_IMPORT_WITH_SRC: Relative path that names a package's src/ directory
    """

    BARREL_IMPORT = "barrelImport"
    UI_DEEP_IMPORT = "uiDeepImport"
    RELATIVE_PACKAGE_IMPORT = "relativePackageImport"
    PACKAGE_IMPORT_WITH_SRC = "packageImportWithSrc"

    @property
    def rule(self) -> str:
        """Name of the lint rule this reason code belongs to."""
        if self in (ReasonCode.BARREL_IMPORT, ReasonCode.UI_DEEP_IMPORT):
            return "enforce-design-system-rad-imports"
        return "no-incorrect-pkg-imports"


@dataclass(frozen=True)
class ImportBinding:
    """
    One element of an import statement's specifier list.

    Attributes:
        imported_name: Name as exported by the source module ("default" for
            default imports, "*" for namespace imports)
        local_name: Name bound in the importing file
        is_type_only: Whether this binding carries its own `type` marker
        kind: One of "named", "default" or "namespace"
    """

    imported_name: str
    local_name: str
    is_type_only: bool = False
    kind: Literal["named", "default", "namespace"] = "named"

    @classmethod
    def named(
        cls, imported_name: str, local_name: str | None = None, is_type_only: bool = False
    ) -> ImportBinding:
        return cls(imported_name, local_name or imported_name, is_type_only, "named")

    @classmethod
    def default(cls, local_name: str) -> ImportBinding:
        return cls(DEFAULT_IMPORT, local_name, False, "default")

    @classmethod
    def namespace(cls, local_name: str) -> ImportBinding:
        return cls(NAMESPACE_IMPORT, local_name, False, "namespace")

    @property
    def is_aliased(self) -> bool:
        return self.local_name != self.imported_name


@dataclass(frozen=True)
class ImportStatement:
    """
    A single import declaration, the unit the policy is evaluated on.

    Attributes:
        source: The module specifier. Anything that is not a string (a dynamic
            specifier) is never flagged.
        bindings: Ordered bindings; the order determines the order of any
            replacement statements
        is_type_only: Whether the whole declaration is `import type`
    """

    source: str
    bindings: tuple[ImportBinding, ...] = ()
    is_type_only: bool = False


@dataclass(frozen=True)
class Diagnostic:
    """A reason code together with its human-readable message."""

    reason_code: ReasonCode
    message: str


@dataclass(frozen=True)
class Clean:
    """The statement satisfies the policy."""

    diagnostics: tuple[Diagnostic, ...] = ()
    replacements: tuple[str, ...] = ()


@dataclass(frozen=True)
class ViolationNoFix:
    """The statement violates the policy and no safe rewrite exists."""

    diagnostics: tuple[Diagnostic, ...]
    replacements: tuple[str, ...] = ()

    @property
    def reason_codes(self) -> tuple[ReasonCode, ...]:
        return tuple(d.reason_code for d in self.diagnostics)


@dataclass(frozen=True)
class ViolationWithFix:
    """
    The statement violates the policy and can be rewritten.

    Attributes:
        diagnostics: Every reason code that fired, in precedence order
        replacements: Full replacement statements, in output order
        replacement_source: New module specifier when the rewrite only changes
            the specifier, None when the statement shape changes
    """

    diagnostics: tuple[Diagnostic, ...]
    replacements: tuple[str, ...]
    replacement_source: str | None = None

    @property
    def reason_codes(self) -> tuple[ReasonCode, ...]:
        return tuple(d.reason_code for d in self.diagnostics)


Verdict = Union[Clean, ViolationNoFix, ViolationWithFix]

CLEAN = Clean()


@dataclass(frozen=True)
class ParsedImport:
    """
    An import declaration located in source text.

    Attributes:
        statement: Structured view of the declaration
        text: The declaration exactly as written
        start: Offset of the first character of the declaration
        end: Offset just past the declaration (including any semicolon)
        source_start: Offset of the opening quote of the specifier literal
        source_end: Offset just past the closing quote of the specifier literal
        quote: Quote character used by the author
        line_number: 1-based line on which the declaration starts
        indent: Whitespace preceding the declaration on its first line
    """

    statement: ImportStatement
    text: str
    start: int
    end: int
    source_start: int
    source_end: int
    quote: str = '"'
    line_number: int = 1
    indent: str = ""


@dataclass
class LintResult:
    """
    A policy violation found in a file.

    Attributes:
        file_path: File containing the import, None for in-memory text
        parsed: The offending declaration
        verdict: Non-clean verdict for the declaration
    """

    parsed: ParsedImport
    verdict: ViolationNoFix | ViolationWithFix
    file_path: Path | None = None

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return self.verdict.diagnostics

    @property
    def fixable(self) -> bool:
        return isinstance(self.verdict, ViolationWithFix)

    @property
    def line_number(self) -> int:
        return self.parsed.line_number
