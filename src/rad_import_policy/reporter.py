"""
Policy evaluation for a single import statement.

This module ties the specifier checks and the barrel splitter together and
produces the final verdict for one statement. Statements are independent:
nothing is remembered between calls.
"""

from __future__ import annotations

from .barrel import split_barrel
from .config import DEFAULT_CONFIG, PolicyConfig
from .paths import classify_path, match_deprecated_subpath
from .rewrite import retarget_statement
from .types import (
    CLEAN,
    Diagnostic,
    ImportStatement,
    ReasonCode,
    Verdict,
    ViolationNoFix,
    ViolationWithFix,
)


def _path_message(reason_code: ReasonCode, replacement_source: str) -> str:
    if reason_code is ReasonCode.UI_DEEP_IMPORT:
        return f"Import from components/ui/; use components/rad/ instead ({replacement_source})"
    if reason_code is ReasonCode.RELATIVE_PACKAGE_IMPORT:
        return f"Don't include ../packages in import path; use {replacement_source}"
    return f"Don't import another package through its src directory; use {replacement_source}"


def check_import(statement: ImportStatement, config: PolicyConfig | None = None) -> Verdict:
    """
    Evaluate one import statement against the policy.

    Candidate violations are gathered in precedence order: deprecated subpath,
    package-root traversal, internal-src traversal, barrel import. Every
    candidate is reported, and the rewrite (if any) comes from the first one.
    Reason codes listed in config.ignore are discarded up front.

    Args:
        statement: Statement to evaluate
        config: Policy configuration (defaults to DEFAULT_CONFIG)

    Returns:
        CLEAN, ViolationNoFix or ViolationWithFix
    """
    if config is None:
        config = DEFAULT_CONFIG

    source = statement.source
    if not isinstance(source, str):
        return CLEAN

    # (diagnostic, replacements, replacement_source); empty replacements mean no fix
    candidates: list[tuple[Diagnostic, tuple[str, ...], str | None]] = []

    deprecated = match_deprecated_subpath(source, config)
    path_matches = [deprecated] if deprecated is not None else []
    path_matches.extend(classify_path(source, config))

    for match in path_matches:
        candidates.append(
            (
                Diagnostic(
                    match.reason_code,
                    _path_message(match.reason_code, match.replacement_source),
                ),
                (retarget_statement(statement, match.replacement_source),),
                match.replacement_source,
            )
        )

    if source == config.aggregator_package:
        barrel = split_barrel(statement, config)
        for diagnostic in barrel.diagnostics:
            candidates.append((diagnostic, barrel.replacements, None))

    candidates = [c for c in candidates if c[0].reason_code not in config.ignore]
    if not candidates:
        return CLEAN

    diagnostics = tuple(diagnostic for diagnostic, _, _ in candidates)
    _, replacements, replacement_source = candidates[0]
    if not replacements:
        return ViolationNoFix(diagnostics)
    return ViolationWithFix(diagnostics, replacements, replacement_source)
