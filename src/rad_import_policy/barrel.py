"""
Barrel import splitting.

A named import from the aggregator package root pulls every component through
the barrel module. This module decides whether such an import can be split
into one deep component import per binding.
"""

from __future__ import annotations

from .config import DEFAULT_CONFIG, PolicyConfig
from .families import resolve_family
from .rewrite import is_identifier, synthesize_component_import
from .types import (
    CLEAN,
    Diagnostic,
    ImportStatement,
    ReasonCode,
    Verdict,
    ViolationNoFix,
    ViolationWithFix,
)


def barrel_diagnostic(config: PolicyConfig = DEFAULT_CONFIG) -> Diagnostic:
    return Diagnostic(
        ReasonCode.BARREL_IMPORT,
        f"Import from {config.aggregator_package} barrel; use deep rad/ imports instead",
    )


def split_barrel(statement: ImportStatement, config: PolicyConfig = DEFAULT_CONFIG) -> Verdict:
    """
    Split an aggregator import into per-component imports.

    The split is all-or-nothing: if any binding cannot be given a deterministic
    target module the statement is reported without a fix, because a partial
    rewrite would drop that binding.

    Args:
        statement: Import whose source is exactly the aggregator package
        config: Policy configuration

    Returns:
        CLEAN for side-effect or default-only imports, ViolationNoFix when no
        safe split exists, ViolationWithFix with one statement per binding
        (in binding order) otherwise
    """
    diagnostics = (barrel_diagnostic(config),)

    # A namespace import aliases the whole module surface
    if any(binding.kind == "namespace" for binding in statement.bindings):
        return ViolationNoFix(diagnostics)

    named = [binding for binding in statement.bindings if binding.kind == "named"]
    if not named:
        return CLEAN

    # The barrel's own default export has no family to move to
    if len(named) != len(statement.bindings):
        return ViolationNoFix(diagnostics)

    # Each name ends up as written in a declaration and a module path
    if not all(
        is_identifier(binding.imported_name) and is_identifier(binding.local_name)
        for binding in named
    ):
        return ViolationNoFix(diagnostics)

    directories = [resolve_family(binding.imported_name, config.families) for binding in named]
    if any(directory is None for directory in directories):
        return ViolationNoFix(diagnostics)

    replacements = tuple(
        synthesize_component_import(binding, directory, statement.is_type_only, config)
        for binding, directory in zip(named, directories)
    )
    return ViolationWithFix(diagnostics, replacements)
