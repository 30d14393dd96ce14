"""
Replacement statement synthesis.

Turns structured import statements back into source text. Output always uses
double-quoted specifiers and a trailing semicolon.
"""

from __future__ import annotations

import re
from dataclasses import replace

from .config import DEFAULT_CONFIG, PolicyConfig
from .types import ImportBinding, ImportStatement

_IDENTIFIER = re.compile(r"^[A-Za-z_$][\w$]*$")


def is_identifier(name: str) -> bool:
    return bool(_IDENTIFIER.match(name))


def _quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def _render_named(binding: ImportBinding) -> str:
    imported = binding.imported_name
    if not is_identifier(imported):
        imported = _quote(imported)
    text = imported if not binding.is_aliased else f"{imported} as {binding.local_name}"
    return f"type {text}" if binding.is_type_only else text


def render_statement(statement: ImportStatement) -> str:
    """
    Render an import statement as source text.

    Default and namespace bindings come first, followed by a brace list of
    named bindings, matching the order the grammar requires.

    Args:
        statement: Statement to render

    Returns:
        A single-line import declaration
    """
    type_prefix = "type " if statement.is_type_only else ""
    source = _quote(statement.source)

    if not statement.bindings:
        return f"import {source};"

    clauses: list[str] = []
    named: list[str] = []
    for binding in statement.bindings:
        if binding.kind == "default":
            clauses.append(binding.local_name)
        elif binding.kind == "namespace":
            clauses.append(f"* as {binding.local_name}")
        else:
            named.append(_render_named(binding))
    if named:
        clauses.append("{ " + ", ".join(named) + " }")

    return f"import {type_prefix}{', '.join(clauses)} from {source};"


def retarget_statement(statement: ImportStatement, new_source: str) -> str:
    """Render the statement with only its module specifier replaced."""
    return render_statement(replace(statement, source=new_source))


def build_component_path(
    imported_name: str, directory: str, config: PolicyConfig = DEFAULT_CONFIG
) -> str:
    """
    Build the deep import path of a design-system component.

    Example:
        build_component_path("DialogTitle", "dialog") ->
        "@adddog/shadcn-vue-design-system/components/rad/dialog/DialogTitle.vue"
    """
    canonical = config.canonical_segment.strip("/")
    return (
        f"{config.aggregator_package}/{canonical}/{directory}/"
        f"{imported_name}.{config.component_extension}"
    )


def synthesize_component_import(
    binding: ImportBinding,
    directory: str,
    statement_is_type_only: bool = False,
    config: PolicyConfig = DEFAULT_CONFIG,
) -> str:
    """
    Build the replacement for one binding of a barrel import.

    Component modules only have a default export, so an unaliased binding
    becomes a default import under its own name and an aliased binding
    becomes `{ default as Alias }`.

    Args:
        binding: Named binding from the barrel import
        directory: Family directory resolved for the binding
        statement_is_type_only: Whether the original declaration was `import type`
        config: Policy configuration

    Returns:
        Replacement import declaration
    """
    path = _quote(build_component_path(binding.imported_name, directory, config))
    type_prefix = "type " if statement_is_type_only or binding.is_type_only else ""

    if binding.is_aliased:
        return f"import {type_prefix}{{ default as {binding.local_name} }} from {path};"
    return f"import {type_prefix}{binding.imported_name} from {path};"
