"""
Policy configuration.

This module provides the PolicyConfig dataclass holding the constants the
policy is evaluated against (workspace scope, aggregator package, family
table, ...) and the functions that read overrides from the
[tool.rad-import-policy] section of a project's pyproject.toml.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .families import FAMILY_MAP
from .types import ReasonCode
from .utils import warn_once

CONFIG_SECTION = "rad-import-policy"

DEFAULT_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs", ".mts", ".cts", ".vue")


@dataclass(frozen=True)
class PolicyConfig:
    """
    Constants the import policy is evaluated against.

    Attributes:
        workspace_scope: Scope prefix of canonical workspace imports (e.g. "@adddog")
        aggregator_package: Design-system package whose root is a barrel module
        component_extension: File extension of component modules, without the dot
        deprecated_segment: Path segment that is no longer allowed in deep imports
        canonical_segment: Path segment that replaces the deprecated one
        families: Ordered (prefix, directory) family table
        extensions: Source file suffixes the linter inspects
        exclude: Extra directory/file name patterns the linter skips
        ignore: Reason codes that are neither reported nor fixed
    """

    workspace_scope: str = "@adddog"
    aggregator_package: str = "@adddog/shadcn-vue-design-system"
    component_extension: str = "vue"
    deprecated_segment: str = "/components/ui/"
    canonical_segment: str = "/components/rad/"
    families: tuple[tuple[str, str], ...] = FAMILY_MAP
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    exclude: tuple[str, ...] = ()
    ignore: frozenset[ReasonCode] = frozenset()

    def with_ignored(self, codes: list[str] | None) -> PolicyConfig:
        """Return a copy that additionally ignores the given reason codes."""
        if not codes:
            return self
        extra = {parse_reason_code(code) for code in codes}
        return replace(self, ignore=self.ignore | extra)


DEFAULT_CONFIG = PolicyConfig()


def parse_reason_code(value: str) -> ReasonCode:
    """
    Convert a reason code string (e.g. "barrelImport") to a ReasonCode.

    Raises:
        ValueError: If the string names no known reason code
    """
    try:
        return ReasonCode(value)
    except ValueError as err:
        valid = ", ".join(code.value for code in ReasonCode)
        raise ValueError(f"Unknown reason code: {value!r}. Expected one of: {valid}") from err


def _expect_str(key: str, value: Any) -> str:
    if not isinstance(value, str) or not value:
        raise ValueError(f"[tool.{CONFIG_SECTION}] {key} must be a non-empty string")
    return value


def _expect_str_list(key: str, value: Any) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"[tool.{CONFIG_SECTION}] {key} must be a list of strings")
    return value


def _parse_families(value: Any) -> tuple[tuple[str, str], ...]:
    if not isinstance(value, list):
        raise ValueError(f"[tool.{CONFIG_SECTION}] families must be a list of [prefix, directory]")
    families = []
    for entry in value:
        if (
            not isinstance(entry, list)
            or len(entry) != 2
            or not all(isinstance(part, str) and part for part in entry)
        ):
            raise ValueError(
                f"[tool.{CONFIG_SECTION}] invalid families entry {entry!r}, "
                "expected [prefix, directory]"
            )
        families.append((entry[0], entry[1]))
    return tuple(families)


def parse_config(section: dict[str, Any]) -> PolicyConfig:
    """
    Build a PolicyConfig from the contents of a [tool.rad-import-policy] table.

    Keys may be written with dashes or underscores. Unknown keys produce a
    warning on stderr and are otherwise ignored.

    Args:
        section: Parsed TOML table

    Returns:
        PolicyConfig with the table's values applied over the defaults

    Raises:
        ValueError: If a value has the wrong type or names an unknown reason code
    """
    overrides: dict[str, Any] = {}

    for raw_key, value in section.items():
        key = raw_key.replace("-", "_")
        if key in ("workspace_scope", "aggregator_package"):
            # Both are joined with "/" when building specifiers
            overrides[key] = _expect_str(raw_key, value).rstrip("/")
        elif key in ("deprecated_segment", "canonical_segment"):
            overrides[key] = _expect_str(raw_key, value)
        elif key == "component_extension":
            overrides[key] = _expect_str(raw_key, value).lstrip(".")
        elif key == "extensions":
            overrides[key] = tuple(
                ext if ext.startswith(".") else f".{ext}"
                for ext in _expect_str_list(raw_key, value)
            )
        elif key == "exclude":
            overrides[key] = tuple(_expect_str_list(raw_key, value))
        elif key == "ignore":
            overrides[key] = frozenset(
                parse_reason_code(code) for code in _expect_str_list(raw_key, value)
            )
        elif key == "families":
            overrides[key] = _parse_families(value)
        else:
            warn_once(f"Warning: Unknown key in [tool.{CONFIG_SECTION}]: {raw_key}")

    return replace(DEFAULT_CONFIG, **overrides)


def load_config(project_root: Path | None) -> PolicyConfig:
    """
    Load the policy configuration for a project.

    Reads [tool.rad-import-policy] from project_root/pyproject.toml. A missing
    file or missing section yields the default configuration.

    Args:
        project_root: Directory containing pyproject.toml, or None for defaults

    Returns:
        The effective PolicyConfig

    Raises:
        ValueError: If pyproject.toml is not valid TOML or the section is invalid
    """
    if project_root is None:
        return DEFAULT_CONFIG

    pyproject_path = project_root / "pyproject.toml"
    if not pyproject_path.exists():
        return DEFAULT_CONFIG

    try:
        data = tomllib.loads(pyproject_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Could not parse {pyproject_path}: {e}") from e

    section = data.get("tool", {}).get(CONFIG_SECTION)
    if section is None:
        return DEFAULT_CONFIG
    if not isinstance(section, dict):
        raise ValueError(f"[tool.{CONFIG_SECTION}] in {pyproject_path} must be a table")

    return parse_config(section)
