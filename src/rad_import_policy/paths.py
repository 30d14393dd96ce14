"""
Module specifier classification.

This module inspects the module specifier of an import on its own, without
looking at the imported bindings. It detects:
- deep imports through the deprecated components/ui/ subpath of the aggregator
- relative paths that climb into a workspace packages/ root
- relative paths that reach into another package's src/ directory
and works out the canonical specifier each of them should be rewritten to.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import DEFAULT_CONFIG, PolicyConfig
from .types import ReasonCode

ASCEND_SEGMENT = ".."
PACKAGES_SEGMENT = "packages"
SRC_SEGMENT = "src"


@dataclass(frozen=True)
class PathMatch:
    """
    A policy category a module specifier falls into.

    Attributes:
        reason_code: Category that matched
        replacement_source: Canonical specifier the import should use instead
    """

    reason_code: ReasonCode
    replacement_source: str


def _split_ascend(source: str) -> tuple[int, list[str]]:
    """
    Split a specifier into its number of leading ".." segments and the rest.

    Empty segments (from "//" or a trailing "/") are dropped from the rest.
    """
    segments = source.split("/")
    ascend = 0
    while ascend < len(segments) and segments[ascend] == ASCEND_SEGMENT:
        ascend += 1
    return ascend, [segment for segment in segments[ascend:] if segment]


def package_root_suffix(source: str) -> str | None:
    """
    Canonical package path for a relative import that climbs into packages/.

    "../../packages/logging/src" gives "logging" and
    "../../packages/type-gen-output/fake-type-gen" gives
    "type-gen-output/fake-type-gen".

    Returns:
        Path after "packages" up to any "src" segment, or None if the
        specifier is not a package-root traversal
    """
    ascend, rest = _split_ascend(source)
    if ascend == 0 or PACKAGES_SEGMENT not in rest:
        return None

    suffix = rest[rest.index(PACKAGES_SEGMENT) + 1 :]
    if SRC_SEGMENT in suffix:
        suffix = suffix[: suffix.index(SRC_SEGMENT)]
    if not suffix:
        return None
    return "/".join(suffix)


def internal_src_suffix(source: str) -> str | None:
    """
    Package name for a relative import that reaches into a package's src/.

    "../../logging/src/index" gives "logging".

    Returns:
        The segment immediately before "src", or None if the specifier is not
        an internal-src traversal
    """
    ascend, rest = _split_ascend(source)
    if ascend == 0 or SRC_SEGMENT not in rest:
        return None

    index = rest.index(SRC_SEGMENT)
    if index == 0 or rest[index - 1] == ".":
        return None
    return rest[index - 1]


def classify_path(source: str, config: PolicyConfig = DEFAULT_CONFIG) -> list[PathMatch]:
    """
    Classify a module specifier into the relative-traversal categories.

    Both checks are always evaluated, so a specifier such as
    "../../../packages/logging/src" yields two matches. Matches are returned
    with the package-root traversal first; its replacement is the one used
    when both apply.

    Args:
        source: Module specifier as written in the import
        config: Policy configuration providing the workspace scope

    Returns:
        Zero, one or two PathMatch objects
    """
    matches: list[PathMatch] = []

    package_suffix = package_root_suffix(source)
    if package_suffix is not None:
        matches.append(
            PathMatch(
                ReasonCode.RELATIVE_PACKAGE_IMPORT,
                f"{config.workspace_scope}/{package_suffix}",
            )
        )

    src_suffix = internal_src_suffix(source)
    if src_suffix is not None:
        matches.append(
            PathMatch(
                ReasonCode.PACKAGE_IMPORT_WITH_SRC,
                f"{config.workspace_scope}/{src_suffix}",
            )
        )

    return matches


def match_deprecated_subpath(
    source: str, config: PolicyConfig = DEFAULT_CONFIG
) -> PathMatch | None:
    """
    Check for a deep import through the deprecated subpath of the aggregator.

    Only the first occurrence of the deprecated segment is replaced; the rest
    of the specifier, including whether it ends in a file extension, is kept
    as written.

    Args:
        source: Module specifier as written in the import
        config: Policy configuration

    Returns:
        PathMatch with the corrected specifier, or None
    """
    if not source.startswith(f"{config.aggregator_package}/"):
        return None
    if config.deprecated_segment not in source:
        return None
    return PathMatch(
        ReasonCode.UI_DEEP_IMPORT,
        source.replace(config.deprecated_segment, config.canonical_segment, 1),
    )
