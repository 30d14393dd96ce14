"""rad-import-policy - Enforce canonical design-system and workspace package import paths."""

from .barrel import split_barrel
from .config import DEFAULT_CONFIG, PolicyConfig, load_config
from .families import FAMILY_MAP, resolve_family
from .linter import ImportPolicyLinter
from .parser import extract_imports
from .paths import classify_path
from .reporter import check_import
from .types import (
    CLEAN,
    Clean,
    Diagnostic,
    ImportBinding,
    ImportStatement,
    LintResult,
    ParsedImport,
    ReasonCode,
    Verdict,
    ViolationNoFix,
    ViolationWithFix,
)
from .utils import find_project_root

__all__ = (
    "CLEAN",
    "DEFAULT_CONFIG",
    "FAMILY_MAP",
    "Clean",
    "Diagnostic",
    "ImportBinding",
    "ImportPolicyLinter",
    "ImportStatement",
    "LintResult",
    "ParsedImport",
    "PolicyConfig",
    "ReasonCode",
    "Verdict",
    "ViolationNoFix",
    "ViolationWithFix",
    "check_import",
    "classify_path",
    "extract_imports",
    "find_project_root",
    "load_config",
    "resolve_family",
    "split_barrel",
)
