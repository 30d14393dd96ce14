"""Tests for module specifier classification."""

from __future__ import annotations

import pytest

from rad_import_policy import PolicyConfig, ReasonCode, classify_path
from rad_import_policy.paths import (
    internal_src_suffix,
    match_deprecated_subpath,
    package_root_suffix,
)

PKG = "@adddog/shadcn-vue-design-system"


class TestPackageRootSuffix:
    """Tests for relative imports that climb into packages/."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("../../packages/env", "env"),
            ("../../../packages/logging/src", "logging"),
            ("../../../packages/logging/src/index", "logging"),
            ("../../../../../packages/type-gen-output/fake-type-gen", "type-gen-output/fake-type-gen"),
            ("../libs/packages/config", "config"),
            ("../../packages/env/", "env"),
        ],
    )
    def test_extracts_package_path(self, source: str, expected: str) -> None:
        """Test that the path after packages/ is extracted without src."""
        assert package_root_suffix(source) == expected

    @pytest.mark.parametrize(
        "source",
        [
            "./packages/env",
            "packages/env",
            "../../packages",
            "../../packages/src",
            "../utils",
            "@adddog/env",
        ],
    )
    def test_no_match(self, source: str) -> None:
        """Test specifiers that are not package-root traversals."""
        assert package_root_suffix(source) is None


class TestInternalSrcSuffix:
    """Tests for relative imports that name another package's src/."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("../../logging/src/index", "logging"),
            ("../../../config/src", "config"),
            ("../../../packages/logging/src", "logging"),
            ("../../../../../../type-utils/src", "type-utils"),
        ],
    )
    def test_extracts_segment_before_src(self, source: str, expected: str) -> None:
        """Test that the segment immediately before src is the package name."""
        assert internal_src_suffix(source) == expected

    @pytest.mark.parametrize(
        "source",
        [
            "./src/index",
            "./logging/src",
            "../src/index",
            "../../utils",
            "logging/src",
        ],
    )
    def test_no_match(self, source: str) -> None:
        """Test specifiers that are not internal-src traversals."""
        assert internal_src_suffix(source) is None


class TestClassifyPath:
    """Tests for classify_path."""

    def test_both_categories_reported(self) -> None:
        """Test that a packages/.../src path fires both reason codes."""
        matches = classify_path("../../../packages/logging/src")

        assert [m.reason_code for m in matches] == [
            ReasonCode.RELATIVE_PACKAGE_IMPORT,
            ReasonCode.PACKAGE_IMPORT_WITH_SRC,
        ]
        assert all(m.replacement_source == "@adddog/logging" for m in matches)

    def test_package_root_only(self) -> None:
        """Test a packages/ path without src."""
        matches = classify_path("../../packages/env")

        assert len(matches) == 1
        assert matches[0].reason_code is ReasonCode.RELATIVE_PACKAGE_IMPORT
        assert matches[0].replacement_source == "@adddog/env"

    def test_src_only(self) -> None:
        """Test a src/ path outside packages/."""
        matches = classify_path("../../logging/src/index")

        assert len(matches) == 1
        assert matches[0].reason_code is ReasonCode.PACKAGE_IMPORT_WITH_SRC
        assert matches[0].replacement_source == "@adddog/logging"

    def test_disagreeing_suffixes_keep_package_root_first(self) -> None:
        """Test that the package-root replacement comes first when suffixes differ."""
        matches = classify_path("../../packages/ui/kit/src")

        assert [m.replacement_source for m in matches] == ["@adddog/ui/kit", "@adddog/kit"]

    @pytest.mark.parametrize(
        "source",
        ["./utils", "../utils", "./src/helpers", "react", "@adddog/logging", "", "../.."],
    )
    def test_same_package_and_external_imports_are_exempt(self, source: str) -> None:
        """Test that specifiers without a cross-package traversal never match."""
        assert classify_path(source) == []

    def test_custom_workspace_scope(self) -> None:
        """Test that the configured scope prefixes the replacement."""
        config = PolicyConfig(workspace_scope="@rad")

        matches = classify_path("../../packages/env", config)

        assert matches[0].replacement_source == "@rad/env"


class TestMatchDeprecatedSubpath:
    """Tests for the components/ui/ deprecated subpath."""

    def test_replaces_segment_and_keeps_extension(self) -> None:
        """Test that only the deprecated segment changes."""
        match = match_deprecated_subpath(f"{PKG}/components/ui/button/Button.vue")

        assert match is not None
        assert match.reason_code is ReasonCode.UI_DEEP_IMPORT
        assert match.replacement_source == f"{PKG}/components/rad/button/Button.vue"

    def test_missing_extension_stays_missing(self) -> None:
        """Test that a specifier without an extension is not given one."""
        match = match_deprecated_subpath(f"{PKG}/components/ui/button")

        assert match is not None
        assert match.replacement_source == f"{PKG}/components/rad/button"

    def test_only_first_occurrence_replaced(self) -> None:
        """Test that the substitution happens once."""
        match = match_deprecated_subpath(f"{PKG}/components/ui/components/ui/x")

        assert match is not None
        assert match.replacement_source == f"{PKG}/components/rad/components/ui/x"

    @pytest.mark.parametrize(
        "source",
        [
            f"{PKG}/components/rad/button/Button.vue",
            f"{PKG}/lib/utils",
            f"{PKG}/other/drawer/AppDrawer.vue",
            f"{PKG}",
            f"{PKG}-legacy/components/ui/button",
            "other-package/components/ui/button",
        ],
    )
    def test_no_match(self, source: str) -> None:
        """Test specifiers that are not deprecated deep imports."""
        assert match_deprecated_subpath(source) is None
