"""Tests for utility functions."""

from __future__ import annotations

from pathlib import Path

import pytest

from rad_import_policy import find_project_root
from rad_import_policy.utils import find_lint_target, warn_once


class TestFindProjectRoot:
    """Tests for find_project_root function."""

    def test_find_project_root_in_current_dir(self, tmp_path: Path) -> None:
        """Test finding project root in current directory."""
        project_root = tmp_path / "project"
        project_root.mkdir()
        (project_root / "pyproject.toml").write_text("[project]\nname = 'test'")

        found = find_project_root(project_root)

        assert found == project_root.resolve()

    def test_find_project_root_in_parent(self, tmp_path: Path) -> None:
        """Test finding project root in parent directory."""
        project_root = tmp_path / "project"
        project_root.mkdir()
        (project_root / "pyproject.toml").write_text("[project]\nname = 'test'")

        subdir = project_root / "packages" / "logging" / "src"
        subdir.mkdir(parents=True)

        found = find_project_root(subdir)

        assert found == project_root.resolve()

    def test_nearest_pyproject_wins(self, tmp_path: Path) -> None:
        """Test that a workspace package with its own pyproject.toml is its own root."""
        (tmp_path / "pyproject.toml").write_text("[tool.rad-import-policy]\n")
        package = tmp_path / "packages" / "logging"
        (package / "src").mkdir(parents=True)
        (package / "pyproject.toml").write_text("[tool.rad-import-policy]\n")
        (package / "src" / "pyproject.toml").mkdir()

        assert find_project_root(package / "src") == package.resolve()

    def test_find_project_root_not_found(self, tmp_path: Path) -> None:
        """Test when project root is not found."""
        some_dir = tmp_path / "some_dir"
        some_dir.mkdir()

        found = find_project_root(some_dir)

        assert found is None

    def test_find_project_root_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that find_project_root defaults to current directory."""
        project_root = tmp_path / "project"
        project_root.mkdir()
        (project_root / "pyproject.toml").write_text("[project]\nname = 'test'")

        monkeypatch.chdir(project_root)

        found = find_project_root()

        assert found == project_root.resolve()


class TestFindLintTarget:
    """Tests for find_lint_target function."""

    def test_prefers_src(self, tmp_path: Path) -> None:
        """Test that src/ is linted when present."""
        (tmp_path / "src").mkdir()

        assert find_lint_target(tmp_path) == tmp_path / "src"

    def test_falls_back_to_project_root(self, tmp_path: Path) -> None:
        """Test the project root is used without src/."""
        assert find_lint_target(tmp_path) == tmp_path


class TestWarnOnce:
    """Tests for warn_once function."""

    def test_prints_each_message_once(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that repeated warnings are suppressed."""
        warn_once("Warning: first")
        warn_once("Warning: first")
        warn_once("Warning: second")

        captured = capsys.readouterr()
        assert captured.err == "Warning: first\nWarning: second\n"
        assert captured.out == ""
