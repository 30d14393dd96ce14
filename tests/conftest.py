"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from rad_import_policy import utils

PKG = "@adddog/shadcn-vue-design-system"


@pytest.fixture(autouse=True)
def reset_warnings():
    """Forget warnings printed by earlier tests so each test sees its own."""
    utils._logged_warnings.clear()
    yield
    utils._logged_warnings.clear()


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """
    Create a small monorepo with one app importing through bad paths.

    Layout:
        pyproject.toml
        src/apps/web/components/Form.vue      barrel + ui/ imports
        src/apps/web/lib/log.ts               relative package imports
        src/apps/web/lib/clean.ts             nothing to report
        src/node_modules/dep/index.js         must be skipped
    """
    project_root = tmp_path / "workspace"
    project_root.mkdir()
    (project_root / "pyproject.toml").write_text("[project]\nname = 'workspace'\n")

    components = project_root / "src" / "apps" / "web" / "components"
    components.mkdir(parents=True)
    (components / "Form.vue").write_text(
        "<script setup lang=\"ts\">\n"
        f'import {{ Button, Input as TextField }} from "{PKG}";\n'
        f"import Label from '{PKG}/components/ui/label/Label.vue';\n"
        f'import {{ cn }} from "{PKG}";\n'
        "</script>\n"
    )

    lib = project_root / "src" / "apps" / "web" / "lib"
    lib.mkdir(parents=True)
    (lib / "log.ts").write_text(
        'import { logger } from "../../../packages/logging/src";\n'
        'import { helper } from "../../logging/src/index";\n'
        "\n"
        "export const log = () => logger.info(helper());\n"
    )
    (lib / "clean.ts").write_text(
        'import { logger } from "@adddog/logging";\n'
        'import { helper } from "./utils";\n'
    )

    node_modules = project_root / "src" / "node_modules" / "dep"
    node_modules.mkdir(parents=True)
    (node_modules / "index.js").write_text(f'import {{ Button }} from "{PKG}";\n')

    return project_root
