"""Unit tests for the import boundary checking script.

Tests verify that the hexagonal architecture import rules are enforced:
- domain/ imports NOTHING from other motionboard layers
- application/ imports from domain/ only
- infrastructure/ imports from domain/ and application/
- config/ imports from domain/ and infrastructure/
"""

import ast

# Import from scripts directory
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "scripts"))

from check_imports import (  # noqa: E402
    ALLOWED_IMPORTS,
    LAYER_HIERARCHY,
    check_file_imports,
    check_import_boundaries,
    format_violations,
    get_import_modules,
)

PACKAGE_DIR = Path(__file__).parent.parent.parent / "motionboard"


@pytest.fixture
def fake_package(tmp_path: Path) -> Path:
    """Empty motionboard package with its four layers."""
    package = tmp_path / "motionboard"
    for layer in LAYER_HIERARCHY:
        (package / layer).mkdir(parents=True)
    return package


def _write(package: Path, relative: str, source: str) -> Path:
    path = package / relative
    path.write_text(source, encoding="utf-8")
    return path


class TestLayerHierarchy:
    """Test that the layer hierarchy is correctly defined."""

    def test_layer_levels(self) -> None:
        assert LAYER_HIERARCHY == {
            "domain": 0,
            "application": 1,
            "infrastructure": 2,
            "config": 3,
        }


class TestAllowedImports:
    """Test that the allowed imports are correctly defined."""

    def test_domain_imports_nothing(self) -> None:
        assert ALLOWED_IMPORTS["domain"] == set()

    def test_application_imports_domain_only(self) -> None:
        assert ALLOWED_IMPORTS["application"] == {"domain"}

    def test_infrastructure_imports(self) -> None:
        assert ALLOWED_IMPORTS["infrastructure"] == {"domain", "application"}

    def test_config_imports(self) -> None:
        assert ALLOWED_IMPORTS["config"] == {"domain", "infrastructure"}


class TestGetImportModules:
    """Test import statement parsing."""

    def test_import(self) -> None:
        node = ast.parse("import os, structlog").body[0]
        assert isinstance(node, ast.Import)
        assert get_import_modules(node) == ["os", "structlog"]

    def test_from_import(self) -> None:
        node = ast.parse("from motionboard.domain.models import motion").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert get_import_modules(node) == ["motionboard.domain.models"]

    def test_relative_import(self) -> None:
        node = ast.parse("from ..models import motion").body[0]
        assert isinstance(node, ast.ImportFrom)
        assert get_import_modules(node) == ["..models"]


class TestCheckFileImports:
    """Test violation detection for single files."""

    def test_domain_importing_infrastructure(self, fake_package: Path) -> None:
        path = _write(
            fake_package,
            "domain/motion.py",
            "from motionboard.infrastructure.adapters import load_sort_order\n",
        )
        violations = check_file_imports(path, fake_package)
        assert violations == [
            (str(path), 1, "domain layer cannot import from infrastructure")
        ]

    def test_domain_importing_pydantic(self, fake_package: Path) -> None:
        path = _write(fake_package, "domain/motion.py", "import os\nimport pydantic\n")
        violations = check_file_imports(path, fake_package)
        assert violations == [
            (str(path), 2, "domain layer cannot import third-party package pydantic")
        ]

    def test_domain_may_use_structlog(self, fake_package: Path) -> None:
        path = _write(
            fake_package, "domain/motion.py", "from __future__ import annotations\nimport structlog\n"
        )
        assert check_file_imports(path, fake_package) == []

    def test_application_importing_infrastructure(self, fake_package: Path) -> None:
        path = _write(
            fake_package,
            "application/board.py",
            "from motionboard.infrastructure.observability import configure_structlog\n",
        )
        assert len(check_file_imports(path, fake_package)) == 1

    def test_config_importing_application(self, fake_package: Path) -> None:
        path = _write(
            fake_package,
            "config/session.py",
            "from motionboard.application.services import MotionBoardService\n",
        )
        violations = check_file_imports(path, fake_package)
        assert violations[0][2] == "config layer cannot import from application"

    def test_infrastructure_may_import_anything_third_party(self, fake_package: Path) -> None:
        path = _write(
            fake_package,
            "infrastructure/codec.py",
            "import pydantic\nfrom motionboard.application.services import base\n",
        )
        assert check_file_imports(path, fake_package) == []

    def test_relative_imports_are_ignored(self, fake_package: Path) -> None:
        path = _write(fake_package, "domain/motion.py", "from ..infrastructure import x\n")
        assert check_file_imports(path, fake_package) == []

    def test_wiring_modules_are_unchecked(self, fake_package: Path) -> None:
        path = _write(
            fake_package,
            "bootstrap.py",
            "from motionboard.infrastructure.observability import configure_structlog\n",
        )
        assert check_file_imports(path, fake_package) == []

    def test_unparseable_file_is_skipped(self, fake_package: Path) -> None:
        path = _write(fake_package, "domain/broken.py", "def (:\n")
        assert check_file_imports(path, fake_package) == []


class TestCheckImportBoundaries:
    """Test whole-package checks."""

    def test_motionboard_package_has_no_violations(self) -> None:
        """The real package respects its layering."""
        violations = check_import_boundaries(PACKAGE_DIR)
        assert violations == [], format_violations(violations)

    def test_violations_are_collected(self, fake_package: Path) -> None:
        _write(fake_package, "domain/a.py", "import pydantic\n")
        _write(fake_package, "application/b.py", "from motionboard.config import x\n")
        assert len(check_import_boundaries(fake_package)) == 2

    def test_missing_package_directory(self, tmp_path: Path) -> None:
        assert check_import_boundaries(tmp_path / "missing") == []


class TestFormatViolations:
    """Test report formatting."""

    def test_no_violations(self) -> None:
        assert format_violations([]) == ""

    def test_report(self) -> None:
        report = format_violations([("motionboard/domain/a.py", 3, "bad import")])
        assert "motionboard/domain/a.py:3: bad import" in report
        assert report.endswith("Total: 1 violation(s)")
