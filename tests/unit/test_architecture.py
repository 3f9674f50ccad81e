"""Tests to verify hexagonal architecture structure."""

from pathlib import Path

import pytest

# Compute project root relative to this test file
PROJECT_ROOT = Path(__file__).parent.parent.parent


@pytest.fixture
def package_path() -> Path:
    """Return the troop_advancement package path."""
    return PROJECT_ROOT / "troop_advancement"


def _imports_in(path: Path) -> list[tuple[Path, str]]:
    lines = []
    for py_file in path.rglob("*.py"):
        for line in py_file.read_text().splitlines():
            stripped = line.strip()
            if stripped.startswith(("from troop_advancement", "import troop_advancement")):
                lines.append((py_file, stripped))
    return lines


def test_main_layers_exist(package_path: Path) -> None:
    """Verify all main layer directories exist."""
    layers = ["domain", "application", "infrastructure", "config", "bootstrap"]
    for layer in layers:
        assert (package_path / layer).is_dir(), f"Missing layer: {layer}"
        assert (package_path / layer / "__init__.py").is_file(), (
            f"Missing {layer}/__init__.py"
        )


def test_domain_subdirectories_exist(package_path: Path) -> None:
    """Verify domain layer has required subdirectories."""
    domain = package_path / "domain"
    for subdir in ["errors", "models", "services"]:
        assert (domain / subdir / "__init__.py").is_file(), (
            f"Missing domain/{subdir}/__init__.py"
        )


def test_domain_has_no_external_layer_imports(package_path: Path) -> None:
    """Verify domain layer imports nothing from outer layers.

    Port interfaces live in application.ports and the domain may use them.
    """
    allowed = "troop_advancement.application.ports"
    for py_file, line in _imports_in(package_path / "domain"):
        module = line.split()[1]
        assert module.startswith(("troop_advancement.domain", allowed)), (
            f"{py_file} contains forbidden import: {line}"
        )


def test_application_does_not_import_infrastructure(package_path: Path) -> None:
    for py_file, line in _imports_in(package_path / "application"):
        module = line.split()[1]
        assert not module.startswith(
            ("troop_advancement.infrastructure", "troop_advancement.bootstrap")
        ), f"{py_file} contains forbidden import: {line}"


def test_infrastructure_does_not_import_bootstrap(package_path: Path) -> None:
    for py_file, line in _imports_in(package_path / "infrastructure"):
        assert "troop_advancement.bootstrap" not in line, (
            f"{py_file} contains forbidden import: {line}"
        )
