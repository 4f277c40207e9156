"""Shared fixtures: a throwaway Poyo project layout under tmp_path."""

from pathlib import Path

import pytest

from poyo.config import ProjectConfig


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Empty project: client pages dir, server views and controllers dirs."""
    root = tmp_path / "app"
    (root / "poyo.client" / "src" / "pages").mkdir(parents=True)
    (root / "Poyo.Server" / "Views" / "Shared").mkdir(parents=True)
    (root / "Poyo.Server" / "Controllers").mkdir(parents=True)
    return root


@pytest.fixture
def config(project: Path) -> ProjectConfig:
    return ProjectConfig(root=project)


@pytest.fixture
def renamed_project(tmp_path: Path) -> Path:
    """Project generated as ``MyApp``: ``myapp.client`` and ``MyApp.Server``."""
    root = tmp_path / "MyApp"
    (root / "myapp.client" / "src" / "pages").mkdir(parents=True)
    (root / "MyApp.Server" / "Views" / "Shared").mkdir(parents=True)
    (root / "MyApp.Server" / "Controllers").mkdir(parents=True)
    return root
