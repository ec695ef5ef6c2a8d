"""
Pytest configuration and shared fixtures.

Provides compressors, fake environments, and an isolated settings directory.
"""

import pytest

from ppwd.compressor import PathCompressor

# ===== Settings Isolation =====


@pytest.fixture(autouse=True)
def temp_config_dir(tmp_path, monkeypatch):
    """
    Point the settings manager at a temporary config directory.

    Keeps every test away from the real user's settings file.
    """
    config_dir = tmp_path / "config"
    monkeypatch.setattr(
        "ppwd.config.settings.user_config_dir", lambda app_name: str(config_dir)
    )
    return config_dir


# ===== Compressor Fixtures =====


@pytest.fixture
def compressor():
    """Create a compressor with default marker and separator."""
    return PathCompressor()


# ===== Environment Fixtures =====


@pytest.fixture
def project_dir(tmp_path):
    """Create a nested directory tree to run in."""
    path = tmp_path.resolve() / "home" / "user" / "projects" / "website"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def in_project_dir(project_dir, monkeypatch):
    """Change into the nested project directory."""
    monkeypatch.chdir(project_dir)
    return project_dir


@pytest.fixture
def fake_environ(project_dir):
    """Environment whose HOME is an ancestor of the project directory."""
    home = project_dir.parent.parent
    return {"HOME": str(home), "PWD": str(project_dir)}
