"""Pytest configuration and fixtures."""


import pytest

from core.fs import MemoryFileSystem


@pytest.fixture
def sample_package_json():
    """Sample package.json content for testing."""
    return """
{
  "name": "test-project",
  "main": "index.js",
  "packageManager": "pnpm@8.6.0",
  "engines": {"node": ">=18", "npm": ">=9"},
  "scripts": {
    "build": "astro build",
    "dev": "astro dev"
  },
  "dependencies": {
    "astro": "0.0.1",
    "express": "^4.18.0"
  },
  "devDependencies": {
    "prettier": "^1.2.3"
  }
}
"""


@pytest.fixture
def memory_fs():
    """Empty in-memory file access."""
    return MemoryFileSystem()


@pytest.fixture
def project_dir(tmp_path, sample_package_json):
    """Create a temporary project directory with a package.json."""
    (tmp_path / "package.json").write_text(sample_package_json)
    return tmp_path
