"""Shared pytest fixtures for haeng tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from haeng.core.config import Config
from haeng.registry.store import RegistryStore

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config(temp_dir: Path) -> Config:
    """Configuration rooted at the temporary directory."""
    return Config(base_dir=temp_dir)


@pytest.fixture
def store(config: Config) -> RegistryStore:
    """Registry store backed by an empty playlists file."""
    store = RegistryStore(config.registry_path)
    store.ensure_file_exists()
    return store


@pytest.fixture
def sample_registry() -> dict[str, str]:
    """A registry with two valid playlists."""
    return {
        "lofi": "https://www.youtube.com/playlist?list=PLlofi",
        "rock": "https://youtube.com/playlist?list=PLrock",
    }


@pytest.fixture
def mock_subprocess_success() -> MagicMock:
    """Mock subprocess.run result for a finished yt-dlp process."""
    mock = MagicMock()
    mock.returncode = 0
    return mock


@pytest.fixture
def mock_subprocess_failure() -> MagicMock:
    """Mock subprocess.run result for a yt-dlp process that exited non-zero."""
    mock = MagicMock()
    mock.returncode = 1
    return mock
