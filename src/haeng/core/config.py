"""Runtime configuration for haeng."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from haeng.core.errors import EnvMissingError

if TYPE_CHECKING:
    from collections.abc import Mapping

# Environment variable naming the base directory for all state and output
BASE_DIR_ENV = "HAENG_PATH"

# Optional override for the downloader executable
DOWNLOADER_ENV = "HAENG_YT_DLP"

PLAYLIST_FILE = "playlists.json"
ARCHIVE_FILE = "myarchive.txt"
DEFAULT_DOWNLOADER = "yt-dlp"


@dataclass(frozen=True)
class Config:
    """Paths and executables used by a single haeng invocation.

    Attributes:
        base_dir: Root directory holding the registry, archive and downloads.
        downloader_bin: Name or path of the yt-dlp executable.
    """

    base_dir: Path
    downloader_bin: str = DEFAULT_DOWNLOADER

    @property
    def registry_path(self) -> Path:
        return self.base_dir / PLAYLIST_FILE

    @property
    def archive_path(self) -> Path:
        return self.base_dir / ARCHIVE_FILE

    def output_template(self, name: str) -> str:
        """Return the yt-dlp output template for a playlist folder."""
        return str(self.base_dir / name / "%(title)s-%(id)s.%(ext)s")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Config:
        """Build a Config from environment variables.

        Args:
            environ: Mapping to read from. Defaults to ``os.environ``.

        Returns:
            The resolved configuration.

        Raises:
            EnvMissingError: If the base directory variable is unset or empty.
        """
        if environ is None:
            environ = os.environ

        base = environ.get(BASE_DIR_ENV, "")
        if not base:
            raise EnvMissingError(BASE_DIR_ENV)

        return cls(
            base_dir=Path(base).expanduser(),
            downloader_bin=environ.get(DOWNLOADER_ENV) or DEFAULT_DOWNLOADER,
        )
