"""JSON file storage for the playlist registry."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from haeng.core.errors import FileCreateError, FileReadError, FileWriteError

logger = logging.getLogger(__name__)

# Mapping of playlist name to playlist URL
Registry = dict[str, str]


class RegistryStore:
    """Loads and rewrites the playlists file.

    The whole file is rewritten on every save. There is no locking and no
    temp-file swap, so a crash mid-write leaves a file that ``load`` will
    treat as empty.

    Attributes:
        path: Location of the playlists JSON file.
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def ensure_file_exists(self) -> None:
        """Create an empty playlists file if none exists.

        Raises:
            FileCreateError: If the file or its directory cannot be created.
        """
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch()
        except OSError as e:
            raise FileCreateError(str(self.path), str(e)) from e
        logger.debug("Created empty playlists file at %s", self.path)

    def load(self) -> Registry:
        """Read the registry from disk.

        Content that is not a JSON object of strings yields an empty
        registry. The next save then overwrites the unreadable file.

        Returns:
            The decoded registry, or an empty one if parsing failed.

        Raises:
            FileReadError: If the file cannot be read.
        """
        try:
            data = self.path.read_bytes()
        except OSError as e:
            raise FileReadError(str(self.path), str(e)) from e

        registry = _parse_registry(data)
        if registry is None:
            logger.debug("Could not parse %s, starting with no playlists", self.path)
            return {}
        return registry

    def persist(self, registry: Registry) -> None:
        """Overwrite the playlists file with the full registry.

        Raises:
            FileWriteError: If the file cannot be opened or written.
        """
        payload = json.dumps(registry, indent=2, ensure_ascii=False)
        try:
            self.path.write_text(payload, encoding="utf-8")
        except OSError as e:
            raise FileWriteError(str(self.path), str(e)) from e
        logger.debug("Saved %d playlist(s) to %s", len(registry), self.path)


def _parse_registry(data: bytes) -> Registry | None:
    """Decode registry JSON, returning None if it is not a name->URL object."""
    try:
        decoded = json.loads(data.decode("utf-8"))
    except (ValueError, RecursionError):
        # UnicodeDecodeError is a ValueError
        return None

    if not isinstance(decoded, dict):
        return None
    if not all(
        isinstance(key, str) and isinstance(value, str)
        for key, value in decoded.items()
    ):
        return None
    return dict(decoded)
