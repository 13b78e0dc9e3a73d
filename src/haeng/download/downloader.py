"""yt-dlp command construction and process launch."""

from __future__ import annotations

import logging
import subprocess  # nosec B404
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from haeng.core.config import Config

logger = logging.getLogger(__name__)


def build_update_command(downloader_bin: str) -> list[str]:
    """Build yt-dlp command that updates the binary in place."""
    return [downloader_bin, "-U"]


def build_download_command(config: Config, name: str, url: str) -> list[str]:
    """Build yt-dlp command for downloading a playlist as m4a audio.

    Every playlist shares one download archive under the base directory, so
    items fetched once are skipped on later runs. Files land in a folder
    named after the playlist.

    Args:
        config: Runtime configuration with base paths and the binary name.
        name: Playlist name, used as the output folder.
        url: Playlist URL, passed as the final positional argument.

    Returns:
        The full argument vector.
    """
    return [
        config.downloader_bin,
        "-ciw",  # continue, ignore errors, no overwrites
        "-f m4a",
        "--embed-thumbnail",
        "--download-archive",
        str(config.archive_path),
        "--restrict-filenames",
        "-o",
        config.output_template(name),
        url,
    ]


def run_command(cmd: list[str]) -> int:
    """Run a yt-dlp command and wait for it to exit.

    Output is passed straight through to the terminal. The exit code is
    returned for logging only; a non-zero status is not an error here.

    Args:
        cmd: The argument vector to execute.

    Returns:
        The process exit code.

    Raises:
        OSError: If the process cannot be started.
        subprocess.SubprocessError: If the process cannot be started.
    """
    logger.debug("Running: %s", " ".join(cmd))
    result = subprocess.run(cmd, check=False)  # nosec B603
    if result.returncode != 0:
        logger.debug("%s exited with status %d", cmd[0], result.returncode)
    return result.returncode
