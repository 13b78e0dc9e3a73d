"""Download feature - drives yt-dlp for registered playlists."""

from haeng.download.downloader import (
    build_download_command,
    build_update_command,
    run_command,
)
from haeng.download.orchestrator import Orchestrator

__all__ = [
    "Orchestrator",
    "build_download_command",
    "build_update_command",
    "run_command",
]
