"""Download orchestration: update check, URL resolution and yt-dlp runs."""

from __future__ import annotations

import logging
import subprocess  # nosec B404
from typing import TYPE_CHECKING

from haeng.core.errors import DownloadLaunchError, HaengError, UpdateCheckError
from haeng.download.downloader import (
    build_download_command,
    build_update_command,
    run_command,
)
from haeng.registry import add, list_playlists, resolve_url
from haeng.ui import print_info, print_warning

if TYPE_CHECKING:
    from haeng.core.config import Config
    from haeng.registry import Registry, RegistryStore

logger = logging.getLogger(__name__)


class Orchestrator:
    """Runs yt-dlp for registered or ad-hoc playlists.

    Every download path first asks yt-dlp to update itself. Only a failure
    to launch the process is treated as an error; the exit status of
    yt-dlp is never inspected.

    Attributes:
        config: Runtime configuration.
        store: Registry storage, used when saving a playlist on download.
    """

    def __init__(self, config: Config, store: RegistryStore) -> None:
        self.config = config
        self.store = store

    def check_for_updates(self) -> None:
        """Run the yt-dlp self-update.

        Raises:
            UpdateCheckError: If yt-dlp cannot be launched.
        """
        print_info("Checking for updates...")
        try:
            run_command(build_update_command(self.config.downloader_bin))
        except (OSError, subprocess.SubprocessError) as e:
            raise UpdateCheckError(str(e)) from e

    def download_one(
        self,
        registry: Registry,
        name: str,
        url: str | None = None,
        save: bool = False,
    ) -> None:
        """Download a single playlist, optionally registering it first.

        A failure to save never blocks the download.

        Args:
            registry: The loaded registry.
            name: Playlist name, also the output folder.
            url: Explicit URL. Looked up by name when omitted.
            save: Register the playlist before downloading.

        Raises:
            UpdateCheckError: If the update check cannot launch yt-dlp.
            NotFoundError: If no URL is given and the name is unregistered.
            DownloadLaunchError: If yt-dlp cannot be launched.
        """
        self.check_for_updates()

        print_info(f"{name} - Downloading ...")

        if url is None:
            url = resolve_url(registry, name)

        if save:
            try:
                add(self.store, registry, name, url)
            except HaengError as e:
                logger.debug("Could not save %s: %s", name, e)
                print_warning(f"{e}, continuing with the download...")

        self._download(name, url)

    def download_all(self, registry: Registry) -> None:
        """Download every registered playlist in name order.

        Stops at the first playlist whose download cannot be launched. An
        empty registry prints "No playlists saved" after the update check
        instead of announcing downloads that will not happen.

        Raises:
            UpdateCheckError: If the update check cannot launch yt-dlp.
            DownloadLaunchError: If yt-dlp cannot be launched for a playlist.
        """
        self.check_for_updates()

        entries = list_playlists(registry)
        if not entries:
            print_info("No playlists saved")
            return

        print_info("Starting downloads...")
        for name, url in entries:
            print_info(f"{name} - Downloading ...")
            self._download(name, url)

    def _download(self, name: str, url: str) -> None:
        cmd = build_download_command(self.config, name, url)
        try:
            run_command(cmd)
        except (OSError, subprocess.SubprocessError) as e:
            raise DownloadLaunchError(name, str(e)) from e
