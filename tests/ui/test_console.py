"""Unit tests for console output and logging setup."""

from __future__ import annotations

import logging

import pytest
from rich.logging import RichHandler

from haeng.ui import (
    print_error,
    print_info,
    print_playlists,
    print_success,
    print_warning,
    setup_logging,
)


class TestPrintFunctions:
    """Tests for print_* helpers."""

    def test_print_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_error("Playlist `x` not found")
        captured = capsys.readouterr()
        assert "ERROR: Playlist `x` not found" in captured.err
        assert captured.out == ""

    def test_print_warning_goes_to_stderr(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_warning("careful")
        assert "careful" in capsys.readouterr().err

    def test_print_success(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_success("Added `x`")
        assert "Added `x`" in capsys.readouterr().out

    def test_markup_in_message_is_literal(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_info("[bold]mix[/bold] - Downloading ...")
        assert "[bold]mix[/bold]" in capsys.readouterr().out

    def test_print_playlists(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_playlists([("lofi", "https://youtube.com/playlist?list=1")])
        out = capsys.readouterr().out
        assert out.startswith("Playlists:")
        assert "lofi - https://youtube.com/playlist?list=1" in out

    def test_print_playlists_empty(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_playlists([])
        assert capsys.readouterr().out.strip() == "Playlists:"


class TestSetupLogging:
    """Tests for setup_logging() function."""

    def test_default_level_is_warning(self) -> None:
        log = setup_logging()
        assert log.level == logging.WARNING

    def test_verbose_level_is_debug(self) -> None:
        log = setup_logging(verbose=True)
        assert log.level == logging.DEBUG

    def test_repeated_setup_keeps_one_handler(self) -> None:
        setup_logging()
        log = setup_logging()
        handlers = [h for h in log.handlers if isinstance(h, RichHandler)]
        assert len(handlers) == 1
