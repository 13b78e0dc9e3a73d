"""Unit tests for exceptions and error formatting."""

from __future__ import annotations

import pytest

from haeng.core import (
    AlreadyExistsError,
    DomainNotAllowedError,
    DownloadLaunchError,
    EnvMissingError,
    FileCreateError,
    FileReadError,
    FileWriteError,
    HaengError,
    InvalidNameError,
    InvalidUrlError,
    NoDomainError,
    NotFoundError,
    RegistryFileError,
    UpdateCheckError,
    format_error,
)


class TestHierarchy:
    """Tests for the exception hierarchy."""

    @pytest.mark.parametrize(
        "error",
        [
            EnvMissingError("HAENG_PATH"),
            FileCreateError("/x", "boom"),
            FileReadError("/x", "boom"),
            FileWriteError("/x", "boom"),
            InvalidUrlError("nope"),
            NoDomainError("mailto:a@b"),
            DomainNotAllowedError("https://vimeo.com/1", "vimeo.com"),
            InvalidNameError(),
            AlreadyExistsError("lofi"),
            NotFoundError("lofi"),
            UpdateCheckError("missing"),
            DownloadLaunchError("lofi", "missing"),
        ],
    )
    def test_all_errors_share_base(self, error: HaengError) -> None:
        """Every error can be caught as HaengError."""
        assert isinstance(error, HaengError)

    def test_file_errors_share_base(self) -> None:
        """File errors are grouped under RegistryFileError."""
        for cls in (FileCreateError, FileReadError, FileWriteError):
            assert issubclass(cls, RegistryFileError)


class TestMessages:
    """Tests for error message content."""

    def test_env_missing(self) -> None:
        error = EnvMissingError("HAENG_PATH")
        assert "HAENG_PATH" in str(error)
        assert error.variable == "HAENG_PATH"

    def test_file_error_includes_action_and_path(self) -> None:
        error = FileWriteError("/data/playlists.json", "Permission denied")
        assert "write" in str(error)
        assert "/data/playlists.json" in str(error)
        assert "Permission denied" in str(error)
        assert error.path == "/data/playlists.json"

    def test_file_create_action(self) -> None:
        assert "create" in str(FileCreateError("/p", "x"))

    def test_file_read_action(self) -> None:
        assert "read" in str(FileReadError("/p", "x"))

    def test_invalid_url(self) -> None:
        assert str(InvalidUrlError("not a url")) == "`not a url` is not a valid URL"

    def test_domain_not_allowed(self) -> None:
        error = DomainNotAllowedError("https://vimeo.com/1", "vimeo.com")
        assert "youtube.com" in str(error)
        assert error.domain == "vimeo.com"

    def test_already_exists(self) -> None:
        assert str(AlreadyExistsError("lofi")) == "Playlist `lofi` already exists"

    def test_not_found(self) -> None:
        assert str(NotFoundError("lofi")) == "Playlist `lofi` not found"

    def test_download_launch(self) -> None:
        error = DownloadLaunchError("lofi", "No such file")
        assert "lofi" in str(error)
        assert "No such file" in str(error)


class TestFormatError:
    """Tests for format_error() function."""

    def test_haeng_error_uses_message(self) -> None:
        error = NotFoundError("lofi")
        assert format_error(error) == str(error)

    def test_os_error(self) -> None:
        result = format_error(PermissionError(13, "Permission denied", "/x"))
        assert result.startswith("System error:")
        assert "Permission denied" in result

    def test_single_line(self) -> None:
        result = format_error(UpdateCheckError("not found"))
        assert "\n" not in result
