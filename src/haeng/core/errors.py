"""Custom exceptions and error formatting for haeng."""

from __future__ import annotations


class HaengError(Exception):
    """Base exception for all haeng errors."""


class EnvMissingError(HaengError):
    """Raised when the base directory environment variable is not set."""

    def __init__(self, variable: str) -> None:
        """Initialize EnvMissingError.

        Args:
            variable: Name of the missing environment variable.
        """
        self.variable = variable
        super().__init__(f"Failed to load `{variable}`, the variable is not set")


class RegistryFileError(HaengError):
    """Base class for I/O failures on the playlists file."""

    action = "access"

    def __init__(self, path: str, message: str) -> None:
        """Initialize a registry file error.

        Args:
            path: Path of the playlists file.
            message: Description of the underlying I/O error.
        """
        self.path = path
        self.message = message
        super().__init__(f"Failed to {self.action} `{path}`: {message}")


class FileCreateError(RegistryFileError):
    """Raised when the playlists file cannot be created."""

    action = "create"


class FileReadError(RegistryFileError):
    """Raised when the playlists file cannot be read."""

    action = "read"


class FileWriteError(RegistryFileError):
    """Raised when the playlists file cannot be written."""

    action = "write"


class InvalidUrlError(HaengError):
    """Raised when a playlist URL cannot be parsed."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"`{url}` is not a valid URL")


class NoDomainError(HaengError):
    """Raised when a playlist URL has no domain name."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"`{url}` is an invalid URL, expected a domain name")


class DomainNotAllowedError(HaengError):
    """Raised when a playlist URL points outside the allowed domains."""

    def __init__(self, url: str, domain: str) -> None:
        self.url = url
        self.domain = domain
        super().__init__(f'`{url}` is not a "youtube.com" URL')


class InvalidNameError(HaengError):
    """Raised when a playlist name is empty."""

    def __init__(self) -> None:
        super().__init__("Playlist name must not be empty")


class AlreadyExistsError(HaengError):
    """Raised when adding a playlist whose name is already registered."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Playlist `{name}` already exists")


class NotFoundError(HaengError):
    """Raised when a playlist name is not in the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Playlist `{name}` not found")


class UpdateCheckError(HaengError):
    """Raised when the downloader cannot be launched to update itself."""

    def __init__(self, message: str) -> None:
        """Initialize UpdateCheckError.

        Args:
            message: Description of the launch failure.
        """
        self.message = message
        super().__init__(f"There was an error while updating YT-DLP: {message}")


class DownloadLaunchError(HaengError):
    """Raised when the downloader cannot be launched for a playlist."""

    def __init__(self, name: str, message: str) -> None:
        """Initialize DownloadLaunchError.

        Args:
            name: The playlist being downloaded.
            message: Description of the launch failure.
        """
        self.name = name
        self.message = message
        super().__init__(f"There was an error running YT-DLP for `{name}`: {message}")


def format_error(error: HaengError | OSError) -> str:
    """Format error for user display as a single line.

    Args:
        error: The exception to format.

    Returns:
        Human-readable error message.
    """
    if isinstance(error, HaengError):
        return str(error)
    return f"System error: {error}"
