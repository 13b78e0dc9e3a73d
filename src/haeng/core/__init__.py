"""Core utilities - configuration and errors."""

from haeng.core.config import Config
from haeng.core.errors import (
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

__all__ = [
    "AlreadyExistsError",
    "Config",
    "DomainNotAllowedError",
    "DownloadLaunchError",
    "EnvMissingError",
    "FileCreateError",
    "FileReadError",
    "FileWriteError",
    "HaengError",
    "InvalidNameError",
    "InvalidUrlError",
    "NoDomainError",
    "NotFoundError",
    "RegistryFileError",
    "UpdateCheckError",
    "format_error",
]
