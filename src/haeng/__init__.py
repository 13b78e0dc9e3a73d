"""A playlist download manager built on yt-dlp."""

from haeng.core import Config, HaengError

__version__ = "0.1.0"
__metadata__ = {
    "name": "haeng",
    "version": __version__,
    "license": "MIT",
    "python": ">=3.12",
}
__all__ = [
    "Config",
    "HaengError",
    "__metadata__",
    "__version__",
]
