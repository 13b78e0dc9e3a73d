"""Allow running haeng with ``python -m haeng``."""

from haeng.cli import app

app()
