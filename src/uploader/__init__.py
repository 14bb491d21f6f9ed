"""Upload a single local file into a Google Drive folder."""

from .settings import Settings

__all__ = ["Settings"]
