"""
Error kinds raised by the archivist core.

Input validation failures are raised as ``pydantic.ValidationError`` by the
schemas in ``app.schemas.neo``; everything else derives from
``NeoArchivistError``.
"""
from typing import Optional


class NeoArchivistError(Exception):
    """Base class for all archivist errors."""


class ConfigurationError(NeoArchivistError):
    """A required setting (e.g. NASA_API_KEY) is missing."""


class UpstreamError(NeoArchivistError):
    """The NeoWs feed could not be reached or answered with an error status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class ToolRegistrationError(NeoArchivistError):
    pass


class ToolNotFoundError(NeoArchivistError):
    pass
