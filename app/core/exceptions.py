"""
Exceptions raised by the document translation pipeline.

Each exception carries the HTTP status code it is surfaced with.
"""

from typing import Any, Dict, Optional

from api.document_translation.schema import ErrorDetail


class DocumentTranslationError(Exception):
    """Base class for document translation failures."""

    status_code: int = 400

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidInputError(DocumentTranslationError):
    """The request did not reference a usable file."""


class DownloadFailedError(DocumentTranslationError):
    """The source file could not be fetched."""

    def __init__(self, reason: str):
        super().__init__(f"Failed to download file: {reason}")
        self.reason = reason


class UpstreamTranslationFailedError(DocumentTranslationError):
    """The translation service answered with a non-success status."""

    def __init__(self, status_code: int, details: str):
        super().__init__("Translation failed.", status_code=status_code)
        self.details = details

    def to_detail(self) -> Dict[str, Any]:
        return ErrorDetail(message=self.message, details=self.details).model_dump()
