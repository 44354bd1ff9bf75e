"""Infrastructure exceptions for document store operations.

They extend LawdeskException so an error that escapes a repository still maps
to a consistent (500) response. Repositories translate the expected ones
(exists / not found) into domain outcomes.
"""

from lawdesk.domain.exceptions import LawdeskException


class DocumentStoreException(LawdeskException):
    """Base exception for document store operations."""

    def __init__(self, message: str, path: str | None = None) -> None:
        details = {"path": path} if path else {}
        super().__init__(message, "DOCUMENT_STORE_ERROR", details)


class DocumentExistsError(DocumentStoreException):
    """Raised when create() targets a document ID that already exists (HTTP 409 on REST)."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("Document already exists", path)


class DocumentNotFoundError(DocumentStoreException):
    """Raised when update() targets a document that does not exist."""

    def __init__(self, path: str | None = None) -> None:
        super().__init__("Document not found", path)
