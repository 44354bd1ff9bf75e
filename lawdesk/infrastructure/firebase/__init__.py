"""Document store access: Firestore REST client, in-memory client, repositories."""

from lawdesk.infrastructure.firebase.client import (
    DocumentClient,
    close_document_store,
    get_document_client,
    init_document_store,
)

__all__ = [
    "DocumentClient",
    "close_document_store",
    "get_document_client",
    "init_document_store",
]
