"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when you first write a document. Use these constants so collection names
stay consistent and act as the single source of truth for the "schema".
Every firm-owned document carries a ``firm_id`` field.

Ordered firm-scoped queries need composite indexes in Firestore:
cases (firm_id, created_at desc), users (firm_id, created_at desc),
calendar_events (firm_id, start_date asc).
"""

COLLECTION_FIRMS = "firms"
COLLECTION_USERS = "users"
COLLECTION_CASES = "cases"
COLLECTION_CALENDAR_EVENTS = "calendar_events"

# One document per claimed email; ID is "<kind>:<escaped email>" so create() is the uniqueness check.
COLLECTION_UNIQUE_EMAILS = "unique_emails"

# Firestore document ID rules: non-empty, at most 1500 bytes, no "/",
# not "." or "..", and not of the reserved form __*__.
MAX_DOCUMENT_ID_BYTES = 1500


def is_valid_document_id(document_id: str | None) -> bool:
    """Return True if document_id is an ID Firestore accepts."""
    if not document_id or not isinstance(document_id, str):
        return False
    if "/" in document_id or document_id in (".", ".."):
        return False
    if len(document_id) >= 4 and document_id.startswith("__") and document_id.endswith("__"):
        return False
    return len(document_id.encode("utf-8")) <= MAX_DOCUMENT_ID_BYTES


def check_document_id(document_id: str) -> str:
    """Return document_id unchanged; raise ValueError if Firestore would reject it."""
    if not is_valid_document_id(document_id):
        raise ValueError(f"Invalid document ID: {document_id!r}")
    return document_id
