"""Document store client (Firestore REST or in-process memory).

Initialized lazily on first use (or at app startup) from settings:
DATABASE_BACKEND=firestore uses FIREBASE_SERVICE_ACCOUNT_KEY (JSON string)
or FIREBASE_SERVICE_ACCOUNT_PATH (file path) with the Firestore REST API;
DATABASE_BACKEND=memory keeps documents in the process.
"""

import json
import logging
from pathlib import Path

from lawdesk.core.config import get_settings
from lawdesk.infrastructure.firebase._memory_client import MemoryDocumentClient
from lawdesk.infrastructure.firebase._rest_client import (
    FirestoreRESTClient,
    _get_credentials,
)

logger = logging.getLogger(__name__)

DocumentClient = FirestoreRESTClient | MemoryDocumentClient

_document_client: DocumentClient | None = None


def _load_key_dict() -> dict | None:
    """Return service account dict from env key or file path."""
    settings = get_settings()
    key_json = (
        settings.firebase_service_account_key.get_secret_value()
        if settings.firebase_service_account_key
        else None
    )
    if key_json:
        try:
            return json.loads(key_json)
        except json.JSONDecodeError as e:
            raise ValueError("FIREBASE_SERVICE_ACCOUNT_KEY is not valid JSON") from e
    path = settings.firebase_service_account_path
    if path:
        resolved = Path(path).expanduser().resolve()
        if not resolved.is_file():
            raise ValueError(
                f"FIREBASE_SERVICE_ACCOUNT_PATH set but file not found: {path} (resolved: {resolved})"
            )
        with open(resolved, encoding="utf-8") as f:
            return json.load(f)
    return None


def _create_firestore_client() -> FirestoreRESTClient:
    key_dict = _load_key_dict()
    if not key_dict:
        raise ValueError("Firestore backend selected but no service account configured")
    project_id = key_dict.get("project_id")
    if not project_id:
        raise ValueError("Firebase service account JSON missing 'project_id'")
    return FirestoreRESTClient(project_id, _get_credentials(key_dict))


def init_document_store() -> DocumentClient:
    """Create the process-wide document client for the configured backend.

    Idempotent: returns the existing client if already initialized. Raises
    ValueError on missing or malformed Firestore credentials so a
    misconfigured deployment fails at startup instead of on first request.
    """
    global _document_client
    if _document_client is not None:
        return _document_client
    backend = get_settings().database_backend
    if backend == "memory":
        _document_client = MemoryDocumentClient()
        logger.warning("Using in-memory document store; data is lost on restart")
    else:
        _document_client = _create_firestore_client()
        logger.info("Firestore REST client initialized")
    return _document_client


def get_document_client() -> DocumentClient:
    """Return the document client, initializing it on first use.

    Same API for both backends (all async):
    - await db.collection(name).document(id).update(changes) / delete()
    - await db.collection(name).document(id).get() -> snapshot | None
    - await db.collection(name).create(id, data)  # DocumentExistsError if taken
    - async for doc in db.collection(name).where(f, op, v).order_by(f).limit(n).stream()
    - await db.collection(name).where(f, op, v).count()
    """
    if _document_client is None:
        return init_document_store()
    return _document_client


async def close_document_store() -> None:
    """Close the client's connections and forget it. Call from app shutdown."""
    global _document_client
    if _document_client is not None:
        await _document_client.aclose()
        _document_client = None
        logger.info("Document store client closed")
