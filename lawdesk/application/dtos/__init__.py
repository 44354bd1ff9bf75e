"""Application DTOs (frozen dataclasses; no dependency on storage or HTTP)."""
