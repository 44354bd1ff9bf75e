"""lawdesk: multi-tenant legal case-management API."""

__version__ = "1.0.0"
