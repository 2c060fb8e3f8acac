"""Persistence layer: contact record, result type and the JSON-file store."""

from .base import Contact, ContactStoreProtocol, StoreResult, StoreStatus
from .contact_store import ContactStore

__all__ = [
    "Contact",
    "ContactStore",
    "ContactStoreProtocol",
    "StoreResult",
    "StoreStatus",
]
