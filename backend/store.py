"""
Contacts persistence facade.
Module-level coroutines over a default ContactStore. Every failure
(missing file, bad JSON, unknown id, failed write) comes back as None;
callers that need to tell them apart use the ContactStore directly.
Structure on disk:
  db/
    contacts.json    JSON array of {name, email, phone, id}
"""

import logging
from typing import Optional

from config import get_settings
from repositories import ContactStore, StoreResult

logger = logging.getLogger(__name__)

_store: Optional[ContactStore] = None


# ── Store wiring ───────────────────────────────────────────────────────

def get_contact_store() -> ContactStore:
    """Return the default store, built from CONTACTS_DB_PATH on first use."""
    global _store
    if _store is None:
        _store = ContactStore(get_settings().CONTACTS_DB_PATH)
    return _store


def set_contact_store(contact_store: Optional[ContactStore]) -> None:
    """Replace the default store. None resets it to the configured path."""
    global _store
    _store = contact_store


def _payload(result: StoreResult, operation: str) -> Optional[object]:
    if not result.ok:
        logger.info("Contacts %s failed (%s): %s", operation, result.status.value, result.error)
        return None
    return result.unwrap_or_none()


def _as_dict(result: StoreResult, operation: str) -> Optional[dict]:
    contact = _payload(result, operation)
    return contact.to_dict() if contact is not None else None


# ── Contacts ───────────────────────────────────────────────────────────

async def list_contacts() -> Optional[list[dict]]:
    contacts = _payload(await get_contact_store().list_contacts(), "list")
    return [c.to_dict() for c in contacts] if contacts is not None else None


async def get_contact_by_id(contact_id: str) -> Optional[dict]:
    return _as_dict(await get_contact_store().get_contact_by_id(contact_id), "get")


async def add_contact(name: str, email: str, phone: str) -> Optional[dict]:
    """Add a contact and return it with its generated id."""
    return _as_dict(await get_contact_store().add_contact(name, email, phone), "add")


async def remove_contact(contact_id: str) -> Optional[dict]:
    """Remove a contact and return its last stored value."""
    return _as_dict(await get_contact_store().remove_contact(contact_id), "remove")
