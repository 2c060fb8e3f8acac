"""FastAPI dependencies and require-helpers for routes."""

from typing import Annotated

from fastapi import Depends, HTTPException

import store
from repositories import Contact, ContactStoreProtocol, StoreResult, StoreStatus


def get_store() -> ContactStoreProtocol:
    """Return the contact store. Use in Depends()."""
    return store.get_contact_store()


def raise_for_result(result: StoreResult) -> None:
    """Map a failed store result to an HTTP error."""
    if result.ok:
        return
    if result.status is StoreStatus.NOT_FOUND:
        raise HTTPException(404, result.error or "Contact not found")
    raise HTTPException(503, "Contacts storage is unavailable")


async def require_contact(
    contact_id: str,
    contact_store: Annotated[ContactStoreProtocol, Depends(get_store)],
) -> Contact:
    """Load contact by id or raise 404/503. Use as Depends(require_contact) with contact_id in path."""
    result = await contact_store.get_contact_by_id(contact_id)
    raise_for_result(result)
    return result.value
