"""Contact list, get, create, delete."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from api.deps import get_store, raise_for_result, require_contact
from repositories import Contact, ContactStoreProtocol
from schemas.requests import ContactCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.get("")
async def list_contacts(contact_store: Annotated[ContactStoreProtocol, Depends(get_store)]):
    result = await contact_store.list_contacts()
    raise_for_result(result)
    return JSONResponse({"contacts": [c.to_dict() for c in result.value]})


@router.get("/{contact_id}")
async def get_contact(contact: Annotated[Contact, Depends(require_contact)]):
    return JSONResponse(contact.to_dict())


@router.post("")
async def create_contact(
    body: ContactCreate,
    contact_store: Annotated[ContactStoreProtocol, Depends(get_store)],
):
    result = await contact_store.add_contact(body.name, body.email, body.phone)
    raise_for_result(result)
    return JSONResponse(result.value.to_dict(), status_code=201)


@router.delete("/{contact_id}")
async def delete_contact(
    contact_id: str,
    contact_store: Annotated[ContactStoreProtocol, Depends(get_store)],
):
    result = await contact_store.remove_contact(contact_id)
    raise_for_result(result)
    return JSONResponse(result.value.to_dict())
