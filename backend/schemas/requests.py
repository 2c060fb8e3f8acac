"""Request body models for the Contacts API."""

from pydantic import BaseModel


class ContactCreate(BaseModel):
    name: str
    email: str
    phone: str
