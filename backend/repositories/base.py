"""
Contact record, store result type and the protocol every contact backend implements.
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Optional, Protocol


@dataclass(frozen=True)
class Contact:
    name: str
    email: str
    phone: str
    id: str

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "Contact":
        """Build a Contact from a stored record. Raises KeyError/TypeError on bad shape."""
        return cls(
            name=data["name"],
            email=data["email"],
            phone=data["phone"],
            id=data["id"],
        )


class StoreStatus(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    STORAGE_ERROR = "storage_error"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class StoreResult:
    """Outcome of a store operation. `value` is set only when status is OK."""
    status: StoreStatus
    value: Optional[object] = None
    error: str = ""

    @property
    def ok(self) -> bool:
        return self.status is StoreStatus.OK

    def unwrap_or_none(self) -> Optional[object]:
        """Return the payload on OK, else the None sentinel."""
        return self.value if self.ok else None

    @classmethod
    def success(cls, value: object) -> "StoreResult":
        return cls(StoreStatus.OK, value=value)

    @classmethod
    def failure(cls, status: StoreStatus, error: str) -> "StoreResult":
        return cls(status, error=error)


class ContactStoreProtocol(Protocol):
    """Persists an ordered collection of contacts."""

    async def list_contacts(self) -> StoreResult:
        """Return OK with list[Contact] in stored order, or a failure result."""
        ...

    async def get_contact_by_id(self, contact_id: str) -> StoreResult:
        """Return OK with the first Contact whose id matches, NOT_FOUND, or a failure result."""
        ...

    async def add_contact(self, name: str, email: str, phone: str) -> StoreResult:
        """Append a contact with a generated id; return OK with the new Contact."""
        ...

    async def remove_contact(self, contact_id: str) -> StoreResult:
        """Delete a contact by id; return OK with the removed Contact."""
        ...

