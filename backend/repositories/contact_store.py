"""
JSON-file implementation of ContactStoreProtocol.
The whole collection lives in one file as a JSON array of
{name, email, phone, id} objects. Every call re-reads the file; mutations
rewrite it in full. There is no lock around read-modify-write, so
overlapping mutations race and the last writer wins.
"""

import asyncio
import json
import logging
import uuid
from pathlib import Path

from .base import Contact, StoreResult, StoreStatus

logger = logging.getLogger(__name__)


class ContactStore:
    """Contact collection persisted as a single JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def ensure_file(self) -> StoreResult:
        """Create the parent directory and an empty collection if the file is missing."""
        if self.path.exists():
            return StoreResult.success(self.path)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
        except OSError as e:
            logger.error("Could not create contacts file %s: %s", self.path, e)
            return StoreResult.failure(StoreStatus.STORAGE_ERROR, str(e))
        logger.info("Initialized empty contacts file at %s", self.path)
        return StoreResult.success(self.path)

    # Internal helpers

    def _read(self) -> StoreResult:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError:
            logger.warning("Contacts file not found: %s", self.path)
            return StoreResult.failure(StoreStatus.STORAGE_ERROR, f"{self.path} not found")
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("Contacts file %s is not valid JSON: %s", self.path, e)
            return StoreResult.failure(StoreStatus.MALFORMED, str(e))
        except OSError as e:
            logger.warning("Could not read contacts file %s: %s", self.path, e)
            return StoreResult.failure(StoreStatus.STORAGE_ERROR, str(e))

        if not isinstance(raw, list):
            logger.warning("Contacts file %s does not hold a JSON array", self.path)
            return StoreResult.failure(StoreStatus.MALFORMED, "expected a JSON array")
        try:
            contacts = [Contact.from_dict(item) for item in raw]
        except (KeyError, TypeError) as e:
            logger.warning("Contacts file %s has a malformed record: %r", self.path, e)
            return StoreResult.failure(StoreStatus.MALFORMED, f"malformed record: {e!r}")
        return StoreResult.success(contacts)

    def _write(self, contacts: list[Contact]) -> StoreResult:
        tmp = self.path.with_name(f"{self.path.name}.{uuid.uuid4().hex}.tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                json.dump([c.to_dict() for c in contacts], f, ensure_ascii=False, indent=2)
            tmp.replace(self.path)
        except OSError as e:
            logger.error("Could not write contacts file %s: %s", self.path, e, exc_info=True)
            tmp.unlink(missing_ok=True)
            return StoreResult.failure(StoreStatus.STORAGE_ERROR, str(e))
        return StoreResult.success(contacts)

    # Operations

    async def list_contacts(self) -> StoreResult:
        return await asyncio.to_thread(self._read)

    async def get_contact_by_id(self, contact_id: str) -> StoreResult:
        listed = await self.list_contacts()
        if not listed.ok:
            return listed
        for contact in listed.value:
            if contact.id == contact_id:
                return StoreResult.success(contact)
        return StoreResult.failure(StoreStatus.NOT_FOUND, f"contact '{contact_id}' not found")

    async def add_contact(self, name: str, email: str, phone: str) -> StoreResult:
        listed = await self.list_contacts()
        if not listed.ok:
            return listed
        contact = Contact(name=name, email=email, phone=phone, id=str(uuid.uuid4()))
        written = await asyncio.to_thread(self._write, [*listed.value, contact])
        if not written.ok:
            return written
        logger.info("Added contact %s", contact.id)
        return StoreResult.success(contact)

    async def remove_contact(self, contact_id: str) -> StoreResult:
        found = await self.get_contact_by_id(contact_id)
        if not found.ok:
            return found
        listed = await self.list_contacts()
        if not listed.ok:
            return listed
        remaining = [c for c in listed.value if c.id != contact_id]
        written = await asyncio.to_thread(self._write, remaining)
        if not written.ok:
            return written
        logger.info("Removed contact %s", contact_id)
        return found
