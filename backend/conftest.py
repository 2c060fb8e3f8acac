import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import store
from repositories import ContactStore


@pytest.fixture()
def contacts_path(tmp_path: Path) -> Path:
    path = tmp_path / "db" / "contacts.json"
    path.parent.mkdir()
    path.write_text("[]", encoding="utf-8")
    return path


@pytest.fixture()
def contact_store(contacts_path: Path) -> ContactStore:
    return ContactStore(contacts_path)


@pytest.fixture(autouse=True)
def reset_default_store():
    yield
    store.set_contact_store(None)
