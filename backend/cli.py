"""
Contacts command line.
Run: python cli.py --action list
     python cli.py --action get --id <id>
     python cli.py --action add --name <name> --email <email> --phone <phone>
     python cli.py --action remove --id <id>
"""

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from config import get_settings
from repositories import ContactStore, StoreResult

logger = logging.getLogger(__name__)

ACTIONS = ("list", "get", "add", "remove")
REQUIRED_ARGS = {
    "list": (),
    "get": ("id",),
    "add": ("name", "email", "phone"),
    "remove": ("id",),
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Manage contacts stored in a JSON file.")
    parser.add_argument("-a", "--action", required=True, choices=ACTIONS)
    parser.add_argument("-i", "--id")
    parser.add_argument("-n", "--name")
    parser.add_argument("-e", "--email")
    parser.add_argument("-p", "--phone")
    parser.add_argument("--db", type=Path, help="Contacts file (default: CONTACTS_DB_PATH or db/contacts.json)")
    return parser


def format_table(contacts: list[dict]) -> str:
    columns = ("id", "name", "email", "phone")
    widths = {
        col: max([len(col)] + [len(str(c.get(col, ""))) for c in contacts])
        for col in columns
    }
    lines = ["  ".join(col.ljust(widths[col]) for col in columns)]
    lines.append("  ".join("-" * widths[col] for col in columns))
    for c in contacts:
        lines.append("  ".join(str(c.get(col, "")).ljust(widths[col]) for col in columns))
    return "\n".join(lines)


async def run_action(args: argparse.Namespace, contact_store: ContactStore) -> StoreResult:
    if args.action == "list":
        return await contact_store.list_contacts()
    if args.action == "get":
        return await contact_store.get_contact_by_id(args.id)
    if args.action == "add":
        return await contact_store.add_contact(args.name, args.email, args.phone)
    return await contact_store.remove_contact(args.id)


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    missing = [f"--{name}" for name in REQUIRED_ARGS[args.action] if getattr(args, name) is None]
    if missing:
        parser.error(f"action '{args.action}' requires {', '.join(missing)}")

    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL, stream=sys.stderr)

    contact_store = ContactStore(args.db or settings.CONTACTS_DB_PATH)
    result = contact_store.ensure_file()
    if result.ok:
        result = asyncio.run(run_action(args, contact_store))
    if not result.ok:
        print(f"Operation failed: {result.status.value}", file=sys.stderr)
        return 1

    if args.action == "list":
        print(format_table([c.to_dict() for c in result.value]))
    else:
        print(json.dumps(result.value.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
