import json
from pathlib import Path

import pytest

from cli import format_table, main


def test_add_get_list_remove(contacts_path: Path, capsys) -> None:
    db = ["--db", str(contacts_path)]

    assert main(["--action", "add", "--name", "Ann", "--email", "ann@example.com", "--phone", "111", *db]) == 0
    added = json.loads(capsys.readouterr().out)

    assert main(["--action", "get", "--id", added["id"], *db]) == 0
    assert json.loads(capsys.readouterr().out) == added

    assert main(["--action", "list", *db]) == 0
    listing = capsys.readouterr().out
    assert added["id"] in listing
    assert "ann@example.com" in listing

    assert main(["-a", "remove", "-i", added["id"], *db]) == 0
    assert json.loads(capsys.readouterr().out) == added
    assert json.loads(contacts_path.read_text(encoding="utf-8")) == []


def test_unknown_id_exits_with_failure(contacts_path: Path, capsys) -> None:
    assert main(["--action", "get", "--id", "nope", "--db", str(contacts_path)]) == 1
    assert "not_found" in capsys.readouterr().err


def test_missing_arguments_are_rejected(contacts_path: Path) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--action", "add", "--name", "Ann", "--db", str(contacts_path)])

    assert exc.value.code == 2


def test_unknown_action_is_rejected() -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--action", "update"])

    assert exc.value.code == 2


def test_list_creates_missing_file(tmp_path: Path, capsys) -> None:
    path = tmp_path / "db" / "contacts.json"

    assert main(["--action", "list", "--db", str(path)]) == 0
    assert path.read_text(encoding="utf-8") == "[]"


def test_format_table_aligns_columns() -> None:
    table = format_table([
        {"id": "1", "name": "Ann", "email": "a@example.com", "phone": "111"},
        {"id": "22", "name": "Bartholomew", "email": "b@example.com", "phone": "2"},
    ])
    lines = table.splitlines()

    assert lines[0].startswith("id  name")
    assert len({len(line.rstrip()) for line in lines[:2]}) == 1
    assert "Bartholomew" in lines[3]


def test_unusable_db_path_exits_with_failure(tmp_path: Path, capsys) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")

    rc = main(["--action", "list", "--db", str(blocker / "db" / "contacts.json")])

    assert rc == 1
    assert "storage_error" in capsys.readouterr().err


def test_unknown_log_level_falls_back(contacts_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "verbose")

    assert main(["--action", "list", "--db", str(contacts_path)]) == 0
