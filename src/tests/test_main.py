"""CLI tests against an in-process store."""

import json

import pytest

from backends import MemoryBackend
from main import main
from store import ObjectStore


@pytest.fixture
def db():
    return ObjectStore(MemoryBackend())


def run(capsys, db, *argv):
    code = main(list(argv), store=db)
    out, err = capsys.readouterr()
    return code, out, err


def test_put_and_get(capsys, db):
    code, out, _ = run(capsys, db, "put-person", "alice", "--last-name", "jordon", "--birthdate", "1990-02-01")
    assert code == 0
    created = json.loads(out)
    assert created["kind"] == "Person"
    assert created["last_name"] == "jordon"

    code, out, _ = run(capsys, db, "get", created["id"])
    assert code == 0
    assert json.loads(out)["name"] == "alice"


def test_by_name_list_delete(capsys, db):
    run(capsys, db, "put-animal", "tiger", "--type", "wild-animal", "--owner-id", "alice")
    code, out, _ = run(capsys, db, "by-name", "tiger")
    found = json.loads(out)
    assert [a["type"] for a in found] == ["wild-animal"]

    code, out, _ = run(capsys, db, "list", "Animal")
    assert len(json.loads(out)) == 1

    code, _, _ = run(capsys, db, "delete", found[0]["id"])
    assert code == 0
    _, out, _ = run(capsys, db, "list", "Animal")
    assert json.loads(out) == []


def test_store_errors_exit_nonzero(capsys, db):
    code, _, err = run(capsys, db, "put-person", "a::b")
    assert code == 1
    assert "error:" in err

    code, _, err = run(capsys, db, "get", "missing")
    assert code == 1
    assert "not found" in err


def test_kinds(capsys, db):
    _, out, _ = run(capsys, db, "kinds")
    assert {"Animal", "Person"} <= set(json.loads(out))


def test_demo(capsys, db):
    code, out, _ = run(capsys, db, "demo", "--flush")
    assert code == 0
    report = json.loads(out)
    assert len(report["deleted_people"]) == 2
    assert report["animal_by_id"]["name"] == "tiger"
    assert report["remaining_people"] == 0
    assert report["remaining_animals"] == 0


def test_bad_birthdate_is_a_usage_error(capsys, db):
    with pytest.raises(SystemExit) as exc:
        main(["put-person", "alice", "--birthdate", "not-a-date"], store=db)
    assert exc.value.code == 2
    assert "--birthdate" in capsys.readouterr().err
    assert db.list_objects("Person") == []
