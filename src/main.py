"""objdb command line entrypoint (flat layout).

Every store operation is exposed as a subcommand printing JSON on stdout.
``demo`` replays the walkthrough of storing, querying and deleting a few
people and animals against a live backend.
"""
from __future__ import annotations

import argparse
import json
import sys
from datetime import datetime
from typing import Any, Sequence

import redis

from app_logging import get_logger, init_logging
from backends import MemoryBackend, RedisBackend
from exceptions import ObjectStoreError
from models import Animal, ObjectRecord, Person, registered_kinds
from store import ObjectStore

log = get_logger("objdb.main")


def _emit(data: Any) -> None:
    print(json.dumps(data, indent=2, default=str))


def _record_out(record: ObjectRecord) -> dict[str, Any]:
    return {"kind": record.get_kind(), **record.to_dict()}


def _cmd_put_person(store: ObjectStore, args) -> None:
    person = Person(last_name=args.last_name, birthday=args.birthday)
    if args.birthdate:
        person.birthdate = args.birthdate
    person.set_name(args.name)
    _emit(_record_out(store.store(person)))


def _cmd_put_animal(store: ObjectStore, args) -> None:
    animal = Animal(type=args.type, owner_id=args.owner_id)
    animal.set_name(args.name)
    _emit(_record_out(store.store(animal)))


def _cmd_get(store: ObjectStore, args) -> None:
    _emit(_record_out(store.get_object_by_id(args.id)))


def _cmd_by_name(store: ObjectStore, args) -> None:
    _emit([_record_out(r) for r in store.get_objects_by_name(args.name)])


def _cmd_list(store: ObjectStore, args) -> None:
    _emit([_record_out(r) for r in store.list_objects(args.kind)])


def _cmd_delete(store: ObjectStore, args) -> None:
    store.delete_object(args.id)
    _emit({"deleted": args.id})


def _cmd_kinds(store: ObjectStore, args) -> None:
    _emit(registered_kinds())


def _cmd_demo(store: ObjectStore, args) -> None:
    if args.flush:
        store.backend.flush()

    store.store(Animal(name="tiger", type="wild-animal", owner_id="alice"))
    store.store(Person(name="alice", last_name="jordon"))
    store.store(Person(name="alice", last_name="macy"))

    tiger = store.get_objects_by_name("tiger")[0]
    people = store.get_objects_by_name("alice")
    log.info("found by name", extra={"tiger": 1, "alice": len(people)})

    report: dict[str, Any] = {"deleted_people": []}
    for person in store.list_objects(Person.kind):
        store.delete_object(person.get_id())
        report["deleted_people"].append(_record_out(person))

    animal = store.get_object_by_id(tiger.get_id())
    report["animal_by_id"] = _record_out(animal)
    store.delete_object(animal.get_id())

    report["remaining_people"] = len(store.list_objects(Person.kind))
    report["remaining_animals"] = len(store.list_objects(Animal.kind))
    _emit(report)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="objdb", description="Polymorphic object store over Redis")
    parser.add_argument("--memory", action="store_true", help="use an in-process backend instead of Redis")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("put-person", help="store a person")
    p.add_argument("name")
    p.add_argument("--last-name", default="")
    p.add_argument("--birthday", default="")
    p.add_argument("--birthdate", default=None, type=datetime.fromisoformat, help="ISO 8601 date/time")
    p.set_defaults(func=_cmd_put_person)

    p = sub.add_parser("put-animal", help="store an animal")
    p.add_argument("name")
    p.add_argument("--type", default="")
    p.add_argument("--owner-id", default="")
    p.set_defaults(func=_cmd_put_animal)

    p = sub.add_parser("get", help="fetch one object by id")
    p.add_argument("id")
    p.set_defaults(func=_cmd_get)

    p = sub.add_parser("by-name", help="fetch all objects with a name")
    p.add_argument("name")
    p.set_defaults(func=_cmd_by_name)

    p = sub.add_parser("list", help="list all objects of a kind")
    p.add_argument("kind")
    p.set_defaults(func=_cmd_list)

    p = sub.add_parser("delete", help="delete an object by id")
    p.add_argument("id")
    p.set_defaults(func=_cmd_delete)

    p = sub.add_parser("kinds", help="show registered kinds")
    p.set_defaults(func=_cmd_kinds)

    p = sub.add_parser("demo", help="run the store/query/delete walkthrough")
    p.add_argument("--flush", action="store_true", help="flush the database first")
    p.set_defaults(func=_cmd_demo)
    return parser


def main(argv: Sequence[str] | None = None, store: ObjectStore | None = None) -> int:
    init_logging()
    args = build_parser().parse_args(argv)
    try:
        if store is None:
            store = ObjectStore(MemoryBackend() if args.memory else RedisBackend.connect())
        args.func(store, args)
    except ObjectStoreError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    except redis.RedisError as e:
        log.error("backend_error", extra={"error": str(e)})
        print(f"backend error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
