"""
Object store facade over a key-value backend.

Each record is written under ``<id>::<name>::<kind>`` (see ``keys``). Lookups
by id, name or kind are glob scans over the key space followed by one fetch
per matching key, so every read costs a scan linear in the total number of
keys. Nothing is cached and no locks are held: the backend is the only
shared state, and a concurrent writer may race between a scan and the
fetch/delete that follows it.
"""
from __future__ import annotations

import uuid
from typing import Callable, Optional

from loguru import logger

import keys
from backends import KeyValueBackend, RedisBackend
from cancellation import Context
from config import _Settings
from exceptions import AmbiguousID, InvalidInput, NotFound, ObjectStoreError
from models import ObjectRecord, decode_record


class ObjectStore:
    def __init__(self, backend: KeyValueBackend):
        self._backend = backend

    @classmethod
    def from_settings(cls, settings: Optional[_Settings] = None) -> "ObjectStore":
        """Store over a connected Redis backend configured from env."""
        return cls(RedisBackend.connect(settings))

    @property
    def backend(self) -> KeyValueBackend:
        return self._backend

    # ----------------- Public API -----------------
    def store(self, record: ObjectRecord, ctx: Optional[Context] = None) -> ObjectRecord:
        """Persist ``record`` under a freshly generated id.

        The id is only assigned once the write succeeded, so a rejected,
        cancelled or failed record keeps whatever id it had. Storing the same
        instance twice creates two independent entries.

        Raises:
            InvalidInput: name or kind is empty.
            InvalidKeyEncoding: name or kind contains the ``::`` delimiter.
        """
        ctx = ctx or Context.background()
        name, kind = record.get_name(), record.get_kind()
        if not name:
            raise InvalidInput("empty name")
        if not kind:
            raise InvalidInput("empty kind")

        object_id = str(uuid.uuid4())
        key = keys.build_key(object_id, name, kind)

        ctx.check()
        payload = record.model_copy(update={"id": object_id}).to_payload()
        self._backend.set(key, payload)
        record.set_id(object_id)
        logger.debug(f"stored {key} ({len(payload)} bytes)")
        return record

    def get_object_by_id(self, object_id: str, ctx: Optional[Context] = None) -> ObjectRecord:
        """
        Raises:
            InvalidInput: empty id.
            NotFound: no record has this id.
            AmbiguousID: more than one key carries this id.
        """
        ctx = ctx or Context.background()
        if not object_id:
            raise InvalidInput("empty id")
        key = self._single_key(object_id, ctx)
        if key is None:
            raise NotFound(f"object {object_id!r} not found")

        ctx.check()
        value = self._backend.get(key)
        if value is None:
            logger.warning(f"key {key} vanished between scan and fetch")
            raise NotFound(f"object {object_id!r} not found")
        return decode_record(keys.kind_from_key(key), value)

    def get_objects_by_name(self, name: str, ctx: Optional[Context] = None) -> list[ObjectRecord]:
        if not name:
            raise InvalidInput("empty name")
        return self._list(
            keys.name_pattern(name),
            lambda key: keys.name_from_key(key) == name,
            ctx or Context.background(),
        )

    def list_objects(self, kind: str, ctx: Optional[Context] = None) -> list[ObjectRecord]:
        if not kind:
            raise InvalidInput("empty kind")
        return self._list(
            keys.kind_pattern(kind),
            lambda key: keys.kind_from_key(key) == kind,
            ctx or Context.background(),
        )

    def delete_object(self, object_id: str, ctx: Optional[Context] = None) -> None:
        """Delete the record with ``object_id``; unknown ids are a no-op."""
        ctx = ctx or Context.background()
        if not object_id:
            raise InvalidInput("empty id")
        key = self._single_key(object_id, ctx)
        if key is None:
            logger.debug(f"delete of unknown id {object_id} ignored")
            return
        ctx.check()
        removed = self._backend.delete(key)
        logger.debug(f"deleted {key} (removed={removed})")

    # ----------------- Helpers -----------------
    def _single_key(self, object_id: str, ctx: Context) -> str | None:
        ctx.check()
        matches = self._backend.keys(keys.id_pattern(object_id))
        if not matches:
            return None
        if len(matches) > 1:
            logger.warning(f"{len(matches)} keys share id {object_id}: {sorted(matches)}")
            raise AmbiguousID(f"multiple objects with the same id {object_id!r}")
        return matches[0]

    def _list(self, pattern: str, accept: Callable[[str], bool], ctx: Context) -> list[ObjectRecord]:
        # Fail-fast: one undecodable record aborts the whole batch.
        ctx.check()
        # A glob "*" may swallow a ":" belonging to the segment, so re-check it exactly.
        matches = sorted(k for k in self._backend.keys(pattern) if accept(k))
        logger.debug(f"scan {pattern} matched {len(matches)} keys")

        objects: list[ObjectRecord] = []
        for key in matches:
            ctx.check()
            value = self._backend.get(key)
            if value is None:
                logger.warning(f"key {key} vanished between scan and fetch, skipping")
                continue
            try:
                objects.append(decode_record(keys.kind_from_key(key), value))
            except ObjectStoreError as e:
                logger.error(f"cannot decode {key}: {e}")
                raise
        return objects


__all__ = ["ObjectStore"]
