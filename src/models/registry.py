"""Kind registry: maps a persisted kind tag back to its record class."""
from __future__ import annotations

from pydantic import ValidationError

from exceptions import InvalidKeyEncoding, MalformedPayload, UnknownObjectKind
from keys import DELIMITER

from .record import ObjectRecord

_KINDS: dict[str, type[ObjectRecord]] = {}


def register_kind(cls: type[ObjectRecord]) -> type[ObjectRecord]:
    """Class decorator adding ``cls`` under its ``kind`` tag."""
    kind = cls.kind
    if not kind:
        raise ValueError(f"{cls.__name__} does not declare a kind")
    if DELIMITER in kind:
        raise InvalidKeyEncoding(f"kind contains the restricted sequence {DELIMITER!r}: {kind!r}")
    existing = _KINDS.get(kind)
    if existing is not None and existing is not cls:
        raise ValueError(f"kind {kind!r} already registered by {existing.__name__}")
    _KINDS[kind] = cls
    return cls


def record_class(kind: str) -> type[ObjectRecord]:
    cls = _KINDS.get(kind)
    if cls is None:
        raise UnknownObjectKind(kind)
    return cls


def registered_kinds() -> list[str]:
    return sorted(_KINDS)


def decode_record(kind: str, payload: bytes | str) -> ObjectRecord:
    """Build the concrete record for ``kind`` from a stored payload.

    Raises:
        UnknownObjectKind: ``kind`` is not registered.
        MalformedPayload: the payload is not valid JSON for that record type.
    """
    cls = record_class(kind)
    try:
        return cls.from_payload(payload)
    except ValidationError as e:
        raise MalformedPayload(kind, str(e)) from e


__all__ = ["register_kind", "record_class", "registered_kinds", "decode_record"]
