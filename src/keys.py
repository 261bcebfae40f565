"""Composite key codec.

Every record lives under ``<id>::<name>::<kind>``. The three scan patterns
below fake a secondary index on each segment using the backend's glob
matching. Segments are never escaped: a name or kind that contains the
delimiter is rejected at write time.
"""
from __future__ import annotations

from exceptions import InvalidKeyEncoding

DELIMITER = "::"

_GLOB_SPECIAL = "\\*?[]"


def build_key(object_id: str, name: str, kind: str) -> str:
    key = DELIMITER.join((object_id, name, kind))
    if key.count(DELIMITER) != 2:
        raise InvalidKeyEncoding(f"unexpected restricted delimiter {DELIMITER!r} in key {key!r}")
    return key


def kind_from_key(key: str) -> str:
    """Everything after the last delimiter ("" when there is none)."""
    _, sep, kind = key.rpartition(DELIMITER)
    return kind if sep else ""


def id_from_key(key: str) -> str:
    return key.partition(DELIMITER)[0]


def name_from_key(key: str) -> str:
    """The segment between the first and the last delimiter."""
    _, sep, rest = key.partition(DELIMITER)
    if not sep:
        return ""
    name, sep, _ = rest.rpartition(DELIMITER)
    return name if sep else ""


def escape_glob(literal: str) -> str:
    return "".join("\\" + ch if ch in _GLOB_SPECIAL else ch for ch in literal)


def id_pattern(object_id: str) -> str:
    return f"{escape_glob(object_id)}{DELIMITER}*{DELIMITER}*"


def name_pattern(name: str) -> str:
    return f"*{DELIMITER}{escape_glob(name)}{DELIMITER}*"


def kind_pattern(kind: str) -> str:
    return f"*{DELIMITER}*{DELIMITER}{escape_glob(kind)}"


__all__ = [
    "DELIMITER",
    "build_key",
    "kind_from_key",
    "id_from_key",
    "name_from_key",
    "escape_glob",
    "id_pattern",
    "name_pattern",
    "kind_pattern",
]
