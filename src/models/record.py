"""
Base model shared by every storable record.

Records are plain pydantic models serialized as JSON objects keyed by field
name, so payloads written before an optional field was added still load.
The ``kind`` tag is a class-level constant chosen per record type; it is part
of the persisted key and must stay stable across releases.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict

from exceptions import InvalidKeyEncoding
from keys import DELIMITER


class ObjectRecord(BaseModel):
    """
    Common identity fields and accessors.

    Attributes:
        id: Unique identifier assigned by the store on write
        name: Non-unique, caller-chosen name (must not contain ``::``)
    """

    model_config = ConfigDict(extra="ignore")

    kind: ClassVar[str] = ""

    id: str = ""
    name: str = ""

    def get_kind(self) -> str:
        return type(self).kind

    def get_id(self) -> str:
        return self.id

    def get_name(self) -> str:
        return self.name

    def set_id(self, object_id: str) -> None:
        self.id = object_id

    def set_name(self, name: str) -> None:
        """Set the name, refusing values that would break the key encoding."""
        if DELIMITER in name:
            raise InvalidKeyEncoding(f"name contains the restricted sequence {DELIMITER!r}: {name!r}")
        self.name = name

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_payload(self) -> bytes:
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def from_payload(cls, payload: bytes | str) -> "ObjectRecord":
        return cls.model_validate_json(payload)


__all__ = ["ObjectRecord"]
