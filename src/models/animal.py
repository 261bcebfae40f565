from .record import ObjectRecord
from .registry import register_kind


@register_kind
class Animal(ObjectRecord):
    """An animal record; ``owner_id`` refers to the owning record by id or name."""

    kind = "Animal"

    type: str = ""
    owner_id: str = ""


__all__ = ["Animal"]
