"""
Record types stored in the object store
"""

from .animal import Animal
from .person import Person
from .record import ObjectRecord
from .registry import decode_record, record_class, register_kind, registered_kinds

__all__ = [
    "Animal",
    "ObjectRecord",
    "Person",
    "decode_record",
    "record_class",
    "register_kind",
    "registered_kinds",
]
