from datetime import datetime, timezone

from .record import ObjectRecord
from .registry import register_kind

# Zero timestamp used when no birthdate is known
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


@register_kind
class Person(ObjectRecord):
    """
    A person record.

    Attributes:
        last_name: Family name
        birthday: Free-form birthday string as entered (e.g. '01-02-1990')
        birthdate: Parsed date of birth
    """

    kind = "Person"

    last_name: str = ""
    birthday: str = ""
    birthdate: datetime = ZERO_TIME


__all__ = ["Person", "ZERO_TIME"]
