
class ObjectStoreError(RuntimeError):
    code = "object_store_error"

    def __init__(self, message: str):  # noqa: D401
        super().__init__(f"[{self.code}] {message}")
        self.message = message


class InvalidInput(ObjectStoreError):
    """Caller-supplied arguments violate a precondition."""
    code = "invalid_input"


class InvalidKeyEncoding(InvalidInput):
    """A would-be key does not contain exactly two delimiters."""
    code = "invalid_key_encoding"


class NotFound(ObjectStoreError):
    code = "not_found"


class AmbiguousID(ObjectStoreError):
    """More than one stored key matches a supposedly unique id."""
    code = "ambiguous_id"


class UnknownObjectKind(ObjectStoreError):
    code = "unknown_object_kind"

    def __init__(self, kind: str):
        super().__init__(f"unknown object kind: {kind!r}")
        self.kind = kind


class MalformedPayload(ObjectStoreError):
    code = "malformed_payload"

    def __init__(self, kind: str, message: str):
        super().__init__(f"cannot decode {kind} payload: {message}")
        self.kind = kind


class OperationCancelled(ObjectStoreError):
    code = "cancelled"


__all__ = [
    "ObjectStoreError",
    "InvalidInput",
    "InvalidKeyEncoding",
    "NotFound",
    "AmbiguousID",
    "UnknownObjectKind",
    "MalformedPayload",
    "OperationCancelled",
]
