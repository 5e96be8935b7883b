import re

from bson import ObjectId

_OBJECT_ID_PATTERN = re.compile(r"[0-9a-fA-F]{24}")


def is_valid_object_id(value: object) -> bool:
    """Return True when ``value`` is the 24 hex character text form of an ObjectId.

    ``ObjectId.is_valid`` is not used: it also accepts 12 byte strings and
    hex text with embedded whitespace.
    """
    return isinstance(value, str) and _OBJECT_ID_PATTERN.fullmatch(value) is not None


def new_object_id() -> str:
    return str(ObjectId())
