# Standard library imports
from typing import Any, Iterable, List, Optional

# External package imports
from bson import ObjectId
from bson.errors import InvalidId


def to_object_id(value: Any) -> Optional[ObjectId]:
    """Parse an ID string; malformed or empty values become None."""
    if isinstance(value, ObjectId):
        return value
    if not value:
        return None
    try:
        return ObjectId(value)
    except (InvalidId, ValueError, TypeError):
        return None


def to_object_ids(values: Iterable[Any]) -> List[ObjectId]:
    """Parse many IDs, silently dropping malformed ones and duplicates."""
    seen = set()
    object_ids = []
    for value in values:
        object_id = to_object_id(value)
        if object_id is not None and object_id not in seen:
            seen.add(object_id)
            object_ids.append(object_id)
    return object_ids


def id_str(value: Any) -> str:
    return str(value) if value is not None else ""
