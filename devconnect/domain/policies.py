"""Ownership rules for mutating posts."""

# Standard library imports
from typing import Optional

# Local application imports
from .exceptions import AuthorizationError
from .models.post import Post


def can_mutate(acting_user_id: Optional[str], record: Post) -> bool:
    """Only the author may edit or delete a record. No roles, no overrides."""
    if not acting_user_id or record is None:
        return False
    return record.author_id == acting_user_id


def ensure_can_mutate(acting_user_id: Optional[str], record: Post) -> None:
    """
    Raises:
        AuthorizationError: If ``acting_user_id`` is not the record's author
    """
    if not can_mutate(acting_user_id, record):
        raise AuthorizationError(
            f"User {acting_user_id} is not the author of post {record.id}"
        )
