# Standard library imports
from typing import Optional

# Local application imports
from ..exceptions import ValidationError


TITLE_MAX_LENGTH = 200
BODY_MAX_LENGTH = 5000
COMMENT_MAX_LENGTH = 1000
BIO_MAX_LENGTH = 500


def clean_text(value: Optional[str], minimum: int, maximum: int, message: str) -> str:
    """
    Trim leading/trailing whitespace and enforce a length range.
    
    Args:
        value: Raw input (None counts as empty)
        minimum: Smallest allowed length after trimming
        maximum: Largest allowed length after trimming
        message: Error message used when the range is violated
        
    Returns:
        The trimmed string
        
    Raises:
        ValidationError: If the trimmed length falls outside [minimum, maximum]
    """
    if value is not None and not isinstance(value, str):
        raise ValidationError(message)
    cleaned = (value or "").strip()
    if not minimum <= len(cleaned) <= maximum:
        raise ValidationError(message)
    return cleaned


def clean_title(title: Optional[str]) -> str:
    return clean_text(
        title, 1, TITLE_MAX_LENGTH,
        f"Title must be between 1 and {TITLE_MAX_LENGTH} characters",
    )


def clean_body(body: Optional[str]) -> str:
    return clean_text(
        body, 1, BODY_MAX_LENGTH,
        f"Body must be between 1 and {BODY_MAX_LENGTH} characters",
    )


def clean_comment_text(text: Optional[str]) -> str:
    return clean_text(
        text, 1, COMMENT_MAX_LENGTH,
        f"Comment must be between 1 and {COMMENT_MAX_LENGTH} characters",
    )
