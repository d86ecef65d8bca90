# Standard library imports
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

# Local application imports
from ..exceptions import ValidationError
from .text_rules import clean_comment_text


@dataclass
class Comment:
    """Pure domain model for Comment entity"""
    id: Optional[str]
    text: str
    user_id: str
    post_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        self.text = clean_comment_text(self.text)
        if not self.user_id:
            raise ValidationError("Comment author is required")
        if not self.post_id:
            raise ValidationError("Comment post is required")
