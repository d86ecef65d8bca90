# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

# Local application imports
from ..exceptions import ValidationError
from .text_rules import BIO_MAX_LENGTH


def normalize_email(email: Optional[str]) -> str:
    """Emails are stored trimmed and lower-cased so uniqueness is case-insensitive."""
    return (email or "").strip().lower()


def normalize_skills(skills: Optional[List[str]]) -> List[str]:
    """Trim every skill and drop empty entries, keeping the original order."""
    return [skill.strip() for skill in (skills or []) if skill and skill.strip()]


@dataclass
class User:
    """Pure domain model for User entity - no external dependencies"""
    id: Optional[str]
    name: str
    email: str
    hashed_password: str
    bio: str = ""
    skills: List[str] = field(default_factory=list)
    avatar: str = ""
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Business validations"""
        self.name = (self.name or "").strip()
        self.email = normalize_email(self.email)
        self.bio = (self.bio or "").strip()
        self.skills = normalize_skills(self.skills)
        self.avatar = (self.avatar or "").strip()

        if not self.name:
            raise ValidationError("Name is required")
        if not self.email or "@" not in self.email:
            raise ValidationError("Please include a valid email")
        if not self.hashed_password:
            raise ValidationError("Password hash is required")
        if len(self.bio) > BIO_MAX_LENGTH:
            raise ValidationError(f"Bio cannot exceed {BIO_MAX_LENGTH} characters")
