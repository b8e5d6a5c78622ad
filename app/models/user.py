# app/models/user.py
from typing import Optional
import uuid
from datetime import datetime, timezone
from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(SQLModel, table=True):
    id: uuid.UUID = Field(
        default_factory=uuid.uuid4, primary_key=True, index=True, nullable=False
    )
    username: str = Field(index=True, unique=True)
    email: str = Field(index=True, unique=True)
    display_name: str = Field(default="")
    avatar: Optional[str] = Field(default=None)  # URL from the media service
    hashed_password: str = Field(default="")
    is_active: bool = Field(default=True)
    is_superuser: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utcnow)
