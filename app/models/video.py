# app/models/video.py
import uuid
from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, Index
from sqlmodel import Field, SQLModel

from app.models.user import utcnow


class Video(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    owner_id: uuid.UUID = Field(foreign_key="user.id", index=True)
    title: str = Field(index=True)
    description: str = Field(default="")
    media_ref: str  # opaque URL returned by the upload service
    thumbnail_ref: Optional[str] = None
    duration_seconds: float = Field(default=0)
    view_count: int = Field(default=0)
    is_published: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utcnow, index=True)

    __table_args__ = (
        CheckConstraint("view_count >= 0", name="ck_video_view_count_non_negative"),
        Index("ix_video_owner_created", "owner_id", "created_at"),
    )
