# app/models/comment.py
import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, Index
from sqlmodel import Field, SQLModel

from app.models.user import utcnow


class Comment(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    video_id: uuid.UUID = Field(foreign_key="video.id")
    owner_id: uuid.UUID = Field(foreign_key="user.id", index=True)
    content: str
    created_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (
        CheckConstraint("length(trim(content)) > 0", name="ck_comment_content_not_empty"),
        Index("ix_comment_video_created", "video_id", "created_at"),
    )
