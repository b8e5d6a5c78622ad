# app/models/like.py

import enum
import uuid
from datetime import datetime

from sqlmodel import SQLModel, Field, UniqueConstraint

from app.models.user import utcnow


class LikeTarget(str, enum.Enum):
    VIDEO = "video"
    COMMENT = "comment"
    TWEET = "tweet"


class Like(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    target_kind: LikeTarget = Field(index=True)
    # Polymorphic reference, no foreign key: the table depends on target_kind
    target_id: uuid.UUID = Field(index=True)
    liked_by: uuid.UUID = Field(foreign_key="user.id", index=True)
    created_at: datetime = Field(default_factory=utcnow)

    # One like per (target, user); the toggle relies on this constraint
    __table_args__ = (
        UniqueConstraint("target_kind", "target_id", "liked_by", name="uq_like_target_user"),
    )
