# app/models/tweet.py
import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, Index
from sqlmodel import Field, SQLModel

from app.models.user import utcnow


class Tweet(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    owner_id: uuid.UUID = Field(foreign_key="user.id")
    content: str
    created_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (
        CheckConstraint("length(trim(content)) > 0", name="ck_tweet_content_not_empty"),
        Index("ix_tweet_owner_created", "owner_id", "created_at"),
    )
