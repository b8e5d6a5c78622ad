# app/models/subscription.py

import uuid
from datetime import datetime

from sqlmodel import SQLModel, Field, UniqueConstraint

from app.models.user import utcnow


class Subscription(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    channel_id: uuid.UUID = Field(foreign_key="user.id", index=True)  # User viewed as a channel
    subscriber_id: uuid.UUID = Field(foreign_key="user.id", index=True)
    created_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (
        UniqueConstraint("channel_id", "subscriber_id", name="uq_subscription_channel_subscriber"),
    )
