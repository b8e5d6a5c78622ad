# app/models/playlist.py
import json
import uuid
from typing import List
from datetime import datetime

from sqlalchemy import Index
from sqlmodel import SQLModel, Field

from app.models.user import utcnow


class Playlist(SQLModel, table=True):
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, nullable=False)
    owner_id: uuid.UUID = Field(foreign_key="user.id")
    name: str = Field(index=True)
    description: str = Field(default="")
    video_ids: str = Field(default="[]")  # Храним как JSON строку, порядок = порядок добавления
    created_at: datetime = Field(default_factory=utcnow)

    __table_args__ = (
        Index("ix_playlist_owner_created", "owner_id", "created_at"),
    )

    @property
    def video_id_list(self) -> List[uuid.UUID]:
        seen = set()
        ordered = []
        for raw in json.loads(self.video_ids or "[]"):
            video_id = uuid.UUID(str(raw))
            if video_id not in seen:
                seen.add(video_id)
                ordered.append(video_id)
        return ordered
