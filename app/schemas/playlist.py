# app/schemas/playlist.py
from typing import List

from datetime import datetime
import uuid

from app.schemas.common import CamelModel
from app.schemas.user import OwnerSummary
from app.schemas.video import VideoSummary


class PlaylistRead(CamelModel):
    id: uuid.UUID
    name: str
    description: str
    video_ids: List[uuid.UUID]
    video_count: int
    created_at: datetime

    @classmethod
    def from_db(cls, db_model):
        # JSON строка из БД превращается обратно в список
        video_ids = db_model.video_id_list
        return cls(
            id=db_model.id,
            name=db_model.name,
            description=db_model.description,
            video_ids=video_ids,
            video_count=len(video_ids),
            created_at=db_model.created_at,
        )


class PlaylistPage(CamelModel):
    total_playlists: int
    current_page: int
    total_pages: int
    playlists: List[PlaylistRead]


class PlaylistDetail(CamelModel):
    id: uuid.UUID
    name: str
    description: str
    owner: OwnerSummary
    videos: List[VideoSummary]
    created_at: datetime
