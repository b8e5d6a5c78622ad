# app/schemas/video.py
from datetime import datetime
from typing import List, Optional
import uuid

from app.schemas.common import CamelModel
from app.schemas.user import OwnerSummary


class VideoSummary(CamelModel):
    id: uuid.UUID
    title: str
    description: str
    media_ref: str
    thumbnail: Optional[str] = None
    views: int
    duration: float
    is_published: bool
    created_at: datetime
    owner: Optional[OwnerSummary] = None

    @classmethod
    def from_db(cls, video, owner=None):
        # Column names differ from the public field names
        return cls(
            id=video.id,
            title=video.title,
            description=video.description,
            media_ref=video.media_ref,
            thumbnail=video.thumbnail_ref,
            views=video.view_count,
            duration=video.duration_seconds,
            is_published=video.is_published,
            created_at=video.created_at,
            owner=OwnerSummary.model_validate(owner) if owner is not None else None,
        )


class VideoPage(CamelModel):
    total_count: int
    page: int
    limit: int
    total_pages: int
    videos: List[VideoSummary]


class ChannelVideoPage(CamelModel):
    total_videos: int
    current_page: int
    total_pages: int
    videos: List[VideoSummary]
