# app/schemas/engagement.py
from typing import List

from app.schemas.common import CamelModel
from app.schemas.user import OwnerSummary
from app.schemas.video import VideoSummary


class LikeToggle(CamelModel):
    liked: bool


class SubscriptionToggle(CamelModel):
    subscribed: bool


class LikedVideoPage(CamelModel):
    total_liked_videos: int
    current_page: int
    total_pages: int
    liked_videos: List[VideoSummary]


class SubscriberPage(CamelModel):
    total_subscribers: int
    current_page: int
    total_pages: int
    subscribers: List[OwnerSummary]


class ChannelPage(CamelModel):
    total_channels: int
    current_page: int
    total_pages: int
    channels: List[OwnerSummary]


class ChannelStats(CamelModel):
    """Best-effort counters, each read separately (no shared snapshot)."""
    total_videos: int = 0
    total_views: int = 0
    total_likes: int = 0
    total_subscribers: int = 0
