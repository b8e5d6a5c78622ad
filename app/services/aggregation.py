# app/services/aggregation.py
"""
Aggregation query engine: paginated listings and channel statistics.

Nothing here writes. Channel stats are assembled from independent reads and
are best-effort: a like or subscription landing between two reads can make
the counters disagree for a moment.
"""
import logging
import uuid
from typing import Optional

from sqlmodel import Session

from app.core.errors import InvalidArgument, NotFound, parse_id
from app.repositories.comments import CommentRepository
from app.repositories.likes import LikeRepository
from app.repositories.playlists import PlaylistRepository
from app.repositories.subscriptions import SubscriptionRepository
from app.repositories.tweets import TweetRepository
from app.repositories.users import UserRepository
from app.repositories.videos import SORT_COLUMNS, VideoRepository
from app.schemas.comment import CommentPage, CommentRead
from app.schemas.engagement import ChannelStats
from app.schemas.playlist import PlaylistDetail, PlaylistPage, PlaylistRead
from app.schemas.tweet import TweetPage, TweetRead
from app.schemas.user import OwnerSummary
from app.schemas.video import ChannelVideoPage, VideoPage, VideoSummary
from app.services.pagination import PageRequest

logger = logging.getLogger(__name__)

SORT_TYPES = ("asc", "desc")


class AggregationService:

    def __init__(self, db: Session):
        self.db = db
        self.users = UserRepository(db)
        self.videos = VideoRepository(db)
        self.comments = CommentRepository(db)
        self.tweets = TweetRepository(db)
        self.playlists = PlaylistRepository(db)
        self.likes = LikeRepository(db)
        self.subscriptions = SubscriptionRepository(db)

    def _require_user(self, user_id, label: str) -> uuid.UUID:
        user_uuid = parse_id(user_id, f"{label.lower()} id")
        if not self.users.exists(user_uuid):
            raise NotFound(f"{label} not found")
        return user_uuid

    def list_videos(
        self,
        page: int = 1,
        limit: int = 10,
        query: Optional[str] = None,
        sort_by: str = "createdAt",
        sort_type: str = "desc",
        user_id=None,
    ) -> VideoPage:
        request = PageRequest.of(page, limit)
        if sort_by not in SORT_COLUMNS:
            raise InvalidArgument(f"Invalid sort field, expected one of: {', '.join(SORT_COLUMNS)}")
        if sort_type not in SORT_TYPES:
            raise InvalidArgument("Invalid sort type, expected 'asc' or 'desc'")
        owner_id = parse_id(user_id, "user id") if user_id else None
        # Blank queries match everything; otherwise the raw text is the substring
        search_text = query if query and query.strip() else None

        logger.debug(f"Listing videos: owner={owner_id}, query={search_text!r}, sort={sort_by} {sort_type}, page={request}")
        total, rows = self.videos.search(
            owner_id=owner_id,
            search_text=search_text,
            sort_by=sort_by,
            descending=sort_type == "desc",
            offset=request.offset,
            limit=request.limit,
        )
        return VideoPage(
            total_count=total,
            page=request.page,
            limit=request.limit,
            total_pages=request.total_pages(total),
            videos=[VideoSummary.from_db(video, owner) for video, owner in rows],
        )

    def channel_stats(self, channel_id) -> ChannelStats:
        channel_uuid = self._require_user(channel_id, "Channel")

        total_videos, total_views = self.videos.owner_totals(channel_uuid)
        stats = ChannelStats(
            total_videos=total_videos,
            total_views=total_views,
            total_likes=self.likes.count_for_channel_videos(channel_uuid),
            total_subscribers=self.subscriptions.count_for_channel(channel_uuid),
        )
        logger.debug(f"Stats for channel {channel_uuid}: {stats}")
        return stats

    def channel_videos(self, channel_id, page: int, limit: int) -> ChannelVideoPage:
        channel_uuid = self._require_user(channel_id, "Channel")
        request = PageRequest.of(page, limit)

        total, videos = self.videos.by_owner(channel_uuid, request.offset, request.limit)
        return ChannelVideoPage(
            total_videos=total,
            current_page=request.page,
            total_pages=request.total_pages(total),
            videos=[VideoSummary.from_db(video) for video in videos],
        )

    def video_detail(self, video_id) -> VideoSummary:
        video_uuid = parse_id(video_id, "video id")
        rows = self.videos.with_owners([video_uuid])
        if not rows:
            raise NotFound("Video not found")
        video, owner = rows[0]
        return VideoSummary.from_db(video, owner)

    def video_comments(self, video_id, page: int, limit: int) -> CommentPage:
        video_uuid = parse_id(video_id, "video id")
        request = PageRequest.of(page, limit)
        if not self.videos.exists(video_uuid):
            raise NotFound("Video not found")

        total, rows = self.comments.for_video(video_uuid, request.offset, request.limit)
        return CommentPage(
            total_comments=total,
            current_page=request.page,
            total_pages=request.total_pages(total),
            comments=[
                CommentRead(
                    id=comment.id,
                    video_id=comment.video_id,
                    content=comment.content,
                    created_at=comment.created_at,
                    owner=OwnerSummary.model_validate(owner),
                )
                for comment, owner in rows
            ],
        )

    def user_tweets(self, user_id, page: int, limit: int) -> TweetPage:
        # Unknown users simply have no tweets
        user_uuid = parse_id(user_id, "user id")
        request = PageRequest.of(page, limit)

        total, tweets = self.tweets.by_owner(user_uuid, request.offset, request.limit)
        return TweetPage(
            total_tweets=total,
            current_page=request.page,
            total_pages=request.total_pages(total),
            tweets=[TweetRead.model_validate(tweet) for tweet in tweets],
        )

    def user_playlists(self, user_id, page: int, limit: int) -> PlaylistPage:
        user_uuid = parse_id(user_id, "user id")
        request = PageRequest.of(page, limit)

        total, playlists = self.playlists.by_owner(user_uuid, request.offset, request.limit)
        return PlaylistPage(
            total_playlists=total,
            current_page=request.page,
            total_pages=request.total_pages(total),
            playlists=[PlaylistRead.from_db(playlist) for playlist in playlists],
        )

    def playlist_detail(self, playlist_id) -> PlaylistDetail:
        playlist_uuid = parse_id(playlist_id, "playlist id")
        row = self.playlists.with_owner(playlist_uuid)
        if row is None:
            raise NotFound("Playlist not found")

        playlist, owner = row
        videos = self.videos.with_owners(playlist.video_id_list)
        return PlaylistDetail(
            id=playlist.id,
            name=playlist.name,
            description=playlist.description,
            owner=OwnerSummary.model_validate(owner),
            videos=[VideoSummary.from_db(video, video_owner) for video, video_owner in videos],
            created_at=playlist.created_at,
        )
