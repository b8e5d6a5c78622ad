# app/services/relations.py
"""
Relation toggle engine: likes and subscriptions.

A toggle never reads-then-writes. It first tries a conditional delete of the
(target, actor) row; only when nothing was deleted does it insert, and the
insert is guarded by the table's unique constraint. A constraint violation
means a concurrent request already created the row, so the relation is
reported as on. If that row vanished again before it could be confirmed,
the whole delete/insert sequence is retried a few times; Conflict is raised
only when every attempt loses. Concurrent toggles settle on one row or none.
"""
import logging
import uuid
from typing import Callable

from sqlmodel import Session

from app.core.config import settings
from app.core.errors import Conflict, InvalidArgument, NotFound, parse_id
from app.models.like import LikeTarget
from app.repositories.comments import CommentRepository
from app.repositories.likes import LikeRepository
from app.repositories.subscriptions import SubscriptionRepository
from app.repositories.tweets import TweetRepository
from app.repositories.users import UserRepository
from app.repositories.videos import VideoRepository
from app.schemas.engagement import (ChannelPage, LikedVideoPage, LikeToggle,
                                    SubscriberPage, SubscriptionToggle)
from app.schemas.user import OwnerSummary
from app.schemas.video import VideoSummary
from app.services.pagination import PageRequest

logger = logging.getLogger(__name__)

# Lost races retried before giving up with Conflict
MAX_TOGGLE_ATTEMPTS = 3


def _toggle(remove: Callable[[], bool], add: Callable[[], bool], count: Callable[[], int],
            attempts: int = MAX_TOGGLE_ATTEMPTS) -> bool:
    """Flips a relation and returns its new state."""
    for attempt in range(1, attempts + 1):
        if remove():
            return False
        if add():
            return True
        # A concurrent insert won the race; the relation is on as long as that row is still there
        if count() == 1:
            return True
        logger.info(f"Relation row vanished after a lost insert, retrying ({attempt}/{attempts})")
    raise Conflict("The relation changed concurrently, please retry")


class RelationService:

    def __init__(self, db: Session):
        self.db = db
        self.likes = LikeRepository(db)
        self.subscriptions = SubscriptionRepository(db)
        self.users = UserRepository(db)
        self._targets = {
            LikeTarget.VIDEO: VideoRepository(db),
            LikeTarget.COMMENT: CommentRepository(db),
            LikeTarget.TWEET: TweetRepository(db),
        }

    # ========================================
    # Likes
    # ========================================

    def toggle_like(self, target_kind, target_id, actor_id: uuid.UUID) -> LikeToggle:
        try:
            kind = LikeTarget(target_kind)
        except ValueError:
            raise InvalidArgument(f"Unsupported like target: {target_kind}")
        target_uuid = parse_id(target_id, f"{kind.value} id")

        if not self._targets[kind].exists(target_uuid):
            raise NotFound(f"{kind.value.capitalize()} not found")

        liked = _toggle(
            lambda: self.likes.remove(kind, target_uuid, actor_id),
            lambda: self.likes.add(kind, target_uuid, actor_id),
            lambda: self.likes.count(kind, target_uuid, actor_id),
        )
        logger.info(f"User {actor_id} {'liked' if liked else 'unliked'} {kind.value} {target_uuid}")
        return LikeToggle(liked=liked)

    def list_liked_videos(self, actor_id: uuid.UUID, page: int, limit: int) -> LikedVideoPage:
        request = PageRequest.of(page, limit)
        total, rows = self.likes.liked_videos(actor_id, request.offset, request.limit)
        return LikedVideoPage(
            total_liked_videos=total,
            current_page=request.page,
            total_pages=request.total_pages(total),
            liked_videos=[VideoSummary.from_db(video, owner) for video, owner in rows],
        )

    # ========================================
    # Subscriptions
    # ========================================

    def toggle_subscription(self, channel_id, actor_id: uuid.UUID) -> SubscriptionToggle:
        channel_uuid = parse_id(channel_id, "channel id")
        if channel_uuid == actor_id and not settings.allow_self_subscription:
            logger.warning(f"User {actor_id} tried to subscribe to their own channel")
            raise InvalidArgument("You cannot subscribe to your own channel")

        if not self.users.exists(channel_uuid):
            raise NotFound("Channel not found")

        subscribed = _toggle(
            lambda: self.subscriptions.remove(channel_uuid, actor_id),
            lambda: self.subscriptions.add(channel_uuid, actor_id),
            lambda: self.subscriptions.count(channel_uuid, actor_id),
        )
        logger.info(f"User {actor_id} {'subscribed to' if subscribed else 'unsubscribed from'} channel {channel_uuid}")
        return SubscriptionToggle(subscribed=subscribed)

    def channel_subscribers(self, channel_id, page: int, limit: int) -> SubscriberPage:
        channel_uuid = parse_id(channel_id, "channel id")
        request = PageRequest.of(page, limit)
        if not self.users.exists(channel_uuid):
            raise NotFound("Channel not found")

        total, users = self.subscriptions.subscribers(channel_uuid, request.offset, request.limit)
        return SubscriberPage(
            total_subscribers=total,
            current_page=request.page,
            total_pages=request.total_pages(total),
            subscribers=[OwnerSummary.model_validate(user) for user in users],
        )

    def subscribed_channels(self, subscriber_id, page: int, limit: int) -> ChannelPage:
        subscriber_uuid = parse_id(subscriber_id, "subscriber id")
        request = PageRequest.of(page, limit)

        total, users = self.subscriptions.channels(subscriber_uuid, request.offset, request.limit)
        return ChannelPage(
            total_channels=total,
            current_page=request.page,
            total_pages=request.total_pages(total),
            channels=[OwnerSummary.model_validate(user) for user in users],
        )
