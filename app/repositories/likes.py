# app/repositories/likes.py
import logging
import uuid
from typing import List, Tuple

from sqlalchemy import and_, delete, func
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select

from app.models.like import Like, LikeTarget
from app.models.user import User
from app.models.video import Video
from app.repositories.base import Repository

logger = logging.getLogger(__name__)


class LikeRepository(Repository):

    def _key(self, kind: LikeTarget, target_id: uuid.UUID, user_id: uuid.UUID):
        return (Like.target_kind == kind, Like.target_id == target_id, Like.liked_by == user_id)

    def count(self, kind: LikeTarget, target_id: uuid.UUID, user_id: uuid.UUID) -> int:
        with self.store_errors("count likes"):
            return self.db.exec(
                select(func.count()).select_from(Like).where(*self._key(kind, target_id, user_id))
            ).one()

    def remove(self, kind: LikeTarget, target_id: uuid.UUID, user_id: uuid.UUID) -> bool:
        """Conditional delete. True when a like existed and is now gone."""
        with self.store_errors("remove like"):
            result = self.db.exec(delete(Like).where(*self._key(kind, target_id, user_id)))
            self.db.commit()
        return result.rowcount > 0

    def add(self, kind: LikeTarget, target_id: uuid.UUID, user_id: uuid.UUID) -> bool:
        """
        Inserts the like under the unique constraint.
        Returns False when a concurrent request inserted the same row first.
        """
        with self.store_errors("add like"):
            self.db.add(Like(target_kind=kind, target_id=target_id, liked_by=user_id))
            try:
                self.db.commit()
                return True
            except IntegrityError:
                self.db.rollback()
                logger.info(f"Like {kind.value}:{target_id} by {user_id} already inserted by a concurrent request.")
                return False

    def count_for_channel_videos(self, channel_id: uuid.UUID) -> int:
        channel_videos = select(Video.id).where(Video.owner_id == channel_id)
        with self.store_errors("count channel likes"):
            return self.db.exec(
                select(func.count())
                .select_from(Like)
                .where(Like.target_kind == LikeTarget.VIDEO, col(Like.target_id).in_(channel_videos))
            ).one()

    def liked_videos(self, user_id: uuid.UUID, offset: int, limit: int) -> Tuple[int, List[Tuple[Video, User]]]:
        """Videos liked by the user, newest like first. Likes of deleted videos are left out."""
        video_like = and_(
            Like.target_kind == LikeTarget.VIDEO,
            Like.target_id == Video.id,
            Like.liked_by == user_id,
        )
        with self.store_errors("list liked videos"):
            total = self.db.exec(
                select(func.count()).select_from(Like).join(Video, video_like)
            ).one()
            rows = self.db.exec(
                select(Video, User)
                .join(Like, video_like)
                .join(User, User.id == Video.owner_id)
                .order_by(col(Like.created_at).desc(), col(Like.id).desc())
                .offset(offset)
                .limit(limit)
            ).all()
        return total, list(rows)
