# app/repositories/comments.py
import uuid
from typing import List, Tuple

from sqlalchemy import func
from sqlmodel import col, select

from app.models.comment import Comment
from app.models.user import User
from app.repositories.base import Repository


class CommentRepository(Repository):

    def exists(self, comment_id: uuid.UUID) -> bool:
        with self.store_errors("check comment"):
            return self.db.exec(select(Comment.id).where(Comment.id == comment_id)).first() is not None

    def for_video(self, video_id: uuid.UUID, offset: int, limit: int) -> Tuple[int, List[Tuple[Comment, User]]]:
        with self.store_errors("list video comments"):
            total = self.db.exec(
                select(func.count()).select_from(Comment).where(Comment.video_id == video_id)
            ).one()
            rows = self.db.exec(
                select(Comment, User)
                .join(User, User.id == Comment.owner_id)
                .where(Comment.video_id == video_id)
                .order_by(col(Comment.created_at).desc(), col(Comment.id).desc())
                .offset(offset)
                .limit(limit)
            ).all()
        return total, list(rows)
