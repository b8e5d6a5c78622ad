# app/repositories/videos.py
import uuid
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import col, select

from app.models.user import User
from app.models.video import Video
from app.repositories.base import Repository

# Public sort keys -> columns
SORT_COLUMNS = {
    "createdAt": Video.created_at,
    "title": Video.title,
    "views": Video.view_count,
    "duration": Video.duration_seconds,
}


class VideoRepository(Repository):

    def exists(self, video_id: uuid.UUID) -> bool:
        with self.store_errors("check video"):
            return self.db.exec(select(Video.id).where(Video.id == video_id)).first() is not None

    def search(
        self,
        owner_id: Optional[uuid.UUID],
        search_text: Optional[str],
        sort_by: str,
        descending: bool,
        offset: int,
        limit: int,
    ) -> Tuple[int, List[Tuple[Video, User]]]:
        """Filtered, sorted page of videos with their owners, plus the total match count."""
        conditions = []
        if owner_id is not None:
            conditions.append(Video.owner_id == owner_id)
        if search_text:
            conditions.append(
                col(Video.title).icontains(search_text, autoescape=True)
                | col(Video.description).icontains(search_text, autoescape=True)
            )

        sort_column = col(SORT_COLUMNS[sort_by])
        # id breaks ties so pages never overlap
        order = (sort_column.desc(), col(Video.id).desc()) if descending else (sort_column.asc(), col(Video.id).asc())

        with self.store_errors("search videos"):
            total = self.db.exec(select(func.count()).select_from(Video).where(*conditions)).one()
            rows = self.db.exec(
                select(Video, User)
                .join(User, User.id == Video.owner_id)
                .where(*conditions)
                .order_by(*order)
                .offset(offset)
                .limit(limit)
            ).all()
        return total, list(rows)

    def by_owner(self, owner_id: uuid.UUID, offset: int, limit: int) -> Tuple[int, List[Video]]:
        with self.store_errors("list channel videos"):
            total = self.db.exec(
                select(func.count()).select_from(Video).where(Video.owner_id == owner_id)
            ).one()
            videos = self.db.exec(
                select(Video)
                .where(Video.owner_id == owner_id)
                .order_by(col(Video.created_at).desc(), col(Video.id).desc())
                .offset(offset)
                .limit(limit)
            ).all()
        return total, list(videos)

    def owner_totals(self, owner_id: uuid.UUID) -> Tuple[int, int]:
        """Video count and summed views for a channel, zeros when it has no videos."""
        with self.store_errors("aggregate channel videos"):
            count, views = self.db.exec(
                select(func.count(Video.id), func.coalesce(func.sum(Video.view_count), 0))
                .where(Video.owner_id == owner_id)
            ).one()
        return int(count or 0), int(views or 0)

    def with_owners(self, video_ids: List[uuid.UUID]) -> List[Tuple[Video, User]]:
        """Videos for the given ids in the same order; unknown ids are skipped."""
        if not video_ids:
            return []
        with self.store_errors("load videos"):
            rows = self.db.exec(
                select(Video, User)
                .join(User, User.id == Video.owner_id)
                .where(col(Video.id).in_(video_ids))
            ).all()
        by_id = {video.id: (video, owner) for video, owner in rows}
        return [by_id[video_id] for video_id in video_ids if video_id in by_id]
