# app/repositories/playlists.py
import uuid
from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import col, select

from app.models.playlist import Playlist
from app.models.user import User
from app.repositories.base import Repository


class PlaylistRepository(Repository):

    def with_owner(self, playlist_id: uuid.UUID) -> Optional[Tuple[Playlist, User]]:
        with self.store_errors("load playlist"):
            return self.db.exec(
                select(Playlist, User)
                .join(User, User.id == Playlist.owner_id)
                .where(Playlist.id == playlist_id)
            ).first()

    def by_owner(self, owner_id: uuid.UUID, offset: int, limit: int) -> Tuple[int, List[Playlist]]:
        with self.store_errors("list user playlists"):
            total = self.db.exec(
                select(func.count()).select_from(Playlist).where(Playlist.owner_id == owner_id)
            ).one()
            playlists = self.db.exec(
                select(Playlist)
                .where(Playlist.owner_id == owner_id)
                .order_by(col(Playlist.created_at).desc(), col(Playlist.id).desc())
                .offset(offset)
                .limit(limit)
            ).all()
        return total, list(playlists)
