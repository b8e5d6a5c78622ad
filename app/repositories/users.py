# app/repositories/users.py
import uuid

from sqlmodel import select

from app.models.user import User
from app.repositories.base import Repository


class UserRepository(Repository):

    def exists(self, user_id: uuid.UUID) -> bool:
        with self.store_errors("check user"):
            return self.db.exec(select(User.id).where(User.id == user_id)).first() is not None
