# app/repositories/subscriptions.py
import logging
import uuid
from typing import List, Tuple

from sqlalchemy import delete, func
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, select

from app.models.subscription import Subscription
from app.models.user import User
from app.repositories.base import Repository

logger = logging.getLogger(__name__)


class SubscriptionRepository(Repository):

    def _key(self, channel_id: uuid.UUID, subscriber_id: uuid.UUID):
        return (Subscription.channel_id == channel_id, Subscription.subscriber_id == subscriber_id)

    def count(self, channel_id: uuid.UUID, subscriber_id: uuid.UUID) -> int:
        with self.store_errors("count subscriptions"):
            return self.db.exec(
                select(func.count()).select_from(Subscription).where(*self._key(channel_id, subscriber_id))
            ).one()

    def remove(self, channel_id: uuid.UUID, subscriber_id: uuid.UUID) -> bool:
        with self.store_errors("remove subscription"):
            result = self.db.exec(delete(Subscription).where(*self._key(channel_id, subscriber_id)))
            self.db.commit()
        return result.rowcount > 0

    def add(self, channel_id: uuid.UUID, subscriber_id: uuid.UUID) -> bool:
        with self.store_errors("add subscription"):
            self.db.add(Subscription(channel_id=channel_id, subscriber_id=subscriber_id))
            try:
                self.db.commit()
                return True
            except IntegrityError:
                self.db.rollback()
                logger.info(f"Subscription {subscriber_id} -> {channel_id} already inserted by a concurrent request.")
                return False

    def count_for_channel(self, channel_id: uuid.UUID) -> int:
        with self.store_errors("count subscribers"):
            return self.db.exec(
                select(func.count()).select_from(Subscription).where(Subscription.channel_id == channel_id)
            ).one()

    def subscribers(self, channel_id: uuid.UUID, offset: int, limit: int) -> Tuple[int, List[User]]:
        with self.store_errors("list subscribers"):
            total = self.count_for_channel(channel_id)
            users = self.db.exec(
                select(User)
                .join(Subscription, Subscription.subscriber_id == User.id)
                .where(Subscription.channel_id == channel_id)
                .order_by(col(Subscription.created_at).desc(), col(Subscription.id).desc())
                .offset(offset)
                .limit(limit)
            ).all()
        return total, list(users)

    def channels(self, subscriber_id: uuid.UUID, offset: int, limit: int) -> Tuple[int, List[User]]:
        with self.store_errors("list subscribed channels"):
            total = self.db.exec(
                select(func.count()).select_from(Subscription).where(Subscription.subscriber_id == subscriber_id)
            ).one()
            users = self.db.exec(
                select(User)
                .join(Subscription, Subscription.channel_id == User.id)
                .where(Subscription.subscriber_id == subscriber_id)
                .order_by(col(Subscription.created_at).desc(), col(Subscription.id).desc())
                .offset(offset)
                .limit(limit)
            ).all()
        return total, list(users)
