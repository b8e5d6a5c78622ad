# app/repositories/tweets.py
import uuid
from typing import List, Tuple

from sqlalchemy import func
from sqlmodel import col, select

from app.models.tweet import Tweet
from app.repositories.base import Repository


class TweetRepository(Repository):

    def exists(self, tweet_id: uuid.UUID) -> bool:
        with self.store_errors("check tweet"):
            return self.db.exec(select(Tweet.id).where(Tweet.id == tweet_id)).first() is not None

    def by_owner(self, owner_id: uuid.UUID, offset: int, limit: int) -> Tuple[int, List[Tweet]]:
        with self.store_errors("list user tweets"):
            total = self.db.exec(
                select(func.count()).select_from(Tweet).where(Tweet.owner_id == owner_id)
            ).one()
            tweets = self.db.exec(
                select(Tweet)
                .where(Tweet.owner_id == owner_id)
                .order_by(col(Tweet.created_at).desc(), col(Tweet.id).desc())
                .offset(offset)
                .limit(limit)
            ).all()
        return total, list(tweets)
