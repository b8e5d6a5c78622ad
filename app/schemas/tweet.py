# app/schemas/tweet.py
from datetime import datetime
from typing import List
import uuid

from app.schemas.common import CamelModel


class TweetRead(CamelModel):
    id: uuid.UUID
    content: str
    created_at: datetime


class TweetPage(CamelModel):
    total_tweets: int
    current_page: int
    total_pages: int
    tweets: List[TweetRead]
