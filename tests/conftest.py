"""
Pytest configuration and fixtures.

Every test gets a fresh in-memory SQLite database. API tests talk to the app
through FastAPI's TestClient with the database dependency pointed at that
database and the Redis-backed rate limiter switched off.
"""

import json
from datetime import datetime, timedelta, timezone
from typing import Generator, List, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from app.core.database import get_db
from app.core.rate_limiter import rate_limit_toggle
from app.core.security import create_access_token
from app.main import app
from app.models.comment import Comment
from app.models.like import Like, LikeTarget
from app.models.playlist import Playlist
from app.models.subscription import Subscription
from app.models.tweet import Tweet
from app.models.user import User
from app.models.video import Video

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


# ================================
# Database Fixtures
# ================================

@pytest.fixture
def engine():
    """In-memory database shared by every connection of the test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


# ================================
# Data Fixtures
# ================================

class Seed:
    """Creates rows directly, bypassing the engines under test."""

    def __init__(self, db: Session):
        self.db = db
        self._tick = 0

    def _next_time(self) -> datetime:
        # Strictly increasing timestamps keep "newest first" assertions deterministic
        self._tick += 1
        return BASE_TIME + timedelta(minutes=self._tick)

    def _save(self, row):
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return row

    def user(self, username: str, **fields) -> User:
        fields.setdefault("email", f"{username}@example.com")
        fields.setdefault("display_name", username.capitalize())
        return self._save(User(username=username, **fields))

    def video(self, owner: User, title: str = "Untitled", **fields) -> Video:
        fields.setdefault("media_ref", f"https://media.example.com/{title.replace(' ', '-')}.mp4")
        fields.setdefault("created_at", self._next_time())
        return self._save(Video(owner_id=owner.id, title=title, **fields))

    def comment(self, video: Video, owner: User, content: str = "Nice video") -> Comment:
        return self._save(Comment(video_id=video.id, owner_id=owner.id, content=content, created_at=self._next_time()))

    def tweet(self, owner: User, content: str = "Hello") -> Tweet:
        return self._save(Tweet(owner_id=owner.id, content=content, created_at=self._next_time()))

    def playlist(self, owner: User, name: str, videos: Optional[List[Video]] = None, description: str = "") -> Playlist:
        video_ids = json.dumps([str(video.id) for video in (videos or [])])
        return self._save(
            Playlist(owner_id=owner.id, name=name, description=description, video_ids=video_ids, created_at=self._next_time())
        )

    def like(self, kind: LikeTarget, target_id, user: User) -> Like:
        return self._save(Like(target_kind=kind, target_id=target_id, liked_by=user.id, created_at=self._next_time()))

    def subscription(self, channel: User, subscriber: User) -> Subscription:
        return self._save(Subscription(channel_id=channel.id, subscriber_id=subscriber.id, created_at=self._next_time()))


@pytest.fixture
def seed(db_session: Session) -> Seed:
    return Seed(db_session)


@pytest.fixture
def alice(seed: Seed) -> User:
    return seed.user("alice")


@pytest.fixture
def bob(seed: Seed) -> User:
    return seed.user("bob")


# ================================
# FastAPI Client Fixtures
# ================================

@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    HTTP client bound to the test database.

    Not used as a context manager, so the lifespan (file database + Redis pool)
    never starts.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[rate_limit_toggle] = lambda: True

    yield TestClient(app)

    app.dependency_overrides.clear()


def bearer(user: User) -> dict:
    token = create_access_token(data={"sub": str(user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers():
    """Returns a function building bearer headers for a user."""
    return bearer
