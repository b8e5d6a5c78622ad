# app/core/database.py
from sqlmodel import create_engine, SQLModel, Session
from app.core.config import settings
from typing import Generator, Annotated
from fastapi import Depends

connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, echo=settings.database_echo, connect_args=connect_args)


def get_db() -> Generator:
    with Session(engine) as session:
        yield session


def init_db():
    # Tables must be registered on the metadata before create_all
    from app.models import user, video, comment, tweet, like, subscription, playlist  # noqa: F401
    SQLModel.metadata.create_all(engine)


SessionDep = Annotated[Session, Depends(get_db)]
