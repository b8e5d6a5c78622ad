# app/repositories/base.py
import logging
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.errors import Internal

logger = logging.getLogger(__name__)


class Repository:
    """Store access for one table. The session is owned by the caller."""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def store_errors(self, action: str):
        """Turns driver failures into Internal so the transport answers 500."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Store error while trying to {action}: {e}", exc_info=True)
            self.db.rollback()
            raise Internal("Database is unavailable, please retry later") from e
