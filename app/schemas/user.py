# app/schemas/user.py
from typing import Optional
import uuid

from app.schemas.common import CamelModel


class OwnerSummary(CamelModel):
    """Minimal projection of a user embedded into listings."""
    id: uuid.UUID
    username: str
    display_name: str
    avatar: Optional[str] = None
