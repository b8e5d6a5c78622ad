# app/schemas/comment.py
from datetime import datetime
from typing import List
import uuid

from app.schemas.common import CamelModel
from app.schemas.user import OwnerSummary


class CommentRead(CamelModel):
    id: uuid.UUID
    video_id: uuid.UUID
    content: str
    created_at: datetime
    owner: OwnerSummary


class CommentPage(CamelModel):
    total_comments: int
    current_page: int
    total_pages: int
    comments: List[CommentRead]
