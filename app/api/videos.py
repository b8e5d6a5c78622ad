# app/api/videos.py

from typing import Optional

from fastapi import APIRouter, Query

from app.core.config import settings
from app.core.database import SessionDep
from app.schemas.comment import CommentPage
from app.schemas.common import ApiResponse
from app.schemas.video import VideoPage, VideoSummary
from app.services.aggregation import AggregationService

router = APIRouter()


@router.get("", response_model=ApiResponse[VideoPage])
def get_all_videos(
    db: SessionDep,
    page: int = Query(1, description="Page number, starting at 1"),
    limit: int = Query(settings.default_page_limit, description="Items per page"),
    query: Optional[str] = Query(None, description="Case-insensitive substring of title or description"),
    sort_by: str = Query("createdAt", alias="sortBy", description="createdAt | title | views | duration"),
    sort_type: str = Query("desc", alias="sortType", description="asc | desc"),
    user_id: Optional[str] = Query(None, alias="userId", description="Only videos of this owner"),
):
    """
    Lists videos with optional owner and text filters.
    Sorted by the requested field, id breaks ties.
    """
    result = AggregationService(db).list_videos(
        page=page, limit=limit, query=query, sort_by=sort_by, sort_type=sort_type, user_id=user_id
    )
    return ApiResponse(status_code=200, data=result, message="Videos fetched successfully")


@router.get("/{video_id}", response_model=ApiResponse[VideoSummary])
def get_video_by_id(video_id: str, db: SessionDep):
    result = AggregationService(db).video_detail(video_id)
    return ApiResponse(status_code=200, data=result, message="Video fetched successfully")


@router.get("/{video_id}/comments", response_model=ApiResponse[CommentPage])
def get_video_comments(
    video_id: str,
    db: SessionDep,
    page: int = Query(1),
    limit: int = Query(settings.default_page_limit),
):
    result = AggregationService(db).video_comments(video_id, page, limit)
    return ApiResponse(status_code=200, data=result, message="Video comments fetched successfully")
