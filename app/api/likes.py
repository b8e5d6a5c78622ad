# app/api/likes.py

from fastapi import APIRouter, Depends, Query

from app.api.auth import get_current_user
from app.core.config import settings
from app.core.database import SessionDep
from app.core.rate_limiter import rate_limit_toggle
from app.models.like import LikeTarget
from app.models.user import User
from app.schemas.common import ApiResponse
from app.schemas.engagement import LikedVideoPage, LikeToggle
from app.services.relations import RelationService

router = APIRouter()


def _toggle(kind: LikeTarget, target_id: str, user: User, db) -> ApiResponse[LikeToggle]:
    result = RelationService(db).toggle_like(kind, target_id, user.id)
    label = kind.value.capitalize()
    message = f"{label} liked successfully" if result.liked else f"{label} unliked successfully"
    return ApiResponse(status_code=200, data=result, message=message)


@router.post("/videos/{video_id}/like", response_model=ApiResponse[LikeToggle], dependencies=[Depends(rate_limit_toggle)])
def toggle_video_like(video_id: str, db: SessionDep, current_user: User = Depends(get_current_user)):
    """Лайк/анлайк видео."""
    return _toggle(LikeTarget.VIDEO, video_id, current_user, db)


@router.post("/comments/{comment_id}/like", response_model=ApiResponse[LikeToggle], dependencies=[Depends(rate_limit_toggle)])
def toggle_comment_like(comment_id: str, db: SessionDep, current_user: User = Depends(get_current_user)):
    return _toggle(LikeTarget.COMMENT, comment_id, current_user, db)


@router.post("/tweets/{tweet_id}/like", response_model=ApiResponse[LikeToggle], dependencies=[Depends(rate_limit_toggle)])
def toggle_tweet_like(tweet_id: str, db: SessionDep, current_user: User = Depends(get_current_user)):
    return _toggle(LikeTarget.TWEET, tweet_id, current_user, db)


@router.get("/likes/videos", response_model=ApiResponse[LikedVideoPage])
def get_liked_videos(
    db: SessionDep,
    current_user: User = Depends(get_current_user),
    page: int = Query(1, description="Page number, starting at 1"),
    limit: int = Query(settings.default_page_limit, description="Items per page"),
):
    """Видео, которые лайкнул текущий пользователь, сначала последние."""
    result = RelationService(db).list_liked_videos(current_user.id, page, limit)
    return ApiResponse(status_code=200, data=result, message="Liked videos fetched successfully")
