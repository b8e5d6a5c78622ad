# app/api/users.py

from fastapi import APIRouter, Query

from app.core.config import settings
from app.core.database import SessionDep
from app.schemas.common import ApiResponse
from app.schemas.engagement import ChannelPage
from app.schemas.playlist import PlaylistPage
from app.schemas.tweet import TweetPage
from app.services.aggregation import AggregationService
from app.services.relations import RelationService

router = APIRouter()


@router.get("/{user_id}/tweets", response_model=ApiResponse[TweetPage])
def get_user_tweets(
    user_id: str,
    db: SessionDep,
    page: int = Query(1),
    limit: int = Query(settings.default_page_limit),
):
    result = AggregationService(db).user_tweets(user_id, page, limit)
    return ApiResponse(status_code=200, data=result, message="User tweets fetched successfully")


@router.get("/{user_id}/playlists", response_model=ApiResponse[PlaylistPage])
def get_user_playlists(
    user_id: str,
    db: SessionDep,
    page: int = Query(1),
    limit: int = Query(settings.default_page_limit),
):
    result = AggregationService(db).user_playlists(user_id, page, limit)
    return ApiResponse(status_code=200, data=result, message="User playlists fetched successfully")


@router.get("/{user_id}/subscriptions", response_model=ApiResponse[ChannelPage])
def get_subscribed_channels(
    user_id: str,
    db: SessionDep,
    page: int = Query(1),
    limit: int = Query(settings.default_page_limit),
):
    """Каналы, на которые подписан пользователь."""
    result = RelationService(db).subscribed_channels(user_id, page, limit)
    return ApiResponse(status_code=200, data=result, message="Subscribed channels fetched successfully")
