# app/api/channels.py

from fastapi import APIRouter, Depends, Query

from app.api.auth import get_current_user
from app.core.config import settings
from app.core.database import SessionDep
from app.core.rate_limiter import rate_limit_toggle
from app.models.user import User
from app.schemas.common import ApiResponse
from app.schemas.engagement import ChannelStats, SubscriberPage
from app.schemas.video import ChannelVideoPage
from app.services.aggregation import AggregationService
from app.services.relations import RelationService

router = APIRouter()


@router.post("/{channel_id}/subscribe", response_model=ApiResponse[dict], dependencies=[Depends(rate_limit_toggle)])
def toggle_subscription(channel_id: str, db: SessionDep, current_user: User = Depends(get_current_user)):
    """Подписка/отписка от канала. Новое состояние передается в message."""
    result = RelationService(db).toggle_subscription(channel_id, current_user.id)
    message = "Subscribed successfully" if result.subscribed else "Unsubscribed successfully"
    return ApiResponse(status_code=200, data={}, message=message)


@router.get("/{channel_id}/stats", response_model=ApiResponse[ChannelStats])
def get_channel_stats(channel_id: str, db: SessionDep):
    result = AggregationService(db).channel_stats(channel_id)
    return ApiResponse(status_code=200, data=result, message="Channel stats fetched successfully")


@router.get("/{channel_id}/videos", response_model=ApiResponse[ChannelVideoPage])
def get_channel_videos(
    channel_id: str,
    db: SessionDep,
    page: int = Query(1),
    limit: int = Query(settings.default_page_limit),
):
    result = AggregationService(db).channel_videos(channel_id, page, limit)
    return ApiResponse(status_code=200, data=result, message="Channel videos fetched successfully")


@router.get("/{channel_id}/subscribers", response_model=ApiResponse[SubscriberPage])
def get_channel_subscribers(
    channel_id: str,
    db: SessionDep,
    page: int = Query(1),
    limit: int = Query(settings.default_page_limit),
):
    result = RelationService(db).channel_subscribers(channel_id, page, limit)
    return ApiResponse(status_code=200, data=result, message="Subscribers fetched successfully")
