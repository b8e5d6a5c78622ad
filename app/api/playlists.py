# app/api/playlists.py

from fastapi import APIRouter

from app.core.database import SessionDep
from app.schemas.common import ApiResponse
from app.schemas.playlist import PlaylistDetail
from app.services.aggregation import AggregationService

router = APIRouter()


@router.get("/{playlist_id}", response_model=ApiResponse[PlaylistDetail])
def get_playlist_by_id(playlist_id: str, db: SessionDep):
    """Возвращает плейлист с видео в порядке добавления."""
    result = AggregationService(db).playlist_detail(playlist_id)
    return ApiResponse(status_code=200, data=result, message="Playlist fetched successfully")
