# app/core/rate_limiter.py
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
import redis.asyncio as redis # Используем async клиент

from app.core.config import settings
from app.core.redis_client import get_redis_client
from app.models.user import User
from app.api.auth import get_current_user

logger = logging.getLogger(__name__)

RATE_LIMIT_KEY_PREFIX = "rate_limit:user"
RATE_LIMIT_ACTION = "toggle"

async def rate_limit_toggle(
    user: User = Depends(get_current_user),
    redis_client: Optional[redis.Redis] = Depends(get_redis_client)
):
    """
    Ограничивает частоту like/subscribe переключений одного пользователя (фиксированное окно).
    Суперпользователи не ограничены. При ошибках Redis запрос пропускается (fail open).
    """
    if user.is_superuser:
        logger.debug(f"Rate limit check bypassed for superuser {user.id}")
        return True
    if redis_client is None:
        logger.warning(f"Redis unavailable, skipping toggle rate limit for user {user.id} (fail open).")
        return True

    limit = settings.toggle_rate_limit_count
    window = settings.toggle_rate_limit_window_seconds
    key = f"{RATE_LIMIT_KEY_PREFIX}:{user.id}:{RATE_LIMIT_ACTION}"

    try:
        # 1. Атомарно увеличиваем счетчик
        current_count = await redis_client.incr(key)

        # 2. Первый запрос в окне задает время жизни ключа
        if current_count == 1:
            await redis_client.expire(key, window)

        # 3. Проверяем лимит
        if current_count > limit:
            final_ttl = await redis_client.ttl(key)
            retry_after = final_ttl if final_ttl > 0 else window
            logger.warning(f"Toggle rate limit exceeded for user {user.id}. Count: {current_count}/{limit}. Retry after: {retry_after}s.")
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=f"Too many like/subscribe actions ({limit} per {window} seconds). Please try again later.",
                headers={"Retry-After": str(retry_after)}
            )

        logger.debug(f"Rate limit check passed for user {user.id}. Count: {current_count}")
        return True

    except redis.RedisError as e:
        logger.error(f"Redis error during rate limiting check for user {user.id}: {e}. Allowing request (Fail open).", exc_info=True)
        return True
