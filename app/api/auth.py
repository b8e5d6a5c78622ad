# app/api/auth.py
"""
Identity context. Tokens are issued elsewhere; here the bearer JWT is only
verified and its `sub` (the user id) resolved to an active user.
"""
import logging
import uuid
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from app.core.database import get_db
from app.core.security import decode_access_token
from app.models.user import User
from sqlmodel import Session

logger = logging.getLogger(__name__)

# auto_error=False: a missing token gets the same 401 as a bad one
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="token", auto_error=False)


def _resolve_user(token: Optional[str], db: Session) -> Optional[User]:
    if not token:
        return None
    payload = decode_access_token(token)
    if payload is None:
        logger.warning("Rejected bearer token: invalid signature or expired")
        return None
    try:
        user_id = uuid.UUID(str(payload.get("sub")))
    except ValueError:
        logger.warning("Rejected bearer token: subject is not a user id")
        return None
    user = db.get(User, user_id)
    if user is None or not user.is_active:
        return None
    return user


def get_current_user(db: Session = Depends(get_db), token: Optional[str] = Depends(oauth2_scheme)) -> User:
    user = _resolve_user(token, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user

