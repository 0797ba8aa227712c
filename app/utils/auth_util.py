import logging
from typing import Optional

from fastapi import HTTPException
from starlette import status
from supabase import Client

from app.domain.account.model.principal import Principal

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: Optional[str]) -> str:
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
        )

    # Bearer prefix 제거
    return authorization.replace(BEARER_PREFIX, "", 1)


def resolve_principal(client: Client, token: str) -> Principal:
    """
    토큰으로 사용자 조회
    - 조회 실패 또는 사용자 없음 -> 401
    """
    try:
        response = client.auth.get_user(token)
    except Exception as e:
        logger.warning("Token verification failed: %s", e)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    user = getattr(response, "user", None) if response is not None else None
    if user is None or not getattr(user, "id", None):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    return Principal(id=str(user.id), email=getattr(user, "email", None))
