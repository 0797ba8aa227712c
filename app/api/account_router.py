import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette import status

from app.core.config import Settings, get_settings
from app.core.cors import CORS_HEADERS
from app.domain.account.service.delete_account_service import delete_account
from app.infrastructure.db.supabase_client import ClientFactory, get_admin_client_factory
from app.utils.auth_util import extract_bearer_token, resolve_principal

logger = logging.getLogger(__name__)

router = APIRouter(tags=["account"])

DELETE_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]


@router.options("/")
@router.options("/delete-account")
async def preflight():
    # CORS preflight: 백엔드 호출 없음
    return PlainTextResponse("ok", headers=CORS_HEADERS)


@router.api_route("/", methods=DELETE_METHODS)
@router.api_route("/delete-account", methods=DELETE_METHODS)
def delete_account_endpoint(
        authorization: Optional[str] = Header(None),
        settings: Settings = Depends(get_settings),
        client_factory: ClientFactory = Depends(get_admin_client_factory),
):
    """
    회원 탈퇴
    - Authorization: Bearer <token> 필요
    - 관련 데이터(study_daily_logs, goals) 삭제 후 auth 사용자 삭제
    """
    try:
        client = client_factory()
        token = extract_bearer_token(authorization)
        principal = resolve_principal(client, token)
        result = delete_account(principal, client, settings)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )

    return JSONResponse(content=result, headers=CORS_HEADERS)
