import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api import account_router
from app.core.config import Settings
from app.core.exceptions import error_response

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    # 설정은 시작 시 한 번만 읽음 (없으면 바로 실패)
    settings = settings or Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Delete Account")
    app.state.settings = settings

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request, exc):
        return error_response(exc.status_code, str(exc.detail), getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request, exc):
        return error_response(422, "Invalid request")

    # 라우터 등록
    app.include_router(account_router.router)

    logger.info("Account deletion service ready (cleanup mode: %s)", settings.cleanup_mode)
    return app


app = create_app()
