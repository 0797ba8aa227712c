from typing import Optional

from fastapi.responses import JSONResponse

from app.core.cors import CORS_HEADERS


class ConfigurationError(Exception):
    """Required settings are missing or invalid."""


def error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": message},
        headers={**CORS_HEADERS, **(headers or {})},
    )
