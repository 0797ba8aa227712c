# -*- coding: utf-8 -*-
"""
회원 탈퇴 서비스
- 외래키 제약 순서대로 관련 데이터 삭제 후 auth 사용자 삭제
- 관련 데이터 삭제는 best-effort (strict 모드에서는 실패 시 중단)
- 롤백 없음
"""
import logging
from dataclasses import dataclass
from typing import List, Optional

from fastapi import HTTPException
from starlette import status
from supabase import Client

from app.core.config import Settings
from app.domain.account.model.principal import Principal

logger = logging.getLogger(__name__)


@dataclass
class TableCleanup:
    table: str
    ok: bool
    error: Optional[str] = None


@dataclass
class CleanupReport:
    tables: List[TableCleanup]

    @property
    def failures(self) -> List[TableCleanup]:
        return [t for t in self.tables if not t.ok]


def error_message(error: Exception) -> str:
    # postgrest APIError / AuthApiError 모두 message 속성을 가짐
    return getattr(error, "message", None) or str(error)


def delete_dependent_rows(principal: Principal, client: Client, settings: Settings) -> CleanupReport:
    results = []
    for table in settings.dependent_tables:
        try:
            client.table(table).delete().eq(settings.user_fk_column, principal.id).execute()
        except Exception as e:
            logger.error("Error deleting %s: %s", table, e)
            results.append(TableCleanup(table=table, ok=False, error=error_message(e)))
            continue

        logger.info("Deleted %s rows for user: %s", table, principal.id)
        results.append(TableCleanup(table=table, ok=True))

    return CleanupReport(tables=results)


def delete_identity(principal: Principal, client: Client):
    try:
        client.auth.admin.delete_user(principal.id)
    except Exception as e:
        logger.error("Error deleting user: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=error_message(e),
        )


def delete_account(principal: Principal, client: Client, settings: Settings):
    logger.info("Deleting account for user: %s", principal.id)

    report = delete_dependent_rows(principal, client, settings)

    if settings.strict_cleanup and report.failures:
        failed = report.failures[0]
        logger.error(
            "Strict cleanup: keeping user %s, %d table(s) failed",
            principal.id, len(report.failures),
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete {failed.table}: {failed.error}",
        )

    delete_identity(principal, client)

    logger.info("Successfully deleted account for user: %s", principal.id)
    return {"success": True}
