import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv
from fastapi import Request

from app.core.exceptions import ConfigurationError

load_dotenv()

CLEANUP_BEST_EFFORT = "best_effort"
CLEANUP_STRICT = "strict"
CLEANUP_MODES = (CLEANUP_BEST_EFFORT, CLEANUP_STRICT)

# 외래키 제약 순서: 로그 먼저, 목표 다음
DEFAULT_DEPENDENT_TABLES = ("study_daily_logs", "goals")
DEFAULT_USER_FK_COLUMN = "user_id"

REQUIRED_VARS = ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY")


@dataclass(frozen=True)
class Settings:
    supabase_url: str
    service_role_key: str
    cleanup_mode: str = CLEANUP_BEST_EFFORT
    dependent_tables: Tuple[str, ...] = DEFAULT_DEPENDENT_TABLES
    user_fk_column: str = DEFAULT_USER_FK_COLUMN
    log_level: str = "INFO"

    def __post_init__(self):
        if self.cleanup_mode not in CLEANUP_MODES:
            raise ConfigurationError(
                f"ACCOUNT_CLEANUP_MODE must be one of {', '.join(CLEANUP_MODES)}, got {self.cleanup_mode!r}"
            )
        if not self.dependent_tables:
            raise ConfigurationError("ACCOUNT_DEPENDENT_TABLES must name at least one table")

    @property
    def strict_cleanup(self) -> bool:
        return self.cleanup_mode == CLEANUP_STRICT

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "Settings":
        """
        환경변수에서 설정을 읽어온다.
        - SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY 는 필수
        - 없으면 시작 시점에 바로 실패
        """
        env = os.environ if environ is None else environ

        missing = [name for name in REQUIRED_VARS if not env.get(name)]
        if missing:
            raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

        tables = DEFAULT_DEPENDENT_TABLES
        raw_tables = env.get("ACCOUNT_DEPENDENT_TABLES")
        if raw_tables is not None:
            tables = tuple(t.strip() for t in raw_tables.split(",") if t.strip())

        return cls(
            supabase_url=env["SUPABASE_URL"],
            service_role_key=env["SUPABASE_SERVICE_ROLE_KEY"],
            cleanup_mode=env.get("ACCOUNT_CLEANUP_MODE", CLEANUP_BEST_EFFORT).strip().lower(),
            dependent_tables=tables,
            user_fk_column=env.get("ACCOUNT_USER_FK_COLUMN", DEFAULT_USER_FK_COLUMN),
            log_level=env.get("LOG_LEVEL", "INFO").upper(),
        )


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
