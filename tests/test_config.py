import pytest

from app.core.config import CLEANUP_BEST_EFFORT, DEFAULT_DEPENDENT_TABLES, Settings
from app.core.exceptions import ConfigurationError

BASE_ENV = {
    "SUPABASE_URL": "https://project.supabase.co",
    "SUPABASE_SERVICE_ROLE_KEY": "service-key",
}


def test_defaults():
    settings = Settings.from_env(dict(BASE_ENV))

    assert settings.supabase_url == "https://project.supabase.co"
    assert settings.service_role_key == "service-key"
    assert settings.cleanup_mode == CLEANUP_BEST_EFFORT
    assert settings.dependent_tables == DEFAULT_DEPENDENT_TABLES == ("study_daily_logs", "goals")
    assert settings.user_fk_column == "user_id"
    assert settings.strict_cleanup is False


def test_missing_required_values_fail_fast():
    with pytest.raises(ConfigurationError) as exc_info:
        Settings.from_env({})

    assert "SUPABASE_URL" in str(exc_info.value)
    assert "SUPABASE_SERVICE_ROLE_KEY" in str(exc_info.value)


def test_empty_value_counts_as_missing():
    env = dict(BASE_ENV, SUPABASE_SERVICE_ROLE_KEY="")

    with pytest.raises(ConfigurationError, match="SUPABASE_SERVICE_ROLE_KEY"):
        Settings.from_env(env)


def test_overrides():
    env = dict(
        BASE_ENV,
        ACCOUNT_CLEANUP_MODE=" Strict ",
        ACCOUNT_DEPENDENT_TABLES="a, b ,,c",
        ACCOUNT_USER_FK_COLUMN="owner_id",
        LOG_LEVEL="debug",
    )

    settings = Settings.from_env(env)

    assert settings.strict_cleanup is True
    assert settings.dependent_tables == ("a", "b", "c")
    assert settings.user_fk_column == "owner_id"
    assert settings.log_level == "DEBUG"


def test_unknown_cleanup_mode():
    with pytest.raises(ConfigurationError, match="ACCOUNT_CLEANUP_MODE"):
        Settings.from_env(dict(BASE_ENV, ACCOUNT_CLEANUP_MODE="sometimes"))


def test_empty_table_list():
    with pytest.raises(ConfigurationError, match="ACCOUNT_DEPENDENT_TABLES"):
        Settings.from_env(dict(BASE_ENV, ACCOUNT_DEPENDENT_TABLES=" , "))
