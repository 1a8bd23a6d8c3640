import pytest

from pos.infrastructure.config import DEFAULT_DATABASE_URL, Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.log_level == "INFO"
    assert settings.log_format == "console"
    assert settings.sql_echo is False


def test_reads_environment():
    settings = Settings.from_env({
        "POS_DATABASE_URL": "sqlite://",
        "POS_LOG_LEVEL": "debug",
        "POS_LOG_FORMAT": "JSON",
        "POS_SQL_ECHO": "1",
    })
    assert settings.database_url == "sqlite://"
    assert settings.log_level == "DEBUG"
    assert settings.log_format == "json"
    assert settings.sql_echo is True


@pytest.mark.parametrize(
    "env", [{"POS_LOG_LEVEL": "chatty"}, {"POS_LOG_FORMAT": "xml"}]
)
def test_rejects_bad_values(env):
    with pytest.raises(ValueError):
        Settings.from_env(env)
