import pytest
from pydantic import ValidationError
from yue.core.config import Settings


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("YUE_LOG_LEVEL", "LOG_LEVEL", "YUE_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    settings = Settings.load()
    assert settings.LOG_LEVEL == "INFO"
    assert "%(message)s" in settings.LOG_FORMAT


def test_reads_package_level(clean_env):
    clean_env.setenv("YUE_LOG_LEVEL", "debug")
    clean_env.setenv("LOG_LEVEL", "ERROR")
    assert Settings.load().LOG_LEVEL == "DEBUG"


def test_ignores_generic_level(clean_env):
    clean_env.setenv("LOG_LEVEL", "trace")
    assert Settings.load().LOG_LEVEL == "INFO"


def test_reads_format(clean_env):
    clean_env.setenv("YUE_LOG_FORMAT", "%(message)s")
    assert Settings.load().LOG_FORMAT == "%(message)s"


def test_invalid_level(clean_env):
    clean_env.setenv("YUE_LOG_LEVEL", "LOUD")
    with pytest.raises(ValidationError, match="Unknown log level"):
        Settings.load()
