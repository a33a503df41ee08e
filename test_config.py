import pytest
from config import NotifierConfig, load_config


def test_defaults():
    config = load_config()
    assert config.TELEGRAM_ENABLED is False
    assert config.TELEGRAM_TIMEOUT == 10.0
    assert config.LOG_LEVEL == "INFO"
    assert config.STOCK_SYMBOL == "ACME"


def test_reads_environment_on_each_load(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "t")
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "c")
    monkeypatch.setenv("TELEGRAM_ENABLED", "Yes")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = load_config()

    assert config.TELEGRAM_ENABLED is True
    assert config.TELEGRAM_BOT_TOKEN == "t"
    assert config.LOG_LEVEL == "DEBUG"

    monkeypatch.setenv("STOCK_SYMBOL", "XYZ")
    assert load_config().STOCK_SYMBOL == "XYZ"


def test_enabled_telegram_requires_credentials(monkeypatch):
    monkeypatch.setenv("TELEGRAM_ENABLED", "1")
    with pytest.raises(ValueError, match="TELEGRAM_BOT_TOKEN"):
        load_config()


@pytest.mark.parametrize("overrides", [
    {"TELEGRAM_TIMEOUT": 0},
    {"TELEGRAM_TIMEOUT": float("nan")},
    {"TELEGRAM_TIMEOUT": float("inf")},
    {"LOG_LEVEL": "LOUD"},
])
def test_validate_rejects_bad_values(overrides):
    with pytest.raises(ValueError):
        NotifierConfig(**overrides).validate()


def test_nan_timeout_from_environment_rejected(monkeypatch):
    monkeypatch.setenv("TELEGRAM_TIMEOUT", "nan")
    with pytest.raises(ValueError, match="TELEGRAM_TIMEOUT"):
        load_config()
