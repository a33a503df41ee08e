import pytest

ENV_VARS = [
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_CHAT_ID",
    "TELEGRAM_ENABLED",
    "TELEGRAM_TIMEOUT",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "STOCK_SYMBOL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep settings from the developer's shell out of config-driven tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
