import os
import math
import logging
from dataclasses import dataclass, field


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


@dataclass
class NotifierConfig:
    # Telegram Configuration
    TELEGRAM_BOT_TOKEN: str = field(default_factory=lambda: _env("TELEGRAM_BOT_TOKEN"))
    TELEGRAM_CHAT_ID: str = field(default_factory=lambda: _env("TELEGRAM_CHAT_ID"))
    TELEGRAM_ENABLED: bool = field(default_factory=lambda: _env_flag("TELEGRAM_ENABLED"))
    TELEGRAM_TIMEOUT: float = field(default_factory=lambda: float(_env("TELEGRAM_TIMEOUT", "10")))

    # Logging
    LOG_LEVEL: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO").upper())
    LOG_FORMAT: str = field(default_factory=lambda: _env("LOG_FORMAT", "%(message)s"))

    # Demo
    STOCK_SYMBOL: str = field(default_factory=lambda: _env("STOCK_SYMBOL", "ACME"))

    def validate(self):
        if not math.isfinite(self.TELEGRAM_TIMEOUT) or self.TELEGRAM_TIMEOUT <= 0:
            raise ValueError("TELEGRAM_TIMEOUT must be a positive, finite number")
        if not isinstance(logging.getLevelName(self.LOG_LEVEL), int):
            raise ValueError(f"Unknown LOG_LEVEL: {self.LOG_LEVEL}")
        if self.TELEGRAM_ENABLED and not (self.TELEGRAM_BOT_TOKEN and self.TELEGRAM_CHAT_ID):
            raise ValueError("TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID are required when Telegram is enabled")


def load_config() -> NotifierConfig:
    """Read a fresh, validated config from the current environment."""
    config = NotifierConfig()
    config.validate()
    return config
