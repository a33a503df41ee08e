import logging
import requests
from typing import Optional
from config import NotifierConfig
from notification import Sender, SendError

API_URL = "https://api.telegram.org/bot{token}/sendMessage"


class TelegramSender(Sender):
    """Terminal sender that posts each message to a Telegram chat."""

    def __init__(self, config: NotifierConfig, session: Optional[requests.Session] = None):
        self.logger = logging.getLogger(__name__)
        self.bot_token = config.TELEGRAM_BOT_TOKEN
        self.chat_id = config.TELEGRAM_CHAT_ID
        self.timeout = config.TELEGRAM_TIMEOUT
        self.enabled = bool(config.TELEGRAM_ENABLED and self.bot_token and self.chat_id)
        self.session = session or requests.Session()

        if self.enabled:
            self.logger.info("Telegram sender initialized")
        else:
            self.logger.warning("Telegram sender disabled - check token and chat_id")

    def send(self, message: str) -> None:
        if not self.enabled:
            self.logger.error("Telegram sender is disabled, message not sent")
            raise SendError("Telegram sender is disabled", message, type(self).__name__)

        payload = {
            'chat_id': self.chat_id,
            'text': message,
            'parse_mode': 'HTML'
        }
        try:
            response = self.session.post(API_URL.format(token=self.bot_token), json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            self.logger.error(f"Error sending Telegram message: {e}")
            raise SendError(f"Telegram request failed: {e}", message, type(self).__name__) from e

        if response.status_code != 200:
            self.logger.error(f"Telegram API returned {response.status_code}: {response.text}")
            raise SendError(f"Telegram API returned {response.status_code}", message, type(self).__name__)

        self.logger.info("Telegram message sent")

    def close(self) -> None:
        self.session.close()
