import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class SendError(Exception):
    """A notification could not be delivered by one layer of the pipeline."""

    def __init__(self, reason: str, message=None, layer: Optional[str] = None):
        super().__init__(reason)
        self.reason = reason
        self.message = message
        self.layer = layer


class Sender:
    """Sender interface: anything that can deliver a text message."""

    def send(self, message: str) -> None:
        raise NotImplementedError("Sender subclasses must implement 'send' method.")

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class EmailSender(Sender):
    def __init__(self):
        self.sent = []

    def send(self, message: str) -> None:
        print(f"Sending email: {message}")
        self.sent.append(message)


class SmsSender(Sender):
    def __init__(self):
        self.sent = []

    def send(self, message: str) -> None:
        print(f"Sending SMS: {message}")
        self.sent.append(message)


class NotificationDecorator(Sender):
    """Sender that owns and forwards to exactly one wrapped sender."""

    def __init__(self, sender: Sender):
        if not isinstance(sender, Sender):
            raise TypeError(f"{type(self).__name__} must wrap a Sender, got {type(sender).__name__}")
        self._wrapped = sender

    @property
    def wrapped(self) -> Sender:
        return self._wrapped

    def send(self, message: str) -> None:
        self._wrapped.send(message)

    def close(self) -> None:
        self._wrapped.close()


def encrypt(message: str) -> str:
    if not isinstance(message, str):
        raise SendError(f"Cannot encrypt {type(message).__name__}, expected str", message)
    try:
        message.encode("utf-8")
    except UnicodeEncodeError as e:
        raise SendError(f"Message is not valid UTF-8: {e}", message) from e
    return f"Encrypted({message})"


class EncryptedNotification(NotificationDecorator):
    """Transforms the message with ``cipher`` before forwarding it."""

    def __init__(self, sender: Sender, cipher: Callable[[str], str] = encrypt):
        super().__init__(sender)
        self.cipher = cipher

    def send(self, message: str) -> None:
        try:
            encrypted = self.cipher(message)
        except SendError as e:
            e.layer = type(self).__name__
            logger.error(f"Encryption failed, message not forwarded: {message!r}")
            raise
        except Exception as e:
            logger.error(f"Encryption failed, message not forwarded: {e}")
            raise SendError(f"Encryption failed: {e}", message, type(self).__name__) from e
        super().send(encrypted)


def _log_message(message: str) -> None:
    logger.info(f"[LOG]: {message}")


class LoggedNotification(NotificationDecorator):
    """Records the message as it passes through, without changing it."""

    def __init__(self, sender: Sender, log: Callable[[str], None] = _log_message):
        super().__init__(sender)
        self.log = log

    def send(self, message: str) -> None:
        self.log(message)
        super().send(message)


def build_pipeline(base: Sender, *layers) -> Sender:
    """Wrap ``base`` in ``layers``, listed from outermost to innermost.

    build_pipeline(email, LoggedNotification, EncryptedNotification)
    is LoggedNotification(EncryptedNotification(email)).
    """
    sender = base
    for layer in reversed(layers):
        sender = layer(sender)
    return sender
