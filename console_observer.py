import logging
from datetime import datetime
from observer import Observer

logger = logging.getLogger(__name__)


def _timestamp():
    return datetime.now().strftime('%Y-%m-%d %H:%M:%S')


class TradingAlgorithm(Observer):
    def __init__(self):
        self.received = []

    def receive(self, value):
        self.received.append(value)
        print(f"[{_timestamp()}] Trading Algorithm reacting to stock price: {value:.2f}")


class UserInterface(Observer):
    def __init__(self):
        self.received = []

    def receive(self, value):
        self.received.append(value)
        print(f"[{_timestamp()}] User Interface updating with new stock price: {value:.2f}")


class PriceLogger(Observer):
    """Records price changes through logging instead of the console."""

    def __init__(self, name: str = "price"):
        self.name = name
        self.received = []

    def receive(self, value):
        self.received.append(value)
        logger.info(f"Logger recording new {self.name}: {value}")
