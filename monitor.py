import logging
import math
from observer import Subject

logger = logging.getLogger(__name__)


class StockMonitor(Subject):
    """Observable stock price; every accepted price is pushed to observers."""

    def __init__(self, symbol: str = "ACME"):
        super().__init__()
        self.symbol = symbol

    def set_price(self, price):
        if isinstance(price, bool):
            raise ValueError(f"Invalid price for {self.symbol}: {price!r}")
        try:
            value = float(price)
        except (TypeError, ValueError):
            raise ValueError(f"Invalid price for {self.symbol}: {price!r}")
        if not math.isfinite(value):
            raise ValueError(f"Price for {self.symbol} must be finite: {price!r}")
        if value < 0:
            raise ValueError(f"Price for {self.symbol} cannot be negative: {value}")

        logger.info(f"{self.symbol} price changed to {value:.2f}")
        self.set_state(value)

    def get_price(self):
        return self.get_state()
