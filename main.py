import argparse
import logging
import sys
from config import load_config
from console_observer import TradingAlgorithm, UserInterface, PriceLogger
from monitor import StockMonitor
from notification import (
    EmailSender,
    SmsSender,
    EncryptedNotification,
    LoggedNotification,
    SendError,
)
from telegram_notifier import TelegramSender

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Stock price observers and decorated notifications')
    parser.add_argument('--prices', type=float, nargs='+', default=[100.5, 105.7], help='Prices to publish in order')
    parser.add_argument('--message', type=str, default='Top Secret Message', help='Message to send through the pipeline')
    channel = parser.add_mutually_exclusive_group()
    channel.add_argument('--sms', action='store_true', help='Deliver by SMS instead of email')
    channel.add_argument('--telegram', action='store_true', help='Deliver through the Telegram Bot API')
    return parser.parse_args(argv)


def run_price_demo(symbol, prices):
    monitor = StockMonitor(symbol)
    for observer in (TradingAlgorithm(), UserInterface(), PriceLogger(f"{symbol} price")):
        monitor.attach(observer)

    for price in prices:
        monitor.set_price(price)
    return monitor


def make_base_sender(args, config):
    if args.telegram:
        return TelegramSender(config)
    if args.sms:
        return SmsSender()
    return EmailSender()


def run_notification_demo(base, message):
    """Send through the bare sender, then grow the chain one layer at a time.

    The caller owns ``base`` and closes it; the layers hold no resources of their own.
    """
    base.send(message)

    encrypted = EncryptedNotification(base)
    encrypted.send(message)

    LoggedNotification(encrypted).send(message)


def main(argv=None):
    args = parse_args(argv)
    try:
        config = load_config()
    except ValueError as e:
        logging.basicConfig(level=logging.INFO, format="%(message)s")
        logger.error(f"Invalid configuration: {e}")
        return 2

    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    try:
        run_price_demo(config.STOCK_SYMBOL, args.prices)
    except ValueError as e:
        logger.error(f"Price update rejected: {e}")
        return 2

    try:
        with make_base_sender(args, config) as base:
            run_notification_demo(base, args.message)
    except SendError as e:
        logger.error(f"Notification failed in {e.layer}: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
