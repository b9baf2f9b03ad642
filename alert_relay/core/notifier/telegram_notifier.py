import asyncio
import sys
from typing import List, Optional

from telegram import Bot
from telegram.constants import ParseMode
from telegram.error import TelegramError
from telegram.request import HTTPXRequest

from alert_relay.config.settings import Settings, get_settings
from alert_relay.core.errors import DeliveryError
from alert_relay.core.notifier.formatter.notification_formatter import format_notification_message
from alert_relay.dal.datamodel.notification import NotificationRequest
from alert_relay.utils.helper import to_iso_z, utc_now
from alert_relay.utils.logger import setup_logger

logger = setup_logger(__name__)


class TelegramNotifier:

    def __init__(
        self,
        bot_token: str,
        chat_id: str,
        bot: Optional[Bot] = None,
        base_url: str = "https://api.telegram.org/bot",
        timeout: float = 10.0,
    ):
        self.telegram_chat_id = chat_id
        self._requests: List[HTTPXRequest] = []
        if bot is None:
            request = HTTPXRequest(connect_timeout=timeout, read_timeout=timeout, write_timeout=timeout)
            # getUpdates is never called, but Bot builds its own client unless one is given
            updates_request = HTTPXRequest(connection_pool_size=1)
            self._requests = [request, updates_request]
            bot = Bot(token=bot_token, base_url=base_url, request=request, get_updates_request=updates_request)
        self.bot = bot

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelegramNotifier":
        return cls(
            settings.BOT_TOKEN,
            settings.CHAT_ID,
            base_url=settings.TELEGRAM_API_URL,
            timeout=settings.TELEGRAM_TIMEOUT,
        )

    def format_message(self, notification: NotificationRequest) -> str:
        return format_notification_message(notification)

    async def send_message(self, text: str) -> None:
        try:
            await self.bot.send_message(
                chat_id=self.telegram_chat_id,
                text=text,
                parse_mode=ParseMode.HTML,
            )
        except TelegramError as e:
            logger.error(f"Error sending message: {e}")
            raise DeliveryError(f"Failed to send Telegram message: {e.message}") from e

    async def notify(self, notification: NotificationRequest) -> None:
        await self.send_message(self.format_message(notification))
        logger.info(f"Delivered {notification.level} notification from {notification.service}")

    # ---------- Lifecycle ----------

    async def aclose(self) -> None:
        for request in self._requests:
            await request.shutdown()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()


async def main() -> int:
    settings = get_settings()
    if not settings.BOT_TOKEN or not settings.CHAT_ID:
        print("Missing BOT_TOKEN or CHAT_ID in environment. See .env.example", file=sys.stderr)
        return 1

    notification = NotificationRequest(
        service="local-test",
        error="manual_test",
        message="This is a test notification sent from telegram_notifier.py",
        level="info",
        timestamp=to_iso_z(utc_now()),
        payload={"local": True},
    )
    async with TelegramNotifier.from_settings(settings) as notifier:
        try:
            await notifier.notify(notification)
        except DeliveryError as e:
            print(f"❌ {e.message}", file=sys.stderr)
            return 2
    print("✅ Telegram notification sent (check your chat).")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
