from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from alert_relay.config.settings import Settings, get_settings
from alert_relay.core.handler import NotifierFactory, handle_notification
from alert_relay.core.notifier.telegram_notifier import TelegramNotifier

router = APIRouter(tags=["Notifications"])


def get_notifier_factory() -> NotifierFactory:
    return TelegramNotifier.from_settings


@router.post("/notify")
async def notify(
    request: Request,
    settings: Settings = Depends(get_settings),
    notifier_factory: NotifierFactory = Depends(get_notifier_factory),
):
    body = await request.body()
    result = await handle_notification(body, request.headers, settings, notifier_factory)
    return JSONResponse(status_code=result.status_code, content=result.body())
