from __future__ import annotations

import hmac
import json
from typing import Any, Callable, Mapping, Optional, Union

from alert_relay.config.settings import Settings
from alert_relay.core.errors import (AuthError, ConfigurationError, ParseError, RelayError, UnexpectedError,
                                     ValidationError)
from alert_relay.core.notifier.telegram_notifier import TelegramNotifier
from alert_relay.core.validator import validate_notification_request
from alert_relay.dal.datamodel.notification import RelayResponse
from alert_relay.utils.logger import setup_logger

logger = setup_logger(__name__)

TOKEN_HEADER = "x-request-token"

NotifierFactory = Callable[[Settings], TelegramNotifier]


def _parse_body(body: Union[str, bytes, None]) -> Any:
    if isinstance(body, bytes):
        try:
            body = body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ParseError() from e
    try:
        return json.loads(body or "{}")
    except json.JSONDecodeError as e:
        raise ParseError() from e


def _header(headers: Optional[Mapping[str, str]], name: str) -> Optional[str]:
    if not headers:
        return None
    value = headers.get(name)
    if value is not None:
        return value
    for key, val in headers.items():
        if key.lower() == name:
            return val
    return None


def _as_bytes(token: str) -> bytes:
    return token.encode("utf-8", "surrogatepass")


def _authenticate(headers: Optional[Mapping[str, str]], request_body: Any, expected: str) -> None:
    provided = _header(headers, TOKEN_HEADER)
    if not provided and isinstance(request_body, dict):
        provided = request_body.get("token")
    if not isinstance(provided, str) or not provided:
        raise AuthError()
    if not hmac.compare_digest(_as_bytes(provided), _as_bytes(expected)):
        raise AuthError()


async def _relay(
    body: Union[str, bytes, None],
    headers: Optional[Mapping[str, str]],
    settings: Settings,
    notifier_factory: NotifierFactory,
) -> None:
    missing = settings.missing_credentials()
    if missing:
        logger.error(f"Relay is not configured, missing: {', '.join(missing)}")
        raise ConfigurationError()

    request_body = _parse_body(body)
    _authenticate(headers, request_body, settings.REQUEST_TOKEN)

    validation = validate_notification_request(request_body)
    if not validation.valid:
        raise ValidationError(validation.error)

    async with notifier_factory(settings) as notifier:
        await notifier.notify(validation.data)


async def handle_notification(
    body: Union[str, bytes, None],
    headers: Optional[Mapping[str, str]],
    settings: Settings,
    notifier_factory: NotifierFactory = TelegramNotifier.from_settings,
) -> RelayResponse:
    """
    Authenticate, validate and deliver one notification.

    Every failure maps to a single status code; nothing is retried.
    """
    try:
        await _relay(body, headers, settings, notifier_factory)
    except RelayError as e:
        if e.status_code >= 500:
            logger.error(f"Notification failed: {e.message}")
        else:
            logger.warning(f"Notification rejected ({e.status_code}): {e.message}")
        return RelayResponse(status_code=e.status_code, ok=False, error=e.message)
    except Exception as e:
        logger.exception("Error processing notification")
        err = UnexpectedError(str(e) or None)
        return RelayResponse(status_code=err.status_code, ok=False, error=err.message)

    return RelayResponse(status_code=200, ok=True)
