import asyncio
import base64
import binascii
import json
from typing import Any, Dict

from alert_relay.config.settings import get_settings
from alert_relay.core.errors import ParseError
from alert_relay.core.handler import handle_notification
from alert_relay.dal.datamodel.notification import RelayResponse


def _event_body(event: Dict[str, Any]):
    body = event.get("body")
    if body and event.get("isBase64Encoded"):
        return base64.b64decode(body)
    return body


def _to_proxy_response(result: RelayResponse) -> Dict[str, Any]:
    return {
        "statusCode": result.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(result.body()),
    }


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """API Gateway proxy entrypoint; runs the same gates as POST /notify."""
    try:
        body = _event_body(event)
    except (binascii.Error, ValueError):
        err = ParseError()
        return _to_proxy_response(RelayResponse(status_code=err.status_code, ok=False, error=err.message))

    headers = event.get("headers") or {}
    result = asyncio.run(handle_notification(body, headers, get_settings()))
    return _to_proxy_response(result)
