from typing import Any

from alert_relay.dal.datamodel.notification import Level, NotificationRequest, ValidationResult
from alert_relay.utils.helper import coerce_timestamp

VALID_LEVELS = tuple(level.value for level in Level)
REQUIRED_TEXT_FIELDS = ("service", "error", "message")


def is_valid_level(level: Any) -> bool:
    return isinstance(level, str) and level in VALID_LEVELS


def _is_non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def validate_notification_request(body: Any) -> ValidationResult:
    """
    Check an untrusted JSON body and build the canonical notification record.

    Rules run in a fixed order and the first failure is returned.
    """
    if body is None or not isinstance(body, dict):
        return ValidationResult.failure("Request body is required")

    for field in REQUIRED_TEXT_FIELDS:
        if not _is_non_empty_str(body.get(field)):
            return ValidationResult.failure(f'Field "{field}" is required and must be a string')

    level = body.get("level")
    if not is_valid_level(level):
        return ValidationResult.failure(
            f'Field "level" is required and must be one of: {", ".join(VALID_LEVELS)}'
        )

    timestamp = body.get("timestamp")
    if timestamp is not None and coerce_timestamp(timestamp) is None:
        return ValidationResult.failure(
            'Field "timestamp" must be a valid date string, number, or Date object'
        )

    payload = body.get("payload")
    if payload is not None and not isinstance(payload, (dict, list)):
        return ValidationResult.failure('Field "payload" must be an object or null')

    return ValidationResult.success(NotificationRequest(
        service=body["service"],
        error=body["error"],
        message=body["message"],
        level=level,
        timestamp=timestamp,
        payload=payload,
    ))
