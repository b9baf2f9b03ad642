from datetime import datetime, timezone

import pytest

from alert_relay.core.validator import is_valid_level, validate_notification_request


def _body(**overrides):
    body = {"service": "payments-api", "error": "db_down", "message": "Database unreachable", "level": "error"}
    body.update(overrides)
    return body


@pytest.mark.parametrize("body", [None, [], "text", 42])
def test_body_is_required(body):
    result = validate_notification_request(body)
    assert result.valid is False
    assert result.error == "Request body is required"


@pytest.mark.parametrize("field", ["service", "error", "message"])
@pytest.mark.parametrize("value", [None, "", 0, False, 12, ["x"], {"a": 1}])
def test_required_text_fields(field, value):
    result = validate_notification_request(_body(**{field: value}))
    assert result.valid is False
    assert result.error == f'Field "{field}" is required and must be a string'


@pytest.mark.parametrize("field", ["service", "error", "message"])
def test_missing_required_field(field):
    body = _body()
    del body[field]
    result = validate_notification_request(body)
    assert result.error == f'Field "{field}" is required and must be a string'


def test_first_failure_wins():
    result = validate_notification_request({"level": "bogus"})
    assert result.error == 'Field "service" is required and must be a string'


def test_whitespace_only_string_is_accepted():
    result = validate_notification_request(_body(service="   "))
    assert result.valid is True


@pytest.mark.parametrize("level", [None, "", "INFO", "Critical", "debug", 1])
def test_invalid_level(level):
    result = validate_notification_request(_body(level=level))
    assert result.valid is False
    assert result.error == 'Field "level" is required and must be one of: info, warning, error, critical'


def test_is_valid_level():
    assert all(is_valid_level(level) for level in ("info", "warning", "error", "critical"))
    assert not is_valid_level("fatal")
    assert not is_valid_level(None)


@pytest.mark.parametrize("timestamp", [
    "2024-05-01T10:00:00Z",
    "2024-05-01T10:00:00.123+02:00",
    "2024-05-01",
    "Wed, 01 May 2024 10:00:00 GMT",
    1714557600,
    1714557600000,
    1714557600.5,
    0,
    datetime(2024, 5, 1, tzinfo=timezone.utc),
])
def test_valid_timestamps(timestamp):
    result = validate_notification_request(_body(timestamp=timestamp))
    assert result.valid is True
    assert result.data.timestamp == timestamp


@pytest.mark.parametrize("timestamp", [
    "yesterday",
    "",
    "2024-13-45",
    "1700000000000",
    "1714557600",
    True,
    float("nan"),
    float("inf"),
    1e300,
    10 ** 400,
    [],
    {},
])
def test_invalid_timestamps(timestamp):
    result = validate_notification_request(_body(timestamp=timestamp))
    assert result.valid is False
    assert result.error == 'Field "timestamp" must be a valid date string, number, or Date object'


@pytest.mark.parametrize("payload", ["text", 1, True, 2.5])
def test_invalid_payload(payload):
    result = validate_notification_request(_body(payload=payload))
    assert result.valid is False
    assert result.error == 'Field "payload" must be an object or null'


@pytest.mark.parametrize("payload", [[1, 2], [], {}, {"nested": {"a": [1]}}])
def test_structured_payload_is_kept(payload):
    result = validate_notification_request(_body(payload=payload))
    assert result.valid is True
    assert result.data.payload == payload


def test_payload_defaults_to_none():
    assert validate_notification_request(_body()).data.payload is None
    assert validate_notification_request(_body(payload=None)).data.payload is None


def test_valid_request_record():
    result = validate_notification_request(_body(payload={"host": "db1", "attempts": 3}, token="ignored"))
    assert result.valid is True
    assert result.error is None
    data = result.data
    assert data.service == "payments-api"
    assert data.level == "error"
    assert data.timestamp is None
    assert data.payload == {"host": "db1", "attempts": 3}


def test_record_is_immutable():
    data = validate_notification_request(_body()).data
    with pytest.raises(Exception):
        data.service = "other"
