import pytest

from alert_relay.config.settings import Settings


class FakeBot:
    def __init__(self, error: Exception | None = None):
        self.calls = []
        self.error = error

    async def send_message(self, **kwargs):
        self.calls.append(kwargs)
        if self.error:
            raise self.error
        return None


@pytest.fixture
def fake_bot():
    return FakeBot()


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        BOT_TOKEN="123:abc",
        CHAT_ID="-100200300",
        REQUEST_TOKEN="s3cret",
    )


@pytest.fixture
def valid_body():
    return {"service": "api", "error": "e1", "message": "failed", "level": "critical"}
