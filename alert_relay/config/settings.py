from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support"""
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Application
    APP_NAME: str = "Alert Relay"
    APP_VERSION: str = "0.1.0"
    LOG_LEVEL: str = Field(default="INFO")
    # empty disables file logging
    LOG_FILE: str = Field(default="logs/alert_relay.log")
    PORT: int = Field(default=8080)

    # Set by the AWS Lambda runtime, whose code directory is read-only
    AWS_LAMBDA_FUNCTION_NAME: Optional[str] = Field(default=None)

    # Telegram
    BOT_TOKEN: Optional[str] = Field(default=None)
    CHAT_ID: Optional[str] = Field(default=None)
    TELEGRAM_API_URL: str = Field(default="https://api.telegram.org/bot")
    TELEGRAM_TIMEOUT: float = Field(default=10.0)

    # Caller authentication
    REQUEST_TOKEN: Optional[str] = Field(default=None)

    def missing_credentials(self) -> List[str]:
        values = {
            "BOT_TOKEN": self.BOT_TOKEN,
            "CHAT_ID": self.CHAT_ID,
            "REQUEST_TOKEN": self.REQUEST_TOKEN,
        }
        return [name for name, value in values.items() if not value]

    def log_file_path(self) -> Optional[Path]:
        if not self.LOG_FILE or self.AWS_LAMBDA_FUNCTION_NAME:
            return None
        return Path(self.LOG_FILE)


def get_settings() -> Settings:
    # fresh read per invocation, credentials are never cached
    return Settings()


settings = Settings()
