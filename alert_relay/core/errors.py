from typing import Optional

CONFIGURATION_ERROR = "Missing required environment variables: BOT_TOKEN, CHAT_ID and/or REQUEST_TOKEN"
PARSE_ERROR = "Invalid JSON in request body"
AUTH_ERROR = "Unauthorized: Invalid or missing request token"
UNEXPECTED_ERROR = "Internal server error"


class RelayError(Exception):
    """Terminal failure of a single relay invocation, mapped to one HTTP status."""
    status_code: int = 500
    default_message: str = UNEXPECTED_ERROR

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(RelayError):
    status_code = 500
    default_message = CONFIGURATION_ERROR


class ParseError(RelayError):
    status_code = 400
    default_message = PARSE_ERROR


class AuthError(RelayError):
    status_code = 401
    default_message = AUTH_ERROR


class ValidationError(RelayError):
    status_code = 400


class DeliveryError(RelayError):
    status_code = 500


class UnexpectedError(RelayError):
    status_code = 500
