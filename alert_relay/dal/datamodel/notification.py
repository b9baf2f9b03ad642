from __future__ import annotations

from enum import StrEnum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel
from pydantic.config import ConfigDict


class Level(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class NotificationRequest(BaseModel):
    """Validated notification record, consumed once by the formatter."""
    model_config = ConfigDict(frozen=True, use_enum_values=True)
    service: str
    error: str
    message: str
    level: Level
    # raw value, coerced to an instant only when formatting
    timestamp: Optional[Any] = None
    payload: Optional[Union[Dict[str, Any], List[Any]]] = None


class ValidationResult(BaseModel):
    valid: bool
    error: Optional[str] = None
    data: Optional[NotificationRequest] = None

    @classmethod
    def failure(cls, error: str) -> ValidationResult:
        return cls(valid=False, error=error)

    @classmethod
    def success(cls, data: NotificationRequest) -> ValidationResult:
        return cls(valid=True, data=data)


class RelayResponse(BaseModel):
    status_code: int = 200
    ok: bool = True
    error: Optional[str] = None

    def body(self) -> Dict[str, Any]:
        if self.ok:
            return {"ok": True}
        return {"ok": False, "error": self.error}
