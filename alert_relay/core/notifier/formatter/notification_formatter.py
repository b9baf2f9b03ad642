from __future__ import annotations

import json
from datetime import datetime
from html import escape
from typing import Optional

from alert_relay.dal.datamodel.notification import NotificationRequest
from alert_relay.utils.helper import coerce_timestamp, to_iso_z, utc_now

SEVERITY_EMOJI = {
    "info": "💡",
    "warning": "⚠️",
    "error": "❌",
    "critical": "🚨",
}
FALLBACK_EMOJI = "🔔"


def _esc(s: str) -> str:
    # Telegram HTML only needs &, < and >
    return escape(s, quote=False)


def severity_emoji(level: str) -> str:
    return SEVERITY_EMOJI.get(level, FALLBACK_EMOJI)


def _fmt_ts(raw, now: Optional[datetime]) -> str:
    resolved = coerce_timestamp(raw) if raw is not None else None
    return to_iso_z(resolved or now or utc_now())


def format_notification_message(request: NotificationRequest, now: Optional[datetime] = None) -> str:
    """
    Format a Telegram HTML message for an incoming alert.

    ``now`` replaces the current time when the request carries no timestamp.
    """
    level = str(request.level)
    header = f"{severity_emoji(level)} <b>[{_esc(level.upper())}]</b> from <b>{_esc(request.service)}</b>\n\n"

    msg = header
    msg += f"<b>Error:</b> {_esc(request.error)}\n"
    msg += f"<b>Message:</b> {_esc(request.message)}\n"
    msg += f"<b>Timestamp:</b> {_esc(_fmt_ts(request.timestamp, now))}\n"

    if request.payload is not None:
        dump = json.dumps(request.payload, indent=2, ensure_ascii=False, default=str)
        msg += f"\n<b>Payload:</b>\n<pre>{_esc(dump)}</pre>"

    return msg
