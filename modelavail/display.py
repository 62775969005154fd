"""
Pure display derivations for unavailable-model records.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from .i18n import translate
from .models import ReasonKind, UnavailableModel

PROVIDER_PLACEHOLDER = "-"
SINCE_FORMAT = "%x %X"


class ReasonCategory(str, Enum):
    """Visual category of a reason badge."""

    COOLDOWN = "cooldown"
    SUSPENDED = "suspended"
    DEFAULT = "default"


REASON_CATEGORIES = {
    ReasonKind.QUOTA_EXCEEDED: ReasonCategory.COOLDOWN,
    ReasonKind.COOLDOWN: ReasonCategory.COOLDOWN,
    ReasonKind.SUSPENDED: ReasonCategory.SUSPENDED,
}

REASON_MESSAGE_KEYS = {
    ReasonKind.QUOTA_EXCEEDED: "reason_quota_exceeded",
    ReasonKind.COOLDOWN: "reason_cooldown",
    ReasonKind.SUSPENDED: "reason_suspended",
}

CATEGORY_STYLES = {
    ReasonCategory.COOLDOWN: "bold yellow",
    ReasonCategory.SUSPENDED: "bold red",
    ReasonCategory.DEFAULT: "bold white",
}


def reason_category(record: UnavailableModel) -> ReasonCategory:
    """quota_exceeded and cooldown share a category; anything unknown is DEFAULT."""
    return REASON_CATEGORIES.get(record.parsed_reason.kind, ReasonCategory.DEFAULT)


def reason_label(record: UnavailableModel, locale: Optional[str] = None) -> str:
    """Localized text for known reasons, otherwise reason_text or the raw reason."""
    reason = record.parsed_reason
    key = REASON_MESSAGE_KEYS.get(reason.kind)
    if key:
        return translate(key, locale)
    return reason.text or record.reason


def display_name(record: UnavailableModel) -> str:
    return record.model_name or record.model_id


def display_provider(record: UnavailableModel) -> str:
    return record.provider or PROVIDER_PLACEHOLDER


def format_since(value: str) -> str:
    """
    Format an ISO-8601 timestamp in local time using the current locale.

    Anything that does not parse is returned unchanged.
    """
    if not isinstance(value, str) or not value.strip():
        return value
    try:
        dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        return dt.astimezone().strftime(SINCE_FORMAT)
    except (ValueError, OverflowError, OSError):
        return value
