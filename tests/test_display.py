#!/usr/bin/env python3
"""
Test reason categorisation, labels and timestamp formatting.
"""

from datetime import datetime

from modelavail.display import (
    ReasonCategory,
    SINCE_FORMAT,
    display_name,
    display_provider,
    format_since,
    reason_category,
    reason_label,
)
from modelavail.models import Reason, ReasonKind, UnavailableModel


def record(reason, reason_text=None, **kwargs):
    return UnavailableModel(
        model_id="m1", client_id="c1", reason=reason, reason_text=reason_text, **kwargs
    )


def test_reason_categories():
    assert reason_category(record("quota_exceeded")) == ReasonCategory.COOLDOWN
    assert reason_category(record("cooldown")) == ReasonCategory.COOLDOWN
    assert reason_category(record("suspended")) == ReasonCategory.SUSPENDED
    assert reason_category(record("maintenance")) == ReasonCategory.DEFAULT
    assert reason_category(record("")) == ReasonCategory.DEFAULT
    assert reason_category(record("Suspended")) == ReasonCategory.DEFAULT


def test_known_reasons_use_localized_text():
    assert reason_label(record("quota_exceeded"), "en") == "Quota exceeded"
    assert reason_label(record("cooldown"), "en") == "Cooling down"
    assert reason_label(record("suspended"), "en") == "Suspended"
    assert reason_label(record("suspended"), "zh") == "已暂停"
    # reason_text is ignored for known reasons
    assert reason_label(record("suspended", "billing"), "en") == "Suspended"


def test_unknown_reason_falls_back_to_text_then_raw_value():
    assert reason_label(record("maintenance", "Planned upgrade")) == "Planned upgrade"
    assert reason_label(record("maintenance", "")) == "maintenance"
    assert reason_label(record("maintenance")) == "maintenance"


def test_reason_variant():
    assert Reason.parse("cooldown").kind == ReasonKind.COOLDOWN
    other = Reason.parse("region_blocked")
    assert other.kind == ReasonKind.OTHER
    assert other.text == "region_blocked"
    assert Reason.parse("region_blocked", "EU only").text == "EU only"
    assert Reason.parse(None).kind == ReasonKind.OTHER


def test_name_and_provider_fallbacks():
    assert display_name(record("cooldown", model_name="GPT-4o")) == "GPT-4o"
    assert display_name(record("cooldown")) == "m1"
    assert display_name(record("cooldown", model_name="")) == "m1"
    assert display_provider(record("cooldown", provider="openai")) == "openai"
    assert display_provider(record("cooldown")) == "-"


def test_format_since_valid_timestamp():
    value = "2024-01-01T00:00:00Z"
    expected = (
        datetime.fromisoformat("2024-01-01T00:00:00+00:00")
        .astimezone()
        .strftime(SINCE_FORMAT)
    )
    assert format_since(value) == expected
    assert format_since(value) != value


def test_format_since_returns_malformed_input_unchanged():
    for value in [
        "",
        "   ",
        "not a date",
        "2024-13-45T99:99:99Z",
        "yesterday",
        "\x00\xff",
        "2024-01-01T00:00:00ZZ",
    ]:
        assert format_since(value) == value
