"""Unit tests for the structlog helpers."""

from edumorph.infra.config.logging_config import MAX_VALUE_LENGTH, clip_long_values


def test_long_values_are_clipped():
    reply = "x" * (MAX_VALUE_LENGTH + 250)

    event = clip_long_values(None, "info", {"event": "llm.invoke.text", "error": reply})

    assert event["error"].startswith("x" * MAX_VALUE_LENGTH + "...")
    assert event["error"].endswith(f"[{MAX_VALUE_LENGTH + 250} chars]")


def test_short_values_and_event_name_untouched():
    event_name = "e" * (MAX_VALUE_LENGTH + 1)

    event = clip_long_values(None, "info", {"event": event_name, "chars": 12, "mode": "chef"})

    assert event == {"event": event_name, "chars": 12, "mode": "chef"}
