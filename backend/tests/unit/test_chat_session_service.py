"""Unit tests for chat session title derivation."""

from datetime import datetime

from creziapro.application.services import derive_session_title

NOW = datetime(2024, 3, 9, 14, 5)


def test_explicit_title_wins():
    assert derive_session_title("My chat", "ignored message", NOW) == "My chat"


def test_short_first_message_is_kept_whole():
    assert derive_session_title(None, "Need a website", NOW) == "Need a website • 03/09, 14:05"


def test_first_message_whitespace_is_collapsed():
    title = derive_session_title(None, "  Need   a\n website ", NOW)

    assert title == "Need a website • 03/09, 14:05"


def test_long_first_message_is_truncated():
    message = "How much would an online store with payments and delivery cost?"

    title = derive_session_title(None, message, NOW)

    preview = title.split(" • ")[0]
    assert len(preview) == 40
    assert preview.endswith("...")
    assert preview == message[:37] + "..."


def test_first_message_of_exactly_forty_chars_is_not_truncated():
    message = "x" * 40

    assert derive_session_title("", message, NOW) == f"{message} • 03/09, 14:05"


def test_fallback_without_first_message():
    assert derive_session_title(None, None, NOW) == "Chat 03/09, 14:05"
    assert derive_session_title(None, "   ", NOW) == "Chat 03/09, 14:05"
