"""Helpers for registering chat widget sessions."""

from datetime import datetime

TITLE_PREVIEW_LENGTH = 40


def derive_session_title(
    title: str | None,
    first_message: str | None,
    now: datetime,
) -> str:
    """Pick a display title for a new chat session.

    An explicit title wins. Otherwise the first user message (whitespace
    collapsed, cut to 40 characters) is combined with a short timestamp,
    falling back to ``Chat <timestamp>``.
    """
    if title:
        return title

    stamp = now.strftime("%m/%d, %H:%M")
    if first_message and first_message.strip():
        clean = " ".join(first_message.split())
        if len(clean) > TITLE_PREVIEW_LENGTH:
            clean = clean[: TITLE_PREVIEW_LENGTH - 3] + "..."
        return f"{clean} • {stamp}"
    return f"Chat {stamp}"
