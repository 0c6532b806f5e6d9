"""the beautiful world start from here."""

from __future__ import annotations

NO_DESCRIPTION = "No description"
ELLIPSIS = "..."


def first_line_truncated(text: str | None, limit: int = 100) -> str:
    """
    Return the first line of ``text``, trimmed and capped at ``limit`` chars.

    Example
    -------
    'Fix bug\\nDetails here' → 'Fix bug'
    None                    → 'No description'
    """
    if text is None:
        return NO_DESCRIPTION
    line = text.split("\n", 1)[0].strip()
    if len(line) > limit:
        return line[: limit - len(ELLIPSIS)] + ELLIPSIS
    return line


def clip(text: str, limit: int) -> str:
    """Cut ``text`` to at most ``limit`` characters, marking the cut with '...'."""
    if len(text) <= limit:
        return text
    return text[: limit - len(ELLIPSIS)] + ELLIPSIS


def plural_commits(count: int) -> str:
    return f"{count} commit(s)"
