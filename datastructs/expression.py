"""Checking that brackets in an expression are balanced."""

from __future__ import annotations

OPENING = "([{<"
CLOSING = ")]}>"


def is_open(ch: str) -> bool:
    """True if ``ch`` is an opening bracket."""
    return len(ch) == 1 and ch in OPENING


def is_close(ch: str) -> bool:
    """True if ``ch`` is a closing bracket."""
    return len(ch) == 1 and ch in CLOSING


def matches(opening: str, closing: str) -> bool:
    """True if ``opening`` and ``closing`` sit at the same position in their bracket sets."""
    return OPENING.find(opening) == CLOSING.find(closing)


def is_balanced(text: str) -> bool:
    """True if every bracket in ``text`` is closed by its partner in the right order."""
    pending: list[str] = []
    for ch in text:
        if is_open(ch):
            pending.append(ch)
        elif is_close(ch):
            if not pending or not matches(pending[-1], ch):
                return False
            pending.pop()
    return not pending