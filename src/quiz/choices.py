from __future__ import annotations

from .normalize import norm_input

def parse_selection(user_input: str, option_count: int) -> int | None:
    """Return the zero-based option index for a typed 1-based number, or None."""
    if option_count <= 0:
        return None
    cleaned = norm_input(user_input).lstrip("0") or "0"
    # anything longer than the largest option number is out of range anyway
    if not cleaned.isdecimal() or len(cleaned) > len(str(option_count)):
        return None
    try:
        idx = int(cleaned)
    except ValueError:
        return None
    if 1 <= idx <= option_count:
        return idx - 1
    return None
