"""Named @shortcuts and the expressions they stand for."""

from typing import Optional, Tuple

# Order is significant: reverse lookup returns the first matching name.
SPECIALS: Tuple[Tuple[str, str], ...] = (
    ("reboot", "@reboot"),
    ("hourly", "0 * * * *"),
    ("daily", "0 0 * * *"),
    ("weekly", "0 0 * * 0"),
    ("monthly", "0 0 1 * *"),
    ("yearly", "0 0 1 1 *"),
    ("annually", "0 0 1 1 *"),
    ("midnight", "0 0 * * *"),
)


def expand(name: str) -> Optional[str]:
    """Return the expansion for a shortcut name, or None if unknown."""
    for key, value in SPECIALS:
        if key == name:
            return value
    return None


def shortcut_for(time_portion: str) -> Optional[str]:
    """Return the first shortcut name whose expansion equals ``time_portion``.

    Args:
        time_portion: Rendered time part of a line (e.g. "0 0 * * *")

    Returns:
        Shortcut name without the leading "@", or None
    """
    for key, value in SPECIALS:
        if value == time_portion:
            return key
    return None
