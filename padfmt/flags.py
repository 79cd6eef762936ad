"""
Formatting flags passed to formattable objects.

Only LEFT_JUSTIFY is defined; other bits a caller sets are kept but ignored.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from enum import IntFlag


# Classes --------------------------------------------------------------------------------------------------------------


class FormatFlags(IntFlag):
    """
    Bit set of flags for a single formatting request.

    Examples:
        >>> FormatFlags.LEFT_JUSTIFY in FormatFlags(1)
        True
    """

    NONE = 0
    LEFT_JUSTIFY = 1  # pad after the content


# Methods --------------------------------------------------------------------------------------------------------------


def as_flags(flags: "FormatFlags | int | None") -> FormatFlags:
    """Coerce an int bit set (or None) into FormatFlags."""
    if flags is None:
        return FormatFlags.NONE
    if isinstance(flags, bool) or not isinstance(flags, int):
        raise TypeError(f"flags must be FormatFlags or int, got {type(flags).__name__}")
    if flags < 0:
        raise ValueError(f"flags must be non-negative, got {flags}")
    return FormatFlags(flags)
