"""
Truncate-pad-append helpers for formattable objects.

Implements the common part of a formatting hook: cut a text value down to the
requested precision (optionally ending in an ellipsis), pad it up to the requested
width, align it left or right, and write it to a destination sink.

Example:
    >>> import io
    >>> sink = io.StringIO()
    >>> append("Hello World", sink, FormatFlags.LEFT_JUSTIFY, 10, 7, ellipsis="...").getvalue()
    'Hell...   '
"""

# Standard library -----------------------------------------------------------------------------------------------------
import io
import logging
from typing import Any, Protocol, TypeVar, runtime_checkable

# Local ----------------------------------------------------------------------------------------------------------------
from .flags import FormatFlags, as_flags

logger = logging.getLogger(__name__)


# Classes --------------------------------------------------------------------------------------------------------------


@runtime_checkable
class SupportsWrite(Protocol):
    """Append-only text sink."""

    def write(self, s: str, /) -> Any: ...


@runtime_checkable
class Formattable(Protocol):
    """
    Object that renders itself into a sink for a single formatting request.

    Implementers typically build their text and delegate to append():

        >>> class Name:
        ...     def __init__(self, value):
        ...         self.value = value
        ...     def format_to(self, sink, flags, width, precision):
        ...         append(self.value, sink, flags, width, precision, ellipsis="~")
        >>> default_string(Name("Ada"))
        'Ada'
    """

    def format_to(
        self,
        sink: SupportsWrite,
        flags: FormatFlags,
        width: int | None,
        precision: int | None,
    ) -> Any: ...


Sink = TypeVar("Sink", bound=SupportsWrite)


# Methods --------------------------------------------------------------------------------------------------------------


def append(
    seq: str,
    sink: Sink,
    flags: FormatFlags | int = FormatFlags.NONE,
    width: int | None = None,
    precision: int | None = None,
    *,
    pad_char: str = " ",
    ellipsis: str | None = None,
) -> Sink:
    """
    Truncate seq to precision, pad it to width, and write it to sink.

    Args:
        seq: Text to format. Never modified.
        sink: Destination with a write(str) method; only the new output is written.
        flags: FormatFlags bit set. LEFT_JUSTIFY pads after the content,
            otherwise padding goes before it.
        width: Minimum output length. None or negative means no minimum.
        precision: Maximum number of characters kept. None or negative
            means no truncation.
        pad_char: Character filling the width shortfall (default: space).
        ellipsis: Marker replacing the tail of truncated text. None or ""
            causes a hard truncation (default: None).

    Returns:
        The same sink, for chaining.

    Raises:
        ValueError: Precision is specified and a non-empty ellipsis is longer
            than it; or pad_char is not exactly one character.
        TypeError: An argument has the wrong type.

    Examples:
        >>> import io
        >>> append("Hello World", io.StringIO(), width=5, precision=5).getvalue()
        'Hello'
        >>> append("Hello", io.StringIO(), width=10, pad_char="*").getvalue()
        '*****Hello'
        >>> append("Hi", io.StringIO(), FormatFlags.LEFT_JUSTIFY, 6, pad_char=".").getvalue()
        'Hi....'

    Notes:
        - The ellipsis only appears when truncation actually happens, but its
          length is checked against precision on every call.
        - Width is a minimum, output longer than width is never cut.
    """
    if not isinstance(seq, str):
        raise TypeError(f"seq must be a str, got {type(seq).__name__}")
    if not callable(getattr(sink, "write", None)):
        raise TypeError(f"sink must have a write() method, got {type(sink).__name__}")

    flags = as_flags(flags)
    width = _as_limit(width, "width")
    precision = _as_limit(precision, "precision")
    pad_char = validate_pad_char(pad_char)
    ellipsis = validate_ellipsis(ellipsis)

    if precision is not None and ellipsis and len(ellipsis) > precision:
        raise ValueError(f"ellipsis length {len(ellipsis)} exceeds precision {precision}")

    text = _truncate(seq, precision, ellipsis)
    padding = pad_char * _pad_amount(text, width)
    sink.write(_align(text, padding, flags))
    return sink


def default_string(value: Any) -> str:
    """
    Unconstrained string form of value.

    Formattable objects are asked to render themselves with no flags, width,
    or precision; anything else goes through str().

    Examples:
        >>> default_string(42)
        '42'
        >>> default_string("text")
        'text'
    """
    if isinstance(value, Formattable):
        sink = io.StringIO()
        value.format_to(sink, FormatFlags.NONE, None, None)
        return sink.getvalue()
    return str(value)


def validate_pad_char(pad_char: str) -> str:
    if not isinstance(pad_char, str):
        raise TypeError(f"pad_char must be a str, got {type(pad_char).__name__}")
    if len(pad_char) != 1:
        raise ValueError(f"pad_char must be a single character, got {pad_char!r}")
    return pad_char


def validate_ellipsis(ellipsis: str | None) -> str | None:
    if ellipsis is not None and not isinstance(ellipsis, str):
        raise TypeError(f"ellipsis must be a str or None, got {type(ellipsis).__name__}")
    return ellipsis


# Private Methods ------------------------------------------------------------------------------------------------------


def _as_limit(value: int | None, name: str) -> int | None:
    """Normalize width/precision: None and negatives mean unspecified."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int or None, got {type(value).__name__}")
    return value if value >= 0 else None


def _truncate(seq: str, precision: int | None, ellipsis: str | None) -> str:
    if precision is None or precision >= len(seq):
        return seq

    if not ellipsis:
        logger.debug("hard truncation of %d chars to precision %d", len(seq), precision)
        return seq[:precision]

    logger.debug("truncation of %d chars to precision %d with ellipsis %r", len(seq), precision, ellipsis)
    return seq[: precision - len(ellipsis)] + ellipsis


def _pad_amount(text: str, width: int | None) -> int:
    if width is None:
        return 0
    return max(0, width - len(text))


def _align(text: str, padding: str, flags: FormatFlags) -> str:
    if FormatFlags.LEFT_JUSTIFY in flags:
        return text + padding
    return padding + text
