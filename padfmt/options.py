"""
Reusable argument sets for padfmt.append().

AppendOptions bundles a pad character and a truncation ellipsis so callers can
keep one immutable value around instead of repeating keyword arguments.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, fields, replace

# Local ----------------------------------------------------------------------------------------------------------------
from .flags import FormatFlags
from .formattable import Sink, append, validate_ellipsis, validate_pad_char


# Classes --------------------------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class AppendOptions:
    """
    Pad character and ellipsis for truncate-pad-append operations.

    Attributes:
        pad_char: Single character used to fill width shortfall (default: space).
        ellipsis: Marker substituted for truncated content; None or "" causes
            a hard truncation (default: None).

    Examples:
        >>> import io
        >>> AppendOptions.ascii().append("Hello World", io.StringIO(), precision=7).getvalue()
        'Hell...'

        >>> AppendOptions.ascii().merge(pad_char="_")
        AppendOptions(pad_char='_', ellipsis='...')
    """

    pad_char: str = " "
    ellipsis: str | None = None

    def __post_init__(self):
        validate_pad_char(self.pad_char)
        validate_ellipsis(self.ellipsis)

    # Class Methods ------------------------------------

    @classmethod
    def ascii(cls) -> "AppendOptions":
        """Three-dot ellipsis on truncation."""
        return cls(ellipsis="...")

    @classmethod
    def unicode(cls) -> "AppendOptions":
        """Single-character horizontal ellipsis on truncation."""
        return cls(ellipsis="…")

    # Methods ------------------------------------------

    def merge(self, **kwargs) -> "AppendOptions":
        """Return a copy with the given fields replaced."""
        known = {f.name for f in fields(self)}
        unknown = set(kwargs) - known
        if unknown:
            raise TypeError(f"unknown option(s): {', '.join(sorted(unknown))}")
        return replace(self, **kwargs)

    def append(
        self,
        seq: str,
        sink: Sink,
        flags: FormatFlags | int = FormatFlags.NONE,
        width: int | None = None,
        precision: int | None = None,
    ) -> Sink:
        """Call padfmt.append() with this pad character and ellipsis."""
        return append(seq, sink, flags, width, precision, pad_char=self.pad_char, ellipsis=self.ellipsis)
