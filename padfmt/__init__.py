"""
padfmt - truncate, pad, and align text for formatted output.
"""

from .flags import FormatFlags
from .formattable import Formattable, SupportsWrite, append, default_string
from .options import AppendOptions

__all__ = [
    "AppendOptions",
    "FormatFlags",
    "Formattable",
    "SupportsWrite",
    "append",
    "default_string",
]
