"""
Parsing of the LENGTH command-line argument.

Accepts plain integers ("30", "-30") and terminal-relative percentages
("50%", "-50%"). A leading minus always means "compress even if the path
already fits".
"""

import re
import shutil

from ..config.constants import (
    DEFAULT_TARGET_LENGTH,
    FALLBACK_TERMINAL_COLUMNS,
    PERCENT_SUFFIX,
)
from ..errors import InvalidArgumentError

_INTEGER_RE = re.compile(r"\s*([+-]?)(\d+)\s*")
_ATOI_RE = re.compile(r"\s*([+-]?\d+)")
_PERCENT_RE = re.compile(r"\s*([+-]?)(\d+)\s*%\s*")


def atoi(text: str) -> int:
    """
    Parse an integer the way C's atoi() does.

    Leading whitespace and an optional sign are accepted, then the longest
    run of digits. Anything unparseable yields 0.
    """
    match = _ATOI_RE.match(text)
    if match is None:
        return 0
    return int(match.group(1))


def terminal_columns() -> int:
    """Return the width of the controlling terminal."""
    return shutil.get_terminal_size((FALLBACK_TERMINAL_COLUMNS, 24)).columns


def is_percentage(text: str | None) -> bool:
    """Return True if text is a terminal-relative length such as "50%"."""
    return text is not None and _PERCENT_RE.fullmatch(text) is not None


def parse_target_length(
    text: str | None, strict: bool = True, columns: int | None = None
) -> int:
    """
    Convert a LENGTH argument into a signed target length.

    Percentages are only understood in strict mode; the compatibility mode
    reads "50%" the way atoi() does, as 50.

    Args:
        text: Raw argument, or None when it was omitted
        strict: Reject malformed input instead of falling back to atoi()
        columns: Terminal width for percentages (detected when None)

    Returns:
        Target length; negative means forced compression

    Raises:
        InvalidArgumentError: Malformed input in strict mode
    """
    if text is None:
        return DEFAULT_TARGET_LENGTH

    match = _INTEGER_RE.fullmatch(text)
    if match is not None:
        sign, digits = match.groups()
        return int(sign + digits)

    if not strict:
        return atoi(text)

    match = _PERCENT_RE.fullmatch(text)
    if match is not None:
        sign, digits = match.groups()
        if columns is None:
            columns = terminal_columns()
        length = columns * int(digits) // 100
        return -length if sign == "-" else length

    if text.strip().endswith(PERCENT_SUFFIX):
        raise InvalidArgumentError(text, "not a valid percentage")
    raise InvalidArgumentError(text)
