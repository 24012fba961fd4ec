#!/usr/bin/env python3
# -----------------------------------------------------------------------------
# Copyright (c) 2026 Melek Derman
#
# SPDX-License-Identifier: MIT
# -----------------------------------------------------------------------------

"""
Shared text-parsing helpers for the PyATHYG package

All low-level splitting, numeric conversion, and fixed-width checks live
here so that the schema builder and the readers never duplicate
format-specific logic.

ATHYG CSV Format
----------------
* Line 1 is a column header and is never parsed.
* Every following line carries one star, with fields separated by a
  single comma.  There is no quoting or escaping: a comma inside a name
  is indistinguishable from a field boundary.
* An empty field means "no value" for numeric columns and "empty text"
  for text columns.

Numeric Conversion
------------------
Numbers are decoded the way C's ``strtoul`` / ``strtol`` / ``strtod``
decode them in the "C" locale: leading whitespace is skipped, the longest
valid numeral prefix is consumed, and anything after it is ignored.  A
field with no leading numeral decodes to ``None``.  No conversion helper
in this module raises for malformed input.
"""

from __future__ import annotations

import functools
import logging
import math
import re
from enum import Enum
from typing import Callable, Iterator, Sequence

import numpy as np

from pyathyg.exceptions import SizeMismatchError
from pyathyg.utils.constants import (
    ATHYG_DELIMITER,
    ATHYG_HEADER_LINES,
    C_WHITESPACE,
    DEFAULT_FLOAT_DTYPE,
    DEFAULT_SIGNED_DTYPE,
    DEFAULT_UNSIGNED_DTYPE,
    TRUTHY_TOKENS,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Numeral grammars
# ---------------------------------------------------------------------------

_WS = "[" + re.escape(C_WHITESPACE) + "]*"

_INT_PATTERN: re.Pattern[str] = re.compile(_WS + r"([+-]?)([0-9]+)")
"""Leading base-10 integer numeral, as accepted by ``strtol``."""

_FLOAT_PATTERN: re.Pattern[str] = re.compile(
    _WS
    + r"(?P<sign>[+-]?)"
    + r"(?:"
    + r"(?P<hex>0[xX](?:[0-9a-fA-F]+(?:\.[0-9a-fA-F]*)?|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
    + r"|(?P<dec>(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
    + r"|(?P<inf>[iI][nN][fF](?:[iI][nN][iI][tT][yY])?)"
    + r"|(?P<nan>[nN][aA][nN])(?:\([0-9A-Za-z_]*\))?"
    + r")"
)
"""Leading floating-point numeral, as accepted by ``strtod``."""

# More digits than this cannot fit any supported integer width, so the
# value saturates without building a huge Python int.
_MAX_INT_DIGITS = 40


class FieldKind(Enum):
    """Target value kinds a catalog field can be coerced into"""

    UNSIGNED_INT = "unsigned_int"
    SIGNED_INT = "signed_int"
    FLOAT = "float"
    CHAR = "char"
    BOOL = "bool"
    TEXT = "text"


NUMERIC_KINDS: frozenset[FieldKind] = frozenset(
    {FieldKind.UNSIGNED_INT, FieldKind.SIGNED_INT, FieldKind.FLOAT}
)

DEFAULT_DTYPES: dict[FieldKind, type] = {
    FieldKind.UNSIGNED_INT: DEFAULT_UNSIGNED_DTYPE,
    FieldKind.SIGNED_INT: DEFAULT_SIGNED_DTYPE,
    FieldKind.FLOAT: DEFAULT_FLOAT_DTYPE,
}
"""Width used for a numeric kind when a field does not name one."""


# ---------------------------------------------------------------------------
# Line handling
# ---------------------------------------------------------------------------

def split_fields(line: str, delimiter: str = ATHYG_DELIMITER) -> list[str]:
    """Split one catalog line into its fields

    Every occurrence of *delimiter* is a boundary.  Adjacent delimiters
    produce an empty field, and the segment after the last delimiter is
    always emitted, so a line without any delimiter yields one field and
    an empty line yields ``[""]``.

    Parameters
    ----------
    line : str
        One line of catalog text, without its line terminator.
    delimiter : str, optional
        Single-character field separator.  Default ``","``.

    Returns
    -------
    list[str]
        The fields, in line order.

    Raises
    ------
    ValueError
        If *delimiter* is not exactly one character.

    Examples
    --------
    >>> split_fields("1,,Sol")
    ['1', '', 'Sol']
    >>> split_fields("a,b,")
    ['a', 'b', '']
    """
    if len(delimiter) != 1:
        raise ValueError(
            f"Delimiter must be a single character, got {delimiter!r}."
        )
    return line.split(delimiter)


def iter_data_lines(
    text: str,
    header_lines: int = ATHYG_HEADER_LINES,
) -> Iterator[tuple[int, str]]:
    """Yield ``(line_number, line)`` for every data line of a catalog text

    The first *header_lines* lines are discarded without being looked at.
    Lines are separated by ``"\\n"`` only; the final line is yielded even
    without a trailing newline, and a trailing newline does not produce an
    extra empty line.  Blank lines in the body are yielded as ``""`` so
    that the caller can reject them.

    Parameters
    ----------
    text : str
        Full file content.
    header_lines : int, optional
        Number of leading lines to skip.  Default ``1``.

    Yields
    ------
    tuple[int, str]
        1-based file line number and the line text.
    """
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()

    for idx in range(header_lines, len(lines)):
        yield idx + 1, lines[idx]


def to_fixed(fields: Sequence[str], count: int) -> tuple[str, ...]:
    """Convert a field sequence into a tuple of exactly *count* fields

    Parameters
    ----------
    fields : Sequence[str]
        Fields produced by :func:`split_fields`.
    count : int
        Required number of fields.

    Returns
    -------
    tuple[str, ...]
        The same field objects, fixed to length *count*.

    Raises
    ------
    SizeMismatchError
        If ``len(fields) != count``.  The sequence is never padded or
        truncated here.
    """
    if len(fields) != count:
        logger.debug("Field sequence -> tuple size mismatch (%d, %d)", len(fields), count)
        raise SizeMismatchError(
            f"Field sequence size mismatch: got {len(fields)}, expected {count}."
        )
    return tuple(fields)


# ---------------------------------------------------------------------------
# Per-kind coercion
# ---------------------------------------------------------------------------

@functools.lru_cache(maxsize=None)
def _int_limits(dtype) -> tuple[int, int]:
    info = np.iinfo(dtype)
    return int(info.min), int(info.max)


def parse_unsigned(text: str, dtype=DEFAULT_UNSIGNED_DTYPE) -> int | None:
    """Decode a leading unsigned integer numeral (``strtoul`` semantics)

    A leading ``-`` negates the value modulo ``2**bits``.  Magnitudes
    above the maximum of *dtype* saturate at that maximum.

    Examples
    --------
    >>> parse_unsigned("42 pc")
    42
    >>> parse_unsigned("") is None
    True
    >>> parse_unsigned("-1", np.uint8)
    255
    """
    match = _INT_PATTERN.match(text)
    if match is None:
        return None

    top = _int_limits(dtype)[1]
    digits = match.group(2).lstrip("0") or "0"
    if len(digits) > _MAX_INT_DIGITS:
        return top

    magnitude = int(digits)
    if magnitude > top:
        return top
    if match.group(1) == "-" and magnitude:
        return top + 1 - magnitude
    return magnitude


def parse_signed(text: str, dtype=DEFAULT_SIGNED_DTYPE) -> int | None:
    """Decode a leading signed integer numeral (``strtol`` semantics)

    Out-of-range values saturate at the limits of *dtype*.

    Examples
    --------
    >>> parse_signed("  -17")
    -17
    >>> parse_signed("300", np.int8)
    127
    """
    match = _INT_PATTERN.match(text)
    if match is None:
        return None

    low, high = _int_limits(dtype)
    negative = match.group(1) == "-"
    digits = match.group(2).lstrip("0") or "0"
    if len(digits) > _MAX_INT_DIGITS:
        return low if negative else high

    value = -int(digits) if negative else int(digits)
    return min(max(value, low), high)


def parse_float(text: str, dtype=DEFAULT_FLOAT_DTYPE) -> float | None:
    """Decode a leading floating-point numeral (``strtod`` semantics)

    Accepts decimal and hexadecimal notation, ``inf``/``infinity`` and
    ``nan``/``nan(...)`` in any letter case.  An exponent marker is only
    consumed when digits follow it, so ``"1e"`` decodes to ``1.0``.

    Parameters
    ----------
    text : str
        Raw field text.
    dtype : numpy dtype, optional
        Target width.  ``float32`` rounds the decoded value to single
        precision; overflow yields an infinity.

    Returns
    -------
    float | None
        The decoded value, or ``None`` when no numeral is present.

    Examples
    --------
    >>> parse_float("10.5")
    10.5
    >>> parse_float("2.5e3mag")
    2500.0
    >>> parse_float("0x1.8p1")
    3.0
    >>> parse_float("G2V") is None
    True
    """
    match = _FLOAT_PATTERN.match(text)
    if match is None:
        return None

    sign = -1.0 if match.group("sign") == "-" else 1.0
    if match.group("hex") is not None:
        try:
            value = float.fromhex(match.group("hex"))
        except OverflowError:
            value = math.inf
    elif match.group("dec") is not None:
        value = float(match.group("dec"))
    elif match.group("inf") is not None:
        value = math.inf
    else:
        value = math.nan
    value = math.copysign(value, sign)

    if dtype is not np.float64 and np.dtype(dtype) != np.float64:
        with np.errstate(over="ignore"):
            value = float(np.dtype(dtype).type(value))
    return value


def parse_char(text: str) -> str | None:
    """Return the first character of *text*, or ``None`` when empty"""
    return text[0] if text else None


def parse_bool(text: str) -> bool:
    """Decode a boolean field

    ``"true"``, ``"t"`` and ``"1"`` in any letter case decode to
    ``True``.  Everything else, the empty string included, decodes to
    ``False``: unlike every other kind, a boolean is never ``None``.
    """
    return text.lower() in TRUTHY_TOKENS


def parse_text(text: str) -> str:
    """Return the field as owned text; an empty field stays ``""``"""
    return str(text)


_COERCERS: dict[FieldKind, Callable] = {
    FieldKind.UNSIGNED_INT: parse_unsigned,
    FieldKind.SIGNED_INT: parse_signed,
    FieldKind.FLOAT: parse_float,
    FieldKind.CHAR: parse_char,
    FieldKind.BOOL: parse_bool,
    FieldKind.TEXT: parse_text,
}


def coerce_field(text: str, kind: FieldKind, dtype=None):
    """Coerce one raw field into an optional typed value

    Parameters
    ----------
    text : str
        Raw field text taken from a split line.
    kind : FieldKind
        Target value kind.
    dtype : numpy dtype, optional
        Width for numeric kinds; ignored for the others.  Defaults to
        ``uint64`` / ``int64`` / ``float64``.

    Returns
    -------
    int | float | str | bool | None
        The decoded value.  ``None`` means the field is absent: empty or
        without a valid leading numeral (numeric kinds), or empty (char).
        Text and boolean fields are never ``None``.

    Raises
    ------
    TypeError
        If *kind* is not a :class:`FieldKind`.
    """
    try:
        coercer = _COERCERS[kind]
    except KeyError:
        raise TypeError(f"No coercion exists for field kind {kind!r}.") from None

    if kind in NUMERIC_KINDS:
        return coercer(text, DEFAULT_DTYPES[kind] if dtype is None else dtype)
    return coercer(text)
