# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2026/10/13 00:12:47
# @Author : Kariko Lin

"""Culture-independent conversions and name checks.

Typed readers return `None` when the text cannot be converted,
the document turns that into the caller's default.
"""

import math
import re
import unicodedata

from ..exceptions import ValidationError

_INTEGER = re.compile(r'[+-]?[0-9]+')
_FLOAT = re.compile(r'[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?')
_FLOAT_SPECIALS = {
    'nan': math.nan,
    'infinity': math.inf,
    '+infinity': math.inf,
    '-infinity': -math.inf,
}

# escaped inside quoted values, everything else below 0x20 is rejected.
ESCAPABLE_CONTROLS = '\t\n\r'


def to_bool(text: str | None) -> bool | None:
    if text is None:
        return None
    match text.strip().lower():
        case 'true':
            return True
        case 'false':
            return False
        case _:
            return None


def to_int(text: str | None) -> int | None:
    if text is None:
        return None
    text = text.strip()
    # `int()` alone would also take '1_000' and non-ASCII digits.
    if _INTEGER.fullmatch(text) is None:
        return None
    return int(text)


def to_float(text: str | None) -> float | None:
    if text is None:
        return None
    text = text.strip()
    if text.lower() in _FLOAT_SPECIALS:
        return _FLOAT_SPECIALS[text.lower()]
    if _FLOAT.fullmatch(text) is None:
        return None
    return float(text)


def to_text(value: object) -> str | None:
    """Formats a value to be written. `None` is kept (it means delete)."""
    if value is None or isinstance(value, str):
        return value
    # bool first, it is an int too.
    if isinstance(value, bool):
        return 'True' if value else 'False'
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return 'NaN'
        if math.isinf(value):
            return 'Infinity' if value > 0 else '-Infinity'
        return repr(value)
    raise TypeError(
        f'Cannot write value of type {type(value).__name__}, '
        'expected str, bool, int, float or None.')


def fold(name: str) -> str:
    """Case-insensitive lookup form of a section or key name.

    Upper-cases one character at a time and keeps characters whose
    upper case is longer, so `'straße'` and `'STRASSE'` stay different.
    """
    return ''.join(
        up if len(up := ch.upper()) == 1 else ch for ch in name)


def check_section(name: str) -> None:
    if not isinstance(name, str):
        raise TypeError(f'Section name must be str, not {type(name).__name__}.')
    for ch in name:
        if ch.isspace() or ch in '];':
            raise ValidationError(
                f'Invalid character {ch!r} in section name "{name}".')


def check_key(name: str) -> None:
    if not isinstance(name, str):
        raise TypeError(f'Key name must be str, not {type(name).__name__}.')
    if not name:
        raise ValidationError('Key name cannot be empty.')
    if name[0] == '[':
        raise ValidationError(f'Key name "{name}" cannot start with "[".')
    # would be read back as a byte order mark in the global section.
    if name[0] == '\ufeff':
        raise ValidationError('Key name cannot start with U+FEFF.')
    for ch in name:
        if ch.isspace() or ch in '=;':
            raise ValidationError(
                f'Invalid character {ch!r} in key name "{name}".')


def check_value(value: str) -> None:
    for ch in value:
        if (unicodedata.category(ch) == 'Cc'
                and ch not in ESCAPABLE_CONTROLS):
            raise ValidationError(
                f'Invalid control character {ch!r} in value.')
