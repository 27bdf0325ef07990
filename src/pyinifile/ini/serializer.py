# -*- encoding: utf-8 -*-
# @File   : serializer.py
# @Time   : 2026/10/13 01:30:02
# @Author : Kariko Lin

"""Canonical INI output.

Comments and blank lines of a parsed file are not kept, the output only
depends on the document content.
"""

from .model import GLOBAL_SECTION, IniDocument, IniSection
from ..exceptions import ValidationError

_QUOTE_ESCAPES = str.maketrans({
    '\\': '\\\\',
    '"': '\\"',
    '\t': '\\t',
    '\n': '\\n',
    '\r': '\\r',
})
# characters the parser would eat if the value were not quoted.
_NEEDS_QUOTES = frozenset(';"\\\t\n\r')


def quote_value(value: str) -> str:
    if value and (
        value[0].isspace() or value[-1].isspace()
        or not _NEEDS_QUOTES.isdisjoint(value)
    ):
        return '"' + value.translate(_QUOTE_ESCAPES) + '"'
    return value


def check_delimiter(delimiter: str) -> None:
    if delimiter.count('=') != 1 or delimiter.strip(' \t') != '=':
        raise ValidationError(
            f'Delimiter {delimiter!r} must be one "=" '
            'surrounded by spaces or tabs only.')


def _output_section(
    section: IniSection, newline: str, delimiter: str
) -> str:
    ret = '' if section.name == GLOBAL_SECTION else f'[{section.name}]{newline}'
    for k, v in section.entries():
        ret += f'{k}{delimiter}{quote_value(v)}{newline}'
    return ret


def dumps(
    doc: IniDocument, *,
    blank_lines: int = 1,
    delimiter: str = ' = '
) -> str:
    """Serializes `doc` to text, using `doc.newline` as line terminator.

    Sections are separated by `blank_lines` empty lines. The global
    section (keys before any header) always comes first, without header.
    """
    if blank_lines < 0:
        raise ValidationError('blank_lines cannot be negative.')
    check_delimiter(delimiter)

    sections = [doc[i] for i in doc if len(doc[i]) > 0]
    sections.sort(key=lambda x: x.name != GLOBAL_SECTION)  # stable
    return (doc.newline * blank_lines).join(
        _output_section(i, doc.newline, delimiter) for i in sections)


def dumpb(doc: IniDocument, **kwargs) -> bytes:
    """Same as `dumps()`, encoded as UTF-8 without byte order mark."""
    return dumps(doc, **kwargs).encode('utf-8')
