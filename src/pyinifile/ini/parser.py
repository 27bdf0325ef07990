# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/12 23:18:56
# @Author : Kariko Lin

"""INI reading, character by character.

Grammar, in short:

    [Section]               ; whitespace and ';' not allowed in the name
    key = unquoted value    ; right-trimmed, ends at ';' or line end
    key = "  quoted\\tvalue"  ; kept verbatim, escapes: \\t \\n \\r \\" \\\\
       ; whitespace may only prefix a comment

Any of `\\r\\n`, `\\n` or `\\r` ends a line. Malformed input is rejected
as a whole with a `FormatError` naming the line.
"""

import logging
from enum import Enum, auto
from io import TextIOBase
from os import PathLike

import chardet

from .model import GLOBAL_SECTION, IniDocument
from .serializer import dumpb
from ..abstract import FileHandler
from ..exceptions import FormatError

logger = logging.getLogger(__name__)

_WHITESPACE = ' \t'
_NEWLINE = '\r\n'
_ESCAPES = {'t': '\t', 'n': '\n', 'r': '\r', '"': '"', '\\': '\\'}


class CharState(Enum):
    FIRST_CHAR_IN_LINE = auto()
    SECTION = auto()
    KEY = auto()
    KEY_WHITESPACE_SUFFIX = auto()
    VALUE_POSSIBLE_WHITESPACE = auto()
    VALUE = auto()
    QUOTED_VALUE = auto()
    QUOTED_VALUE_ESCAPE = auto()
    WHITESPACE_PREFIX = auto()
    WHITESPACE_SUFFIX = auto()
    COMMENT = auto()


class _StateMachine:
    def __init__(self, doc: IniDocument, multi_value: bool) -> None:
        self.doc = doc
        self.multi_value = multi_value
        self.state = CharState.FIRST_CHAR_IN_LINE
        self.section = GLOBAL_SECTION
        self.key = ''
        self._buf: list[str] = []

    def feed(self, ch: str) -> str | None:
        """Consumes one character.

        Returns why `ch` is not acceptable, or `None` when it is.
        """
        match self.state:
            case CharState.FIRST_CHAR_IN_LINE:
                if ch == '[':
                    self._buf.clear()
                    self.state = CharState.SECTION
                elif ch in _NEWLINE:
                    pass
                elif ch in _WHITESPACE:
                    self.state = CharState.WHITESPACE_PREFIX
                elif ch == ';':
                    self.state = CharState.COMMENT
                elif ch == '=':
                    return 'missing key name'
                else:
                    self._buf[:] = [ch]
                    self.state = CharState.KEY

            case CharState.SECTION:
                if ch == ']':
                    self.section = ''.join(self._buf)
                    self.doc._open_section(self.section)
                    self.state = CharState.WHITESPACE_SUFFIX
                elif ch in _NEWLINE or ch in _WHITESPACE or ch == ';':
                    return 'unexpected end of section'
                else:
                    self._buf.append(ch)

            case CharState.KEY | CharState.KEY_WHITESPACE_SUFFIX:
                if ch == '=':
                    if self.state is CharState.KEY:
                        self.key = ''.join(self._buf)
                    self._buf.clear()
                    self.state = CharState.VALUE_POSSIBLE_WHITESPACE
                elif ch in _WHITESPACE:
                    if self.state is CharState.KEY:
                        self.key = ''.join(self._buf)
                    self.state = CharState.KEY_WHITESPACE_SUFFIX
                elif self.state is CharState.KEY_WHITESPACE_SUFFIX:
                    return 'unexpected end of key'
                elif ch in _NEWLINE or ch == ';':
                    return 'unexpected end of key'
                else:
                    self._buf.append(ch)

            case CharState.VALUE_POSSIBLE_WHITESPACE:
                if ch in _NEWLINE:
                    self._commit('')
                    self.state = CharState.FIRST_CHAR_IN_LINE
                elif ch == ';':
                    self._commit('')
                    self.state = CharState.COMMENT
                elif ch in _WHITESPACE:
                    pass
                elif ch == '"':
                    self._buf.clear()
                    self.state = CharState.QUOTED_VALUE
                else:
                    self._buf[:] = [ch]
                    self.state = CharState.VALUE

            case CharState.VALUE:
                if ch in _NEWLINE or ch == ';':
                    self._commit(''.join(self._buf).rstrip())
                    self.state = (CharState.COMMENT if ch == ';'
                                  else CharState.FIRST_CHAR_IN_LINE)
                else:
                    self._buf.append(ch)

            case CharState.QUOTED_VALUE:
                if ch in _NEWLINE:
                    return 'premature end of quoted value'
                elif ch == '"':
                    self._commit(''.join(self._buf))
                    self.state = CharState.WHITESPACE_SUFFIX
                elif ch == '\\':
                    self.state = CharState.QUOTED_VALUE_ESCAPE
                else:
                    self._buf.append(ch)

            case CharState.QUOTED_VALUE_ESCAPE:
                if ch not in _ESCAPES:
                    return 'invalid escape sequence'
                self._buf.append(_ESCAPES[ch])
                self.state = CharState.QUOTED_VALUE

            case CharState.WHITESPACE_PREFIX | CharState.WHITESPACE_SUFFIX:
                if ch in _NEWLINE:
                    self.state = CharState.FIRST_CHAR_IN_LINE
                elif ch == ';':
                    self.state = CharState.COMMENT
                elif ch not in _WHITESPACE:
                    return ('unexpected character in whitespace line'
                            if self.state is CharState.WHITESPACE_PREFIX
                            else 'unexpected character after value')

            case CharState.COMMENT:
                if ch in _NEWLINE:
                    self.state = CharState.FIRST_CHAR_IN_LINE
        return None

    def _commit(self, value: str) -> None:
        replaced = self.doc._store(
            self.section, self.key, value, append=self.multi_value)
        if replaced and not self.multi_value:
            logger.debug('[%s] %s appears more than once, last one wins.',
                         self.section, self.key)


def _line_at(text: str, start: int) -> str:
    end = len(text)
    for i in _NEWLINE:
        pos = text.find(i, start)
        if pos != -1:
            end = min(end, pos)
    return text[start:end]


def parse(
    text: str, *,
    newline: str = '\n',
    multi_value: bool = False
) -> IniDocument:
    """Parses INI text into a new document.

    Duplicate keys inside a section overwrite each other, unless
    `multi_value` is set, then all of their values are kept in order.
    `newline` is stored on the document for saving it later.
    """
    doc = IniDocument(newline=newline)
    machine = _StateMachine(doc, multi_value)
    if text.startswith('\ufeff'):
        text = text[1:]

    lineno, line_start, prev = 1, 0, ''
    for idx, ch in enumerate(text):
        if (reason := machine.feed(ch)) is not None:
            raise FormatError(lineno, _line_at(text, line_start), reason)
        if ch == '\r' or (ch == '\n' and prev != '\r'):
            lineno += 1
        if ch in _NEWLINE:
            line_start = idx + 1
        prev = ch

    # last line without terminator
    if machine.state is not CharState.FIRST_CHAR_IN_LINE:
        if (reason := machine.feed('\n')) is not None:
            raise FormatError(lineno, _line_at(text, line_start), reason)

    doc._drop_empty()
    logger.debug('Parsed %d section(s) from %d line(s).', len(doc), lineno)
    return doc


def loads(data: str | bytes, **kwargs) -> IniDocument:
    """Parses INI text, or UTF-8 bytes (with or without BOM)."""
    if isinstance(data, (bytes, bytearray)):
        data = bytes(data).decode('utf-8-sig')
    return parse(data, **kwargs)


class IniParser(FileHandler[IniDocument]):
    """Reads and writes *one* INI file.

    `encoding=None` guesses the codec of the file with `chardet`.
    Saving always writes UTF-8 without byte order mark.
    """
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = 'utf-8-sig', *,
        multi_value: bool = False,
        newline: str = '\n'
    ) -> None:
        super().__init__(filename, encoding)
        self._multi_value = multi_value
        self._newline = newline

    @staticmethod
    def readstream(buf: TextIOBase, **kwargs) -> IniDocument:
        """Reads a decoded char stream.

        Open files with `newline=''` for line numbers in errors to match
        the file. Usually just `self.read()`.
        """
        return parse(buf.read(), **kwargs)

    @staticmethod
    def _decode(raw: bytes) -> str:
        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            logger.warning(
                'Cannot tell the encoding (guessed %s, confidence %.2f), '
                'using UTF-8.', codec['encoding'], codec['confidence'])
            codec = {'encoding': 'utf-8-sig'}
        # fallbacks
        try:
            return raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            return raw.decode('utf-8-sig')

    def read(self) -> IniDocument:
        raw = self.readbytes()
        text = (self._decode(raw) if self._codec is None
                else raw.decode(self._codec))
        return parse(
            text, newline=self._newline, multi_value=self._multi_value)

    def write(
        self, instance: IniDocument, *,
        blank_lines: int = 1,
        delimiter: str = ' = '
    ) -> None:
        """Saves to *one* INI file, see `serializer.dumps()`."""
        self.writebytes(
            dumpb(instance, blank_lines=blank_lines, delimiter=delimiter))

    def __str__(self) -> str:
        return f'INI file: {super().__str__()} ({self._codec})'
