# -*- encoding: utf-8 -*-
# @File   : exceptions.py
# @Time   : 2026/10/12 21:40:18
# @Author : Kariko Lin

"""Exceptions raised by pyinifile.

    IniError
    ├── FormatError      # text does not follow the INI grammar
    └── ValidationError  # illegal section, key, value or option

`OSError` and `UnicodeDecodeError` coming from the underlying file or
stream are never wrapped.
"""


class IniError(Exception):
    """Base class of every pyinifile error."""


class FormatError(IniError):
    """INI text cannot be parsed. The whole parse is aborted.

    `line_number` is 1-based, `line` is the raw offending line
    (without its terminator).
    """
    def __init__(self, line_number: int, line: str, reason: str) -> None:
        super().__init__(
            f'File cannot be parsed (line {line_number}: "{line}"): {reason}')
        self.line_number = line_number
        self.line = line
        self.reason = reason


class ValidationError(IniError, ValueError):
    """A write supplied an illegal name or value; nothing was modified."""
