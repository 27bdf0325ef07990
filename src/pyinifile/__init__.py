# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:36:05
# @Author : Kariko Lin

"""Reading and writing .ini files.

```python
import pyinifile

doc = pyinifile.load('settings.ini')
port = doc.read('database', 'port', 143)
doc.write('database', 'server', '192.0.2.62')
pyinifile.dump(doc, 'settings.ini')
```
"""

from io import TextIOBase
from os import PathLike
from typing import BinaryIO, TextIO

from .exceptions import FormatError, IniError, ValidationError
from .ini import (
    GLOBAL_SECTION, IniDocument, IniParser, IniSection,
    dumpb, dumps, loads, parse
)

__version__ = '1.0.0'

__all__ = [
    'IniDocument', 'IniSection', 'IniParser', 'GLOBAL_SECTION',
    'load', 'loads', 'parse', 'dump', 'dumps', 'dumpb',
    'IniError', 'FormatError', 'ValidationError',
]


def load(
    source: str | PathLike[str] | TextIO | BinaryIO,
    **kwargs
) -> IniDocument:
    """Parses a file name, a text stream or a binary (UTF-8) stream.

    Keyword arguments go to `parse()` (`multi_value`, `newline`).
    """
    if isinstance(source, (str, PathLike)):
        return IniParser(source, **kwargs).read()
    return loads(source.read(), **kwargs)


def dump(
    doc: IniDocument,
    destination: str | PathLike[str] | TextIO | BinaryIO,
    **kwargs
) -> None:
    """Saves to a file name, a text stream or a binary stream.

    Keyword arguments go to `dumps()` (`blank_lines`, `delimiter`).
    """
    if isinstance(destination, (str, PathLike)):
        IniParser(destination).write(doc, **kwargs)
    elif isinstance(destination, TextIOBase):
        destination.write(dumps(doc, **kwargs))
    else:
        destination.write(dumpb(doc, **kwargs))
