# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 22:01:14
# @Author : Kariko Lin

from .model import GLOBAL_SECTION, NEWLINES, IniDocument, IniSection
from .parser import CharState, IniParser, loads, parse
from .serializer import dumpb, dumps

__all__ = [
    'GLOBAL_SECTION', 'NEWLINES', 'IniDocument', 'IniSection',
    'CharState', 'IniParser', 'loads', 'parse',
    'dumpb', 'dumps',
]
