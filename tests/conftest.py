# -*- encoding: utf-8 -*-
# @File   : conftest.py
# @Time   : 2026/10/14 19:02:11
# @Author : Kariko Lin

"""Shared fixtures: small INI texts and documents built through `write()`."""

import pytest

from pyinifile import IniDocument


@pytest.fixture
def sample_text() -> str:
    return (
        '; last modified 1 April 2001 by John Doe\n'
        '[owner]\n'
        'name=John Doe\n'
        'organization=Acme Widgets Inc.\n'
        '[database]\n'
        'server=192.0.2.62     ; use IP address\n'
        'port=143\n'
        'file = "payroll.dat"\n'
    )


@pytest.fixture
def escaping_text() -> str:
    return (
        '   ; testing whitespace line\n'
        '[lines]  ;comment here\n'
        'line-0="\\"" ;escaping quotes\n'
        'line-1="\\\\" ;escaping backslash\n'
        'line-2\t\t\t=\tXXX\t ;tabs\n'
        'line-n  =   "\\r\\n\\t"\n'
    )


@pytest.fixture
def written_doc() -> IniDocument:
    doc = IniDocument()
    doc.write('personal', 'firstName', 'John')
    doc.write('personal', 'lastName', 'Doe')
    doc.write('information', 'isDead', True)
    doc.write('information', 'age', 20)
    doc.write('information', 'motto', '  spaced ; "quoted" \\ ')
    doc.write('information', 'multiline', 'a\tb\r\nc')
    return doc
