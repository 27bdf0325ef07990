# -*- encoding: utf-8 -*-
# @File   : test_serializer.py
# @Time   : 2026/10/14 21:11:08
# @Author : Kariko Lin

"""Tests for canonical INI output and parse/save round trips."""

import pytest

from pyinifile import IniDocument, ValidationError, dumpb, dumps, loads, parse
from pyinifile.ini.serializer import quote_value


class TestDumps:

    def test_layout(self) -> None:
        doc = IniDocument()
        doc.write('default', 'name', 'john')
        doc.write('Default', 'Name', 'doe')
        doc.write('DEFAULT', 'NAME', None)
        doc.write('personal', 'firstName', 'John')
        doc.write('personal', 'lastName', 'Doe')
        doc.write('information', 'isDead', True)
        doc.write('information', 'age', 20)
        assert dumps(doc) == (
            '[personal]\n'
            'firstName = John\n'
            'lastName = Doe\n'
            '\n'
            '[information]\n'
            'isDead = True\n'
            'age = 20\n'
        )

    def test_configured_newline(self) -> None:
        doc = IniDocument(newline='\r\n')
        doc.write('A', 'k', '1')
        doc.write('B', 'k', '2')
        assert dumps(doc) == '[A]\r\nk = 1\r\n\r\n[B]\r\nk = 2\r\n'

    def test_empty_document(self) -> None:
        assert dumps(IniDocument()) == ''

    def test_global_section_first(self) -> None:
        doc = IniDocument()
        doc.write('A', 'k', '1')
        doc.write('', 'g', '2')
        assert dumps(doc) == 'g = 2\n\n[A]\nk = 1\n'

    def test_deleted_key_not_written(self) -> None:
        doc = IniDocument()
        doc.write('S', 'K', 'v')
        doc.write('S', 'L', 'w')
        doc.write('S', 'K', None)
        assert dumps(doc) == '[S]\nL = w\n'

    def test_multi_value_lines(self) -> None:
        doc = IniDocument()
        doc.add('A', 'k', '1')
        doc.add('A', 'k', '2')
        assert dumps(doc) == '[A]\nk = 1\nk = 2\n'

    def test_options(self) -> None:
        doc = IniDocument()
        doc.write('A', 'k', '1')
        doc.write('B', 'm', '2')
        assert dumps(doc, blank_lines=0, delimiter='=') == '[A]\nk=1\n[B]\nm=2\n'
        assert dumps(doc, blank_lines=2) == '[A]\nk = 1\n\n\n[B]\nm = 2\n'

    @pytest.mark.parametrize('delimiter', [':', '==', ' = x', ''])
    def test_bad_delimiter(self, delimiter: str) -> None:
        doc = IniDocument()
        with pytest.raises(ValidationError):
            dumps(doc, delimiter=delimiter)

    def test_negative_blank_lines(self) -> None:
        with pytest.raises(ValidationError):
            dumps(IniDocument(), blank_lines=-1)

    def test_bytes_are_utf8_without_bom(self) -> None:
        doc = IniDocument()
        doc.write('A', 'k', 'čćž')
        data = dumpb(doc)
        assert not data.startswith(b'\xef\xbb\xbf')
        assert data.decode('utf-8') == '[A]\nk = čćž\n'


class TestQuoting:

    @pytest.mark.parametrize('value', ['plain', '', 'a=b', 'x y'])
    def test_unquoted(self, value: str) -> None:
        assert quote_value(value) == value

    @pytest.mark.parametrize('value, expected', [
        (' x', '" x"'),
        ('x\t', '"x\\t"'),
        ('a;b', '"a;b"'),
        ('say "hi"', '"say \\"hi\\""'),
        ('c:\\dir', '"c:\\\\dir"'),
        ('a\r\nb', '"a\\r\\nb"'),
    ])
    def test_quoted(self, value: str, expected: str) -> None:
        assert quote_value(value) == expected


class TestRoundTrip:

    def test_parse_of_save(self, written_doc: IniDocument) -> None:
        assert parse(dumps(written_doc)) == written_doc
        assert loads(dumpb(written_doc)).read(
            'information', 'motto') == '  spaced ; "quoted" \\ '

    def test_idempotent(self, written_doc: IniDocument) -> None:
        once = dumps(written_doc)
        assert dumps(parse(once)) == once

    def test_parsed_file_resaves_canonically(self, escaping_text: str) -> None:
        doc = parse(escaping_text)
        assert dumps(doc) == (
            '[lines]\n'
            'line-0 = "\\""\n'
            'line-1 = "\\\\"\n'
            'line-2 = XXX\n'
            'line-n = "\\r\\n\\t"\n'
        )
        assert parse(dumps(doc)) == doc

    def test_global_section(self) -> None:
        doc = IniDocument()
        doc.write('', 'g', ' padded ')
        doc.write('A', 'k', '1')
        assert parse(dumps(doc)) == doc

    def test_multi_value(self) -> None:
        doc = IniDocument()
        doc.add('A', 'k', '1')
        doc.add('A', 'k', ' 2')
        again = parse(dumps(doc), multi_value=True)
        assert again.read_all('a', 'K') == ('1', ' 2')
        assert parse(dumps(doc)).read_all('A', 'k') == (' 2',)

    def test_unquoted_control_survives(self) -> None:
        doc = parse('[A]\nk = a\x01b\n')
        assert parse(dumps(doc)) == doc
