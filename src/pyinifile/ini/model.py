# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 22:05:31
# @Author : Kariko Lin

"""
Basically INI Structure, case-insensitive on both sections and keys.

```ini
key = val       ; keys before any header live in the global section ("").

[Section]
key = value
Key = other     ; same key, last one wins (unless multi-value parsing).
```

Both classes are read-only mappings to the user,
all changes go through `IniDocument.write()` and friends.
"""

from collections.abc import Iterator, KeysView, Mapping

from . import convert
from ..exceptions import ValidationError

GLOBAL_SECTION = ''
NEWLINES = ('\n', '\r\n', '\r')


class IniSection(Mapping[str, str]):
    """INI section dict.

    Every key maps to the *last* of its values. More than one value only
    happens through `IniDocument.add()` or multi-value parsing,
    use `values_of()` to get all of them.
    """

    def __init__(self, name: str) -> None:
        self._name = name
        # folded key -> (key as first written, values)
        self.__data: dict[str, tuple[str, list[str]]] = {}

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        try:
            return self.__data[convert.fold(key)][1][-1]
        except (KeyError, AttributeError, TypeError):
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and convert.fold(key) in self.__data

    def __len__(self) -> int:
        return len(self.__data)

    def __iter__(self) -> Iterator[str]:
        return (name for name, _ in self.__data.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniSection):
            return super().__eq__(other)
        return (
            {k: v for k, (_, v) in self.__data.items()}
            == {k: v for k, (_, v) in other.__data.items()})

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"[{self._name}]"

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self.__data))

    def values_of(self, key: str) -> tuple[str, ...]:
        """All values of `key` in insertion order, empty if absent."""
        if key not in self:
            return ()
        return tuple(self.__data[convert.fold(key)][1])

    def entries(self) -> Iterator[tuple[str, str]]:
        """Every `(key, value)` pair, one per stored value. For the writer."""
        for name, values in self.__data.values():
            for i in values:
                yield name, i

    # the following are for IniDocument only, no validation done here.
    def _set(self, key: str, value: str, append: bool = False) -> bool:
        """Returns whether `key` already had a value."""
        folded = convert.fold(key)
        entry = self.__data.get(folded)
        if entry is None:
            self.__data[folded] = (key, [value])
            return False
        if append:
            entry[1].append(value)
        else:
            entry[1][:] = [value]
        return True

    def _remove(self, key: str) -> None:
        self.__data.pop(convert.fold(key), None)

    def _copy(self) -> 'IniSection':
        ret = IniSection(self._name)
        for k, (name, values) in self.__data.items():
            ret.__data[k] = (name, values.copy())
        return ret


class IniDocument(Mapping[str, IniSection]):
    """INI file representation.

    Sections are kept in the order they were first written (or parsed).
    A section without keys does not exist: deleting its last key
    deletes the section as well.

    `newline` is the line terminator used when saving. It is never
    detected from parsed input.
    """

    def __init__(self, newline: str = '\n') -> None:
        self.newline = newline
        self.__sections: dict[str, IniSection] = {}

    @property
    def newline(self) -> str:
        return self._newline

    @newline.setter
    def newline(self, value: str) -> None:
        if value not in NEWLINES:
            raise ValidationError(
                f'Unsupported line terminator {value!r}, '
                f'expected one of {NEWLINES!r}.')
        self._newline = value

    def __getitem__(self, section: str) -> IniSection:
        try:
            return self.__sections[convert.fold(section)]
        except (KeyError, AttributeError, TypeError):
            raise KeyError(section) from None

    def __contains__(self, section: object) -> bool:
        return (isinstance(section, str)
                and convert.fold(section) in self.__sections)

    def __len__(self) -> int:
        return len(self.__sections)

    def __iter__(self) -> Iterator[str]:
        return (i.name for i in self.__sections.values())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return self.__sections == other.__sections

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return '<IniDocument { .sections = %d }>' % len(self.__sections)

    # --- reading ---

    def read(self, section: str, key: str, default=None):
        """Value of `key` in `section`, or `default` if either is missing.

        The type of `default` picks the conversion: `bool`, `int` and
        `float` defaults go through `read_bool()`, `read_int()` and
        `read_float()`, and a value that does not convert gives `default`
        back instead of raising.
        """
        if isinstance(default, bool):
            return self.read_bool(section, key, default)
        if isinstance(default, int):
            return self.read_int(section, key, default)
        if isinstance(default, float):
            return self.read_float(section, key, default)
        return self._lookup(section, key, default)

    def read_bool(self, section: str, key: str,
                  default: bool | None = None) -> bool | None:
        ret = convert.to_bool(self._lookup(section, key))
        return default if ret is None else ret

    def read_int(self, section: str, key: str,
                 default: int | None = None) -> int | None:
        ret = convert.to_int(self._lookup(section, key))
        return default if ret is None else ret

    def read_float(self, section: str, key: str,
                   default: float | None = None) -> float | None:
        ret = convert.to_float(self._lookup(section, key))
        return default if ret is None else ret

    def read_all(self, section: str, key: str) -> tuple[str, ...]:
        """Every value stored under `key`, see `add()`."""
        sect = self.__sections.get(convert.fold(section))
        return () if sect is None else sect.values_of(key)

    def _lookup(self, section: str, key: str,
                default: str | None = None) -> str | None:
        sect = self.__sections.get(convert.fold(section))
        if sect is None or key not in sect:
            return default
        return sect[key]

    def contains_section(self, section: str) -> bool:
        return section in self

    def contains_key(self, section: str, key: str) -> bool:
        sect = self.__sections.get(convert.fold(section))
        return sect is not None and key in sect

    def get_sections(self) -> KeysView[str]:
        """Section names. The view follows later changes of the document."""
        return self.keys()

    def get_keys(self, section: str) -> KeysView[str]:
        """Key names of `section`, empty while the section is missing.

        Like `get_sections()`, the view follows later changes, also when
        the section is deleted and written again.
        """
        return _SectionKeysView(self, section)

    # --- writing ---

    def write(self, section: str, key: str, value) -> None:
        """Sets `key` in `section` to `value`, replacing all older values.

        `bool`, `int` and `float` values are formatted invariantly,
        `None` deletes the key. Raises `ValidationError` (and changes
        nothing) if the section, key or value has illegal characters.
        """
        text = self.__validate(section, key, value)
        if text is None:
            self.delete(section, key)
            return
        self._store(section, key, text)

    def add(self, section: str, key: str, value) -> None:
        """Like `write()`, but keeps the values `key` already has."""
        text = self.__validate(section, key, value)
        if text is None:
            raise ValidationError('Cannot add None, use delete() instead.')
        self._store(section, key, text, append=True)

    @staticmethod
    def __validate(section: str, key: str, value) -> str | None:
        convert.check_section(section)
        convert.check_key(key)
        text = convert.to_text(value)
        if text is not None:
            convert.check_value(text)
        return text

    def delete(self, section: str, key: str | None = None) -> None:
        """Deletes a key, or the whole section if `key` is omitted.

        Missing sections and keys are silently ignored.
        """
        sect = self.__sections.get(convert.fold(section))
        if sect is None:
            return
        if key is not None:
            sect._remove(key)
            if len(sect) > 0:
                return
        del self.__sections[convert.fold(section)]

    def clear(self) -> None:
        self.__sections.clear()

    def copy(self) -> 'IniDocument':
        ret = IniDocument(self.newline)
        for k, sect in self.__sections.items():
            ret.__sections[k] = sect._copy()
        return ret

    # for IniParser, whose grammar already guarantees the names.
    def _open_section(self, section: str) -> IniSection:
        return self.__sections.setdefault(
            convert.fold(section), IniSection(section))

    def _store(self, section: str, key: str, value: str,
               append: bool = False) -> bool:
        return self._open_section(section)._set(key, value, append)

    def _drop_empty(self) -> None:
        for k in [k for k, v in self.__sections.items() if len(v) == 0]:
            del self.__sections[k]


class _SectionKeysView(KeysView[str]):
    """Keys of a section looked up by name on every use."""

    def __init__(self, doc: IniDocument, section: str) -> None:
        super().__init__(doc)
        self._section = section

    def __sect(self) -> Mapping[str, str]:
        return self._mapping.get(self._section, {})

    def __len__(self) -> int:
        return len(self.__sect())

    def __contains__(self, key: object) -> bool:
        return key in self.__sect()

    def __iter__(self) -> Iterator[str]:
        yield from self.__sect()

    def __repr__(self) -> str:
        return f'{type(self).__name__}({list(self)!r})'
