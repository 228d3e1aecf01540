# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/18 14:20:03

"""
Basically INI Structure, as a nested dict.

The outer layer maps section names to sections, where the unnamed section
at the top of a file is `''`. The inner layer maps keys to values.
Everything is a string, and comments are not kept.
"""

from collections.abc import MutableMapping
from typing import Iterator, Mapping
from warnings import warn

from .consts import (
    COMMENT_PREFIXES, DEFAULT_SECTION, LineDelim, resolve_delim)
from .errors import EmptyStringSection, MissingEquals


def _is_comment_or_empty(line: str) -> bool:
    return not line or line.startswith(COMMENT_PREFIXES)


def _section_name(line: str) -> str | None:
    if line.startswith('[') and line.endswith(']'):
        return line[1:-1]
    return None


def _format_pairs(pairs: Mapping[str, str], delimiter: str) -> str:
    return ''.join(f'{k} = {v}{delimiter}' for k, v in pairs.items())


class IniDocument(MutableMapping[str, dict[str, str]]):
    """INI 文档。支持以下形式的小节和键值对：

        ```ini
        # 文件头部游离的键值对位于 '' 小节。
        key = val

        [section]
        key233 = val666
        ```

    区分大小写。另有 `*_case_insensitive` 系列方法可供不区分大小写的查找与删除。

    注：不保证小节、键的顺序，也不保留注释。
    """

    def __init__(self, delimiter: LineDelim | str | None = None) -> None:
        self.__raw: dict[str, dict[str, str]] = {}
        self.delimiter = resolve_delim(delimiter)

    @classmethod
    def empty(
        cls, delimiter: LineDelim | str | None = None
    ) -> 'IniDocument':
        return cls(delimiter)

    def __getitem__(self, key: str) -> dict[str, str]:
        return self.__raw[key]

    def __setitem__(self, key: str, value: Mapping[str, str]) -> None:
        # shouldn't keep ptr to external dict.
        self.__raw[key] = dict(value)

    def __delitem__(self, key: str) -> None:
        del self.__raw[key]

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def __len__(self) -> int:
        return len(self.__raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IniDocument):
            return NotImplemented
        return self.__raw == other.__raw

    def __repr__(self) -> str:
        return f'IniDocument({self.__raw!r})'

    def __str__(self) -> str:
        return self.to_string()

    def is_empty(self) -> bool:
        """A document that only holds empty sections is empty too."""
        return not any(self.__raw.values())

    def insert(
        self, key: str, value: str, section: str = DEFAULT_SECTION
    ) -> str | None:
        """Insert a key into a section, creating the section if needed.
        Returns the overwritten value, if any."""
        pairs = self.__raw.setdefault(section, {})
        old = pairs.get(key)
        pairs[key] = value
        return old

    def get(
        self, key: str, section: str = DEFAULT_SECTION
    ) -> str | None:
        if (pairs := self.__raw.get(section)) is None:
            return None
        return pairs.get(key)

    def get_section(self, section: str) -> dict[str, str] | None:
        return self.__raw.get(section)

    def remove(self, key: str, section: str = DEFAULT_SECTION) -> str | None:
        """Remove a pair. The section itself stays even if left empty."""
        if (pairs := self.__raw.get(section)) is None:
            return None
        return pairs.pop(key, None)

    def remove_section(self, section: str) -> dict[str, str] | None:
        return self.__raw.pop(section, None)

    # case insensitive stuffs.
    # names are compared by `str.lower()`, and sections are scanned
    # in insertion order, so the first declared one wins on collision.
    def __matching_sections(self, section: str) -> list[str]:
        folded = section.lower()
        found = [name for name in self.__raw if name.lower() == folded]
        if len(found) > 1:
            warn(
                f'Sections {found} all match "{section}" ignoring case. '
                f'Taking them in declaration order.',
                stacklevel=3)
        return found

    @staticmethod
    def __matching_key(pairs: dict[str, str], key: str) -> str | None:
        folded = key.lower()
        for k in pairs:
            if k.lower() == folded:
                return k
        return None

    def get_case_insensitive(
        self, key: str, section: str = DEFAULT_SECTION
    ) -> str | None:
        for name in self.__matching_sections(section):
            pairs = self.__raw[name]
            if (actual := self.__matching_key(pairs, key)) is not None:
                return pairs[actual]
        return None

    def get_section_case_insensitive(
        self, section: str
    ) -> dict[str, str] | None:
        if not (found := self.__matching_sections(section)):
            return None
        return self.__raw[found[0]]

    def remove_case_insensitive(
        self, key: str, section: str = DEFAULT_SECTION
    ) -> str | None:
        for name in self.__matching_sections(section):
            pairs = self.__raw[name]
            if (actual := self.__matching_key(pairs, key)) is not None:
                return pairs.pop(actual)
        return None

    def remove_section_case_insensitive(
        self, section: str
    ) -> dict[str, str] | None:
        if not (found := self.__matching_sections(section)):
            return None
        return self.__raw.pop(found[0])

    @classmethod
    def from_string(
        cls, text: str, delimiter: LineDelim | str | None = None
    ) -> 'IniDocument':
        """Parse a document. Stops at the first bad line.

        Inline comments are NOT supported, `a = b ; c` gives `b ; c`.

        Raises:
            - `MissingEquals` when a pair line has no `=`.
            - `EmptyStringSection` on a `[]` header.
        """
        ret = cls(delimiter)
        this_sect = DEFAULT_SECTION
        for lineno, line in enumerate(text.split(ret.delimiter), 1):
            line = line.strip()
            if _is_comment_or_empty(line):
                continue
            if (name := _section_name(line)) is not None:
                if name == DEFAULT_SECTION:
                    raise EmptyStringSection(lineno)
                this_sect = name
                continue
            key, eq, val = line.partition('=')
            if not eq:
                raise MissingEquals(line, lineno)
            ret.insert(key.strip(), val.strip(), this_sect)
        return ret

    def to_string(self, delimiter: LineDelim | str | None = None) -> str:
        """Dump back to INI text, the unnamed section first.
        Every line ends with the delimiter, the last one included."""
        delimiter = (
            self.delimiter if delimiter is None else resolve_delim(delimiter))
        ret = ''
        if (header := self.__raw.get(DEFAULT_SECTION)) is not None:
            ret += _format_pairs(header, delimiter)
        for sect, pairs in self.__raw.items():
            if sect == DEFAULT_SECTION:
                continue
            ret += f'[{sect}]{delimiter}'
            ret += _format_pairs(pairs, delimiter)
        return ret
