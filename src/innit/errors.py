# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/18 14:11:52

"""Errors raised while reading INI text.

Line numbers are 1-based, counted on the active line delimiter.
"""


class InnitError(Exception):
    """Base class of everything this package raises."""
    pass


class MissingEquals(InnitError):
    """A line that is neither a comment nor a section header has no `=`."""
    def __init__(self, line: str, lineno: int) -> None:
        super().__init__(f'bad k/v pair `{line}` on line {lineno}')
        self.line = line
        self.lineno = lineno

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MissingEquals):
            return NotImplemented
        return (self.line, self.lineno) == (other.line, other.lineno)

    def __hash__(self) -> int:
        return hash((MissingEquals, self.line, self.lineno))

    def __repr__(self) -> str:
        return f'MissingEquals({self.line!r}, {self.lineno})'


class EmptyStringSection(InnitError):
    """`[]` header. The empty name is kept for the default section."""
    def __init__(self, lineno: int) -> None:
        super().__init__(f'section with empty string as name on line {lineno}')
        self.lineno = lineno

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmptyStringSection):
            return NotImplemented
        return self.lineno == other.lineno

    def __hash__(self) -> int:
        return hash((EmptyStringSection, self.lineno))

    def __repr__(self) -> str:
        return f'EmptyStringSection({self.lineno})'


class InvalidYamlDocument(InnitError):
    """YAML root is not a mapping of section mappings."""
    pass
