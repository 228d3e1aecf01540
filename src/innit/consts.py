# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/18 14:05:37

from enum import Enum


class LineDelim(str, Enum):
    LF = '\n'
    CRLF = '\r\n'


# the unnamed section at the top of a file.
DEFAULT_SECTION = ''
COMMENT_PREFIXES = ('#', ';')
BOM = '\ufeff'

# CRLF only when asked for with `delimiter=`.
LINE_DELIM = LineDelim.LF


def resolve_delim(delimiter: LineDelim | str | None = None) -> str:
    """`None` for the package default. Raises `ValueError` for anything
    other than LF or CRLF."""
    if delimiter is None:
        return LINE_DELIM.value
    return LineDelim(delimiter).value
