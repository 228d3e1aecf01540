# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 15:40:19

import logging

from .consts import DEFAULT_SECTION, LINE_DELIM, LineDelim
from .errors import (
    InnitError, MissingEquals, EmptyStringSection, InvalidYamlDocument
)
from .model import IniDocument
from .parser import parse, serialize, IniFileParser, IniYamlParser

__all__ = [
    'IniDocument', 'parse', 'serialize',
    'IniFileParser', 'IniYamlParser',
    'InnitError', 'MissingEquals', 'EmptyStringSection', 'InvalidYamlDocument',
    'LineDelim', 'LINE_DELIM', 'DEFAULT_SECTION'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
