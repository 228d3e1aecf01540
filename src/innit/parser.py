# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/18 15:02:48

"""Text and file level entries of the INI document.

`parse()` and `serialize()` work on strings only.
The `FileHandler`s below take care of opening and decoding files.
"""

import logging
from io import StringIO, TextIOBase

import chardet
import yaml

from .abstract import FileHandler
from .consts import BOM, LineDelim
from .errors import InvalidYamlDocument
from .model import IniDocument


def parse(
    text: str, delimiter: LineDelim | str | None = None
) -> IniDocument:
    """Parse INI text. See `IniDocument.from_string()`."""
    return IniDocument.from_string(text, delimiter)


def serialize(
    doc: IniDocument, delimiter: LineDelim | str | None = None
) -> str:
    """Dump a document back to INI text.
    Comments, blank lines and spaces around `=` are all lost."""
    return doc.to_string(delimiter)


class IniFileParser(FileHandler[IniDocument]):
    kind = 'INI file'

    def __init__(
        self, filename: str,
        encoding: str | None = None,
        delimiter: LineDelim | str | None = None
    ) -> None:
        super().__init__(filename, encoding)
        self._delim = delimiter

    def readstream(self, buf: TextIOBase) -> IniDocument:
        """Parse a whole decoded text stream at once.

        A leading BOM is dropped, so `utf-8` also reads `utf-8-sig` files.
        Raises on the first bad line like `parse()`.
        """
        text = buf.read()
        if text.startswith(BOM):
            text = text[len(BOM):]
        return parse(text, self._delim)

    @staticmethod
    def _guess_decode(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        guess = chardet.detect(raw)
        tried = (
            [guess['encoding']]
            if guess['encoding'] and guess['confidence'] >= 0.8 else [])
        # gbk decodes almost anything, so it goes last.
        for codec in (*tried, 'utf-8-sig', 'gbk'):
            try:
                text = raw.decode(codec)
            except UnicodeDecodeError:
                continue
            logging.debug(f'`{filename}` decoded as {codec}.')
            break
        else:
            text = raw.decode('gbk', errors='replace')
            logging.warning(
                f'No codec fits `{filename}`, undecodable bytes replaced.')
        # line endings untouched, as with `open(newline='')`.
        return StringIO(text, newline='')

    def read(self) -> IniDocument:
        try:
            # when encoding is None, `open()` would fallback to system default.
            # newline='' since CRLF documents split on '\r\n' themselves.
            with open(
                self._fn, 'r', encoding=self._codec, newline=''
            ) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError as e:
            logging.warning(
                f'Unable to decode `{self._fn}` as {self._codec}, '
                f'guessing with chardet.\n  {e}')
            return self.readstream(self._guess_decode(self._fn))

    def write(self, instance: IniDocument) -> None:
        with open(self._fn, 'w', encoding=self._codec, newline='') as fp:
            fp.write(serialize(instance, self._delim))
        logging.debug(f'{len(instance)} section(s) written to `{self._fn}`.')


class IniYamlParser(FileHandler[IniDocument]):
    """Converts between INI documents and plain YAML mappings like:

        ```yaml
        '':
          key: val
        section:
          key233: val666
        ```
    """
    kind = 'YAML file'

    def __init__(self, filename: str, encoding: str = 'utf-8') -> None:
        super().__init__(filename, encoding)

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            data = yaml.safe_load(fp)
        ret = IniDocument()
        if data is None:
            return ret
        if not isinstance(data, dict):
            raise InvalidYamlDocument(
                f'`{self._fn}` should be a mapping of sections, '
                f'got {type(data).__name__}.')
        for sect, pairs in data.items():
            if pairs is None:
                pairs = {}
            if not isinstance(pairs, dict):
                raise InvalidYamlDocument(
                    f'Section "{sect}" in `{self._fn}` is not a mapping.')
            # may there be some pure digits considered as int
            ret[str(sect)] = {
                str(k): '' if v is None else str(v) for k, v in pairs.items()
            }
        return ret

    def write(self, instance: IniDocument) -> None:
        data = {sect: dict(pairs) for sect, pairs in instance.items()}
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                data, fp, allow_unicode=True, sort_keys=False,
                default_flow_style=False)
