# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/18 14:02:11

from abc import ABCMeta, abstractmethod
from typing import Generic, TypeVar

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Reads and writes a `T` from and to one file.

    `encoding=None` falls back to the system default, as `open()` does.
    """
    kind = 'file'

    def __init__(self, filename: str, encoding: str | None = None) -> None:
        self._fn = filename
        self._codec = encoding

    @property
    def filename(self) -> str:
        return self._fn

    @property
    def encoding(self) -> str | None:
        return self._codec

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return f'{self.kind}: {self._fn} ({self._codec})'
