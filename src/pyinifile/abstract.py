# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/12 21:52:40
# @Author : Kariko Lin

import logging
from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Loads a `T` from one file on disk and saves it back.

    `OSError` from opening, reading or writing is never caught.
    """
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = 'utf-8'
    ) -> None:
        self._fn = fspath(filename)
        self._codec = encoding

    @property
    def filename(self) -> str:
        return self._fn

    @property
    def encoding(self) -> str | None:
        return self._codec

    def readbytes(self) -> bytes:
        logger.debug('Reading %s', self._fn)
        with open(self._fn, 'rb') as fp:
            return fp.read()

    def writebytes(self, data: bytes) -> None:
        logger.debug('Writing %d bytes to %s', len(data), self._fn)
        with open(self._fn, 'wb') as fp:
            fp.write(data)

    @abstractmethod
    def read(self) -> T:
        raise NotImplementedError

    @abstractmethod
    def write(self, instance: T) -> None:
        raise NotImplementedError

    def __str__(self) -> str:
        return self._fn
