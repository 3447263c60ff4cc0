# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/12 22:47:30
# @Author : Kariko Lin

"""Loads an `IniDocument` from a file, and writes it back line by line.

Only a small INI dialect gets indexed:

    ```ini
    ; comment, kept but never indexed
    orphan = kept, never indexed (no section yet)

    [Section]
    Key = value
    Quoted = "with spaces"  ; one layer of quotes is stripped
    no equal sign here, kept as is
    ```

Anything else passes through unchanged.
"""

import logging
import os
import shutil
import tempfile
from io import StringIO, TextIOBase
from os import PathLike
from os.path import basename, dirname, exists

import chardet

from ..abstract import FileHandler
from ..errors import ConfigError, FileAccessError
from .model import IniDocument
from .utils import (
    fold, is_blank, is_comment, is_section_header, section_name, trim,
    unquote
)

logger = logging.getLogger(__name__)

FALLBACK_ENCODING = 'latin-1'


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None, *,
        atomic: bool = False
    ) -> None:
        super().__init__(filename)
        self._codec = encoding
        self._atomic = atomic

    @property
    def encoding(self) -> str | None:
        """Codec used by the last `read()`, and by the next `write()`.

        `None` means the platform default of `open()`.
        """
        return self._codec

    @staticmethod
    def readstream(buf: TextIOBase) -> IniDocument:
        """Read a decoded text stream into a new document.

        Lines keep everything but their trailing newline.
        """
        ret = IniDocument()
        this_sect = ''
        while i := buf.readline():
            line = i[:-1] if i.endswith('\n') else i
            lineno = ret._append_line(line)

            if is_blank(line) or is_comment(line):
                continue
            if is_section_header(line):
                this_sect = section_name(line)
                ret._index_section(this_sect, lineno)
                continue
            # lines before the first header are never indexed.
            if not this_sect:
                continue
            t = trim(line)
            if (pos := t.find('=')) < 0:
                continue
            ret._index_pair(
                this_sect, fold(t[:pos]), unquote(trim(t[pos + 1:])), lineno)

        logger.debug('loaded %d lines, %d sections', len(ret.lines), len(ret))
        return ret

    def _decode_file(self) -> StringIO:
        with open(self._fn, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            logger.warning(
                'unsure about encoding of %s (%s), trying utf-8',
                self._fn, codec['encoding'])
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
            self._codec = codec['encoding']
        except (UnicodeDecodeError, LookupError):
            logger.warning(
                'cannot decode %s as %s, falling back to %s',
                self._fn, codec['encoding'], FALLBACK_ENCODING)
            buf = raw.decode(FALLBACK_ENCODING)
            self._codec = FALLBACK_ENCODING
        logger.debug('decoded %s as %s', self._fn, self._codec)
        return StringIO(buf, newline=None)

    def read(self) -> IniDocument:
        """Read the file this parser points to.

        Raises `FileAccessError` if it is missing or unreadable.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong, just fallback to `chardet`.
            try:
                with open(self._fn, 'r', encoding=self._codec) as fp:
                    return self.readstream(fp)
            except UnicodeDecodeError:
                return self.readstream(self._decode_file())
        except OSError as e:
            raise FileAccessError.unreadable(self._fn) from e
        except LookupError as e:
            raise ConfigError(f'unknown encoding {self._codec!r}') from e

    def write(self, instance: IniDocument) -> None:
        """Overwrite the file with every line of `instance`.

        Without `atomic`, the file is truncated first,
        so a failure halfway may leave it empty or partial.
        """
        try:
            if self._atomic:
                self.__replace(str(instance))
            else:
                with open(self._fn, 'w', encoding=self._codec) as fp:
                    fp.write(str(instance))
        except OSError as e:
            raise FileAccessError.unwritable(self._fn) from e
        except LookupError as e:
            raise ConfigError(f'unknown encoding {self._codec!r}') from e
        logger.debug('wrote %d lines to %s', len(instance.lines), self._fn)

    def __replace(self, data: str) -> None:
        """Write to a sibling temp file, then rename it over the target."""
        fd, tmp = tempfile.mkstemp(
            '.tmp', prefix=basename(self._fn) + '.',
            dir=dirname(self._fn) or '.')
        try:
            with os.fdopen(fd, 'w', encoding=self._codec) as fp:
                fp.write(data)
                fp.flush()
                os.fsync(fp.fileno())
            if exists(self._fn):
                shutil.copymode(self._fn, tmp)
            os.replace(tmp, self._fn)
        except BaseException:
            if exists(tmp):
                os.remove(tmp)
            raise

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"
