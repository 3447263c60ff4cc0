# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/12 22:03:41
# @Author : Kariko Lin

"""
Line-preserving INI document.

The raw lines are the only thing ever written back.
Everything else (anchors, key lines, values) is an index derived from them,
and every structural edit shifts that index in the same call.

Duplicated sections and keys follow "last occurrence wins":

    ```ini
    [db]
    host = a
    [DB]        ; anchor of `db` from now on, new keys go below here.
    host = b    ; `get('db', 'host')` => 'b', `set()` rewrites this line.
    ```
"""

import logging
from collections.abc import Iterator, Mapping

from ..errors import NotFoundError
from .utils import (
    fold, format_pair, is_blank, is_section_header, trim
)

logger = logging.getLogger(__name__)


class IniSectionProxy(Mapping[str, str]):
    """Read-only view of a section's resolved pairs.

    Keys are case-insensitive. Edit through `IniDocument.set()` instead,
    since a value without its line would break the index.
    """

    def __init__(self, section_name: str, pairs: dict[str, str]) -> None:
        self._name = section_name
        # shared with IniDocument, so the view follows later edits.
        self._data = pairs

    def __getitem__(self, key: str) -> str:
        return self._data[fold(key)]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold(key) in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'[{self._name}]'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        return self._data.copy()


class IniDocument(Mapping[str, IniSectionProxy]):
    """Line store plus its index. Sections are keyed by folded name."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self.__anchors: dict[str, int] = {}
        self.__key_lines: dict[str, dict[str, int]] = {}
        self.__values: dict[str, dict[str, str]] = {}

    # --- loader hooks, see `IniParser.readstream()` ---

    def _append_line(self, line: str) -> int:
        self._lines.append(line)
        return len(self._lines) - 1

    def _index_section(self, section: str, lineno: int) -> None:
        # always overwrite: the last header is the anchor.
        self.__anchors[section] = lineno

    def _index_pair(
        self, section: str, key: str, value: str, lineno: int
    ) -> None:
        # key tables appear with the first assignment, not with the header.
        self.__key_lines.setdefault(section, {})[key] = lineno
        self.__values.setdefault(section, {})[key] = value

    # --- read access ---

    @property
    def lines(self) -> tuple[str, ...]:
        return tuple(self._lines)

    def has_section(self, section: str) -> bool:
        return fold(section) in self.__anchors

    def anchor_of(self, section: str) -> int:
        try:
            return self.__anchors[fold(section)]
        except KeyError:
            raise NotFoundError(section) from None

    def line_of(self, section: str, key: str) -> int:
        sec, k = fold(section), fold(key)
        if sec not in self.__key_lines:
            raise NotFoundError(section)
        if k not in self.__key_lines[sec]:
            raise NotFoundError(section, key)
        return self.__key_lines[sec][k]

    def get(self, section: str, key: str) -> str:  # type: ignore[override]
        """Resolved (unquoted) value of `key` in `section`.

        Unlike `Mapping.get()` there is no default;
        raises `NotFoundError` instead.
        """
        sec, k = fold(section), fold(key)
        if sec not in self.__values:
            raise NotFoundError(section)
        if k not in self.__values[sec]:
            raise NotFoundError(section, key)
        return self.__values[sec][k]

    def __getitem__(self, section: str) -> IniSectionProxy:
        sec = fold(section)
        if sec not in self.__anchors:
            raise KeyError(section)
        return IniSectionProxy(sec, self.__values.get(sec, {}))

    def __contains__(self, section: object) -> bool:
        return isinstance(section, str) and self.has_section(section)

    def __len__(self) -> int:
        return len(self.__anchors)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__anchors)

    def __str__(self) -> str:
        return ''.join(f'{i}\n' for i in self._lines)

    def __repr__(self) -> str:
        return '<IniDocument lines=%d sections=%d>' % (
            len(self._lines), len(self.__anchors))

    # --- mutation ---

    def set(self, section: str, key: str, value: str) -> int:
        """Make `key` in `section` hold `value`, touching as few lines
        as possible. Returns the line number of the assignment.

        - section missing: append `[section]` and the pair at the end,
          after one blank separator if the last line is not blank.
        - key present: rewrite the right-hand side of its line in place.
        - key missing: insert before the next header, stepping back over
          exactly one blank line unless that line is the header itself;
          or append at the end of the file.
        """
        sec, k = fold(section), fold(key)

        if sec not in self.__anchors:
            if self._lines and not is_blank(self._lines[-1]):
                self._lines.append('')
            self._index_section(sec, self._append_line(f'[{section}]'))
            lineno = self._append_line(format_pair(key, value))
            self._index_pair(sec, k, value, lineno)
            logger.debug('appended section [%s] at line %d', sec, lineno - 1)
            return lineno

        if k in self.__key_lines.get(sec, {}):
            lineno = self.__key_lines[sec][k]
            line = self._lines[lineno]
            lhs = trim(line[:line.find('=')])
            self._lines[lineno] = format_pair(lhs, value)
            self.__values[sec][k] = value
            logger.debug('rewrote [%s] %s at line %d', sec, k, lineno)
            return lineno

        anchor = self.__anchors[sec]
        lineno = anchor + 1
        while lineno < len(self._lines):
            if is_section_header(self._lines[lineno]):
                # only before a header, never at the end of the file.
                if lineno - 1 > anchor and is_blank(self._lines[lineno - 1]):
                    lineno -= 1
                break
            lineno += 1

        self._lines.insert(lineno, format_pair(key, value))
        self.__shift(lineno, 1)
        self._index_pair(sec, k, value, lineno)
        logger.debug('inserted [%s] %s at line %d', sec, k, lineno)
        return lineno

    def delete(self, section: str, key: str) -> int:
        """Remove the line assigning `key` in `section`.

        The header stays, even if the section becomes empty.
        Returns the removed line number.
        """
        lineno = self.line_of(section, key)
        sec, k = fold(section), fold(key)

        del self._lines[lineno]
        del self.__key_lines[sec][k]
        del self.__values[sec][k]
        self.__shift(lineno + 1, -1)
        logger.debug('deleted [%s] %s at line %d', sec, k, lineno)
        return lineno

    def __shift(self, start: int, delta: int) -> None:
        """Move every recorded line number >= `start` by `delta`."""
        for sec, n in self.__anchors.items():
            if n >= start:
                self.__anchors[sec] = n + delta
        for keys in self.__key_lines.values():
            for k, n in keys.items():
                if n >= start:
                    keys[k] = n + delta
