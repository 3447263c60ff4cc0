# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2026/10/12 21:12:05
# @Author : Kariko Lin

from os import PathLike


class IniToolError(Exception):
    """Base of everything `pyinitool` raises on purpose."""
    pass


class FileAccessError(IniToolError):
    """The INI file could not be opened for reading or writing."""

    def __init__(self, message: str, path: str | PathLike[str]) -> None:
        super().__init__(message)
        self.path = path

    @classmethod
    def unreadable(cls, path: str | PathLike[str]) -> 'FileAccessError':
        return cls(f'cannot open file {path}', path)

    @classmethod
    def unwritable(cls, path: str | PathLike[str]) -> 'FileAccessError':
        return cls(f'cannot write file {path}', path)


class NotFoundError(IniToolError, LookupError):
    """Section or key absent from the document index.

    `key` is `None` when the section itself is missing,
    so callers may tell both cases apart without parsing the message.
    """

    def __init__(self, section: str, key: str | None = None) -> None:
        super().__init__(
            'section not found' if key is None else 'key not found')
        self.section = section
        self.key = key


class ConfigError(IniToolError):
    """An `INITOOL_*` setting holds a value that cannot be used."""
    pass
