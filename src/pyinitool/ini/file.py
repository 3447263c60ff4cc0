# -*- encoding: utf-8 -*-
# @File   : file.py
# @Time   : 2026/10/13 00:21:08
# @Author : Kariko Lin

from os import PathLike

from .model import IniDocument
from .parser import IniParser


class IniFile:
    """An `IniDocument` bound to its path.

    Loads on construction. `set()` and `delete()` write the whole file
    back right after the edit; `get()` never touches the disk.
    """

    def __init__(
        self, path: str | PathLike[str],
        encoding: str | None = None, *,
        atomic: bool = False
    ) -> None:
        self._parser = IniParser(path, encoding, atomic=atomic)
        self._doc = self._parser.read()

    @property
    def path(self) -> str:
        return self._parser.filename

    @property
    def document(self) -> IniDocument:
        return self._doc

    def get(self, section: str, key: str) -> str:
        return self._doc.get(section, key)

    def set(self, section: str, key: str, value: str) -> None:
        self._doc.set(section, key, value)
        self.flush()

    def delete(self, section: str, key: str) -> None:
        # raises before anything is written.
        self._doc.delete(section, key)
        self.flush()

    def flush(self) -> None:
        self._parser.write(self._doc)

    def __repr__(self) -> str:
        return f'<IniFile {self.path!r} {self._doc!r}>'
