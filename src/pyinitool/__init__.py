# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:02:10
# @Author : Kariko Lin

from .errors import FileAccessError, IniToolError, NotFoundError
from .ini import IniDocument, IniFile, IniParser, IniSectionProxy

__all__ = [
    'IniDocument', 'IniFile', 'IniParser', 'IniSectionProxy',
    'IniToolError', 'FileAccessError', 'NotFoundError'
]
