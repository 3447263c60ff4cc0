# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/12 21:31:50
# @Author : Kariko Lin

from .file import IniFile
from .model import IniDocument, IniSectionProxy
from .parser import IniParser

__all__ = ['IniFile', 'IniDocument', 'IniSectionProxy', 'IniParser']
