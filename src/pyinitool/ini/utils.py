# -*- encoding: utf-8 -*-
# @File   : utils.py
# @Time   : 2026/10/12 21:40:17
# @Author : Kariko Lin

"""String helpers shared by the loader and the mutation engine."""

WHITESPACE = ' \t\r\n'
COMMENT = ';'


def trim(s: str) -> str:
    return s.strip(WHITESPACE)


def fold(s: str) -> str:
    """Identity form of a section or key name: trimmed and lowercased."""
    return trim(s).lower()


def is_blank(line: str) -> bool:
    return not trim(line)


def is_comment(line: str) -> bool:
    return trim(line).startswith(COMMENT)


def is_section_header(line: str) -> bool:
    t = trim(line)
    return len(t) >= 3 and t[0] == '[' and t[-1] == ']'


def section_name(line: str) -> str:
    """`[ Foo ]` => `foo`. Caller must check `is_section_header()` first."""
    return fold(trim(line)[1:-1])


def unquote(s: str) -> str:
    # only one layer, and only when quoted at both ends.
    if len(s) >= 2 and s[0] == '"' and s[-1] == '"':
        return s[1:-1]
    return s


def quote_if_needed(s: str) -> str:
    if ' ' in s or '=' in s:
        return f'"{s}"'
    return s


def format_pair(key: str, value: str) -> str:
    return f'{key} = {quote_if_needed(value)}'
