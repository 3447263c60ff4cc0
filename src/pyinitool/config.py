# -*- encoding: utf-8 -*-
# @File   : config.py
# @Time   : 2026/10/13 00:40:12
# @Author : Kariko Lin

"""Runtime settings, taken from the environment.

- `INITOOL_ENCODING`: codec to read and write with.
  Unset means platform default, then `chardet` on decode errors.
- `INITOOL_LOG_LEVEL`: `DEBUG`, `INFO`, ... defaults to `WARNING`.
- `INITOOL_ATOMIC_WRITE`: `1`/`true`/`yes`/`on` to write through
  a temp file and rename it over the target.
"""

import codecs
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ConfigError

ENV_PREFIX = 'INITOOL_'
TRUTHY = ('1', 'true', 'yes', 'on')


@dataclass(frozen=True)
class Settings:
    encoding: str | None = None
    log_level: int = logging.WARNING
    atomic_write: bool = False


def _level(name: str | None) -> int:
    if not name:
        return logging.WARNING
    level = logging.getLevelName(name.strip().upper())
    # getLevelName() echoes 'Level X' back for unknown names.
    return level if isinstance(level, int) else logging.WARNING


def _encoding(name: str | None) -> str | None:
    if not name:
        return None
    try:
        codecs.lookup(name)
    except LookupError:
        raise ConfigError(
            f'unknown encoding {name!r} in {ENV_PREFIX}ENCODING') from None
    return name


def load_settings(env: Mapping[str, str] | None = None) -> Settings:
    """Raises `ConfigError` if `INITOOL_ENCODING` names no known codec."""
    if env is None:
        env = os.environ
    return Settings(
        encoding=_encoding(env.get(ENV_PREFIX + 'ENCODING')),
        log_level=_level(env.get(ENV_PREFIX + 'LOG_LEVEL')),
        atomic_write=(
            env.get(ENV_PREFIX + 'ATOMIC_WRITE', '').strip().lower()
            in TRUTHY),
    )
