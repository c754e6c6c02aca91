from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


SOURCE_SUFFIX = '.yoc'

# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_PROMPT = '> '


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_files() -> List[Path]:
    # missing files are skipped so a stale path never blocks startup
    return [p for p in paths_from_env('YOCTO_PRELUDE_PATH', []) if p.is_file()]


def get_log_level() -> str:
    level = os.environ.get('YOCTO_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    # unknown names fall back so logging.basicConfig never rejects them
    if not isinstance(logging.getLevelName(level), int):
        return _DEFAULT_LOG_LEVEL
    return level


def get_prompt() -> str:
    return os.environ.get('YOCTO_PROMPT', _DEFAULT_PROMPT)
