"""Settings loaded from environment variables (+ optional project .env).

Priority: real environment variable > .env entry > default.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

ENV_PREFIX = 'TODO'
DOTENV_PATH = Path(__file__).resolve().parent.parent / '.env'


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def read_dotenv(path: Path = DOTENV_PATH) -> Dict[str, str]:
    """Parse simple KEY=VALUE lines; blank lines and '#' comments are skipped."""
    values: Dict[str, str] = {}
    if not path.exists():
        return values
    try:
        text = path.read_text(encoding='utf-8')
    except OSError:
        return values
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        values[k.strip()] = v.strip().strip('"').strip("'")
    return values


def truthy(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def lookup(name: str, dotenv: Dict[str, str], default: Optional[str] = None) -> Optional[str]:
    v = os.environ.get(name)
    if v is not None and v.strip() != '':
        return v
    return dotenv.get(name, default)


@dataclass(frozen=True)
class Settings:
    store_file: Path
    alt_screen: bool
    log_dir: Path
    log_level: int


def _level(name: Optional[str], default: int) -> int:
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def get_settings(dotenv: Optional[Dict[str, str]] = None) -> Settings:
    env = read_dotenv() if dotenv is None else dotenv
    home = Path.home()
    store_file = lookup(_k('FILE'), env)
    log_dir = lookup(_k('LOG_DIR'), env)
    return Settings(
        store_file=Path(store_file).expanduser() if store_file else home / '.local' / 'share' / 'todo' / 'store.json',
        alt_screen=truthy(lookup(_k('ALT_SCREEN'), env), True),
        log_dir=Path(log_dir).expanduser() if log_dir else home / '.local' / 'state' / 'todo',
        log_level=_level(lookup(_k('LOG_LEVEL'), env), logging.WARNING),
    )
