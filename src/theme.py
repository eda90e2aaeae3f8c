"""Color & style helpers.

Decisions:
- Completed items render with strikethrough + dim in the "done" color.
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides come from TODO_PRIMARY / TODO_OPEN / TODO_DONE in the
  environment or the project .env file.
"""
from __future__ import annotations
import os, sys

from config import lookup, read_dotenv

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''

def _valid_hex(value: str | None) -> bool:
    h = (value or '').lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _fg(hex_code: str) -> str:
    """Foreground sequence for a #rrggbb color; 256-color cube unless truecolor."""
    if not _ENABLE:
        return ''
    rgb = bytes.fromhex(hex_code.lstrip('#'))
    if _USE_TRUECOLOR:
        return _code('38;2;' + ';'.join(str(c) for c in rgb))
    r6, g6, b6 = (round(c * 5 / 255) for c in rgb)
    return _code(f'38;5;{16 + 36 * r6 + 6 * g6 + b6}')

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')
STRIKE = _code('9')

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_OPEN_DEFAULT = '#48B3AF'
HEX_DONE_DEFAULT = '#A7E399'

_DOTENV = read_dotenv()

def _palette(name: str, default: str) -> str:
    value = lookup(name, _DOTENV, default)
    return '#' + value.lstrip('#') if _valid_hex(value) else default

HEX_PRIMARY = _palette('TODO_PRIMARY', HEX_PRIMARY_DEFAULT)
HEX_OPEN = _palette('TODO_OPEN', HEX_OPEN_DEFAULT)
HEX_DONE = _palette('TODO_DONE', HEX_DONE_DEFAULT)

PRIMARY = _fg(HEX_PRIMARY)
C_OPEN = _fg(HEX_OPEN)
C_DONE = _fg(HEX_DONE)

HEADER_COLOR = PRIMARY
POSITION_COLOR = PRIMARY + BOLD
EMPTY_COLOR = DIM + PRIMARY
OPEN_STYLE = C_OPEN
DONE_STYLE = C_DONE + DIM + STRIKE

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE or not any(styles):
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color', 'RESET', 'BOLD', 'DIM', 'STRIKE', 'HEADER_COLOR', 'POSITION_COLOR', 'EMPTY_COLOR',
    'OPEN_STYLE', 'DONE_STYLE', 'HEX_PRIMARY', 'HEX_OPEN', 'HEX_DONE',
]
