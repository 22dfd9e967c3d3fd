"""Glyphs and colour helpers for command output.

Decisions:
- Colour decorates only; the plain text of every line is unchanged.
- Enabled when stdout is a TTY or FORCE_COLOR is truthy; NO_COLOR always wins.
- Truecolor when COLORTERM advertises it, otherwise the 256-colour cube.
- Palette overrides come from TASK_CLI_COLOR_* (#RRGGBB).
- The environment is read at call time so a loaded .env takes effect.
"""
from __future__ import annotations
import os, sys
from typing import Dict, Optional

OK_GLYPH = "✅"
ERROR_GLYPH = "❌"

# Default palette
HEX_ID_DEFAULT = '#476EAE'
HEX_TODO_DEFAULT = '#48B3AF'
HEX_INPROGRESS_DEFAULT = '#F6FF99'
HEX_DONE_DEFAULT = '#A7E399'

PALETTE_ENV: Dict[str, str] = {
    'id': 'TASK_CLI_COLOR_ID',
    'todo': 'TASK_CLI_COLOR_TODO',
    'in-progress': 'TASK_CLI_COLOR_IN_PROGRESS',
    'done': 'TASK_CLI_COLOR_DONE',
}
PALETTE_DEFAULTS: Dict[str, str] = {
    'id': HEX_ID_DEFAULT,
    'todo': HEX_TODO_DEFAULT,
    'in-progress': HEX_INPROGRESS_DEFAULT,
    'done': HEX_DONE_DEFAULT,
}

RESET = "\033[0m"
BOLD = "\033[1m"


def _truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def colors_enabled() -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    return _truthy(os.environ.get("FORCE_COLOR")) or sys.stdout.isatty()


def _use_truecolor() -> bool:
    colorterm = os.environ.get("COLORTERM", "").lower()
    return any(tok in colorterm for tok in ("truecolor", "24bit"))


def _valid_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"


def palette_hex(role: str) -> str:
    """Resolve a role's hex colour (environment override > default)."""
    override = os.environ.get(PALETTE_ENV[role], "").strip()
    if override and _valid_hex(override):
        return '#' + override.lstrip('#')
    return PALETTE_DEFAULTS[role]


def _fg(role: str) -> str:
    r, g, b = _hex_to_rgb(palette_hex(role))
    if _use_truecolor():
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)


def color(text: str, role: str, bold: bool = False) -> str:
    """Wrap text in the role's colour when colour output is enabled."""
    if not colors_enabled():
        return text
    return (BOLD if bold else '') + _fg(role) + text + RESET


__all__ = [
    'OK_GLYPH', 'ERROR_GLYPH', 'RESET', 'BOLD', 'color', 'colors_enabled', 'palette_hex',
]
