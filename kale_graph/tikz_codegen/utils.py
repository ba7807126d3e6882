import math
import re
from typing import Optional

_LATEX_SPECIALS = {
    '\\': r'\textbackslash{}',
    '&': r'\&',
    '%': r'\%',
    '$': r'\$',
    '#': r'\#',
    '_': r'\_',
    '{': r'\{',
    '}': r'\}',
    '~': r'\textasciitilde{}',
    '^': r'\textasciicircum{}',
}

_hex_re = re.compile(r'^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$')
_named_color_re = re.compile(r'^[A-Za-z]+(?:![0-9]{1,3}(?:![A-Za-z]+)?)?$')


def latex_escape(text: str) -> str:
    return ''.join(_LATEX_SPECIALS.get(ch, ch) for ch in text)


def hex_color(color: str) -> Optional[str]:
    """Return ``RRGGBB`` (upper case) for ``#rgb``/``#rrggbb`` input, else ``None``."""
    text = color.strip()
    if not _hex_re.match(text):
        return None
    value = text[1:]
    if len(value) == 3:
        value = ''.join(ch * 2 for ch in value)
    return value.upper()


def is_named_color(color: str) -> bool:
    """xcolor names and mixes such as ``red`` or ``blue!40!white``."""
    return bool(_named_color_re.match(color.strip()))


def format_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        raise ValueError("Cannot format non-finite float for TikZ output")
    formatted = f"{value:.4f}"
    formatted = formatted.rstrip("0").rstrip(".")
    if formatted in ("", "-0"):
        return "0"
    return formatted
