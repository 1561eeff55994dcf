# src/diskfit/utils/sizes.py
import re

from diskfit.config import KB, UNIT_FACTORS, UNIT_LABELS
from diskfit.errors import SizeSyntaxError

_SIZE_RE = re.compile(r"([+-]?[0-9]+)(.*)", re.DOTALL)


def parse_size(text: str) -> int:
    """
    Converts a size like '700m' or '4G' to a byte count.

    The number must be an integer and may be followed by exactly one unit
    letter (b, k, m, g or t, any case). The scale is decimal.
    """
    stripped = text.strip()
    match = _SIZE_RE.fullmatch(stripped)
    if not match:
        raise SizeSyntaxError(f"Can't convert string '{text}' to a number.")

    number, unit = int(match.group(1)), match.group(2)
    if not unit:
        return number

    factor = UNIT_FACTORS.get(unit.lower()) if len(unit) == 1 else None
    if factor is None:
        raise SizeSyntaxError(f"Unknown unit: '{unit}'")
    return number * factor


def format_size(num: int) -> str:
    """Human readable size in the largest unit the value reaches, e.g. '1.20K'."""
    value = float(num)
    i = 0
    while value >= KB and i < len(UNIT_LABELS) - 1:
        value /= KB
        i += 1

    if i == 0:
        return f"{value:.0f}{UNIT_LABELS[i]}"

    # 999999 bytes would read 1000.00K after rounding
    text = f"{value:.2f}"
    if float(text) >= KB and i < len(UNIT_LABELS) - 1:
        value /= KB
        i += 1
        text = f"{value:.2f}"
    return f"{text}{UNIT_LABELS[i]}"
