import math
from datetime import datetime

BYTE_UNITS = ["B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB"]


def format_time(now: datetime | None = None) -> str:
    """MM/DD hh:m -- 12-hour clock, minute not zero-padded."""
    now = now or datetime.now()
    return f"{now:%m/%d %I}:{now.minute}"


def format_bytes(num: float) -> str:
    """Human-readable decimal byte size, e.g. 1.34 GB, 512 B, 16 GB."""
    if num < 1:
        return f"{num:g} B"
    exponent = min(int(math.log10(num) // 3), len(BYTE_UNITS) - 1)
    value = float(f"{num / 1000 ** exponent:.3g}")
    return f"{value:g} {BYTE_UNITS[exponent]}"
