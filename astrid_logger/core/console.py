"""
Console emitter: one coloured line per log call.

    [10/18 03:7] ERROR - worker.py: Could not fetch api, status code: 500
"""

import sys

from astrid_logger.core.formatting import format_time
from astrid_logger.schemas.config import DEFAULT_COLORS, Colors
from astrid_logger.schemas.log import Severity

_RESET = "\033[0m"

LABELS = {
    Severity.ERROR: "ERROR",
    Severity.SUCCESS: "SUCCESS",
}


def _ansi(color: str | None) -> str | None:
    """Hex colour (#RRGGBB or #RGB) -> 24-bit ANSI foreground escape."""
    if not color:
        return None
    value = color.strip().lstrip("#")
    if len(value) == 3:
        value = "".join(c * 2 for c in value)
    if len(value) != 6:
        return None
    try:
        r, g, b = (int(value[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        return None
    return f"\033[38;2;{r};{g};{b}m"


def colorize(text: str, color: str | None, fallback: str) -> str:
    escape = _ansi(color) or _ansi(fallback)
    return f"{escape}{text}{_RESET}"


def _severity(value) -> Severity:
    try:
        return Severity(value)
    except ValueError:
        return Severity.DEBUG


class ConsoleEmitter:
    def __init__(self, colors: Colors | None = None, stream=None):
        self.colors = colors or Colors()
        self._stream = stream

    def emit(self, severity: Severity | str, title: str, *messages) -> None:
        """Print one line. Unknown severities are shown as DEBUG."""
        severity = _severity(severity)
        label = colorize(
            LABELS.get(severity, "DEBUG"),
            self.colors.for_severity(severity),
            DEFAULT_COLORS[severity.value],
        )
        title = colorize(str(title), self.colors.title_color, DEFAULT_COLORS["title"])
        text = " ".join(str(m) for m in messages)
        print(f"[{format_time()}] {label} - {title}: {text}", file=self._stream or sys.stdout)

    def error(self, title: str, *messages) -> None:
        self.emit(Severity.ERROR, title, *messages)
