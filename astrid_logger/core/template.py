"""
Template renderer: substitutes {{TOKEN}} markers with runtime values.

Tokens (case-insensitive):
- {{FILE}}          caller file name
- {{PATH}}          caller full path
- {{CONTENT}}       content supplied by the dispatcher (the log messages)
- {{TIME}}          formatted local time
- {{UNIX}}          unix timestamp (seconds)
- {{USED_MEMORY}}   used system memory
- {{FREE_MEMORY}}   available system memory
- {{TOTAL_MEMORY}}  total system memory
"""

import re
import time
from collections.abc import Sequence

import psutil

from astrid_logger.core.caller import file_name
from astrid_logger.core.console import ConsoleEmitter
from astrid_logger.core.formatting import format_bytes, format_time

TOKEN_RE = re.compile(
    r"\{\{(FILE|PATH|CONTENT|TIME|UNIX|USED_MEMORY|FREE_MEMORY|TOTAL_MEMORY)\}\}",
    re.IGNORECASE,
)


class TemplateRenderer:
    def __init__(self, source_file: str, emitter: ConsoleEmitter):
        self.source_file = source_file
        self._emitter = emitter

    def _values(self, content: str) -> dict[str, str]:
        memory = psutil.virtual_memory()
        return {
            "FILE": file_name(self.source_file),
            "PATH": self.source_file,
            "CONTENT": content,
            "TIME": format_time(),
            "UNIX": str(int(time.time())),
            "USED_MEMORY": format_bytes(memory.total - memory.available),
            "FREE_MEMORY": format_bytes(memory.available),
            "TOTAL_MEMORY": format_bytes(memory.total),
        }

    def render(self, template: str | Sequence[str] | None, content: str | Sequence[str] = "") -> str:
        """Render a template; returns "" (after reporting) when there is nothing to render."""
        if template is not None and not isinstance(template, str):
            template = " ".join(str(t) for t in template)
        if not isinstance(content, str):
            content = " ".join(str(c) for c in content)

        if not template:
            self._emitter.error("AstridLogger - Parser", "No string was passed into the parser.")
            return ""

        if not TOKEN_RE.search(template):
            return template

        values = self._values(content)
        # Single pass: substituted values are never rescanned for tokens.
        return TOKEN_RE.sub(lambda m: values[m.group(1).upper()], template)
