import io
import re

import pytest
from structlog.testing import capture_logs

from astrid_logger.core.console import ConsoleEmitter
from astrid_logger.core.template import TemplateRenderer
from astrid_logger.schemas.config import Colors

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

SOURCE_FILE = "/srv/app/worker.py"


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub("", text)


class FakeChatSender:
    def __init__(self, error: Exception | None = None, response=None):
        self.error = error
        self.response = response if response is not None else {"id": "1"}
        self.calls: list[tuple[str, dict]] = []

    async def send(self, url: str, payload: dict):
        self.calls.append((url, payload))
        if self.error:
            raise self.error
        return self.response


class FakeSmsSender:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls: list[dict] = []

    async def send(self, body: str, from_: str, to: str):
        self.calls.append({"body": body, "from_": from_, "to": to})
        if self.error:
            raise self.error
        return {"sid": "SM123"}


@pytest.fixture(autouse=True)
def captured_logs():
    """Keep structlog diagnostics out of captured stdout."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def stream():
    return io.StringIO()


@pytest.fixture
def emitter(stream):
    return ConsoleEmitter(Colors(), stream=stream)


@pytest.fixture
def renderer(emitter):
    return TemplateRenderer(SOURCE_FILE, emitter)


@pytest.fixture
def lines(stream):
    def _lines() -> list[str]:
        return [strip_ansi(line) for line in stream.getvalue().splitlines()]
    return _lines
