from typing import Any, Protocol


class ChatSender(Protocol):
    async def send(self, url: str, payload: dict) -> Any:
        """POST a JSON payload to a chat webhook. Raises on delivery failure."""


class SmsSender(Protocol):
    async def send(self, body: str, from_: str, to: str) -> Any:
        """Send one text message. Raises on delivery failure."""
