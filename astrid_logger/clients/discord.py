"""
Discord webhook client.

POSTs {"content": ...} or {"embeds": [...]} to an incoming webhook URL.
Discord answers 204 No Content unless the URL carries ?wait=true.
"""

import httpx
import structlog

from astrid_logger.config import settings

logger = structlog.get_logger()


class DiscordWebhookClient:
    def __init__(self, timeout: float | None = None, transport: httpx.AsyncBaseTransport | None = None):
        self._timeout = timeout if timeout is not None else settings.WEBHOOK_TIMEOUT
        self._transport = transport
        self._http: httpx.AsyncClient | None = None

    def _client(self) -> httpx.AsyncClient:
        if self._http is None:
            self._http = httpx.AsyncClient(timeout=self._timeout, transport=self._transport)
        return self._http

    async def aclose(self):
        """Close the underlying httpx client."""
        if self._http:
            await self._http.aclose()
            self._http = None

    async def send(self, url: str, payload: dict) -> dict | str | None:
        """Send a webhook. Raises httpx.HTTPError on network or 4xx/5xx.

        Returns the decoded JSON reply, the raw text for non-JSON replies,
        or None when the reply is empty.
        """
        resp = await self._client().post(url, json=payload)
        resp.raise_for_status()
        logger.debug("discord.webhook_sent", status=resp.status_code)
        if resp.status_code == 204 or not resp.content:
            return None
        if "json" not in resp.headers.get("content-type", ""):
            return resp.text
        return resp.json()
