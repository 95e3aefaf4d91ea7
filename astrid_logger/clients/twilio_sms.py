"""
Twilio SMS client: async wrapper around the blocking twilio SDK.
"""

import asyncio
from functools import partial

import structlog
from twilio.rest import Client

logger = structlog.get_logger()


class TwilioSmsClient:
    def __init__(self, account_sid: str, auth_token: str, client: Client | None = None):
        self._client = client or Client(account_sid, auth_token)

    async def _run_sync(self, fn, *args, **kwargs):
        """Run a synchronous SDK call in executor."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, partial(fn, *args, **kwargs))

    async def send(self, body: str, from_: str, to: str):
        """Create a message. Raises twilio's TwilioException on failure."""
        message = await self._run_sync(
            self._client.messages.create, body=body, from_=from_, to=to
        )
        logger.debug("twilio.message_created", sid=getattr(message, "sid", None))
        return message
