"""
Logger facade.

    log = Logger({"discord": {"enabled": True, "errorWebhook": "https://discord.com/api/webhooks/..."}})
    await log.success("Successfully fetched data")
    await log.error(["Could not fetch api,", "status code: 500"], title="Fetcher")

A logging call never raises: channel failures end up in the returned
DispatchResponse, anything else is reported on the console.
"""

from collections.abc import Sequence
from pathlib import Path

import structlog

from astrid_logger.clients.base import ChatSender, SmsSender
from astrid_logger.clients.discord import DiscordWebhookClient
from astrid_logger.clients.twilio_sms import TwilioSmsClient
from astrid_logger.core.caller import resolve_caller_file
from astrid_logger.core.console import ConsoleEmitter
from astrid_logger.output.base import DispatchResponse
from astrid_logger.output.router import DispatchPipeline
from astrid_logger.schemas.config import LoggerConfig, load_config
from astrid_logger.schemas.log import LogEvent, Severity

logger = structlog.get_logger()

Messages = str | Sequence[str] | None


class Logger:
    def __init__(
        self,
        config: LoggerConfig | dict | None = None,
        *,
        source_file: str | None = None,
        chat_sender: ChatSender | None = None,
        sms_sender: SmsSender | None = None,
        stream=None,
    ):
        if not isinstance(config, LoggerConfig):
            config = LoggerConfig.model_validate(config or {})
        self.config = config
        self.source_file = source_file or resolve_caller_file()
        self.emitter = ConsoleEmitter(config.colors, stream=stream)
        self._owned_clients: list[DiscordWebhookClient] = []

        if config.chat.enabled and chat_sender is None:
            chat_sender = DiscordWebhookClient()
            self._owned_clients.append(chat_sender)

        if config.sms.enabled:
            if not config.sms.has_credentials:
                self.emitter.error(
                    "AstridLogger",
                    "Twilio integration enabled, but accountSID or authToken was not found.",
                )
                sms_sender = None
            elif sms_sender is None:
                sms_sender = TwilioSmsClient(config.sms.account_sid, config.sms.auth_token)

        self.pipeline = DispatchPipeline(
            config,
            self.source_file,
            self.emitter,
            chat_sender=chat_sender,
            sms_sender=sms_sender,
        )

    @classmethod
    def from_file(cls, path: str | Path, **kwargs) -> "Logger":
        """Build a logger from a JSON config file."""
        return cls(load_config(path), **kwargs)

    async def aclose(self):
        for client in self._owned_clients:
            await client.aclose()
        self._owned_clients.clear()

    async def __aenter__(self) -> "Logger":
        return self

    async def __aexit__(self, *exc_info):
        await self.aclose()

    async def _log(
        self,
        severity: Severity,
        messages: Messages,
        title: str | None,
        disable_chat: bool,
        disable_sms: bool,
        options: dict,
    ) -> DispatchResponse | None:
        try:
            # options may carry disableDiscord / disableTwilio
            data = {**options, "title": title, "messages": messages}
            if disable_chat:
                data["disable_chat"] = True
            if disable_sms:
                data["disable_sms"] = True
            event = LogEvent.model_validate(data)
            return await self.pipeline.dispatch_log(severity, event)
        except Exception as e:
            logger.exception("logger.dispatch_failed", severity=severity.value)
            try:
                self.emitter.error("AstridLogger", f"Error sending {severity.value} log", e)
            except Exception:
                logger.exception("logger.console_unavailable")
            return None

    async def error(
        self,
        messages: Messages = None,
        *,
        title: str | None = None,
        disable_chat: bool = False,
        disable_sms: bool = False,
        **options,
    ) -> DispatchResponse | None:
        return await self._log(Severity.ERROR, messages, title, disable_chat, disable_sms, options)

    async def success(
        self,
        messages: Messages = None,
        *,
        title: str | None = None,
        disable_chat: bool = False,
        disable_sms: bool = False,
        **options,
    ) -> DispatchResponse | None:
        return await self._log(Severity.SUCCESS, messages, title, disable_chat, disable_sms, options)

    async def debug(
        self,
        messages: Messages = None,
        *,
        title: str | None = None,
        disable_chat: bool = False,
        disable_sms: bool = False,
        **options,
    ) -> DispatchResponse | None:
        return await self._log(Severity.DEBUG, messages, title, disable_chat, disable_sms, options)
