"""
Dispatch pipeline: console line first, then each enabled channel.

Validate -> emit -> chat -> sms -> response. Channels run one after the other;
a failure in one never stops the other.
"""

import structlog

from astrid_logger.clients.base import ChatSender, SmsSender
from astrid_logger.core.caller import file_name
from astrid_logger.core.console import ConsoleEmitter
from astrid_logger.core.template import TemplateRenderer
from astrid_logger.output.base import DeliveryOutcome, DispatchResponse
from astrid_logger.output.chat import send_chat
from astrid_logger.output.sms import send_sms
from astrid_logger.schemas.config import LoggerConfig
from astrid_logger.schemas.log import LogEvent, Severity

logger = structlog.get_logger()


class DispatchPipeline:
    def __init__(
        self,
        config: LoggerConfig,
        source_file: str,
        emitter: ConsoleEmitter,
        chat_sender: ChatSender | None = None,
        sms_sender: SmsSender | None = None,
    ):
        self.config = config
        self.source_file = source_file
        self.emitter = emitter
        self.renderer = TemplateRenderer(source_file, emitter)
        self.chat_sender = chat_sender
        self.sms_sender = sms_sender

    @property
    def file_name(self) -> str:
        return file_name(self.source_file)

    @property
    def chat_enabled(self) -> bool:
        return self.config.chat.enabled and self.chat_sender is not None

    @property
    def sms_enabled(self) -> bool:
        return self.config.sms.enabled and self.sms_sender is not None

    async def _guarded(self, channel: str, send, *args) -> DeliveryOutcome:
        """Run a channel send, turning anything it leaks into a failed outcome."""
        try:
            return await send(*args)
        except Exception as e:
            logger.exception("output.channel_crashed", channel=channel)
            return DeliveryOutcome(channel=channel, attempted=True, sent=False, error=e)

    async def dispatch_log(self, severity: Severity | str, event: LogEvent) -> DispatchResponse:
        response = DispatchResponse(source_file=self.file_name)

        try:
            severity = Severity(severity)
        except ValueError:
            self.emitter.error("AstridLogger", f"Invalid log type {severity!r}, nothing was logged.")
            return response

        if not event.messages:
            self.emitter.error("AstridLogger", "No messages were passed to the logger.")
            return response

        title = event.title or self.file_name
        self.emitter.emit(severity, title, *event.messages)

        if self.chat_enabled and not event.disable_chat:
            response.chat = await self._guarded(
                "chat",
                send_chat,
                self.config.chat,
                self.chat_sender,
                severity,
                event.messages,
                self.renderer,
                self.emitter,
            )

        if self.sms_enabled and not event.disable_sms:
            response.sms = await self._guarded(
                "sms",
                send_sms,
                self.config.sms,
                self.sms_sender,
                severity,
                event.messages,
                self.renderer,
                self.emitter,
            )

        return response
