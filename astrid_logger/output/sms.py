"""
SMS output: text the severity's rendered content template to the configured number.
"""

import structlog

from astrid_logger.clients.base import SmsSender
from astrid_logger.core.console import ConsoleEmitter
from astrid_logger.core.template import TemplateRenderer
from astrid_logger.output.base import DeliveryOutcome
from astrid_logger.schemas.config import SmsChannelConfig
from astrid_logger.schemas.log import Severity

logger = structlog.get_logger()

CHANNEL = "sms"
TITLE = "AstridLogger - Twilio"


def is_international(number: str | None) -> bool:
    return bool(number) and "+" in number


async def send_sms(
    config: SmsChannelConfig,
    sender: SmsSender,
    severity: Severity,
    messages: list[str],
    renderer: TemplateRenderer,
    emitter: ConsoleEmitter,
) -> DeliveryOutcome:
    """Send one text. Invalid numbers are reported, then the send is still attempted."""
    if not is_international(config.send_to) or not is_international(config.send_from):
        emitter.error(
            TITLE,
            "Numbers must be in international (E.164) format, e.g. +15551234567; "
            "refer to the Twilio documentation for more information.",
        )

    try:
        body = renderer.render(config.content.get(severity), messages)
        response = await sender.send(body=body, from_=config.send_from, to=config.send_to)
        logger.info("output.sms.sent", severity=severity.value)
        return DeliveryOutcome(channel=CHANNEL, attempted=True, sent=True, payload=response)

    except Exception as e:
        emitter.error(TITLE, "Error sending text!", e)
        logger.exception("output.sms.failed", severity=severity.value)
        return DeliveryOutcome(channel=CHANNEL, attempted=True, sent=False, error=e)
