"""
Chat-webhook output: send one log event to the severity's webhook.

Payload precedence: configured embed > rendered content template > fallback text.
"""

import structlog

from astrid_logger.clients.base import ChatSender
from astrid_logger.core.console import ConsoleEmitter
from astrid_logger.core.template import TemplateRenderer
from astrid_logger.output.base import DeliveryOutcome
from astrid_logger.schemas.config import ChatChannelConfig
from astrid_logger.schemas.log import Severity

logger = structlog.get_logger()

CHANNEL = "chat"
TITLE = "AstridLogger - Discord"
FALLBACK_CONTENT = "No content specified"


def build_payload(
    config: ChatChannelConfig,
    severity: Severity,
    messages: list[str],
    renderer: TemplateRenderer,
) -> dict:
    settings = config.for_severity(severity)
    if settings.embed:
        return {"embeds": [settings.embed]}

    content = ""
    if settings.content:
        content = renderer.render(settings.content, " ".join(messages))
    return {"content": content or FALLBACK_CONTENT}


async def send_chat(
    config: ChatChannelConfig,
    sender: ChatSender,
    severity: Severity,
    messages: list[str],
    renderer: TemplateRenderer,
    emitter: ConsoleEmitter,
) -> DeliveryOutcome:
    """Deliver to the severity's webhook. Never raises."""
    webhook = config.for_severity(severity).webhook
    if not webhook:
        emitter.error(TITLE, f"No {severity.value} webhook specified!")
        return DeliveryOutcome(channel=CHANNEL, attempted=True, sent=False)

    try:
        payload = build_payload(config, severity, messages, renderer)
        response = await sender.send(webhook, payload)
        logger.info("output.chat.sent", severity=severity.value, target=webhook[:60])
        return DeliveryOutcome(channel=CHANNEL, attempted=True, sent=True, payload=response)

    except Exception as e:
        emitter.error(TITLE, f"Error sending {severity.value} webhook!", e)
        logger.exception("output.chat.failed", severity=severity.value, target=webhook[:60])
        return DeliveryOutcome(channel=CHANNEL, attempted=True, sent=False, error=e)
