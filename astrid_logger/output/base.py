from dataclasses import dataclass
from typing import Any


@dataclass
class DeliveryOutcome:
    channel: str  # "chat" or "sms"
    attempted: bool
    sent: bool = False
    payload: Any = None  # channel response on success
    error: Exception | None = None


@dataclass
class DispatchResponse:
    source_file: str
    chat: DeliveryOutcome | None = None
    sms: DeliveryOutcome | None = None
