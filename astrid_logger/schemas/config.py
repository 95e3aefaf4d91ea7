"""
Logger configuration models.

Accepts both the explicit shape:

    {"chat": {"enabled": true, "severities": {"error": {"webhook": "https://..."}}}}

and the flat camelCase shape found in existing JSON config files:

    {"discord": {"enabled": true, "errorWebhook": "https://...", "errorContent": "..."}}

Flat per-severity keys are folded into explicit Severity-keyed mappings at
validation time, so nothing downstream builds keys from strings.
"""

import json
from pathlib import Path

from pydantic import AliasChoices, BaseModel, Field, model_validator
from pydantic.alias_generators import to_camel

from astrid_logger.schemas.log import Severity

DEFAULT_COLORS = {
    "error": "#F54242",
    "success": "#8CE86D",
    "debug": "#D6D6D6",
    "title": "#8CE86D",
}


class _Frozen(BaseModel):
    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "alias_generator": to_camel,
        "extra": "ignore",
    }


def _fold_severity_keys(data: dict, suffixes: dict[str, str]) -> dict[str, dict]:
    """Pop `<severity><Suffix>` / `<severity>_<suffix>` keys out of data.

    Returns {severity: {field: value}}.
    """
    folded: dict[str, dict] = {}
    for severity in Severity:
        for suffix, field_name in suffixes.items():
            for key in (f"{severity.value}{suffix.capitalize()}", f"{severity.value}_{suffix}"):
                if key in data:
                    value = data.pop(key)
                    if value is not None:
                        folded.setdefault(severity.value, {})[field_name] = value
    return folded


class Colors(_Frozen):
    error: str | None = None
    success: str | None = None
    debug: str | None = None
    title: str | None = None

    def for_severity(self, severity: Severity | str | None) -> str:
        key = severity.value if isinstance(severity, Severity) else severity
        if key not in ("error", "success"):
            key = "debug"
        return getattr(self, key) or DEFAULT_COLORS[key]

    @property
    def title_color(self) -> str:
        return self.title or DEFAULT_COLORS["title"]


class ChatSeverityConfig(_Frozen):
    webhook: str | None = None
    embed: dict | None = None
    content: str | None = None


class ChatChannelConfig(_Frozen):
    enabled: bool = False
    severities: dict[Severity, ChatSeverityConfig] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _fold_flat_keys(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        folded = _fold_severity_keys(
            data, {"webhook": "webhook", "embed": "embed", "content": "content"}
        )
        if folded:
            severities = dict(data.get("severities") or {})
            for severity, values in folded.items():
                merged = dict(severities.get(severity) or {})
                merged.update(values)
                severities[severity] = merged
            data["severities"] = severities
        return data

    def for_severity(self, severity: Severity) -> ChatSeverityConfig:
        return self.severities.get(severity) or ChatSeverityConfig()


class SmsChannelConfig(_Frozen):
    enabled: bool = False
    account_sid: str | None = Field(
        default=None,
        validation_alias=AliasChoices("account_sid", "accountSID", "accountSid", "accountId"),
    )
    auth_token: str | None = None
    send_to: str | None = None
    send_from: str | None = None
    content: dict[Severity, str] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _fold_flat_keys(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        folded = _fold_severity_keys(data, {"content": "content"})
        if folded:
            content = dict(data.get("content") or {})
            content.update({severity: values["content"] for severity, values in folded.items()})
            data["content"] = content
        return data

    @property
    def has_credentials(self) -> bool:
        return bool(self.account_sid and self.auth_token)


class LoggerConfig(_Frozen):
    colors: Colors = Field(default_factory=Colors)
    chat: ChatChannelConfig = Field(
        default_factory=ChatChannelConfig,
        validation_alias=AliasChoices("chat", "discord"),
    )
    sms: SmsChannelConfig = Field(
        default_factory=SmsChannelConfig,
        validation_alias=AliasChoices("sms", "twilio"),
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_null_sections(cls, data):
        if isinstance(data, dict):
            data = {k: v for k, v in data.items() if v is not None}
        return data


def load_config(path: str | Path) -> LoggerConfig:
    """Read a JSON config file into a LoggerConfig."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return LoggerConfig.model_validate(raw)
