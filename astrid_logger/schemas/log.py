from enum import Enum

from pydantic import AliasChoices, BaseModel, Field, field_validator


class Severity(str, Enum):
    ERROR = "error"
    SUCCESS = "success"
    DEBUG = "debug"


DEFAULT_MESSAGES = ["No message provided"]


class LogEvent(BaseModel):
    """One log call, as received by the facade."""
    model_config = {"populate_by_name": True}

    title: str | None = None  # None -> caller file name
    messages: list[str] = Field(default_factory=lambda: list(DEFAULT_MESSAGES))
    disable_chat: bool = Field(
        default=False, validation_alias=AliasChoices("disable_chat", "disableDiscord")
    )
    disable_sms: bool = Field(
        default=False, validation_alias=AliasChoices("disable_sms", "disableTwilio")
    )

    @field_validator("messages", mode="before")
    @classmethod
    def _wrap_messages(cls, value):
        if value is None:
            return list(DEFAULT_MESSAGES)
        if isinstance(value, str):
            return [value]
        return [str(m) for m in value]
