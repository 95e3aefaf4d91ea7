"""End-to-end tests for the Logger facade."""
import io
import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from astrid_logger import Logger
from astrid_logger.clients.discord import DiscordWebhookClient
from astrid_logger.clients.twilio_sms import TwilioSmsClient
from tests.conftest import FakeChatSender, FakeSmsSender, strip_ansi

SMS = {
    "enabled": True,
    "accountSID": "AC1",
    "authToken": "tok",
    "sendTo": "+15550000000",
    "sendFrom": "+15551111111",
    "errorContent": "{{FILE}}: {{CONTENT}}",
}


def _stdout_lines(capsys) -> list[str]:
    return [strip_ansi(line) for line in capsys.readouterr().out.splitlines()]


@pytest.mark.asyncio
async def test_success_with_channels_disabled(capsys):
    log = Logger({"colors": {}, "twilio": {"enabled": False}, "discord": {"enabled": False}})
    response = await log.success(["ok"])

    assert response.source_file == "test_logger.py"
    assert response.chat is None
    assert response.sms is None
    (line,) = _stdout_lines(capsys)
    assert "SUCCESS" in line
    assert line.endswith("test_logger.py: ok")


def test_source_file_resolves_to_constructing_module():
    log = Logger()
    assert log.source_file.endswith("test_logger.py")
    assert Logger(source_file="/app/main.py").source_file == "/app/main.py"


@pytest.mark.asyncio
async def test_error_without_content_sends_fallback(capsys):
    chat = FakeChatSender()
    log = Logger({"discord": {"enabled": True, "errorWebhook": "https://hook"}}, chat_sender=chat)
    response = await log.error(["x"])

    assert chat.calls == [("https://hook", {"content": "No content specified"})]
    assert response.chat.sent is True


@pytest.mark.asyncio
async def test_unreachable_webhook_still_sends_sms(capsys):
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    sms = FakeSmsSender()
    chat = DiscordWebhookClient(transport=httpx.MockTransport(refuse))
    log = Logger(
        {"discord": {"enabled": True, "errorWebhook": "https://unreachable.invalid/hook"}, "twilio": SMS},
        chat_sender=chat,
        sms_sender=sms,
    )
    response = await log.error("disk full")
    await chat.aclose()

    assert response.chat.sent is False
    assert isinstance(response.chat.error, httpx.ConnectError)
    assert response.sms.sent is True
    assert sms.calls[0]["body"] == "test_logger.py: disk full"


@pytest.mark.asyncio
async def test_local_send_to_number_warns_then_sends(capsys):
    sms = FakeSmsSender()
    log = Logger({"twilio": {**SMS, "sendTo": "5551234"}}, sms_sender=sms)
    response = await log.error("x", disable_chat=True)

    output = _stdout_lines(capsys)
    assert "ERROR - test_logger.py: x" in output[0]
    assert "international" in output[1]
    assert len(sms.calls) == 1
    assert response.sms.sent is True


def test_sms_enabled_without_credentials_is_disabled(capsys):
    sms = FakeSmsSender()
    log = Logger({"twilio": {"enabled": True, "sendTo": "+1", "sendFrom": "+2"}}, sms_sender=sms)

    assert log.pipeline.sms_enabled is False
    (line,) = _stdout_lines(capsys)
    assert "accountSID or authToken was not found" in line


def test_default_clients_are_built_from_config():
    with patch("astrid_logger.clients.twilio_sms.Client") as client_cls:
        log = Logger({"discord": {"enabled": True}, "twilio": SMS})

    client_cls.assert_called_once_with("AC1", "tok")
    assert isinstance(log.pipeline.chat_sender, DiscordWebhookClient)
    assert isinstance(log.pipeline.sms_sender, TwilioSmsClient)


@pytest.mark.asyncio
async def test_debug_defaults_message(capsys):
    log = Logger()
    await log.debug()

    (line,) = _stdout_lines(capsys)
    assert "DEBUG" in line
    assert line.endswith("No message provided")


@pytest.mark.asyncio
async def test_named_log_uses_title(capsys):
    await Logger().success("This is a named message", title="Hello world")
    assert "SUCCESS - Hello world: This is a named message" in _stdout_lines(capsys)[0]


@pytest.mark.asyncio
async def test_pipeline_failure_never_escapes(capsys, captured_logs):
    log = Logger()
    with patch.object(log.pipeline, "dispatch_log", new=AsyncMock(side_effect=RuntimeError("kaput"))):
        assert await log.error("x") is None
        assert await log.success("x") is None

    output = _stdout_lines(capsys)
    assert "Error sending error log kaput" in output[0]
    assert "Error sending success log kaput" in output[1]
    assert [entry["event"] for entry in captured_logs].count("logger.dispatch_failed") == 2


@pytest.mark.asyncio
async def test_from_file_and_context_manager(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"discord": {"enabled": True, "errorWebhook": "https://hook"}}))

    async with Logger.from_file(path) as log:
        assert log.source_file.endswith("test_logger.py")
        assert len(log._owned_clients) == 1
    assert log._owned_clients == []


@pytest.mark.asyncio
async def test_plain_text_webhook_reply_counts_as_sent(capsys):
    chat = DiscordWebhookClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, text="ok"))
    )
    log = Logger({"discord": {"enabled": True, "errorWebhook": "https://hooks.test/relay"}}, chat_sender=chat)
    response = await log.error("x")
    await chat.aclose()

    assert response.chat.sent is True
    assert response.chat.payload == "ok"
    assert response.chat.error is None


@pytest.mark.asyncio
async def test_broken_console_stream_never_escapes(captured_logs):
    stream = io.StringIO()
    log = Logger(stream=stream)
    stream.close()

    assert await log.error("x") is None
    assert await log.success("x") is None
    events = [entry["event"] for entry in captured_logs]
    assert events.count("logger.dispatch_failed") == 2
    assert events.count("logger.console_unavailable") == 2


@pytest.mark.asyncio
async def test_original_option_names_disable_channels():
    chat = FakeChatSender()
    sms = FakeSmsSender()
    log = Logger(
        {"discord": {"enabled": True, "errorWebhook": "https://hook"}, "twilio": SMS},
        chat_sender=chat,
        sms_sender=sms,
    )

    response = await log.error("x", disableDiscord=True, disableTwilio=True)

    assert response.chat is None
    assert response.sms is None
    assert chat.calls == []
    assert sms.calls == []


@pytest.mark.asyncio
async def test_keyword_disable_wins_over_option_names():
    chat = FakeChatSender()
    log = Logger({"discord": {"enabled": True, "errorWebhook": "https://hook"}}, chat_sender=chat)

    response = await log.error("x", disable_chat=True, disableDiscord=False)

    assert response.chat is None
    assert chat.calls == []
