# tests/test_handler.py
import json
import logging
from unittest.mock import AsyncMock, MagicMock

import pytest

from kuma_relay.adapters.google_chat import GoogleChatMessage
from kuma_relay.application.ports.notifier import DeliveryError
from kuma_relay.application.services.handler import WebhookHandler


# --- 픽스처 ----------------------------------------------------------------

@pytest.fixture
def fake_notifier():
    """Notifier 포트를 Mock 으로 대체"""
    mock_notifier = MagicMock()
    mock_notifier.deliver = AsyncMock(return_value=None)
    mock_notifier.deliver_raw = AsyncMock(return_value=True)
    return mock_notifier


@pytest.fixture
def handler(fake_notifier):
    return WebhookHandler(fake_notifier)


def make_body(**overrides) -> bytes:
    payload = {
        "heartbeat": {"monitorID": 5, "status": 0, "time": "2024-01-01 00:00:00", "msg": "timeout", "ping": 0},
        "monitor": {"id": 5, "name": "API", "url": "https://api.example.com"},
        "msg": "",
    }
    payload.update(overrides)
    return json.dumps(payload).encode("utf-8")


# --- 테스트들 ---------------------------------------------------------------

@pytest.mark.anyio
async def test_valid_payload_is_delivered_as_card(handler, fake_notifier):
    result = await handler.handle_webhook(make_body())

    assert result is True
    fake_notifier.deliver.assert_awaited_once()
    fake_notifier.deliver_raw.assert_not_awaited()

    message = fake_notifier.deliver.await_args.args[0]
    assert isinstance(message, GoogleChatMessage)
    assert message.card.header.title == "Down - API"


@pytest.mark.anyio
async def test_malformed_json_falls_back_to_raw(handler, fake_notifier):
    result = await handler.handle_webhook(b"{not json")

    assert result is False
    fake_notifier.deliver_raw.assert_awaited_once_with("{not json")
    fake_notifier.deliver.assert_not_awaited()


@pytest.mark.anyio
async def test_wrong_shape_falls_back_to_raw(handler, fake_notifier):
    body = b'{"heartbeat": "oops"}'

    result = await handler.handle_webhook(body)

    assert result is False
    fake_notifier.deliver_raw.assert_awaited_once_with('{"heartbeat": "oops"}')


@pytest.mark.anyio
async def test_raw_fallback_failure_is_not_raised(handler, fake_notifier):
    fake_notifier.deliver_raw.return_value = False

    assert await handler.handle_webhook(b"plain text alert") is False


@pytest.mark.anyio
async def test_delivery_error_propagates(handler, fake_notifier):
    fake_notifier.deliver.side_effect = DeliveryError("unexpected status code: 500", status_code=500)

    with pytest.raises(DeliveryError):
        await handler.handle_webhook(make_body())


@pytest.mark.anyio
async def test_parse_failure_is_logged_as_warning(handler, caplog):
    with caplog.at_level(logging.WARNING, logger="kuma_relay.application.services.handler"):
        await handler.handle_webhook(b"{not json")

    records = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert len(records) == 1
    assert records[0].getMessage().startswith("⚠️ Error parsing Uptime Kuma notification: ")
    # 예외는 포맷 인자로 넘긴다
    assert records[0].args
