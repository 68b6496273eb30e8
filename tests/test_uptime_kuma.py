# tests/test_uptime_kuma.py
import json

import pytest
from pydantic import ValidationError

from kuma_relay.adapters.uptime_kuma import Heartbeat, Monitor, UptimeKumaNotification


# --- Helper 데이터 ---------------------------------------------------------

def make_kuma_payload() -> dict:
    """Uptime Kuma HTTP 모니터 DOWN 알림 샘플"""
    return {
        "heartbeat": {
            "monitorID": 5,
            "status": 0,
            "time": "2024-01-01 00:00:00.000",
            "msg": "Request failed with status code 502",
            "important": True,
            "duration": 60,
            "ping": None,
        },
        "monitor": {
            "id": 5,
            "name": "API",
            "url": "https://api.example.com",
            "hostname": None,
            "port": None,
            "type": "http",
            "interval": 60,
        },
        "msg": "[API] [🔴 Down] Request failed with status code 502",
    }


# --- 파싱 테스트 -----------------------------------------------------------

def test_parse_full_payload():
    notification = UptimeKumaNotification.model_validate(make_kuma_payload())

    assert notification.heartbeat.monitorID == 5
    assert notification.heartbeat.status == 0
    assert notification.heartbeat.msg == "Request failed with status code 502"
    assert notification.monitor.name == "API"
    assert notification.monitor.url == "https://api.example.com"
    assert notification.msg.startswith("[API]")


def test_null_fields_fall_back_to_defaults():
    """null 로 온 필드는 기본값"""
    notification = UptimeKumaNotification.model_validate(make_kuma_payload())

    assert notification.heartbeat.ping == 0.0
    assert notification.monitor.hostname == ""
    assert notification.monitor.port == 0


def test_test_notification_with_null_heartbeat_and_monitor():
    """Uptime Kuma 'Test' 버튼 알림은 heartbeat / monitor 가 null"""
    body = json.dumps({"heartbeat": None, "monitor": None, "msg": "Uptime Kuma Testing"})
    notification = UptimeKumaNotification.model_validate_json(body)

    assert notification.heartbeat == Heartbeat()
    assert notification.monitor == Monitor()
    assert notification.msg == "Uptime Kuma Testing"


def test_empty_object_is_valid():
    notification = UptimeKumaNotification.model_validate_json("{}")

    assert notification.heartbeat.status == 0
    assert notification.monitor.name == ""
    assert notification.msg == ""


def test_unknown_fields_are_ignored():
    notification = UptimeKumaNotification.model_validate({"msg": "hi", "extra": {"a": 1}})
    assert notification.msg == "hi"


@pytest.mark.parametrize(
    "body",
    [
        "not json at all",
        "",
        "[1, 2, 3]",
        '{"heartbeat": {"status": "up"}}',
        '{"monitor": "API"}',
        '{"heartbeat": {"status": "1"}}',
        '{"heartbeat": {"ping": "12"}}',
        '{"monitor": {"id": true}}',
        '{"monitor": {"port": "443"}}',
        '{"msg": 123}',
    ],
)
def test_unparseable_bodies_raise(body):
    """JSON 이 아니거나 모양이 안 맞으면 ValidationError"""
    with pytest.raises(ValidationError):
        UptimeKumaNotification.model_validate_json(body)


def test_no_type_coercion():
    """문자열 숫자 / bool 을 숫자로 바꿔서 UP 카드가 나가면 안 된다"""
    body = '{"heartbeat": {"status": "1", "ping": "12"}, "monitor": {"id": true}}'
    with pytest.raises(ValidationError):
        UptimeKumaNotification.model_validate_json(body)


def test_integer_ping_is_accepted():
    notification = UptimeKumaNotification.model_validate_json('{"heartbeat": {"ping": 12}}')
    assert notification.heartbeat.ping == 12.0
