# kuma_relay/domain/events.py
from __future__ import annotations

from pydantic import BaseModel

from kuma_relay.adapters.uptime_kuma import UptimeKumaNotification
from kuma_relay.domain import rules
from kuma_relay.domain.sanitize import sanitize


def _is_certificate_expiry(message: str) -> bool:
    lowered = message.lower()
    if rules.CERTIFICATE_KEYWORD not in lowered:
        return False
    return any(keyword in lowered for keyword in rules.EXPIRY_KEYWORDS)


def _strip_down_prefix(message: str) -> str:
    """'DOWN - Certificate ...' -> 'Certificate ...' (접두사 대소문자 무시)"""
    text = message.strip()
    if text.lower().startswith(rules.DOWN_PREFIX):
        text = text[len(rules.DOWN_PREFIX):]
    return text.strip()


class MonitorStatusEvent(BaseModel):
    """
    카드 생성 로직에서 다루기 편하게 정제된 모니터 상태 변경 이벤트.
    Uptime Kuma 알림에서 뽑은 값들을 sanitize 해서 모아둔다.
    """

    monitor_id: int
    monitor_name: str
    status: int

    message: str
    heartbeat_message: str
    url: str
    hostname: str

    ping: float
    time: str

    @classmethod
    def from_notification(cls, notification: UptimeKumaNotification) -> "MonitorStatusEvent":
        heartbeat = notification.heartbeat
        monitor = notification.monitor

        return cls(
            monitor_id=monitor.id,
            monitor_name=monitor.name,
            status=heartbeat.status,
            message=sanitize(notification.msg),
            heartbeat_message=sanitize(heartbeat.msg),
            url=sanitize(monitor.url),
            hostname=sanitize(monitor.hostname),
            ping=heartbeat.ping,
            time=heartbeat.time,
        )

    @property
    def is_up(self) -> bool:
        return self.status == rules.STATUS_UP

    @property
    def status_label(self) -> str:
        return rules.STATUS_LABEL_UP if self.is_up else rules.STATUS_LABEL_DOWN

    @property
    def status_glyph(self) -> str:
        return rules.STATUS_GLYPH_UP if self.is_up else rules.STATUS_GLYPH_DOWN

    @property
    def display_url(self) -> str:
        """URL 이 없으면 hostname 으로 대체 (ping / port 타입 모니터)"""
        return self.url or self.hostname

    @property
    def subtitle(self) -> str:
        if self.message:
            return self.message
        if self.heartbeat_message:
            return self.heartbeat_message
        return rules.SUBTITLE_FALLBACK_UP if self.is_up else rules.SUBTITLE_FALLBACK_DOWN

    @property
    def preview_source(self) -> str:
        """preview 분류에 쓰는 메시지: top-level msg 우선, 없으면 heartbeat msg"""
        return self.message or self.heartbeat_message

    def is_certificate_expiry(self) -> bool:
        return _is_certificate_expiry(self.preview_source)

    def certificate_preview(self) -> str:
        return _strip_down_prefix(self.preview_source)
