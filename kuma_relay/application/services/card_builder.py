# kuma_relay/application/services/card_builder.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import List, Optional

from kuma_relay.adapters.google_chat import (
    Card,
    CardHeader,
    CardSection,
    CardV2,
    GoogleChatMessage,
    Widget,
    labeled_text,
    link_button,
    paragraph,
)
from kuma_relay.adapters.uptime_kuma import UptimeKumaNotification
from kuma_relay.domain import rules
from kuma_relay.domain.events import MonitorStatusEvent


def build_widgets(event: MonitorStatusEvent) -> List[Widget]:
    """
    카드 본문 위젯 목록.
    순서 고정: 상세 메시지 → URL → 응답 시간 → 시각 → Visit Site 버튼
    """
    widgets: List[Widget] = []

    if event.heartbeat_message:
        widgets.append(paragraph(event.heartbeat_message))

    if event.display_url:
        widgets.append(labeled_text(rules.LABEL_URL, event.display_url))

    if event.ping > 0:
        widgets.append(labeled_text(rules.LABEL_RESPONSE_TIME, f"{event.ping:.2f} ms"))

    if event.time:
        widgets.append(labeled_text(rules.LABEL_TIME, event.time))

    # hostname fallback 으로는 버튼을 만들지 않는다
    if event.url:
        widgets.append(link_button(rules.BUTTON_VISIT_SITE, event.url))

    return widgets


def build_preview_text(event: MonitorStatusEvent) -> str:
    """
    모바일 알림 미리보기용 텍스트.

    인증서 만료 알림이면 'DOWN - ' 접두사를 뗀 메시지 한 줄만 보낸다.
    그 외에는
        ✅ Application is back online
        API
        [API] [✅ Up]
        (heartbeat msg)
    형태로 만든다.
    """
    if event.is_certificate_expiry():
        return event.certificate_preview()

    headline = rules.PREVIEW_HEADLINE_UP if event.is_up else rules.PREVIEW_HEADLINE_DOWN
    lines = [
        f"{event.status_glyph} {headline}",
        event.monitor_name,
        f"[{event.monitor_name}] [{event.status_glyph} {event.status_label}]",
    ]
    if event.heartbeat_message:
        lines.append(event.heartbeat_message)

    return "\n".join(lines)


def build_card_id(event: MonitorStatusEvent, now: datetime) -> str:
    return f"{rules.CARD_ID_PREFIX}-{event.monitor_id}-{int(now.timestamp())}"


def build_chat_message(
    notification: UptimeKumaNotification,
    now: Optional[datetime] = None,
) -> GoogleChatMessage:
    """
    Uptime Kuma 알림 → Google Chat cardsV2 메시지 변환.

    값이 비어 있는 필드는 해당 위젯을 생략할 뿐, 이 함수는 실패하지 않는다.

    Args:
        notification: 파싱된 Uptime Kuma webhook payload
        now: cardId 에 들어갈 처리 시각 (기본값: 현재 UTC 시각)
    """
    event = MonitorStatusEvent.from_notification(notification)
    now = now or datetime.now(timezone.utc)

    header = CardHeader(
        title=f"{event.status_label} - {event.monitor_name}",
        subtitle=event.subtitle,
    )
    card = Card(
        header=header,
        sections=[CardSection(widgets=build_widgets(event))],
    )

    return GoogleChatMessage(
        text=build_preview_text(event),
        cardsV2=[CardV2(cardId=build_card_id(event, now), card=card)],
    )
