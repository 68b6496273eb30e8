# kuma_relay/application/services/handler.py
from __future__ import annotations

import logging

from pydantic import ValidationError

from kuma_relay.application.ports.notifier import Notifier
from kuma_relay.adapters.uptime_kuma import UptimeKumaNotification
from .card_builder import build_chat_message

logger = logging.getLogger(__name__)


class WebhookHandler:
    """
    Uptime Kuma webhook 처리 서비스

    책임:
    - webhook payload 파싱
    - Google Chat 카드로 변환 후 전송
    - 파싱 실패 시 원문 그대로 전송 (best-effort)
    """

    def __init__(self, notifier: Notifier):
        """
        Args:
            notifier: 알림 전송 구현체
        """
        self.notifier = notifier

    async def handle_webhook(self, body: bytes) -> bool:
        """
        Uptime Kuma 가 보낸 request body 를 받아서

          1) UptimeKumaNotification 으로 파싱되면 카드로 변환해서 전송
          2) 파싱이 안 되면 원문을 {"text": ...} 로 감싸서 전송

        까지 수행한다.

        Args:
            body: webhook request body (raw bytes)

        Returns:
            True  -> 카드로 변환해서 전송함
            False -> 원문 fallback 으로 전송함 (성공 여부와 무관)

        Raises:
            DeliveryError: 파싱된 알림을 전송하지 못한 경우
        """
        text = body.decode("utf-8", errors="replace")
        logger.info("Received webhook: %s", text)

        try:
            notification = UptimeKumaNotification.model_validate_json(body)
        except ValidationError as exc:
            logger.warning("⚠️ Error parsing Uptime Kuma notification: %s", exc)
            await self.notifier.deliver_raw(text)
            return False

        message = build_chat_message(notification)
        await self.notifier.deliver(message)
        return True
