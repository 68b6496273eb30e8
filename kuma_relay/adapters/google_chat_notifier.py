# kuma_relay/adapters/google_chat_notifier.py
"""
Google Chat Webhook 알림 전송 어댑터
"""
from __future__ import annotations

from typing import Any, Dict, Optional
import json
import logging

import httpx

from kuma_relay.adapters.google_chat import GoogleChatMessage
from kuma_relay.application.ports.notifier import DeliveryError

logger = logging.getLogger(__name__)


class GoogleChatNotifier:
    """Google Chat Webhook으로 cardsV2 메시지 전송"""

    def __init__(
        self,
        webhook_url: str,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Args:
            webhook_url: Google Chat incoming webhook URL
            transport: 테스트에서 httpx.MockTransport 를 꽂을 때 사용
        """
        self.webhook_url = webhook_url
        self.transport = transport

    async def deliver(self, message: GoogleChatMessage) -> None:
        """
        카드 메시지를 한 번 POST 한다. 재시도는 없다.

        Raises:
            DeliveryError: 200 이 아닌 응답이거나 요청 자체가 실패한 경우
        """
        payload = message.to_payload()
        logger.info(
            "Sending to Google Chat: %s",
            json.dumps(payload, ensure_ascii=False),
        )

        try:
            resp = await self._post(payload)
        except httpx.RequestError as exc:
            raise DeliveryError(f"error sending request: {exc}") from exc

        if resp.status_code != httpx.codes.OK:
            raise DeliveryError(
                f"unexpected status code: {resp.status_code}, body: {resp.text[:200]}",
                status_code=resp.status_code,
            )

        logger.info("✅ Successfully sent to Google Chat")

    async def deliver_raw(self, text: str) -> bool:
        try:
            resp = await self._post({"text": text})
        except httpx.RequestError as exc:
            logger.error("❌ Raw message request error: %s", exc)
            return False

        if resp.status_code != httpx.codes.OK:
            logger.error(
                "❌ Raw message response error. status=%s body=%s",
                resp.status_code,
                resp.text[:200],
            )
            return False

        logger.info("✅ Raw message posted to Google Chat")
        return True

    async def _post(self, payload: Dict[str, Any]) -> httpx.Response:
        # timeout 은 httpx 기본값을 그대로 쓴다
        async with httpx.AsyncClient(transport=self.transport) as client:
            return await client.post(self.webhook_url, json=payload)
