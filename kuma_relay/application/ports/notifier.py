# kuma_relay/application/ports/notifier.py
"""
알림 전송 포트 (인터페이스)

Secondary Port: 애플리케이션이 외부 채팅 webhook 을 사용하기 위한 인터페이스
required Port
"""
from typing import Optional, Protocol

from kuma_relay.adapters.google_chat import GoogleChatMessage


class DeliveryError(Exception):
    """
    변환된 카드 메시지를 webhook 으로 전달하지 못함.

    status_code 는 응답을 받은 경우에만 채워진다 (전송 자체가 실패하면 None).
    """

    def __init__(self, detail: str, status_code: Optional[int] = None):
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code


class Notifier(Protocol):
    """
    알림 전송 인터페이스

    이 Protocol을 구현하는 어댑터:
    - GoogleChatNotifier (adapters/google_chat_notifier.py)

    Protocol을 사용하는 서비스:
    - handler.py (Uptime Kuma webhook 처리)
    """

    async def deliver(self, message: GoogleChatMessage) -> None:
        """
        카드 메시지 전송. 실패하면 DeliveryError.

        Args:
            message: 변환된 Google Chat 카드 메시지
        """
        ...

    async def deliver_raw(self, text: str) -> bool:
        """
        파싱에 실패한 원문을 {"text": ...} 로 감싸서 전송 (best-effort)

        Args:
            text: webhook 으로 들어온 원문

        Returns:
            전송 성공 여부. 실패해도 예외를 던지지 않는다.
        """
        ...
