# kuma_relay/container.py
"""
의존성 조립 (Dependency Assembly)
"""
import logging

from kuma_relay.adapters.google_chat_notifier import GoogleChatNotifier
from kuma_relay.application.ports.notifier import Notifier
from kuma_relay.application.services.handler import WebhookHandler
from kuma_relay.config import RelaySettings

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    서비스 컨테이너

    설정 값을 받아서 애플리케이션의 의존성을 생성하고 조립합니다.
    """

    def __init__(self, settings: RelaySettings, notifier: Notifier | None = None):
        self._settings = settings

        # Adapter 생성 (Singleton)
        self._notifier = notifier or GoogleChatNotifier(settings.webhook_url)

        # Services 생성
        self._webhook_handler = WebhookHandler(self._notifier)

    @property
    def settings(self) -> RelaySettings:
        return self._settings

    @property
    def webhook_handler(self) -> WebhookHandler:
        """WebhookHandler 인스턴스"""
        return self._webhook_handler


def init_container(settings: RelaySettings) -> ServiceContainer:
    """
    ServiceContainer 초기화

    애플리케이션 시작 시 명시적으로 호출합니다.

    Args:
        settings: 환경 변수에서 읽은 설정 값

    Returns:
        ServiceContainer 인스턴스
    """
    container = ServiceContainer(settings)
    logger.info("✅ Service container initialized")
    return container
