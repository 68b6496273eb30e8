# kuma_relay/config.py
from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

DEFAULT_PORT = "8080"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_LOG_LEVEL = "INFO"


class ConfigError(RuntimeError):
    """필수 환경 변수가 비어 있음"""


@dataclass(frozen=True)
class RelaySettings:
    """
    서버 시작 시 한 번 만들어서 container 에 주입하는 설정 값.
    (요청 처리 중에는 읽기만 한다)
    """

    webhook_url: str
    port: str = DEFAULT_PORT
    host: str = DEFAULT_HOST
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "RelaySettings":
        # .env 읽어오기
        load_dotenv()

        webhook_url = os.getenv("GOOGLE_CHAT_WEBHOOK_URL", "")
        if not webhook_url:
            raise ConfigError("GOOGLE_CHAT_WEBHOOK_URL environment variable is required")

        return cls(
            webhook_url=webhook_url,
            port=os.getenv("PORT") or DEFAULT_PORT,
            host=os.getenv("HOST") or DEFAULT_HOST,
            log_level=os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL,
        )

    @property
    def masked_webhook_url(self) -> str:
        return mask_webhook_url(self.webhook_url)


def mask_webhook_url(url: str) -> str:
    """webhook URL 에 key/token 이 들어 있어서 로그에는 앞 20자만 남긴다"""
    if len(url) < 20:
        return "***"
    return url[:20] + "***"
