# kuma_relay/main.py
from contextlib import asynccontextmanager
import logging
import sys

from fastapi import Depends, FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import ClientDisconnect
import uvicorn

from kuma_relay.application.ports.notifier import DeliveryError
from kuma_relay.application.services.handler import WebhookHandler
from kuma_relay.config import ConfigError, RelaySettings
from kuma_relay.container import ServiceContainer, init_container
from kuma_relay.logging_config import setup_logging

logger = logging.getLogger(__name__)

HEALTH_METHODS = ["GET", "HEAD", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 시작/종료 시 실행"""
    # container 가 주입되지 않았으면 (uvicorn kuma_relay.main:app) 환경 변수에서 조립
    if app.state.container is None:
        settings = RelaySettings.from_env()
        setup_logging(settings.log_level)
        app.state.container = init_container(settings)

    settings = app.state.container.settings

    logger.info("=" * 80)
    logger.info("🚀 Server starting on port %s", settings.port)
    logger.info("Forwarding to Google Chat webhook: %s", settings.masked_webhook_url)
    logger.info("=" * 80)

    yield

    logger.info("👋 Shutting down Uptime Kuma relay")


def get_webhook_handler(request: Request) -> WebhookHandler:
    return request.app.state.container.webhook_handler


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405:
        return PlainTextResponse(
            "Method not allowed", status_code=405, headers=exc.headers
        )
    return PlainTextResponse(
        str(exc.detail), status_code=exc.status_code, headers=exc.headers
    )


def create_app(container: ServiceContainer | None = None) -> FastAPI:
    """
    FastAPI 앱 생성

    Args:
        container: 미리 조립한 ServiceContainer (테스트에서 fake notifier 주입용)
    """
    app = FastAPI(title="Uptime Kuma to Google Chat Relay", lifespan=lifespan)
    app.state.container = container
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)

    @app.post("/webhook", response_class=PlainTextResponse)
    async def webhook(
        request: Request,
        handler: WebhookHandler = Depends(get_webhook_handler),
    ):
        """Uptime Kuma webhook 수신 엔드포인트"""
        try:
            body = await request.body()
        except ClientDisconnect as exc:
            logger.error("Error reading request body: %s", exc)
            return PlainTextResponse("Error reading request", status_code=400)

        try:
            await handler.handle_webhook(body)
        except DeliveryError as exc:
            logger.error("Error sending to Google Chat: %s", exc)
            return PlainTextResponse("Error forwarding message", status_code=500)

        return PlainTextResponse("OK")

    @app.api_route("/health", methods=HEALTH_METHODS, response_class=PlainTextResponse)
    async def health():
        """헬스체크 엔드포인트 (method 상관없이 항상 200)"""
        return PlainTextResponse("OK")

    return app


app = create_app()


def run():
    """
    환경 변수를 읽어서 서버 실행.
    GOOGLE_CHAT_WEBHOOK_URL 이 없으면 바로 종료한다.
    """
    setup_logging()

    try:
        settings = RelaySettings.from_env()
    except ConfigError as exc:
        logger.error("%s", exc)
        sys.exit(1)

    setup_logging(settings.log_level)
    container = init_container(settings)

    uvicorn.run(create_app(container), host=settings.host, port=int(settings.port))
