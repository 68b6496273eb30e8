# kuma_relay/adapters/uptime_kuma.py
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator


class _KumaModel(BaseModel):
    """
    Uptime Kuma 는 값이 없을 때 key 를 빼지 않고 null 을 보낸다.
    (ex. 'Test' 버튼 알림은 heartbeat / monitor 가 통째로 null)
    null 인 key 는 버려서 각 필드의 기본값(0, "", 빈 객체)을 쓰게 한다.
    """

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Heartbeat(_KumaModel):
    """
    heartbeat 객체. status 가 1 이면 UP, 나머지는 전부 DOWN 으로 본다.
    ex) { "monitorID": 5, "status": 1, "time": "2024-01-01 00:00:00.000", "msg": "200 - OK", "ping": 10.5 }
    """

    monitorID: int = Field(default=0, strict=True)
    status: int = Field(default=0, strict=True)
    time: str = Field(default="", strict=True)
    msg: str = Field(default="", strict=True)
    ping: float = Field(default=0.0, strict=True)


class Monitor(_KumaModel):
    id: int = Field(default=0, strict=True)
    name: str = Field(default="", strict=True)
    url: str = Field(default="", strict=True)
    hostname: str = Field(default="", strict=True)
    port: int = Field(default=0, strict=True)
    type: str = Field(default="", strict=True)


class UptimeKumaNotification(_KumaModel):
    """
    Uptime Kuma → 우리 서버로 들어오는 webhook JSON payload.

    - 우리가 쓰는 필드만 정의하고, 나머지 key 는 Pydantic 이 무시한다.
    - JSON 자체가 깨졌거나 타입이 안 맞으면 ValidationError.
      ("1" 을 int 로, true 를 int 로 바꾸는 식의 형변환은 하지 않는다)
    """

    heartbeat: Heartbeat = Field(default_factory=Heartbeat)
    monitor: Monitor = Field(default_factory=Monitor)
    msg: str = Field(default="", strict=True)
