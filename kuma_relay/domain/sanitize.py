# kuma_relay/domain/sanitize.py
from __future__ import annotations

from kuma_relay.domain.rules import NULL_MARKERS


def sanitize(value: str | None) -> str:
    """
    앞뒤 공백을 제거하고, "N/A" / "NA" / "NULL" 같은 placeholder 는 빈 문자열로 바꾼다.

    ex) sanitize(" N/A ") -> ""
        sanitize("  example.com  ") -> "example.com"
    """
    if not value:
        return ""

    trimmed = value.strip()
    if trimmed.upper() in NULL_MARKERS:
        return ""
    return trimmed
