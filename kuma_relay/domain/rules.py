# kuma_relay/domain/rules.py

# sanitize() 에서 "값 없음" 으로 취급하는 문자열 (대소문자 무시)
NULL_MARKERS = frozenset({"N/A", "NA", "NULL"})

STATUS_UP = 1

STATUS_LABEL_UP = "Up"
STATUS_LABEL_DOWN = "Down"

STATUS_GLYPH_UP = "✅"
STATUS_GLYPH_DOWN = "🔴"

SUBTITLE_FALLBACK_UP = "Service is operational"
SUBTITLE_FALLBACK_DOWN = "Service is experiencing issues"

PREVIEW_HEADLINE_UP = "Application is back online"
PREVIEW_HEADLINE_DOWN = "Application went down"

# 인증서 만료 알림 판별 키워드 (소문자 substring 매칭)
CERTIFICATE_KEYWORD = "certificate"
EXPIRY_KEYWORDS = ("expire", "expiration")

# 인증서 만료 preview 에서 떼어내는 접두사
DOWN_PREFIX = "down -"

CARD_ID_PREFIX = "uptime-kuma"

LABEL_URL = "URL"
LABEL_RESPONSE_TIME = "Response Time"
LABEL_TIME = "Time"
BUTTON_VISIT_SITE = "Visit Site"
