"""
로깅 설정
"""
import logging
import sys


def setup_logging(level: str = "INFO"):
    """
    애플리케이션 로깅 설정

    - Console handler 사용
    - stdout 출력
    - 포맷: '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    """
    log_level = logging.getLevelName(level.upper())
    if not isinstance(log_level, int):
        log_level = logging.INFO

    # 루트 로거 설정
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # 기존 핸들러 제거 (중복 방지)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    )

    root_logger.addHandler(console_handler)
