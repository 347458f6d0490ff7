"""
로깅 유틸리티

로깅 설정과 민감정보 마스킹
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """
    루트 로거 설정

    Args:
        level: 로그 레벨 (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            없으면 설정의 LOG_LEVEL 사용
    """
    if level is None:
        from bybit_client.config import settings
        level = settings.LOG_LEVEL

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


def mask_api_key(api_key: str) -> str:
    """
    API Key 마스킹 (로깅용)

    Returns:
        마스킹된 API Key (앞 8자만 표시)
    """
    if len(api_key) <= 8:
        return "***"
    return f"{api_key[:8]}***"
