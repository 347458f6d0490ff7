"""
클라이언트 설정 모듈

Pydantic Settings를 사용하여 환경 변수를 타입 안전하게 로드합니다.
"""

import logging
from datetime import timedelta

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bybit_client.constants import Environment

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Bybit 클라이언트 설정"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Credentials
    BYBIT_API_KEY: str = Field(
        default="",
        description="Bybit API Key"
    )
    BYBIT_API_SECRET: str = Field(
        default="",
        description="Bybit API Secret"
    )

    # Exchange Settings
    BYBIT_ENV: str = Field(
        default="mainnet",
        description="Bybit 환경 (mainnet, testnet)"
    )
    BYBIT_RECV_WINDOW_MS: int = Field(
        default=5000,
        ge=1,
        le=60000,
        description="수신 허용 시간 (ms)"
    )
    EXCHANGE_TIMEOUT: float = Field(
        default=30.0,
        gt=0,
        le=120,
        description="거래소 API 타임아웃 (초)"
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(
        default="INFO",
        description="로그 레벨"
    )

    @field_validator("BYBIT_ENV")
    @classmethod
    def validate_env(cls, v):
        """BYBIT_ENV 값 검증"""
        allowed = ["mainnet", "testnet"]
        if v.lower() not in allowed:
            raise ValueError(f"BYBIT_ENV must be one of {allowed}")
        return v.lower()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """LOG_LEVEL 값 검증"""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of {allowed}")
        return v.upper()

    @property
    def environment(self) -> Environment:
        return Environment.from_name(self.BYBIT_ENV)

    @property
    def recv_window(self) -> timedelta:
        return timedelta(milliseconds=self.BYBIT_RECV_WINDOW_MS)


# 전역 설정 인스턴스
settings = Settings()

logger.debug(f"Settings loaded: BYBIT_ENV={settings.BYBIT_ENV}, recv_window={settings.BYBIT_RECV_WINDOW_MS}ms")
