"""
Bybit V5 상수

도메인, 인증 헤더 이름, 기본값
API 문서: https://bybit-exchange.github.io/docs/v5/guide
"""

from datetime import timedelta
from enum import Enum


class Environment(str, Enum):
    """Bybit REST 도메인"""
    MAINNET = "https://api.bybit.com"
    TESTNET = "https://api-testnet.bybit.com"

    @classmethod
    def from_name(cls, name: str) -> "Environment":
        """"mainnet" / "testnet" 문자열 → Environment"""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown Bybit environment: {name}") from None


MAINNET = Environment.MAINNET.value
TESTNET = Environment.TESTNET.value

# 인증 헤더
HEADER_API_KEY = "X-BAPI-API-KEY"
HEADER_SIGN = "X-BAPI-SIGN"
HEADER_TIMESTAMP = "X-BAPI-TIMESTAMP"
HEADER_RECV_WINDOW = "X-BAPI-RECV-WINDOW"

# 기본 수신 허용 시간 (5초)
DEFAULT_RECV_WINDOW = timedelta(milliseconds=5000)
