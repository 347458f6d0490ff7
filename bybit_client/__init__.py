"""
Bybit Client

Bybit V5 인증 REST API 비동기 클라이언트
- 파라미터 인코딩 (query string / JSON)
- HMAC SHA256 요청 서명
- 응답 envelope 해석 (HTTP 200 + retCode 에러 구분)
"""

from bybit_client.client import BybitClient
from bybit_client.constants import MAINNET, TESTNET, Environment
from bybit_client.endpoint import GetRequest, PostRequest
from bybit_client.exceptions import (
    ApplicationError,
    BybitException,
    DecodeError,
    EncodingError,
    ExchangeAuthError,
    InsufficientBalanceError,
    OrderNotFoundException,
    RateLimitExceededError,
    RequestBuildError,
    SignatureError,
    TransportError,
)
from bybit_client.models import ErrorEnvelope, ResponseEnvelope, SignedRequest
from bybit_client.params import Parameters, ParamMode
from bybit_client.pending import PendingRequest
from bybit_client.response import decode_response
from bybit_client.signer import sign

__version__ = "0.1.0"

__all__ = [
    "BybitClient",
    "Environment",
    "MAINNET",
    "TESTNET",
    "GetRequest",
    "PostRequest",
    "Parameters",
    "ParamMode",
    "PendingRequest",
    "SignedRequest",
    "ResponseEnvelope",
    "ErrorEnvelope",
    "decode_response",
    "sign",
    "BybitException",
    "RequestBuildError",
    "EncodingError",
    "SignatureError",
    "TransportError",
    "DecodeError",
    "ApplicationError",
    "ExchangeAuthError",
    "RateLimitExceededError",
    "OrderNotFoundException",
    "InsufficientBalanceError",
]
