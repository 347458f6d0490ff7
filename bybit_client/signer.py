"""
Bybit V5 요청 서명

서명 방식:
1. timestamp(ms) + api_key + recv_window(ms) + 파라미터 문자열 (구분자 없음)
2. secret 으로 HMAC SHA256
3. 소문자 hex 인코딩

서버가 같은 문자열을 재구성해 검증하므로 순서와 숫자 포맷이
한 바이트라도 다르면 모든 인증 요청이 거부된다.
"""

import hashlib
import hmac
import logging
from datetime import datetime, timedelta, timezone
from typing import Union

from bybit_client.exceptions import EncodingError, SignatureError
from bybit_client.params import Parameters

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)


def timestamp_millis(timestamp: datetime) -> int:
    """
    datetime → epoch milliseconds

    naive datetime은 UTC로 간주
    """
    if timestamp.tzinfo is None:
        timestamp = timestamp.replace(tzinfo=timezone.utc)
    return (timestamp - _EPOCH) // _ONE_MS


def recv_window_millis(recv_window: timedelta) -> int:
    """timedelta → milliseconds (ms 미만 버림)"""
    return recv_window // _ONE_MS


def signature_payload(
    timestamp: datetime,
    api_key: str,
    recv_window: timedelta,
    encoded_params: str
) -> str:
    """서명 대상 문자열 생성"""
    return (
        f"{timestamp_millis(timestamp)}"
        f"{api_key}"
        f"{recv_window_millis(recv_window)}"
        f"{encoded_params}"
    )


def sign(
    secret: str,
    timestamp: datetime,
    api_key: str,
    recv_window: timedelta,
    params: Union[Parameters, str]
) -> str:
    """
    요청 서명 생성

    Args:
        secret: API Secret
        timestamp: 요청 시각 (X-BAPI-TIMESTAMP 헤더와 같은 값을 사용해야 함)
        api_key: API Key
        recv_window: 수신 허용 시간
        params: 파라미터 (Parameters 또는 이미 인코딩된 문자열)

    Returns:
        소문자 hex 서명

    Raises:
        SignatureError: 파라미터 인코딩 실패
    """
    if isinstance(params, Parameters):
        try:
            encoded = params.encode()
        except EncodingError as e:
            raise SignatureError(
                message=f"Cannot sign request: {e.message}",
                details=e.details
            ) from e
    else:
        encoded = params

    payload = signature_payload(timestamp, api_key, recv_window, encoded)

    signature = hmac.new(
        secret.encode("utf-8"),
        payload.encode("utf-8"),
        hashlib.sha256
    ).hexdigest()

    logger.debug(f"Signed payload ({len(payload)} bytes)")

    return signature
