"""
Endpoint Request Base

HTTP 메서드별 요청 베이스 클래스
각 엔드포인트는 GetRequest 또는 PostRequest를 상속하고
DOMAIN / ENDPOINT / RESPONSE 상수와 파라미터 필드를 선언한다.

Example:
    class WalletBalanceRequest(GetRequest):
        ENDPOINT: ClassVar[str] = "/v5/account/wallet-balance"
        RESPONSE: ClassVar[type] = WalletBalance

        account_type: AccountType = Field(..., alias="accountType")
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar, Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from bybit_client.constants import (
    HEADER_API_KEY,
    HEADER_RECV_WINDOW,
    HEADER_SIGN,
    HEADER_TIMESTAMP,
    MAINNET,
)
from bybit_client.exceptions import RequestBuildError
from bybit_client.models import SignedRequest
from bybit_client.pending import PendingRequest
from bybit_client.params import Parameters
from bybit_client.signer import recv_window_millis, sign, timestamp_millis
from bybit_client.utils.logging import mask_api_key

logger = logging.getLogger(__name__)


def _validate_header_value(name: str, value: str) -> str:
    """헤더 값 검증 (출력 가능한 ASCII만 허용)"""
    if any(not (" " <= ch <= "~" or ch == "\t") for ch in value):
        raise RequestBuildError(
            message=f"Invalid characters in header {name}",
            details={"header": name}
        )
    return value


class BaseRequest(BaseModel, ABC):
    """
    서명 요청 베이스

    모델 필드가 곧 요청 파라미터이며 선언 순서대로 인코딩된다.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    METHOD: ClassVar[str] = ""
    DOMAIN: ClassVar[str] = MAINNET
    ENDPOINT: ClassVar[str] = ""
    RESPONSE: ClassVar[Any] = Dict[str, Any]

    def uri(self, domain: Optional[str] = None) -> str:
        """도메인 + 엔드포인트 경로"""
        return f"{domain or self.DOMAIN}{self.ENDPOINT}"

    @abstractmethod
    def to_parameters(self) -> Parameters:
        """메서드에 맞는 전송 방식으로 파라미터 래핑"""
        pass

    @abstractmethod
    def _target(self, uri: str, encoded: str) -> Tuple[str, str]:
        """(요청 URL, 바디) 결정"""
        pass

    def build(
        self,
        api_key: str,
        secret: str,
        recv_window: timedelta,
        timestamp: Optional[datetime] = None,
        domain: Optional[str] = None
    ) -> SignedRequest:
        """
        서명 요청 생성

        Args:
            api_key: API Key
            secret: API Secret
            recv_window: 수신 허용 시간
            timestamp: 요청 시각 (기본: 현재 UTC)
            domain: 도메인 override (기본: DOMAIN)

        Returns:
            SignedRequest

        Raises:
            RequestBuildError: 인코딩/서명/헤더 구성 실패
        """
        timestamp = timestamp or datetime.now(timezone.utc)
        params = self.to_parameters()

        # 서명과 전송에 같은 인코딩 결과 사용
        encoded = params.encode()
        signature = sign(secret, timestamp, api_key, recv_window, encoded)

        headers = {
            HEADER_API_KEY: _validate_header_value(HEADER_API_KEY, api_key),
            HEADER_SIGN: signature,
            HEADER_TIMESTAMP: str(timestamp_millis(timestamp)),
            HEADER_RECV_WINDOW: str(recv_window_millis(recv_window)),
        }

        url, body = self._target(self.uri(domain), encoded)

        logger.debug(
            f"Bybit request signed: {self.METHOD} {self.ENDPOINT} "
            f"(API Key={mask_api_key(api_key)})"
        )

        return SignedRequest(method=self.METHOD, url=url, headers=headers, body=body)

    def as_request(
        self,
        api_key: str,
        secret: str,
        recv_window: timedelta,
        timestamp: Optional[datetime] = None,
        domain: Optional[str] = None
    ) -> PendingRequest:
        """서명 요청 + 응답 타입 바인딩"""
        request = self.build(api_key, secret, recv_window, timestamp=timestamp, domain=domain)
        return PendingRequest(request, self.RESPONSE)


class GetRequest(BaseRequest):
    """조회 요청 (query string, 빈 바디)"""

    METHOD: ClassVar[str] = "GET"

    def to_parameters(self) -> Parameters:
        return Parameters.by_query(self)

    def _target(self, uri: str, encoded: str) -> Tuple[str, str]:
        url = f"{uri}?{encoded}" if encoded else uri
        return url, ""


class PostRequest(BaseRequest):
    """변경 요청 (JSON 바디)"""

    METHOD: ClassVar[str] = "POST"

    def to_parameters(self) -> Parameters:
        return Parameters.by_body(self)

    def _target(self, uri: str, encoded: str) -> Tuple[str, str]:
        return uri, encoded
