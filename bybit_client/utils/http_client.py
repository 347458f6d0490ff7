"""
HTTPX Transport

httpx 기반 비동기 transport
SignedRequest를 그대로 전송하고 응답 바이트를 반환한다.
재시도는 하지 않는다 (호출자 정책).
"""

import logging
from typing import Optional

import httpx

from bybit_client.exceptions import TransportError
from bybit_client.models import SignedRequest

logger = logging.getLogger(__name__)


class HTTPXTransport:
    """
    비동기 HTTP transport

    Features:
    - httpx.AsyncClient 래퍼
    - JSON 바디 요청에 Content-Type 추가
    - 네트워크 에러/타임아웃/2xx 이외 상태 → TransportError
    - 요청/응답 로깅

    Example:
        >>> async with HTTPXTransport(timeout=10.0) as transport:
        ...     balance = await pending.execute(transport)
    """

    def __init__(
        self,
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None
    ):
        """
        Args:
            timeout: 요청 타임아웃 (초)
            client: 외부에서 관리하는 AsyncClient (없으면 생성)
        """
        self.timeout = timeout
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(timeout=timeout)

        logger.debug(f"HTTPXTransport initialized: timeout={timeout}s")

    @classmethod
    def from_settings(cls, settings=None) -> "HTTPXTransport":
        """설정(EXCHANGE_TIMEOUT)에서 transport 생성"""
        if settings is None:
            from bybit_client.config import settings

        return cls(timeout=settings.EXCHANGE_TIMEOUT)

    async def __call__(self, request: SignedRequest) -> bytes:
        """
        요청 전송

        Returns:
            응답 바이트

        Raises:
            TransportError: 네트워크 에러, 타임아웃, 2xx 이외 상태
        """
        headers = dict(request.headers)
        if request.body:
            headers["Content-Type"] = "application/json"

        try:
            response = await self.client.request(
                method=request.method,
                url=request.url,
                headers=headers,
                content=request.content if request.body else None
            )
        except httpx.TimeoutException as e:
            logger.warning(f"Timeout: {request.method} {request.url}")
            raise TransportError(
                message=f"Request timeout: {request.url}",
                details={
                    "url": request.url,
                    "method": request.method,
                    "error": str(e)
                }
            ) from e
        except httpx.RequestError as e:
            logger.warning(f"Network error: {request.method} {request.url} - {e}")
            raise TransportError(
                message=f"Network error: {request.url}",
                details={
                    "url": request.url,
                    "method": request.method,
                    "error": str(e)
                }
            ) from e

        logger.debug(
            f"{request.method} {request.url} -> {response.status_code} "
            f"({len(response.content)} bytes)"
        )

        if not 200 <= response.status_code < 300:
            error_body = response.text[:500]  # 처음 500자만
            logger.error(
                f"HTTP error {response.status_code}: {request.method} {request.url}\n"
                f"Response: {error_body}"
            )
            raise TransportError(
                message=f"HTTP error: {response.status_code}",
                status_code=response.status_code,
                details={
                    "url": request.url,
                    "method": request.method,
                    "status_code": response.status_code,
                    "response": error_body
                }
            )

        return response.content

    async def close(self) -> None:
        """클라이언트 종료 (직접 생성한 경우만)"""
        if self._owns_client:
            await self.client.aclose()
        logger.debug("HTTPXTransport closed")

    async def __aenter__(self):
        """Context manager 진입"""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Context manager 종료"""
        await self.close()
