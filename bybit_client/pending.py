"""
Pending Request

서명이 끝난 요청과 기대 응답 타입을 묶은 값
실제 전송은 호출자가 넘긴 transport 함수가 담당한다.
"""

import logging
from typing import Awaitable, Callable, Generic, Type, TypeVar, Union

from bybit_client.exceptions import BybitException, TransportError
from bybit_client.models import SignedRequest
from bybit_client.response import decode_response

logger = logging.getLogger(__name__)

T = TypeVar("T")

Transport = Callable[[SignedRequest], Awaitable[Union[bytes, str]]]


class PendingRequest(Generic[T]):
    """
    전송 대기 중인 서명 요청

    Example:
        >>> pending = client.get_funding_balance(coin="USDT")
        >>> balance = await pending.execute(transport)
    """

    def __init__(self, request: SignedRequest, response_type: Type[T]):
        self.request = request
        self.response_type = response_type

    async def execute(self, transport: Transport) -> T:
        """
        요청 실행

        transport를 정확히 한 번 호출하고 응답을 해석한다.
        재시도/타임아웃은 transport 책임

        Raises:
            TransportError: transport 실패 (BybitException은 그대로 전파)
            ApplicationError: retCode != 0
            DecodeError: 응답 해석 실패
        """
        logger.debug(f"Executing {self.request.method} {self.request.url}")

        try:
            content = await transport(self.request)
        except BybitException:
            raise
        except Exception as e:
            raise TransportError(
                message=f"Transport failed: {e}",
                details={
                    "url": self.request.url,
                    "method": self.request.method,
                    "error": type(e).__name__
                }
            ) from e

        return decode_response(content, self.response_type)

    def __repr__(self) -> str:
        name = getattr(self.response_type, "__name__", str(self.response_type))
        return f"PendingRequest[{name}]({self.request.method} {self.request.url})"
