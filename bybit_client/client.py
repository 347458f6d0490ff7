"""
Bybit Client

API 자격증명을 보관하고 엔드포인트별 서명 요청을 만든다.
모든 메서드는 PendingRequest를 반환하며 전송은 호출자가 transport로 수행한다.

Example:
    >>> client = BybitClient.from_settings()
    >>> async with HTTPXTransport() as transport:
    ...     balance = await client.get_funding_balance(coin="USDT").execute(transport)
"""

import logging
from datetime import timedelta
from decimal import Decimal
from typing import Optional, Type, Union

from pydantic import ValidationError

from bybit_client.constants import DEFAULT_RECV_WINDOW, Environment
from bybit_client.endpoint import BaseRequest
from bybit_client.endpoints.asset import AccountType, FundingBalance, FundingBalanceRequest
from bybit_client.endpoints.order import (
    CancelOrderRequest,
    Category,
    CreateOrderRequest,
    OpenOrdersRequest,
    OrderList,
    OrderResult,
    OrderType,
    Side,
    TimeInForce,
)
from bybit_client.exceptions import EncodingError
from bybit_client.pending import PendingRequest
from bybit_client.utils.logging import mask_api_key

logger = logging.getLogger(__name__)

Number = Union[str, int, float, Decimal]


def format_number(value: Number) -> str:
    """
    수량/가격 → 고정소수점 문자열

    거래소는 지수 표기(1e-05, 1E+5)를 받지 않는다.
    float는 repr 기준으로 변환해 이진 오차를 끌어오지 않는다.

    Raises:
        EncodingError: NaN, Infinity, 숫자가 아닌 값
    """
    if isinstance(value, str):
        return value
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise EncodingError(f"Unsupported numeric value: {value!r}")

    number = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    if not number.is_finite():
        raise EncodingError(f"Non-finite numeric value: {value!r}")
    return format(number, "f")


class BybitClient:
    """
    Bybit V5 클라이언트

    인증: HMAC SHA256 서명 (헤더)
    상태 없음: 요청마다 timestamp를 새로 캡처하므로 동시 사용 가능
    """

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        recv_window: timedelta = DEFAULT_RECV_WINDOW,
        environment: Environment = Environment.MAINNET
    ):
        """
        Args:
            api_key: API Key
            api_secret: API Secret
            recv_window: 기본 수신 허용 시간
            environment: MAINNET / TESTNET
        """
        if not api_key or not api_secret:
            raise ValueError("Bybit API credentials not configured")

        self._api_key = api_key
        self._api_secret = api_secret
        self.recv_window = recv_window
        self.environment = environment

        logger.info(
            f"Bybit client initialized: "
            f"API Key={mask_api_key(api_key)}, env={environment.name}"
        )

    @classmethod
    def from_settings(cls, settings=None) -> "BybitClient":
        """설정(.env)에서 클라이언트 생성"""
        if settings is None:
            from bybit_client.config import settings

        return cls(
            api_key=settings.BYBIT_API_KEY,
            api_secret=settings.BYBIT_API_SECRET,
            recv_window=settings.recv_window,
            environment=settings.environment
        )

    @property
    def api_key(self) -> str:
        return self._api_key

    def prepare(
        self,
        request: BaseRequest,
        recv_window: Optional[timedelta] = None
    ) -> PendingRequest:
        """
        임의 엔드포인트 요청 서명

        Raises:
            RequestBuildError: 인코딩/서명/헤더 구성 실패
        """
        return request.as_request(
            self._api_key,
            self._api_secret,
            self.recv_window if recv_window is None else recv_window,
            domain=self.environment.value
        )

    def _prepare(
        self,
        request_type: Type[BaseRequest],
        recv_window: Optional[timedelta],
        **fields
    ) -> PendingRequest:
        """
        엔드포인트 모델 생성 후 서명

        Raises:
            EncodingError: 필드 검증 실패 (pydantic ValidationError 원인)
        """
        try:
            request = request_type(**fields)
        except ValidationError as e:
            raise EncodingError(
                message=f"Invalid {request_type.__name__} parameters",
                details={"errors": e.errors(include_url=False, include_context=False)}
            ) from e
        return self.prepare(request, recv_window)

    # === Asset ===

    def get_funding_balance(
        self,
        coin: Optional[str] = None,
        account_type: AccountType = AccountType.FUND,
        with_bonus: bool = False,
        recv_window: Optional[timedelta] = None
    ) -> PendingRequest[FundingBalance]:
        """전체 코인 잔고 조회"""
        return self._prepare(
            FundingBalanceRequest,
            recv_window,
            account_type=account_type,
            coin=coin,
            with_bonus=int(with_bonus)
        )

    # === Order ===

    def create_order(
        self,
        category: Category,
        symbol: str,
        side: Side,
        order_type: OrderType,
        qty: Number,
        price: Optional[Number] = None,
        time_in_force: Optional[TimeInForce] = None,
        order_link_id: Optional[str] = None,
        reduce_only: Optional[bool] = None,
        recv_window: Optional[timedelta] = None
    ) -> PendingRequest[OrderResult]:
        """
        주문 생성

        수량/가격은 고정소수점 문자열로 전송 (format_number)

        Raises:
            EncodingError: Limit 주문에 가격 누락, NaN 수량 등 잘못된 파라미터
        """
        return self._prepare(
            CreateOrderRequest,
            recv_window,
            category=category,
            symbol=symbol,
            side=side,
            order_type=order_type,
            qty=format_number(qty),
            price=None if price is None else format_number(price),
            time_in_force=time_in_force,
            order_link_id=order_link_id,
            reduce_only=reduce_only
        )

    def cancel_order(
        self,
        category: Category,
        symbol: str,
        order_id: Optional[str] = None,
        order_link_id: Optional[str] = None,
        recv_window: Optional[timedelta] = None
    ) -> PendingRequest[OrderResult]:
        """주문 취소"""
        return self._prepare(
            CancelOrderRequest,
            recv_window,
            category=category,
            symbol=symbol,
            order_id=order_id,
            order_link_id=order_link_id
        )

    def get_open_orders(
        self,
        category: Category,
        symbol: Optional[str] = None,
        order_id: Optional[str] = None,
        open_only: Optional[int] = None,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
        recv_window: Optional[timedelta] = None
    ) -> PendingRequest[OrderList]:
        """
        미체결 주문 조회

        Args:
            open_only: 0 = 활성 주문, 1/2 = 최근 종료 주문 (UTA 기준)
            limit: 페이지 크기 (1~50)
        """
        return self._prepare(
            OpenOrdersRequest,
            recv_window,
            category=category,
            symbol=symbol,
            order_id=order_id,
            open_only=open_only,
            limit=limit,
            cursor=cursor
        )

    def __repr__(self) -> str:
        return (
            f"BybitClient(api_key={mask_api_key(self._api_key)}, "
            f"env={self.environment.name})"
        )
