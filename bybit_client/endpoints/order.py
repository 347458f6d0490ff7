"""
Order Endpoints

주문 생성/취소/미체결 조회
API 문서: https://bybit-exchange.github.io/docs/v5/order/create-order
"""

from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from bybit_client.endpoint import GetRequest, PostRequest


class Category(str, Enum):
    """상품 카테고리"""
    SPOT = "spot"
    LINEAR = "linear"
    INVERSE = "inverse"
    OPTION = "option"


class Side(str, Enum):
    """주문 방향"""
    BUY = "Buy"
    SELL = "Sell"


class OrderType(str, Enum):
    """주문 타입"""
    MARKET = "Market"
    LIMIT = "Limit"


class TimeInForce(str, Enum):
    GTC = "GTC"
    IOC = "IOC"
    FOK = "FOK"
    POST_ONLY = "PostOnly"


# === 응답 ===

class OrderResult(BaseModel):
    """주문 생성/취소 결과"""
    model_config = ConfigDict(populate_by_name=True)

    order_id: str = Field(..., alias="orderId")
    order_link_id: str = Field("", alias="orderLinkId")


class OrderInfo(BaseModel):
    """
    주문 정보

    수량/가격은 거래소 문자열 그대로 유지
    """
    model_config = ConfigDict(populate_by_name=True)

    order_id: str = Field(..., alias="orderId")
    order_link_id: str = Field("", alias="orderLinkId")
    symbol: str
    side: str
    order_type: str = Field("", alias="orderType")
    order_status: str = Field("", alias="orderStatus")
    price: str = "0"
    qty: str = "0"
    cum_exec_qty: str = Field("0", alias="cumExecQty")
    avg_price: str = Field("", alias="avgPrice")
    created_time: str = Field("", alias="createdTime")


class OrderList(BaseModel):
    """주문 목록 (커서 페이지네이션)"""
    model_config = ConfigDict(populate_by_name=True)

    category: Category
    orders: List[OrderInfo] = Field(default_factory=list, alias="list")
    next_page_cursor: str = Field("", alias="nextPageCursor")


# === 요청 ===

class CreateOrderRequest(PostRequest):
    """POST /v5/order/create"""
    ENDPOINT: ClassVar[str] = "/v5/order/create"
    RESPONSE: ClassVar[type] = OrderResult

    category: Category
    symbol: str
    side: Side
    order_type: OrderType = Field(..., alias="orderType")
    qty: str
    price: Optional[str] = None
    time_in_force: Optional[TimeInForce] = Field(None, alias="timeInForce")
    order_link_id: Optional[str] = Field(None, alias="orderLinkId")
    reduce_only: Optional[bool] = Field(None, alias="reduceOnly")

    @model_validator(mode="after")
    def validate_limit_price(self):
        """Limit 주문은 가격 필수"""
        if self.order_type == OrderType.LIMIT and self.price is None:
            raise ValueError("Price is required for limit orders")
        return self


class CancelOrderRequest(PostRequest):
    """POST /v5/order/cancel"""
    ENDPOINT: ClassVar[str] = "/v5/order/cancel"
    RESPONSE: ClassVar[type] = OrderResult

    category: Category
    symbol: str
    order_id: Optional[str] = Field(None, alias="orderId")
    order_link_id: Optional[str] = Field(None, alias="orderLinkId")

    @model_validator(mode="after")
    def validate_order_reference(self):
        """orderId 또는 orderLinkId 중 하나는 필수"""
        if not self.order_id and not self.order_link_id:
            raise ValueError("Either order_id or order_link_id is required")
        return self


class OpenOrdersRequest(GetRequest):
    """GET /v5/order/realtime"""
    ENDPOINT: ClassVar[str] = "/v5/order/realtime"
    RESPONSE: ClassVar[type] = OrderList

    category: Category
    symbol: Optional[str] = None
    order_id: Optional[str] = Field(None, alias="orderId")
    open_only: Optional[int] = Field(None, ge=0, le=2, alias="openOnly")
    limit: Optional[int] = Field(None, ge=1, le=50)
    cursor: Optional[str] = None
