"""
Endpoints

엔드포인트별 요청/응답 스키마
"""

from bybit_client.endpoints.asset import (
    AccountType,
    CoinBalance,
    FundingBalance,
    FundingBalanceRequest,
)
from bybit_client.endpoints.order import (
    CancelOrderRequest,
    Category,
    CreateOrderRequest,
    OpenOrdersRequest,
    OrderInfo,
    OrderList,
    OrderResult,
    OrderType,
    Side,
    TimeInForce,
)

__all__ = [
    "AccountType",
    "CoinBalance",
    "FundingBalance",
    "FundingBalanceRequest",
    "CancelOrderRequest",
    "Category",
    "CreateOrderRequest",
    "OpenOrdersRequest",
    "OrderInfo",
    "OrderList",
    "OrderResult",
    "OrderType",
    "Side",
    "TimeInForce",
]
