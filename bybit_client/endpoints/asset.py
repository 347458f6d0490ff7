"""
Asset Endpoints

자산 조회 엔드포인트
API 문서: https://bybit-exchange.github.io/docs/v5/asset/balance/all-balance
"""

from enum import Enum
from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from bybit_client.endpoint import GetRequest


class AccountType(str, Enum):
    """계정 타입"""
    UNIFIED = "UNIFIED"
    FUND = "FUND"
    CONTRACT = "CONTRACT"
    SPOT = "SPOT"


class CoinBalance(BaseModel):
    """코인별 잔고 (금액은 문자열 그대로 유지)"""
    model_config = ConfigDict(populate_by_name=True)

    coin: str
    transfer_balance: str = Field(..., alias="transferBalance")
    wallet_balance: str = Field(..., alias="walletBalance")
    bonus: str = ""


class FundingBalance(BaseModel):
    """계정 전체 코인 잔고"""
    model_config = ConfigDict(populate_by_name=True)

    account_type: AccountType = Field(..., alias="accountType")
    member_id: str = Field(..., alias="memberId")
    balance: List[CoinBalance] = Field(default_factory=list)


class FundingBalanceRequest(GetRequest):
    """
    전체 코인 잔고 조회

    GET /v5/asset/transfer/query-account-coins-balance
    """
    ENDPOINT: ClassVar[str] = "/v5/asset/transfer/query-account-coins-balance"
    RESPONSE: ClassVar[type] = FundingBalance

    account_type: AccountType = Field(AccountType.FUND, alias="accountType")
    coin: Optional[str] = None
    with_bonus: int = Field(0, alias="withBonus")
