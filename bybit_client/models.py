"""
Bybit 공통 모델

- SignedRequest: 서명이 끝난 전송 직전 HTTP 요청
- ResponseEnvelope: 성공 응답 envelope (retCode == 0)
- ErrorEnvelope: 에러 응답 envelope (retCode != 0)

Bybit는 실패도 HTTP 200으로 응답하고 두 envelope의 필드 구성이 같다.
retCode 값만으로 구분하므로 각 모델은 자기 쪽 코드만 허용한다.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Generic, Mapping, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

T = TypeVar("T")


@dataclass(frozen=True)
class SignedRequest:
    """서명 완료 HTTP 요청 (생성 후 변경 불가)"""
    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""

    def __post_init__(self):
        # 헤더도 읽기 전용으로 고정
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def content(self) -> bytes:
        """전송용 바디 바이트"""
        return self.body.encode("utf-8")

    def __repr__(self) -> str:
        return f"SignedRequest({self.method} {self.url})"


class ResponseEnvelope(BaseModel, Generic[T]):
    """
    성공 응답 envelope

    {"retCode":0,"retMsg":"OK","result":{...},"retExtInfo":{},"time":1700000000000}
    """
    model_config = ConfigDict(populate_by_name=True)

    return_code: int = Field(..., alias="retCode", strict=True)
    return_message: str = Field(..., alias="retMsg")
    result: T
    return_extended_info: Optional[Any] = Field(None, alias="retExtInfo")
    time: int = Field(..., ge=0, strict=True)

    @field_validator("return_code")
    @classmethod
    def validate_success_code(cls, v):
        """성공 envelope는 retCode 0만 허용"""
        if v != 0:
            raise ValueError("success envelope requires retCode 0")
        return v


class ErrorEnvelope(BaseModel):
    """
    에러 응답 envelope

    {"retCode":10001,"retMsg":"params error"}
    """
    model_config = ConfigDict(populate_by_name=True)

    return_code: int = Field(..., alias="retCode", strict=True)
    return_message: Optional[str] = Field(None, alias="retMsg")

    @field_validator("return_code")
    @classmethod
    def validate_error_code(cls, v):
        """에러 envelope는 0이 아닌 retCode만 허용"""
        if v == 0:
            raise ValueError("non-zero error code")
        return v
