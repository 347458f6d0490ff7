"""
Parameter Encoder

요청 파라미터를 Bybit가 기대하는 wire 포맷으로 변환
- GET: query string (필드 선언 순서 유지)
- POST: compact JSON 바디

서명 대상 문자열과 실제 전송 문자열은 반드시 동일해야 하므로
두 경우 모두 이 모듈의 결과를 그대로 사용한다.
"""

import json
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Union
from urllib.parse import urlencode

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from bybit_client.exceptions import EncodingError

Payload = Union[BaseModel, Mapping[str, Any]]


class ParamMode(str, Enum):
    """파라미터 전송 방식"""
    QUERY = "query"
    BODY = "body"


def _to_json_object(payload: Payload) -> Dict[str, Any]:
    """
    payload → JSON 호환 dict

    pydantic 모델은 alias 기준으로 덤프 (선언 순서 유지),
    Mapping은 입력 순서 그대로 사용
    """
    try:
        if isinstance(payload, BaseModel):
            return payload.model_dump(mode="json", by_alias=True)
        if isinstance(payload, Mapping):
            return to_jsonable_python(dict(payload))
    except (PydanticSerializationError, TypeError, ValueError) as e:
        raise EncodingError(
            message=f"Cannot serialize parameters: {e}",
            details={"type": type(payload).__name__}
        ) from e

    raise EncodingError(
        message="Parameters must be a pydantic model or a mapping",
        details={"type": type(payload).__name__}
    )


def _query_value(key: str, value: Any) -> str:
    """query string 단일 값 변환 (bool은 소문자 true/false)"""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if not math.isfinite(value):
            raise EncodingError(
                message=f"Non-finite number in query parameter: {key}",
                details={"field": key, "value": str(value)}
            )
        return str(value)
    if isinstance(value, (int, str)):
        return str(value)

    # 중첩 구조는 query string으로 표현하지 않음
    raise EncodingError(
        message=f"Unsupported value in query parameter: {key}",
        details={"field": key, "type": type(value).__name__}
    )


def encode_query(payload: Payload) -> str:
    """
    query string 인코딩

    None 필드는 생략하고 나머지는 선언 순서대로 form-urlencoded 처리

    Raises:
        EncodingError: 중첩 구조, NaN/Infinity 등 표현 불가능한 값
    """
    data = _to_json_object(payload)
    pairs = [
        (key, _query_value(key, value))
        for key, value in data.items()
        if value is not None
    ]
    return urlencode(pairs)


def encode_body(payload: Payload) -> str:
    """
    JSON 바디 인코딩 (공백 없는 compact 형식)

    query string과 동일하게 최상위 None 필드는 생략

    Raises:
        EncodingError: JSON으로 표현 불가능한 값
    """
    data = {
        key: value
        for key, value in _to_json_object(payload).items()
        if value is not None
    }
    try:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise EncodingError(
            message=f"Cannot encode JSON body: {e}",
            details={"type": type(payload).__name__}
        ) from e


@dataclass(frozen=True)
class Parameters:
    """
    전송 방식이 태그된 요청 파라미터

    태그는 HTTP 메서드에 따라 호출자가 선택한다 (payload 형태로 추론하지 않음).
    """
    mode: ParamMode
    payload: Payload

    @classmethod
    def by_query(cls, payload: Payload) -> "Parameters":
        return cls(ParamMode.QUERY, payload)

    @classmethod
    def by_body(cls, payload: Payload) -> "Parameters":
        return cls(ParamMode.BODY, payload)

    def encode(self) -> str:
        """wire 포맷 문자열 반환"""
        if self.mode is ParamMode.QUERY:
            return encode_query(self.payload)
        return encode_body(self.payload)
