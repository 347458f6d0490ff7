"""
Response Decoder

Bybit 응답 바이트를 결과 타입 또는 예외로 변환

HTTP 상태는 항상 200이므로 retCode를 직접 확인한다.
1. JSON 파싱
2. retCode 확인 (정수가 아니면 DecodeError)
3. 0 → ResponseEnvelope[T] 검증 후 result 반환
4. 그 외 → ErrorEnvelope 검증 후 ApplicationError 발생
"""

import json
import logging
from typing import Any, Type, TypeVar, Union

from pydantic import ValidationError

from bybit_client.exceptions import ApplicationError, DecodeError
from bybit_client.models import ErrorEnvelope, ResponseEnvelope

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _preview(content: Union[bytes, str]) -> str:
    """에러 상세용 응답 일부 (처음 200자)"""
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    return content[:200]


def decode_response(content: Union[bytes, str], result_type: Type[T]) -> T:
    """
    응답 해석

    Args:
        content: 응답 바이트
        result_type: 성공 시 result 타입

    Returns:
        result (result_type으로 검증된 값)

    Raises:
        ApplicationError: retCode != 0 (코드별 하위 클래스 포함)
        DecodeError: 어느 envelope와도 일치하지 않는 응답
    """
    try:
        raw: Any = json.loads(content)
    except (TypeError, ValueError) as e:
        raise DecodeError(
            message=f"Malformed JSON response: {e}",
            details={"response": _preview(content)}
        ) from e

    if not isinstance(raw, dict):
        raise DecodeError(
            message="Response is not a JSON object",
            details={"response": _preview(content)}
        )

    code = raw.get("retCode")
    # bool은 int의 하위 타입이므로 별도 제외
    if not isinstance(code, int) or isinstance(code, bool):
        raise DecodeError(
            message="Response has no integer retCode",
            details={"response": _preview(content)}
        )

    if code == 0:
        try:
            envelope = ResponseEnvelope[result_type].model_validate(raw)
        except ValidationError as e:
            raise DecodeError(
                message=f"Unexpected success envelope: {e.error_count()} validation error(s)",
                details={"response": _preview(content), "errors": e.errors(include_url=False)}
            ) from e

        logger.debug(f"Response decoded: {getattr(result_type, '__name__', result_type)}")
        return envelope.result

    try:
        error = ErrorEnvelope.model_validate(raw)
    except ValidationError as e:
        raise DecodeError(
            message=f"Unexpected error envelope: {e.error_count()} validation error(s)",
            details={"response": _preview(content), "errors": e.errors(include_url=False)}
        ) from e

    logger.error(f"Bybit API error: {error.return_message or 'N/A'} ({error.return_code})")
    raise ApplicationError.from_code(error.return_code, error.return_message)
