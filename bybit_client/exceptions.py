"""
Bybit Client Exceptions

서명 요청 생성, 전송, 응답 해석 중 발생할 수 있는 예외 정의
"""

from typing import Optional


class BybitException(Exception):
    """Bybit 클라이언트 예외 기본 클래스"""

    def __init__(self, message: str, details: dict = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# === 요청 생성 ===

class RequestBuildError(BybitException):
    """
    요청 생성 실패

    인코딩, 서명, 헤더 구성 중 하나라도 실패하면 발생
    부분적으로 만들어진 요청은 반환되지 않음
    """

    pass


class EncodingError(RequestBuildError):
    """
    파라미터 직렬화 실패

    query string 또는 JSON으로 표현할 수 없는 값
    호출자 버그이므로 재시도 불필요
    """

    pass


class SignatureError(RequestBuildError):
    """
    서명 실패

    서명 대상 파라미터 인코딩 실패가 원인 (__cause__ 참조)
    """

    pass


# === 전송 ===

class TransportError(BybitException):
    """
    전송 계층 에러

    연결 실패, 타임아웃, 2xx 이외의 HTTP 상태
    재시도 여부는 호출자가 결정
    """

    def __init__(self, message: str, status_code: int = None, details: dict = None):
        self.status_code = status_code
        super().__init__(message, details)


# === 응답 해석 ===

class DecodeError(BybitException):
    """
    응답 해석 실패

    성공 envelope, 에러 envelope 어느 쪽과도 일치하지 않는 응답
    API 스펙 변경 가능성이 높음 (해당 호출은 실패 처리)
    """

    pass


class ApplicationError(BybitException):
    """
    거래소 애플리케이션 에러

    HTTP 200 + retCode != 0 으로 전달되는 in-band 에러
    """

    def __init__(self, code: int, message: Optional[str] = None):
        self.code = code
        self.error_message = message
        super().__init__(message or "N/A", {"retCode": code})

    def __str__(self):
        return f"{self.error_message or 'N/A'} ({self.code})"

    @classmethod
    def from_code(cls, code: int, message: Optional[str] = None) -> "ApplicationError":
        """
        retCode에 맞는 예외 인스턴스 생성

        알려진 코드는 세부 예외 클래스로, 나머지는 ApplicationError로 변환
        """
        error_class = _ERROR_CODE_MAP.get(code, cls)
        return error_class(code, message)


class ExchangeAuthError(ApplicationError):
    """
    인증 에러

    API Key 오류, 서명 오류, 권한 부족
    재시도 불필요
    """

    pass


class RateLimitExceededError(ApplicationError):
    """
    Rate Limit 초과

    너무 많은 요청 (지연 후 재시도는 호출자 책임)
    """

    pass


class OrderNotFoundException(ApplicationError):
    """주문 없음"""

    pass


class InsufficientBalanceError(ApplicationError):
    """잔고 부족"""

    pass


# Bybit V5 에러 코드 → 예외 클래스
_ERROR_CODE_MAP = {
    10003: ExchangeAuthError,  # invalid api key
    10004: ExchangeAuthError,  # error sign
    10005: ExchangeAuthError,  # permission denied
    10006: RateLimitExceededError,
    110001: OrderNotFoundException,
    110004: InsufficientBalanceError,  # wallet balance
    110007: InsufficientBalanceError,  # available balance
}
