"""
Pytest 설정 및 공통 Fixtures
"""

import json
from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar, Dict
from unittest.mock import AsyncMock

import pytest

from bybit_client.endpoint import GetRequest, PostRequest

API_KEY = "XXXXXXXXXXXXXXXXXX"
API_SECRET = "YYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYYY"


class SampleQuery(GetRequest):
    """테스트용 조회 엔드포인트"""
    ENDPOINT: ClassVar[str] = "/v5/test/query"
    RESPONSE: ClassVar[Any] = Dict[str, Any]

    a: int
    b: str


class SampleBody(PostRequest):
    """테스트용 변경 엔드포인트"""
    ENDPOINT: ClassVar[str] = "/v5/test/body"
    RESPONSE: ClassVar[Any] = Dict[str, Any]

    a: int
    b: str


@pytest.fixture
def api_key():
    return API_KEY


@pytest.fixture
def api_secret():
    return API_SECRET


@pytest.fixture
def fixed_timestamp():
    """2024-01-01T00:00:00Z (1704067200000 ms)"""
    return datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def recv_window():
    return timedelta(milliseconds=5000)


@pytest.fixture
def query_params():
    return SampleQuery(a=1, b="x")


@pytest.fixture
def body_params():
    return SampleBody(a=1, b="x")


@pytest.fixture
def make_transport():
    """
    고정 응답을 반환하는 transport 생성

    Example:
        transport = make_transport({"retCode": 0, ...})
    """
    def _make(payload: Dict[str, Any]) -> AsyncMock:
        return AsyncMock(return_value=json.dumps(payload).encode("utf-8"))

    return _make
