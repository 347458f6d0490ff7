"""
Endpoint Request 테스트

GET/POST 요청 서명 및 구성 검증
"""

import dataclasses
from datetime import datetime, timedelta, timezone
from typing import Any, ClassVar, Dict, List

import pytest

from bybit_client.constants import (
    HEADER_API_KEY,
    HEADER_RECV_WINDOW,
    HEADER_SIGN,
    HEADER_TIMESTAMP,
    MAINNET,
    TESTNET,
)
from bybit_client.endpoint import GetRequest
from bybit_client.exceptions import EncodingError, RequestBuildError
from bybit_client.pending import PendingRequest
from bybit_client.signer import sign


class EmptyQuery(GetRequest):
    ENDPOINT: ClassVar[str] = "/v5/test/empty"


class ListQuery(GetRequest):
    ENDPOINT: ClassVar[str] = "/v5/test/list"

    symbols: List[str]


class TestGetRequest:
    """조회 요청"""

    def test_uri(self, query_params):
        assert query_params.uri() == f"{MAINNET}/v5/test/query"
        assert query_params.uri(TESTNET) == f"{TESTNET}/v5/test/query"

    def test_build(self, query_params, api_key, api_secret, recv_window, fixed_timestamp):
        """query string이 URL에 붙고 바디는 비어 있음"""
        request = query_params.build(api_key, api_secret, recv_window, timestamp=fixed_timestamp)

        assert request.method == "GET"
        assert request.url == f"{MAINNET}/v5/test/query?a=1&b=x"
        assert request.url.endswith("?a=1&b=x")
        assert request.body == ""

    def test_headers(self, query_params, api_key, api_secret, recv_window, fixed_timestamp):
        request = query_params.build(api_key, api_secret, recv_window, timestamp=fixed_timestamp)

        expected_sign = sign(api_secret, fixed_timestamp, api_key, recv_window, "a=1&b=x")
        assert dict(request.headers) == {
            HEADER_API_KEY: api_key,
            HEADER_SIGN: expected_sign,
            HEADER_TIMESTAMP: "1704067200000",
            HEADER_RECV_WINDOW: "5000",
        }

    def test_empty_query_has_no_separator(self, api_key, api_secret, recv_window, fixed_timestamp):
        request = EmptyQuery().build(api_key, api_secret, recv_window, timestamp=fixed_timestamp)

        assert request.url == f"{MAINNET}/v5/test/empty"
        assert request.headers[HEADER_SIGN] == sign(api_secret, fixed_timestamp, api_key, recv_window, "")

    def test_domain_override(self, query_params, api_key, api_secret, recv_window):
        request = query_params.build(api_key, api_secret, recv_window, domain=TESTNET)

        assert request.url.startswith(f"{TESTNET}/v5/test/query?")

    def test_encoding_failure(self, api_key, api_secret, recv_window):
        """query로 표현할 수 없는 필드는 EncodingError"""
        with pytest.raises(EncodingError):
            ListQuery(symbols=["BTCUSDT"]).build(api_key, api_secret, recv_window)


class TestPostRequest:
    """변경 요청"""

    def test_build(self, body_params, api_key, api_secret, recv_window, fixed_timestamp):
        """JSON 바디, query string 없음"""
        request = body_params.build(api_key, api_secret, recv_window, timestamp=fixed_timestamp)

        assert request.method == "POST"
        assert request.url == f"{MAINNET}/v5/test/body"
        assert "?" not in request.url
        assert request.body == '{"a":1,"b":"x"}'
        assert request.content == b'{"a":1,"b":"x"}'

    def test_signature_covers_body(self, body_params, api_key, api_secret, recv_window, fixed_timestamp):
        """서명 대상과 전송 바디가 동일"""
        request = body_params.build(api_key, api_secret, recv_window, timestamp=fixed_timestamp)

        expected = sign(api_secret, fixed_timestamp, api_key, recv_window, request.body)
        assert request.headers[HEADER_SIGN] == expected


class TestBuildCommon:
    """공통 동작"""

    def test_different_timestamps_different_signatures(self, query_params, api_key, api_secret, recv_window, fixed_timestamp):
        first = query_params.build(api_key, api_secret, recv_window, timestamp=fixed_timestamp)
        second = query_params.build(
            api_key, api_secret, recv_window,
            timestamp=fixed_timestamp + timedelta(milliseconds=1)
        )

        assert first.headers[HEADER_SIGN] != second.headers[HEADER_SIGN]
        assert first.headers[HEADER_TIMESTAMP] != second.headers[HEADER_TIMESTAMP]

    def test_default_timestamp_is_now(self, query_params, api_key, api_secret, recv_window):
        """timestamp 생략 시 현재 시각 (헤더와 서명이 같은 값 사용)"""
        before = int(datetime.now(timezone.utc).timestamp() * 1000) - 1
        request = query_params.build(api_key, api_secret, recv_window)
        after = int(datetime.now(timezone.utc).timestamp() * 1000) + 1

        header_ts = int(request.headers[HEADER_TIMESTAMP])
        assert before <= header_ts <= after

        signed_at = datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(milliseconds=header_ts)
        assert request.headers[HEADER_SIGN] == sign(api_secret, signed_at, api_key, recv_window, "a=1&b=x")

    def test_build_does_not_mutate(self, query_params, api_key, api_secret, recv_window):
        before = query_params.model_dump()

        query_params.build(api_key, api_secret, recv_window)

        assert query_params.model_dump() == before

    def test_request_is_immutable(self, query_params, api_key, api_secret, recv_window):
        request = query_params.build(api_key, api_secret, recv_window)

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.url = "https://example.com"
        with pytest.raises(TypeError):
            request.headers[HEADER_SIGN] = "forged"

    @pytest.mark.parametrize("bad_key", ["key\n", "key\r\nX-Evil: 1", "키"])
    def test_invalid_api_key_header(self, query_params, api_secret, recv_window, bad_key):
        """헤더에 넣을 수 없는 API Key는 RequestBuildError"""
        with pytest.raises(RequestBuildError):
            query_params.build(bad_key, api_secret, recv_window)

    def test_as_request_binds_response_type(self, query_params, api_key, api_secret, recv_window):
        pending = query_params.as_request(api_key, api_secret, recv_window)

        assert isinstance(pending, PendingRequest)
        assert pending.response_type == Dict[str, Any]
        assert pending.request.url.endswith("?a=1&b=x")
