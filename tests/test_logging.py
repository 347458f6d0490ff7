"""
로깅 유틸리티 테스트
"""

import logging

import pytest

from bybit_client.utils.logging import mask_api_key, setup_logging


@pytest.mark.parametrize(
    "api_key, expected",
    [
        ("", "***"),
        ("12345678", "***"),
        ("123456789", "12345678***"),
        ("XXXXXXXXXXXXXXXXXX", "XXXXXXXX***"),
    ]
)
def test_mask_api_key(api_key, expected):
    assert mask_api_key(api_key) == expected


def test_signing_logs_do_not_leak_credentials(caplog, query_params, api_key, api_secret, recv_window):
    """서명 로그에 API Key 원문/Secret/서명이 남지 않음"""
    with caplog.at_level(logging.DEBUG, logger="bybit_client"):
        request = query_params.build(api_key, api_secret, recv_window)

    assert caplog.records
    assert api_key not in caplog.text
    assert api_secret not in caplog.text
    assert request.headers["X-BAPI-SIGN"] not in caplog.text


def test_setup_logging(monkeypatch):
    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    setup_logging("debug")

    assert calls[0]["level"] == logging.DEBUG


def test_setup_logging_default_level(monkeypatch):
    """레벨 미지정 시 설정의 LOG_LEVEL 사용"""
    from bybit_client import config

    calls = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(config, "settings", config.Settings(_env_file=None, LOG_LEVEL="WARNING"))

    setup_logging()

    assert calls[0]["level"] == logging.WARNING
