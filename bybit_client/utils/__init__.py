"""
Utils

로깅 헬퍼와 기본 HTTP transport
"""

from bybit_client.utils.logging import mask_api_key, setup_logging

__all__ = ["mask_api_key", "setup_logging"]
