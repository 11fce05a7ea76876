# lunchpick/errors.py
from __future__ import annotations


class LunchPickError(Exception):
    """Base error. `message` is what the user sees in the notice box."""

    default_message = "알 수 없는 오류가 발생했습니다."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigError(LunchPickError):
    default_message = "KAKAO_REST_API_KEY가 설정되지 않았습니다."


class NotFound(LunchPickError):
    """Vendor answered but `documents` was empty."""

    default_message = "검색 결과가 없습니다."


class TransportFailure(LunchPickError):
    """Non-2xx status, network exception or unreadable body."""

    default_message = "요청 중 오류가 발생했습니다."


class LocationUnavailable(LunchPickError):
    default_message = "위치를 가져오지 못했습니다."


class EmptySource(LunchPickError):
    default_message = "식당 목록이 비어 있습니다. 주소를 검색해 주세요."
