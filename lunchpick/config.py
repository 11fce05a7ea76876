# lunchpick/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .geo import is_valid_lat_lng

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")


def _as_float(val: Optional[str], default: float) -> float:
    if val is None or not val.strip():
        return default
    try:
        return float(val)
    except ValueError:
        return default


def _as_int(val: Optional[str], default: int) -> int:
    if val is None or not val.strip():
        return default
    try:
        return int(val)
    except ValueError:
        return default


@dataclass(frozen=True)
class KakaoConfig:
    rest_api_key: str = ""
    base_url: str = "https://dapi.kakao.com"
    keyword: str = "식당"
    radius_m: int = 2000
    timeout: Optional[float] = None  # None이면 무제한 대기
    default_lat: float = 34.9687735
    default_lng: float = 127.4802359

    @classmethod
    def from_env(cls) -> "KakaoConfig":
        timeout = _as_float(os.getenv("KAKAO_TIMEOUT"), 0.0)
        lat = _as_float(os.getenv("LUNCHPICK_DEFAULT_LAT"), cls.default_lat)
        lng = _as_float(os.getenv("LUNCHPICK_DEFAULT_LNG"), cls.default_lng)
        if not is_valid_lat_lng(lat, lng):
            # 범위 밖이면 기본 위치로
            lat, lng = cls.default_lat, cls.default_lng
        return cls(
            rest_api_key=os.getenv("KAKAO_REST_API_KEY", "").strip(),
            base_url=os.getenv("KAKAO_BASE_URL", cls.base_url).rstrip("/"),
            keyword=os.getenv("LUNCHPICK_KEYWORD", cls.keyword),
            radius_m=_as_int(os.getenv("LUNCHPICK_RADIUS_M"), cls.radius_m),
            timeout=timeout if timeout > 0 else None,
            default_lat=lat,
            default_lng=lng,
        )


def log_level(val: Optional[str]) -> str:
    """Level name for logging.basicConfig; unknown names fall back to INFO."""
    name = (val or "").strip().upper()
    if name and isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


LOG_LEVEL = log_level(os.getenv("LOG_LEVEL"))
