# lunchpick/geo.py
from __future__ import annotations

import math
from typing import Any, Optional


# Earth's mean radius in kilometers (WGS84-ish)
EARTH_RADIUS_KM = 6371.0088


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Great-circle distance between two points on Earth (lat/lng in degrees).
    Returns distance in kilometers.
    """
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lng2 - lng1)

    a = math.sin(dphi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2.0) ** 2
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


def is_valid_lat_lng(lat: float, lng: float) -> bool:
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0


def parse_degrees(value: Any) -> Optional[float]:
    """
    Kakao는 좌표를 "127.0276" 같은 문자열로 준다.
    숫자로 못 바꾸면 None.
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        out = float(str(value).strip())
    except ValueError:
        return None
    return out if math.isfinite(out) else None


def parse_xy(x: Any, y: Any) -> Optional[tuple[float, float]]:
    """
    Vendor (x=lng, y=lat) pair -> (lat, lng), or None when either side is
    missing, non-numeric or out of range.
    """
    lng = parse_degrees(x)
    lat = parse_degrees(y)
    if lat is None or lng is None:
        return None
    if not is_valid_lat_lng(lat, lng):
        return None
    return lat, lng
