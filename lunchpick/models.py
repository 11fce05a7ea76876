# lunchpick/models.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .geo import is_valid_lat_lng, parse_degrees, parse_xy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    def __post_init__(self) -> None:
        if not is_valid_lat_lng(self.lat, self.lng):
            raise ValueError(f"invalid coordinate: lat={self.lat}, lng={self.lng}")


@dataclass(frozen=True)
class Place:
    id: str
    name: str
    category: str  # "음식점 > 한식 > 국밥" 같은 자유 형식
    x: str         # 경도 (vendor 문자열 그대로)
    y: str         # 위도
    address: str = ""
    road_address: str = ""
    phone: str = ""
    url: str = ""
    distance_m: Optional[int] = None

    @property
    def coordinate(self) -> Coordinate:
        lat, lng = parse_xy(self.x, self.y)  # type: ignore[misc]
        return Coordinate(lat=lat, lng=lng)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> Optional["Place"]:
        """
        Build a Place from one Kakao keyword-search document.
        Returns None when the coordinate is unusable.
        """
        x, y = doc.get("x"), doc.get("y")
        if parse_xy(x, y) is None:
            return None

        distance = parse_degrees(doc.get("distance"))
        return cls(
            id=str(doc.get("id", "")),
            name=str(doc.get("place_name", "")),
            category=str(doc.get("category_name", "")),
            x=str(x).strip(),
            y=str(y).strip(),
            address=str(doc.get("address_name", "")),
            road_address=str(doc.get("road_address_name", "")),
            phone=str(doc.get("phone", "")),
            url=str(doc.get("place_url", "")),
            distance_m=int(distance) if distance is not None else None,
        )


def places_from_documents(docs: Iterable[Dict[str, Any]]) -> List[Place]:
    out: List[Place] = []
    for doc in docs:
        place = Place.from_document(doc)
        if place is None:
            logger.warning("dropping place with bad coordinate: %r", doc.get("place_name"))
            continue
        out.append(place)
    return out
