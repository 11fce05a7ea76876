# lunchpick/orchestrator.py
"""User actions (search, spin, select, locate) over an immutable SearchState.

Every action takes the current state and returns an `Outcome`. Failures that
happen before anything changed are raised as `LunchPickError`; a failure of
the nearby search after the map already moved comes back as `Outcome.notice`
together with the new state.
"""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence

from . import state as transitions
from .errors import LocationUnavailable, LunchPickError, NotFound
from .geo import parse_xy
from .kakao import Degrees
from .models import Coordinate, Place
from .recommend import spin_places
from .state import SearchState

logger = logging.getLogger(__name__)

UNSUPPORTED_MESSAGE = "이 브라우저는 Geolocation을 지원하지 않습니다."


class PlaceSearch(Protocol):
    def search_address(self, address: str) -> List[Dict[str, Any]]: ...

    def search_nearby(self, x: Degrees, y: Degrees) -> List[Place]: ...


class MapView(Protocol):
    def center_at(self, center: Coordinate) -> None: ...

    def render_markers(self, places: Sequence[Place], selected: Optional[Place]) -> None: ...


class ListView(Protocol):
    def render(self, places: Sequence[Place], selected: Optional[Place]) -> Optional[str]: ...


@dataclass(frozen=True)
class Outcome:
    state: SearchState
    notice: Optional[LunchPickError] = None


def parse_position(position: Optional[Dict[str, Any]]) -> Coordinate:
    """
    Browser geolocation result -> Coordinate.
    {"coords": {"latitude": .., "longitude": ..}} on success,
    {"error": {"code": .., "message": ..}} on failure. code 0 means the
    browser has no geolocation at all (1 denied, 2 unavailable, 3 timeout).
    """
    if position is None:
        raise LocationUnavailable(UNSUPPORTED_MESSAGE)
    if not isinstance(position, dict):
        logger.warning("geolocation failed: %r", position)
        raise LocationUnavailable()
    if "error" in position:
        logger.warning("geolocation failed: %r", position["error"])
        error = position["error"] if isinstance(position["error"], dict) else {}
        if error.get("code") == 0:
            raise LocationUnavailable(UNSUPPORTED_MESSAGE)
        raise LocationUnavailable()

    coords = position.get("coords") or {}
    parsed = parse_xy(coords.get("longitude"), coords.get("latitude"))
    if parsed is None:
        logger.warning("geolocation returned unusable coords: %r", coords)
        raise LocationUnavailable()
    lat, lng = parsed
    return Coordinate(lat=lat, lng=lng)


class Orchestrator:
    def __init__(self, client: PlaceSearch, rng: Optional[random.Random] = None) -> None:
        self.client = client
        self.rng = rng or random.Random()

    def _fill_nearby(self, state: SearchState, x: Degrees, y: Degrees) -> Outcome:
        try:
            places = self.client.search_nearby(x, y)
        except LunchPickError as exc:
            return Outcome(state, notice=exc)
        return Outcome(transitions.with_results(state, places))

    def search(self, state: SearchState, address: str) -> Outcome:
        # 후보가 여러 개여도 첫 번째만 쓴다
        first = self.client.search_address(address)[0]
        parsed = parse_xy(first.get("x"), first.get("y"))
        if parsed is None:
            logger.warning("geocoder candidate without usable x/y: %r", first)
            raise NotFound("주소를 찾을 수 없습니다.")

        lat, lng = parsed
        searching = transitions.begin_search(
            transitions.with_inputs(state, query=address),
            Coordinate(lat=lat, lng=lng),
        )
        return self._fill_nearby(searching, first["x"], first["y"])

    def spin(self, state: SearchState) -> Outcome:
        picked = spin_places(
            state.places,
            excluded_spec=state.excluded_category,
            included_spec=state.included_category,
            count=state.count,
            rng=self.rng,
        )
        return Outcome(transitions.after_spin(state, picked))

    def select(self, state: SearchState, place_id: str) -> Outcome:
        for place in state.places:
            if place.id == place_id:
                return Outcome(transitions.select(state, place))
        logger.info("select ignored, %s not in current list", place_id)
        return Outcome(state)

    def locate(self, state: SearchState, position: Optional[Dict[str, Any]]) -> Outcome:
        center = parse_position(position)
        located = transitions.locate(state, center)
        # 경도, 위도 순서
        return self._fill_nearby(located, center.lng, center.lat)

    def present(self, state: SearchState, map_view: MapView, list_view: ListView) -> Optional[str]:
        """Push state to the views; returns a place id if the list view reported a pick."""
        map_view.center_at(state.center)
        map_view.render_markers(state.places, state.selected)
        return list_view.render(state.places, state.selected)
