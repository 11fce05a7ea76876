# lunchpick/state.py
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from .models import Coordinate, Place


@dataclass(frozen=True)
class SearchState:
    center: Coordinate
    query: str = ""
    count: int = 0                 # 0이면 개수 제한 없음
    included_category: str = ""
    excluded_category: str = ""    # 쉼표 구분
    selected: Optional[Place] = None
    places: Tuple[Place, ...] = ()

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")


def initial_state(default_center: Coordinate) -> SearchState:
    return SearchState(center=default_center)


def with_inputs(
    state: SearchState,
    query: Optional[str] = None,
    count: Optional[int] = None,
    included_category: Optional[str] = None,
    excluded_category: Optional[str] = None,
) -> SearchState:
    """Copy form inputs into the state; None leaves a field as is."""
    changes = {}
    if query is not None:
        changes["query"] = query
    if count is not None:
        changes["count"] = int(count)
    if included_category is not None:
        changes["included_category"] = included_category
    if excluded_category is not None:
        changes["excluded_category"] = excluded_category
    return replace(state, **changes) if changes else state


# ---------------------------
# Transitions (one per user action)
# ---------------------------
def begin_search(state: SearchState, center: Coordinate) -> SearchState:
    """Address resolved: move the map, drop the old list and selection."""
    return replace(state, center=center, places=(), selected=None)


def with_results(state: SearchState, places: Sequence[Place]) -> SearchState:
    return replace(state, places=tuple(places))


def after_spin(state: SearchState, picked: Sequence[Place]) -> SearchState:
    picked = tuple(picked)
    if not picked:
        return state
    selected = state.selected if state.selected in picked else None
    return replace(state, places=picked, center=picked[0].coordinate, selected=selected)


def select(state: SearchState, place: Optional[Place]) -> SearchState:
    return replace(state, selected=place)


def locate(state: SearchState, center: Coordinate) -> SearchState:
    """Current position known: recenter, old results no longer apply."""
    return replace(state, center=center, places=(), selected=None)
