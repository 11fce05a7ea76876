# lunchpick/recommend.py
from __future__ import annotations

import random
from typing import List, Optional, Sequence

from .errors import EmptySource
from .models import Place


# ---------------------------
# Filter helpers
# ---------------------------
def parse_excluded(spec: str) -> List[str]:
    """
    "카페, 술집,," -> ["카페", "술집"]
    빈 토큰은 버린다 (빈 문자열은 모든 카테고리에 substring으로 걸리기 때문).
    """
    if not spec:
        return []
    tokens = [t.strip() for t in spec.split(",")]
    return [t for t in tokens if t]


def is_eligible(place: Place, excluded: Sequence[str], included: str) -> bool:
    label = place.category
    if any(tok in label for tok in excluded):
        return False
    if included and included not in label:
        return False
    return True


def eligible_places(places: Sequence[Place], excluded_spec: str, included_spec: str) -> List[Place]:
    excluded = parse_excluded(excluded_spec)
    included = included_spec or ""  # 입력 그대로 비교
    return [p for p in places if is_eligible(p, excluded, included)]


# ---------------------------
# Spin
# ---------------------------
def spin_places(
    places: Sequence[Place],
    excluded_spec: str = "",
    included_spec: str = "",
    count: int = 0,
    rng: Optional[random.Random] = None,
) -> List[Place]:
    """
    랜덤 추천:
    - 포함/제외 카테고리로 거른다
    - 남는 게 없으면 전체 목록에서 뽑는다
    - 섞어서 count개 (0이면 전부)
    """
    if not places:
        raise EmptySource()
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    pool = eligible_places(places, excluded_spec, included_spec)
    if not pool:
        pool = list(places)

    rng = rng or random.Random()
    rng.shuffle(pool)

    if count == 0 or count >= len(pool):
        return pool
    return pool[:count]
