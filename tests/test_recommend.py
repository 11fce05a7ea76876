import random

import pytest

from conftest import make_doc
from lunchpick.errors import EmptySource
from lunchpick.models import Place
from lunchpick.recommend import eligible_places, is_eligible, parse_excluded, spin_places


def _ids(places):
    return [p.id for p in places]


def test_parse_excluded_trims_and_drops_empty():
    assert parse_excluded(" 카페 , 술집,, ") == ["카페", "술집"]
    assert parse_excluded("") == []


def test_excluded_substring_match(sample_places):
    out = eligible_places(sample_places, "카페", "")
    assert _ids(out) == ["1", "3", "4", "5"]
    assert all("카페" not in p.category for p in out)


def test_included_substring_match(sample_places):
    out = eligible_places(sample_places, "", "한식")
    assert _ids(out) == ["1", "5"]


def test_include_and_exclude_combined(sample_places):
    out = eligible_places(sample_places, "국밥", "한식")
    assert _ids(out) == ["5"]


def test_exclude_is_case_sensitive():
    cafe = Place.from_document(make_doc("c1", "블루보틀", "음식점 > Cafe"))
    assert is_eligible(cafe, ["cafe"], "")
    assert not is_eligible(cafe, ["Cafe"], "")
    assert [p.id for p in eligible_places([cafe], "cafe", "")] == ["c1"]
    assert eligible_places([cafe], "Cafe", "") == []


def test_include_is_case_sensitive():
    cafe = Place.from_document(make_doc("c1", "블루보틀", "음식점 > Cafe"))
    assert is_eligible(cafe, [], "Cafe")
    assert not is_eligible(cafe, [], "cafe")
    assert eligible_places([cafe], "", "cafe") == []


def test_included_token_is_not_stripped(sample_places):
    # "음식점 > 한식 > 국밥" ends with 국밥, so a trailing space must not match
    assert _ids(eligible_places(sample_places, "", "국밥")) == ["1"]
    assert eligible_places(sample_places, "", "국밥 ") == []


def test_spin_returns_exact_count_from_source(sample_places):
    rng = random.Random(7)
    for c in range(1, len(sample_places) + 1):
        out = spin_places(sample_places, count=c, rng=rng)
        assert len(out) == c
        assert set(_ids(out)) <= set(_ids(sample_places))
        assert len(set(_ids(out))) == c


def test_spin_count_zero_or_too_big_returns_all(sample_places):
    assert sorted(_ids(spin_places(sample_places, count=0, rng=random.Random(1)))) == sorted(_ids(sample_places))
    assert len(spin_places(sample_places, count=100, rng=random.Random(1))) == len(sample_places)


def test_spin_draws_only_from_eligible(sample_places):
    out = spin_places(sample_places, excluded_spec="카페", count=3, rng=random.Random(3))
    assert len(out) == 3
    assert set(_ids(out)) <= {"1", "3", "4", "5"}


def test_spin_falls_back_to_full_list_when_filters_remove_all(sample_places):
    out = spin_places(sample_places, included_spec="중식", rng=random.Random(5))
    assert sorted(_ids(out)) == sorted(_ids(sample_places))


def test_spin_does_not_mutate_input(sample_places):
    before = list(sample_places)
    spin_places(sample_places, rng=random.Random(11))
    assert sample_places == before


def test_spin_empty_source_raises():
    with pytest.raises(EmptySource):
        spin_places([], count=3)


def test_spin_negative_count_raises(sample_places):
    with pytest.raises(ValueError):
        spin_places(sample_places, count=-1)


def test_spin_shuffle_reaches_every_first_position(sample_places):
    # 편향된 comparator 셔플이면 일부 위치가 거의 안 나온다
    rng = random.Random(2024)
    firsts = {spin_places(sample_places, rng=rng)[0].id for _ in range(300)}
    assert firsts == set(_ids(sample_places))
