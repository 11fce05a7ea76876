import sys
from pathlib import Path

import pytest

# Ensure the project root is on sys.path for direct pytest runs
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from lunchpick.models import Place  # noqa: E402


def make_doc(pid, name, category, x="127.0276", y="37.4979", **extra):
    doc = {
        "id": pid,
        "place_name": name,
        "category_name": category,
        "x": x,
        "y": y,
        "address_name": "서울 강남구 역삼동 825",
        "road_address_name": "서울 강남구 강남대로 396",
        "phone": "02-000-0000",
        "place_url": f"http://place.map.kakao.com/{pid}",
        "distance": "120",
    }
    doc.update(extra)
    return doc


SAMPLE_DOCS = [
    make_doc("1", "장수국밥", "음식점 > 한식 > 국밥", x="127.0281", y="37.4981"),
    make_doc("2", "스타벅스 강남점", "음식점 > 카페 > 커피전문점", x="127.0270", y="37.4975"),
    make_doc("3", "라멘집", "음식점 > 일식 > 라멘", x="127.0290", y="37.4990"),
    make_doc("4", "김밥천국", "음식점 > 분식 > 김밥", x="127.0265", y="37.4970"),
    make_doc("5", "한우마을", "음식점 > 한식 > 육류,고기", x="127.0300", y="37.5000"),
    make_doc("6", "이디야커피", "음식점 > 카페", x="127.0255", y="37.4960"),
]


@pytest.fixture
def sample_places():
    return [Place.from_document(d) for d in SAMPLE_DOCS]
