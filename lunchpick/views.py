# lunchpick/views.py
from __future__ import annotations

from contextlib import nullcontext
from typing import Any, List, Optional, Sequence

import folium
import pandas as pd
import streamlit as st
from streamlit_folium import st_folium

from .geo import haversine_km
from .models import Coordinate, Place


def kakao_map_url(place: Place) -> str:
    if place.url:
        return place.url
    return f"https://map.kakao.com/link/map/{place.name},{place.y},{place.x}"


# ---------------------------
# Pure builders (테스트 가능)
# ---------------------------
def places_frame(places: Sequence[Place], center: Coordinate) -> pd.DataFrame:
    """List-view table, one row per place in current order."""
    rows = []
    for i, p in enumerate(places, start=1):
        c = p.coordinate
        rows.append(
            {
                "no": i,
                "id": p.id,
                "name": p.name,
                "category": p.category,
                "address": p.road_address or p.address,
                "phone": p.phone,
                "dist_km": round(haversine_km(center.lat, center.lng, c.lat, c.lng), 2),
                "url": kakao_map_url(p),
            }
        )
    columns = ["no", "id", "name", "category", "address", "phone", "dist_km", "url"]
    return pd.DataFrame(rows, columns=columns)


def build_map(
    center: Coordinate,
    places: Sequence[Place],
    selected: Optional[Place] = None,
    zoom_start: int = 15,
) -> folium.Map:
    m = folium.Map([center.lat, center.lng], zoom_start=zoom_start)

    folium.Marker(
        [center.lat, center.lng],
        tooltip="지도 중심",
        icon=folium.Icon(color="blue", icon="home", prefix="fa"),
    ).add_to(m)

    selected_id = selected.id if selected else None
    for p in places:
        c = p.coordinate
        is_selected = p.id == selected_id
        folium.Marker(
            [c.lat, c.lng],
            tooltip=p.name,
            popup=folium.Popup(f"{p.name}<br>{p.category}", max_width=250),
            icon=folium.Icon(
                color="red" if is_selected else "orange",
                icon="star" if is_selected else "cutlery",
                prefix="fa",
            ),
        ).add_to(m)
    return m


# ---------------------------
# Streamlit views
# ---------------------------
class FoliumMapView:
    def __init__(
        self,
        key: str = "map_main",
        height: int = 520,
        width: Optional[int] = None,
        container: Any = None,
    ) -> None:
        self.key = key
        self.container = container
        self.height = height
        self.width = width
        self.center: Optional[Coordinate] = None

    def center_at(self, center: Coordinate) -> None:
        self.center = center

    def render_markers(self, places: Sequence[Place], selected: Optional[Place]) -> None:
        if self.center is None:
            # 중심이 없으면 첫 식당 기준
            if not places:
                return
            self.center = places[0].coordinate
        m = build_map(self.center, places, selected)
        with self.container if self.container is not None else nullcontext():
            st_folium(m, height=self.height, width=self.width, key=self.key, returned_objects=[])


class StreamlitListView:
    def __init__(self, center_of: Optional[Coordinate] = None, container: Any = None) -> None:
        self.center_of = center_of
        self.container = container

    def render(self, places: Sequence[Place], selected: Optional[Place]) -> Optional[str]:
        with self.container if self.container is not None else nullcontext():
            return self._render(places, selected)

    def _render(self, places: Sequence[Place], selected: Optional[Place]) -> Optional[str]:
        if not places:
            st.info("표시할 식당이 없습니다. 주소를 검색하거나 현위치를 눌러 주세요.")
            return None

        center = self.center_of or places[0].coordinate
        df = places_frame(places, center)
        picked: List[str] = []
        selected_id = selected.id if selected else None

        for _, r in df.iterrows():
            with st.container(border=True):
                c1, c2 = st.columns([4, 1])
                with c1:
                    mark = "⭐ " if r["id"] == selected_id else ""
                    st.markdown(f"**{mark}{r['no']}. {r['name']}**")
                    st.caption(str(r["category"]))
                    st.write(f"{r['address']} • {r['dist_km']:.2f} km")
                    st.markdown(f"[카카오맵에서 보기]({r['url']})")
                with c2:
                    if st.button("선택", key=f"pick_{r['id']}_{r['no']}", use_container_width=True):
                        picked.append(str(r["id"]))

        return picked[0] if picked else None
