# app.py
from __future__ import annotations

import logging

import streamlit as st
from streamlit_js_eval import get_geolocation

from lunchpick.config import LOG_LEVEL, KakaoConfig
from lunchpick.errors import LunchPickError
from lunchpick.kakao import KakaoLocalClient
from lunchpick.models import Coordinate
from lunchpick.orchestrator import Orchestrator, Outcome
from lunchpick.state import SearchState, initial_state, with_inputs
from lunchpick.views import FoliumMapView, StreamlitListView

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("lunchpick.app")

# --------------------
# Page config + CSS
# --------------------
st.set_page_config(page_title="식당 추천 앱", layout="wide")

st.markdown(
    """
    <style>
      html, body, [class*="css"]  { font-size: 17px; }

      .lp-title {
        text-align: center;
        font-size: 40px;
        font-weight: 800;
        margin: 10px 0 18px 0;
        letter-spacing: -0.5px;
      }
      .lp-section {
        font-size: 24px;
        font-weight: 800;
        margin: 0 0 10px 0;
      }

      .stButton button {
        font-size: 16px !important;
        padding: 0.5rem 0.9rem !important;
      }

      .block-container { max-width: 1400px; padding-top: 1.2rem; }

      header[data-testid="stHeader"] {
        display: none;
      }
    </style>
    """,
    unsafe_allow_html=True,
)

st.markdown('<div class="lp-title">식당 추천 앱</div>', unsafe_allow_html=True)

config = KakaoConfig.from_env()


# --------------------
# Helpers
# --------------------
@st.cache_resource
def get_orchestrator(_cfg: KakaoConfig) -> Orchestrator:
    return Orchestrator(KakaoLocalClient(_cfg))


def apply(outcome: Outcome) -> None:
    st.session_state.search = outcome.state
    if outcome.notice is not None:
        st.session_state.notice = outcome.notice.message


def form_state() -> SearchState:
    return with_inputs(
        st.session_state.search,
        count=int(st.session_state.count),
        included_category=str(st.session_state.included),
        excluded_category=str(st.session_state.excluded),
    )


try:
    orchestrator = get_orchestrator(config)
except LunchPickError as e:
    st.error(e.message)
    st.stop()

# --------------------
# Session state defaults
# --------------------
if "search" not in st.session_state:
    st.session_state.search = initial_state(Coordinate(config.default_lat, config.default_lng))
if "locating" not in st.session_state:
    st.session_state.locating = False
if "notice" not in st.session_state:
    st.session_state.notice = None
if "count" not in st.session_state:
    st.session_state.count = 0
if "included" not in st.session_state:
    st.session_state.included = ""
if "excluded" not in st.session_state:
    st.session_state.excluded = ""


# --------------------
# Controls
# --------------------
q_col, btn_col = st.columns([5, 1])
with q_col:
    address = st.text_input(
        "주소",
        placeholder="주소 또는 건물명 입력",
        label_visibility="collapsed",
        key="address",
    )
with btn_col:
    if st.button("검색", type="primary", use_container_width=True, key="btn_search"):
        try:
            apply(orchestrator.search(form_state(), address))
        except LunchPickError as e:
            logger.warning("search failed: %s", e.message)
            st.session_state.notice = e.message

c_loc, c_count, c_spin = st.columns([1, 2, 2])
with c_loc:
    if st.button("현위치", use_container_width=True, key="btn_locate"):
        st.session_state.locating = True
with c_count:
    st.number_input("추천 개수 (0 = 전부)", min_value=0, max_value=45, step=1, key="count")
with c_spin:
    st.write("")
    if st.button("🎲 랜덤 추천", use_container_width=True, key="btn_spin"):
        try:
            apply(orchestrator.spin(form_state()))
        except LunchPickError as e:
            st.session_state.notice = e.message

c_inc, c_exc = st.columns(2)
with c_inc:
    st.text_input("추천할 카테고리", placeholder="예: 한식", key="included")
with c_exc:
    st.text_input("제외할 카테고리", placeholder="쉼표로 구분 (예: 카페, 술집)", key="excluded")

# geolocation 컴포넌트는 첫 rerun에서 None을 주고 값이 오면 다시 rerun 된다
if st.session_state.locating:
    position = get_geolocation()
    if position is not None:
        st.session_state.locating = False
        try:
            apply(orchestrator.locate(form_state(), position))
        except LunchPickError as e:
            st.session_state.notice = e.message

if st.session_state.notice:
    st.error(st.session_state.notice)
    st.session_state.notice = None


# --------------------
# Map + list
# --------------------
current: SearchState = st.session_state.search
map_col, list_col = st.columns([3, 2], gap="large")
with map_col:
    st.markdown('<div class="lp-section">지도</div>', unsafe_allow_html=True)
with list_col:
    st.markdown(f'<div class="lp-section">식당 목록 ({len(current.places)})</div>', unsafe_allow_html=True)

picked_id = orchestrator.present(
    current,
    FoliumMapView(key="map_main", height=560, container=map_col),
    StreamlitListView(center_of=current.center, container=list_col),
)
if picked_id:
    apply(orchestrator.select(current, picked_id))
    st.rerun()
