# lunchpick/kakao.py
"""Kakao Local API client: address geocoding and keyword search around a point.

Both calls are single GETs with the `KakaoAK` authorization header. Failures
are turned into `NotFound` / `TransportFailure` carrying the notice the user
should see; nothing is retried.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

import requests

from .config import KakaoConfig
from .errors import ConfigError, NotFound, TransportFailure
from .models import Place, places_from_documents

logger = logging.getLogger(__name__)

ADDRESS_PATH = "/v2/local/search/address.json"
KEYWORD_PATH = "/v2/local/search/keyword.json"

Degrees = Union[str, float]


class KakaoLocalClient:
    def __init__(self, config: KakaoConfig, session: Optional[requests.Session] = None) -> None:
        if not config.rest_api_key:
            raise ConfigError()
        self.config = config
        self._session = session or requests.Session()

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"KakaoAK {self.config.rest_api_key}"}

    def _get_documents(self, path: str, params: Dict[str, Any], failure_message: str) -> List[Dict[str, Any]]:
        url = self.config.base_url + path
        try:
            resp = self._session.get(url, params=params, headers=self.headers, timeout=self.config.timeout)
            resp.raise_for_status()
            data = resp.json()
        except requests.RequestException:
            logger.exception("kakao request failed: %s", path)
            raise TransportFailure(failure_message)
        except ValueError:
            # requests의 JSONDecodeError도 ValueError
            logger.exception("kakao response is not JSON: %s", path)
            raise TransportFailure(failure_message)

        if not isinstance(data, dict):
            logger.warning("unexpected kakao payload type %s for %s", type(data).__name__, path)
            return []
        docs = data.get("documents") or []
        return [d for d in docs if isinstance(d, dict)]

    def search_address(self, address: str) -> List[Dict[str, Any]]:
        """
        Geocode free-text address. Returns candidate documents in vendor
        order (each has `x`, `y`, `address_name`).
        """
        query = (address or "").strip()
        if not query:
            raise NotFound("주소를 찾을 수 없습니다.")

        logger.info("address search: %s", query)
        docs = self._get_documents(
            ADDRESS_PATH,
            {"query": query},
            "주소 검색 중 오류가 발생했습니다.",
        )
        if not docs:
            raise NotFound("주소를 찾을 수 없습니다.")
        return docs

    def search_nearby(self, x: Degrees, y: Degrees) -> List[Place]:
        """Keyword search (default "식당") within the configured radius of (x=lng, y=lat)."""
        params = {
            "query": self.config.keyword,
            "x": x,
            "y": y,
            "radius": self.config.radius_m,
        }
        logger.info("nearby search: x=%s y=%s radius=%s", x, y, self.config.radius_m)
        docs = self._get_documents(KEYWORD_PATH, params, "식당 검색 중 오류가 발생했습니다.")

        places = places_from_documents(docs)
        if not places:
            raise NotFound("근처에 식당이 없습니다.")
        return places
