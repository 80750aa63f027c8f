from __future__ import annotations

from threading import Lock
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple
from urllib.parse import urlencode

import httpx

from mandataire_crm.core.config import get_settings


Filters = List[Tuple[str, str]]

# Keeps `in.(...)` lookups well under common 8 KB URL limits.
IN_FILTER_BATCH_SIZE = 100


class SupabaseClient:
    """Thin PostgREST client shared by every repository.

    All calls raise ``httpx.HTTPError`` on transport or HTTP failures; callers
    let it propagate to the app-level handler.
    """

    _shared_client: httpx.Client | None = None
    _client_lock: Lock = Lock()

    def __init__(self) -> None:
        settings = get_settings()
        self.base_url = settings.supabase_url.rstrip("/") + "/rest/v1"
        self.api_key = settings.supabase_service_role_key or settings.supabase_anon_key
        if not self.api_key:
            raise ValueError("Supabase API key is required")
        self._client = self._get_shared_client(settings.supabase_timeout_seconds)

    @classmethod
    def _get_shared_client(cls, timeout: float) -> httpx.Client:
        if cls._shared_client is not None:
            return cls._shared_client
        with cls._client_lock:
            if cls._shared_client is None:
                cls._shared_client = httpx.Client(
                    timeout=timeout,
                    limits=httpx.Limits(max_keepalive_connections=20, max_connections=100),
                )
        return cls._shared_client

    def _headers(self, prefer: Optional[str] = None, json_body: bool = False) -> Dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
        }
        if json_body:
            headers["Content-Type"] = "application/json"
        if prefer:
            headers["Prefer"] = prefer
        return headers

    def _url(self, table: str, params: Optional[Filters] = None) -> str:
        url = f"{self.base_url}/{table}"
        if params:
            url = f"{url}?{urlencode(params, doseq=True)}"
        return url

    @staticmethod
    def _rows(response: httpx.Response) -> List[Dict[str, Any]]:
        if not response.content:
            return []
        data = response.json()
        if isinstance(data, list):
            return data
        if isinstance(data, dict):
            return [data]
        return []

    def select(
        self,
        table: str,
        select: str,
        filters: Optional[Filters] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        order: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        params: Filters = [("select", select)]
        if filters:
            params.extend(filters)
        if limit is not None:
            params.append(("limit", str(limit)))
        if offset is not None:
            params.append(("offset", str(offset)))
        if order:
            params.append(("order", order))

        response = self._client.get(self._url(table, params), headers=self._headers())
        response.raise_for_status()
        return self._rows(response)

    def insert(self, table: str, payload: Dict[str, Any] | List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        response = self._client.post(
            self._url(table),
            headers=self._headers(prefer="return=representation", json_body=True),
            json=payload,
        )
        response.raise_for_status()
        return self._rows(response)

    def update(
        self,
        table: str,
        payload: Dict[str, Any],
        filters: Filters,
    ) -> List[Dict[str, Any]]:
        response = self._client.patch(
            self._url(table, filters),
            headers=self._headers(prefer="return=representation", json_body=True),
            json=payload,
        )
        response.raise_for_status()
        return self._rows(response)

    def delete(self, table: str, filters: Filters) -> List[Dict[str, Any]]:
        if not filters:
            raise ValueError("Refusing to delete without filters")
        response = self._client.delete(
            self._url(table, filters),
            headers=self._headers(prefer="return=representation"),
        )
        response.raise_for_status()
        return self._rows(response)


def _quote(value: str) -> str:
    cleaned = value.replace("\\", "").replace('"', "")
    return f'"{cleaned}"'


def in_filter(values: List[str]) -> str:
    return "in.(" + ",".join(_quote(value) for value in values) + ")"


def search_filter(columns: List[str], term: str) -> Tuple[str, str]:
    """PostgREST ``or`` filter matching ``term`` case-insensitively in any column."""
    pattern = _quote(f"*{term.strip()}*")
    return "or", "(" + ",".join(f"{column}.ilike.{pattern}" for column in columns) + ")"


def batched(values: Sequence[str], size: int = IN_FILTER_BATCH_SIZE) -> Iterator[List[str]]:
    for start in range(0, len(values), size):
        yield list(values[start : start + size])
