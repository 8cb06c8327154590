from __future__ import annotations

from threading import Lock
from typing import Any, Dict, Iterator, List, Optional, Tuple
from urllib.parse import urlencode

import httpx

from bookingboost.core.config import get_settings


Filters = List[Tuple[str, str]]
Row = Dict[str, Any]


class SupabaseClient:
    """Read-only PostgREST access to the hotel tables.

    Every instance shares one pooled ``httpx.Client``; reports only ever read,
    so there are no write helpers here.
    """

    _http: httpx.Client | None = None
    _http_lock: Lock = Lock()

    def __init__(self) -> None:
        settings = get_settings()
        api_key = settings.supabase_service_role_key or settings.supabase_anon_key
        if not api_key:
            raise ValueError("SUPABASE_SERVICE_ROLE_KEY or SUPABASE_ANON_KEY must be set")
        self.rest_url = f"{settings.supabase_url.rstrip('/')}/rest/v1"
        self.headers = {"apikey": api_key, "Authorization": f"Bearer {api_key}"}
        self.http = self._pooled_http()

    @classmethod
    def _pooled_http(cls) -> httpx.Client:
        with cls._http_lock:
            if cls._http is None:
                cls._http = httpx.Client(
                    timeout=30.0,
                    limits=httpx.Limits(max_keepalive_connections=20, max_connections=100),
                )
            return cls._http

    def select(
        self,
        table: str,
        select: str,
        filters: Optional[Filters] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        order: Optional[str] = None,
        count: bool = False,
    ) -> Tuple[List[Row], Optional[int]]:
        params: Filters = [("select", select), *(filters or [])]
        for key, value in (("limit", limit), ("offset", offset), ("order", order)):
            if value is not None:
                params.append((key, str(value)))

        headers = dict(self.headers)
        if count:
            headers["Prefer"] = "count=exact"
        response = self.http.get(f"{self.rest_url}/{table}?{urlencode(params)}", headers=headers)
        response.raise_for_status()
        return response.json(), _total_from_content_range(response.headers.get("content-range"))

    def iter_pages(
        self,
        table: str,
        select: str,
        filters: Optional[Filters] = None,
        order: Optional[str] = None,
        page_size: int = 1000,
    ) -> Iterator[List[Row]]:
        # The server may cap a response below page_size (max-rows), so a short page is
        # not the end; walk until the exact count is reached or a page comes back empty.
        offset = 0
        total: Optional[int] = None
        while total is None or offset < total:
            page, count = self.select(
                table,
                select,
                filters,
                limit=page_size,
                offset=offset,
                order=order,
                count=total is None,
            )
            if count is not None:
                total = count
            if not page:
                return
            yield page
            offset += len(page)

    def select_all(
        self,
        table: str,
        select: str,
        filters: Optional[Filters] = None,
        order: Optional[str] = None,
        page_size: int = 1000,
    ) -> List[Row]:
        return [
            row
            for page in self.iter_pages(table, select, filters, order=order, page_size=page_size)
            for row in page
        ]


def _total_from_content_range(content_range: Optional[str]) -> Optional[int]:
    # "0-999/4213"; the total is "*" when no count was requested.
    if not content_range or "/" not in content_range:
        return None
    total = content_range.rsplit("/", 1)[1]
    return int(total) if total.isdigit() else None
