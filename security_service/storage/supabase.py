"""
Lightweight Supabase PostgREST wrapper.
Only the calls used by the repositories: select, upsert and delete by column.
"""
import httpx
from dataclasses import dataclass
from typing import Any
from security_service.config import settings


@dataclass
class QueryResult:
    data: list[dict[str, Any]]


class QueryBuilder:
    """Chainable PostgREST query builder mimicking supabase-py API."""

    def __init__(self, client: httpx.Client, table: str, base_url: str, headers: dict):
        self._client = client
        self._base_url = f"{base_url}/rest/v1/{table}"
        self._headers = headers
        self._params: dict[str, str] = {}
        self._method = "GET"
        self._body: Any = None

    def select(self, columns: str = "*") -> "QueryBuilder":
        self._method = "GET"
        self._params["select"] = columns
        return self

    def upsert(self, data: dict) -> "QueryBuilder":
        self._method = "POST"
        self._body = data
        self._headers["Prefer"] = "resolution=merge-duplicates,return=representation"
        return self

    def delete(self) -> "QueryBuilder":
        self._method = "DELETE"
        self._headers["Prefer"] = "return=representation"
        return self

    def eq(self, column: str, value: Any) -> "QueryBuilder":
        self._params[column] = f"eq.{value}"
        return self

    def limit(self, count: int) -> "QueryBuilder":
        self._params["limit"] = str(count)
        return self

    def execute(self) -> QueryResult:
        if self._method == "GET":
            resp = self._client.get(self._base_url, params=self._params, headers=self._headers)
        elif self._method == "POST":
            resp = self._client.post(self._base_url, json=self._body, params=self._params, headers=self._headers)
        elif self._method == "DELETE":
            resp = self._client.delete(self._base_url, params=self._params, headers=self._headers)
        else:
            raise ValueError(f"Unknown method: {self._method}")

        resp.raise_for_status()

        if not resp.content:
            return QueryResult(data=[])

        data = resp.json()
        if isinstance(data, dict):
            data = [data]

        return QueryResult(data=data if isinstance(data, list) else [])


class SupabaseClient:
    """Minimal Supabase client using PostgREST."""

    def __init__(self, url: str, key: str, client: httpx.Client | None = None):
        self._url = url.rstrip("/")
        self._key = key
        self._client = client or httpx.Client(timeout=30.0)

    def _headers(self) -> dict:
        return {
            "apikey": self._key,
            "Authorization": f"Bearer {self._key}",
            "Content-Type": "application/json",
        }

    def table(self, name: str) -> QueryBuilder:
        return QueryBuilder(self._client, name, self._url, self._headers())


_client: SupabaseClient | None = None


def get_supabase() -> SupabaseClient:
    global _client
    if _client is None:
        _client = SupabaseClient(settings.supabase_url, settings.supabase_key)
    return _client
