"""Supabase (PostgREST) store adapter over httpx.

Rows live at ``{SUPABASE_URL}/rest/v1/{table}``. Equality filters become
``field=eq.value`` query params and ordering becomes ``order=field.desc``.
Every transport or HTTP failure surfaces as ``RemoteError``.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from ecolista.domain.errors import RemoteError
from ecolista.infra.Store_Repository import StoreRepository

logger = logging.getLogger(__name__)


def _eq_params(filters: Optional[Dict[str, Any]]) -> Dict[str, str]:
    params = {}
    for field, value in (filters or {}).items():
        if isinstance(value, bool):
            value = str(value).lower()
        params[field] = f"eq.{value}"
    return params


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return body.get("message") or body.get("error") or str(body)
    return str(body)


class RestStoreRepository(StoreRepository):
    def __init__(self, base_url: str, api_key: str, table: str = "eco_lista",
                 client: Optional[httpx.AsyncClient] = None, timeout: float = 10.0):
        if not base_url:
            raise ValueError("SUPABASE_URL must be set for the rest store backend")
        self.table = table
        self._owns_client = client is None
        headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._client = client or httpx.AsyncClient(timeout=timeout)
        self._client.headers.update(headers)
        self._url = f"{base_url.rstrip('/')}/rest/v1/{table}"

    async def _request(self, method: str, action: str, **kwargs) -> httpx.Response:
        try:
            response = await self._client.request(method, self._url, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"Store {action} on {self.table} failed: {e}")
            raise RemoteError(f"Error de conexión con la tabla {self.table}") from e
        if response.status_code >= 400:
            detail = _error_detail(response)
            logger.error(f"Store {action} on {self.table} returned {response.status_code}: {detail}")
            raise RemoteError(f"Error {response.status_code} en {action}: {detail}")
        return response

    async def select(self, filters=None, order=None, descending=False, columns="*"):
        params = {"select": columns or "*"}
        params.update(_eq_params(filters))
        if order:
            params["order"] = f"{order}.{'desc' if descending else 'asc'}"
        response = await self._request("GET", "select", params=params)
        data = response.json()
        return data if isinstance(data, list) else []

    async def insert(self, row):
        response = await self._request(
            "POST", "insert", json=[row], headers={"Prefer": "return=representation"}
        )
        data = response.json()
        if not data:
            raise RemoteError(f"La inserción en {self.table} no devolvió la fila")
        return data[0]

    async def update(self, row_id, patch):
        response = await self._request(
            "PATCH", "update", params=_eq_params({"id": row_id}), json=patch,
            headers={"Prefer": "return=representation"},
        )
        data = response.json()
        if not data:
            raise RemoteError(f"No existe la fila {row_id} en {self.table}")
        return data[0]

    async def delete(self, filters):
        if not filters:
            raise RemoteError("Borrado sin filtros rechazado")
        await self._request("DELETE", "delete", params=_eq_params(filters))

    async def aclose(self):
        if self._owns_client:
            await self._client.aclose()
