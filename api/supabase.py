import logging
from typing import Any, Dict, Optional

import httpx

from .config import ProxyConfig
from .errors import ProxyError, UpstreamError
from .query import TableQuery, encode_query


logger = logging.getLogger(__name__)


class SupabaseClient:
    """Read-only access to the Supabase REST interface (PostgREST)."""

    def __init__(self, config: ProxyConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        key = self.config.supabase_key.get_secret_value()
        return {
            "apikey": key,
            "Authorization": f"Bearer {key}",
            "Accept": "application/json",
        }

    def url_for(self, query: TableQuery) -> str:
        qs = encode_query(query)
        url = f"{self.config.supabase_url}/rest/v1/{query.table}"
        return f"{url}?{qs}" if qs else url

    def fetch(self, query: TableQuery) -> Any:
        if not self.config.is_configured:
            raise ProxyError("Supabase is not configured", status=500)

        with httpx.Client(
            timeout=self.config.request_timeout,
            headers=self._headers(),
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            resp = client.get(self.url_for(query))

        logger.debug("Supabase %s -> %s", query.table, resp.status_code)
        if not resp.is_success:
            raise UpstreamError(resp.status_code, resp.text)
        return resp.json()
