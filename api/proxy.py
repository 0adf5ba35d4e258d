import json
import logging
from typing import Any, Callable, Dict, Optional

import httpx

from .config import ProxyConfig
from .errors import ClientError
from .models import ProxyRequest, ProxyResponse
from .query import visible_videos
from .rows import unique_values
from .supabase import SupabaseClient


logger = logging.getLogger(__name__)

ALLOWED_METHODS = "GET,HEAD,POST,OPTIONS"


class QueryProxy:
    """Translates one proxy request into one read against the ``videos`` table.

    ``handle`` never raises: every failure ends up as an error envelope.
    """

    def __init__(
        self,
        config: ProxyConfig,
        transport: Optional[httpx.BaseTransport] = None,
        client: Optional[SupabaseClient] = None,
    ):
        self.config = config
        self.client = client or SupabaseClient(config, transport=transport)
        self._routes: Dict[str, Callable[[Dict[str, str]], Dict[str, Any]]] = {
            "videos": self.videos,
            "topCategories": self.top_categories,
            "popularTags": self.popular_tags,
            "videoById": self.video_by_id,
        }

    # ----- Envelope -----
    def cors_headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Access-Control-Allow-Origin": self.config.allowed_origin,
            "Access-Control-Allow-Headers": "Content-Type",
        }

    def _json(self, status_code: int, payload: Any) -> ProxyResponse:
        return ProxyResponse(
            status_code=status_code,
            headers=self.cors_headers(),
            body=json.dumps(payload, separators=(",", ":")),
        )

    def handle(self, request: ProxyRequest) -> ProxyResponse:
        try:
            # Handle preflight
            if request.method == "OPTIONS":
                return ProxyResponse(
                    status_code=204,
                    headers={**self.cors_headers(), "Access-Control-Allow-Methods": ALLOWED_METHODS},
                    body="",
                )

            route = self._routes.get(request.action)
            if route is None:
                raise ClientError("Unknown action")
            return self._json(200, route(request.filters))
        except ClientError as e:
            return self._json(e.status, {"message": e.message})
        except Exception as e:
            logger.error("supabase-proxy error: %s", e, exc_info=True)
            status = getattr(e, "status", None) or 500
            return self._json(status, {"error": str(e) or repr(e)})

    # ----- Actions -----
    def videos(self, filters: Dict[str, str]) -> Dict[str, Any]:
        query = visible_videos().order("created_at", descending=True)
        if filters.get("mainCategory"):
            query = query.eq("main_category", filters["mainCategory"])
        if filters.get("quality"):
            query = query.eq("quality", filters["quality"])
        if filters.get("countryCategory"):
            query = query.contains("country_categories", filters["countryCategory"])
        if filters.get("popularTag"):
            query = query.contains("popular_tags", filters["popularTag"])
        return {"videos": self.client.fetch(query)}

    def _distinct(self, column: str):
        rows = self.client.fetch(visible_videos(column))
        return unique_values(rows, column)

    def top_categories(self, filters: Dict[str, str]) -> Dict[str, Any]:
        return {"topCategories": self._distinct("top_categories")}

    def popular_tags(self, filters: Dict[str, str]) -> Dict[str, Any]:
        return {"popularTags": self._distinct("popular_tags")}

    def video_by_id(self, filters: Dict[str, str]) -> Dict[str, Any]:
        video_id = filters.get("id")
        if not video_id:
            raise ClientError("Missing id param")
        rows = self.client.fetch(visible_videos().eq("id", video_id))
        return {"video": rows[0] if rows else None}
