import logging
from typing import Any, Dict, Mapping

from fastapi import FastAPI, Request, Response

from .config import ProxyConfig
from .models import ProxyRequest, ProxyResponse
from .proxy import QueryProxy


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Read once per cold start; the proxy itself is rebuilt for every request
CONFIG = ProxyConfig.from_env()


def build_proxy() -> QueryProxy:
    return QueryProxy(CONFIG)


def handler(event: Mapping[str, Any], context: Any) -> Dict[str, Any]:
    """Netlify / Lambda function handler"""
    request = ProxyRequest.from_event(event or {})
    return build_proxy().handle(request).to_event()


# ASGI app for Vercel Python function: export `app`
app = FastAPI(title="Video Listing Supabase Proxy", version="1.0.0")


def _to_response(result: ProxyResponse) -> Response:
    return Response(
        content=result.body,
        status_code=result.status_code,
        headers=result.headers,
    )


@app.get("/")
def root():
    """Health check endpoint"""
    return {"status": "ok", "message": "Supabase proxy is running"}


@app.api_route("/api/supabase-proxy", methods=["GET", "HEAD", "OPTIONS"])
def supabase_proxy(request: Request) -> Response:
    proxy_request = ProxyRequest.from_params(request.method, dict(request.query_params))
    return _to_response(build_proxy().handle(proxy_request))
