from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


RECOGNIZED_FILTERS = ("mainCategory", "quality", "countryCategory", "popularTag", "id")
DEFAULT_ACTION = "videos"


class ProxyRequest(BaseModel):
    method: str = "GET"
    action: str = DEFAULT_ACTION
    filters: Dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_params(cls, method: str, params: Optional[Mapping[str, Any]]) -> "ProxyRequest":
        params = params or {}
        filters = {
            name: str(params[name])
            for name in RECOGNIZED_FILTERS
            if params.get(name)
        }
        return cls(
            method=str(method or "GET").upper(),
            action=str(params.get("action") or DEFAULT_ACTION),
            filters=filters,
        )

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> "ProxyRequest":
        """Build a request from a Netlify / Lambda function event."""
        return cls.from_params(
            event.get("httpMethod", "GET"),
            event.get("queryStringParameters"),
        )


class ProxyResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    headers: Dict[str, str]
    body: str = ""

    def to_event(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
