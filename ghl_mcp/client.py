# client.py  –  the one HTTP client every tool module talks through
#
# Each call opens its own httpx.AsyncClient from the *current* config, so a
# token swapped in by update_access_token() applies to the very next request.

from typing import Any, Dict, Optional
import httpx

from .config import GHLConfig, log
from .errors import ConfigurationError, GHLApiError

TIMEOUT = 30
Envelope = Dict[str, Any]


def _error_message(resp: httpx.Response) -> str:
    message = None
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        message = body.get("message")
    if isinstance(message, list):
        message = ", ".join(str(m) for m in message)
    return message or resp.reason_phrase or "Unknown error"


class GHLApiClient:
    def __init__(self, config: GHLConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        for attr in ("access_token", "base_url", "location_id", "version"):
            if not getattr(config, attr):
                raise ConfigurationError(f"GHL client requires a non-empty {attr}")
        self._config = config.copy()
        self._transport = transport

    # ── configuration ────────────────────────────────────────
    @property
    def location_id(self) -> str:
        return self._config.location_id

    def get_config(self) -> GHLConfig:
        return self._config.copy()

    def update_access_token(self, token: str) -> None:
        if not token:
            raise ConfigurationError("access token must not be empty")
        self._config.access_token = token
        log("[GHL API]", "Access token updated")

    def _headers(self, version: Optional[str]) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._config.access_token}",
            "Version":       version or self._config.version,
            "Content-Type":  "application/json",
            "Accept":        "application/json",
        }

    # ── transport ────────────────────────────────────────────
    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        version: Optional[str] = None,
        response_type: str = "json",
    ) -> Envelope:
        """Send one request and wrap the reply as {success, data}.

        Non-2xx replies and transport failures raise GHLApiError.
        response_type "text" keeps the body as a string; "bytes" keeps the raw
        payload and adds the reply's contentType to the envelope.
        """
        method = method.upper()
        log("[GHL API]", method, path)
        try:
            async with httpx.AsyncClient(
                base_url=self._config.base_url,
                headers=self._headers(version),
                timeout=TIMEOUT,
                transport=self._transport,
            ) as client:
                resp = await client.request(method, path, params=params, json=json)
        except httpx.HTTPError as exc:
            log("[GHL API]", "Request error:", method, path, exc, force=True)
            raise GHLApiError(str(exc) or exc.__class__.__name__) from exc

        log("[GHL API]", f"Response {resp.status_code}: {path}")
        if resp.status_code >= 400:
            message = _error_message(resp)
            log("[GHL API]", "Response error:", resp.status_code, message, path, force=True)
            raise GHLApiError(message, status=resp.status_code)

        if response_type == "bytes":
            return {
                "success": True,
                "data": resp.content,
                "contentType": resp.headers.get("content-type"),
            }
        if response_type == "text":
            return {"success": True, "data": resp.text}
        if not resp.content:
            return {"success": True, "data": {}}
        try:
            data = resp.json()
        except ValueError:
            data = resp.text
        return {"success": True, "data": data}

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None, **kw) -> Envelope:
        return await self.request("GET", path, params=params, **kw)

    async def post(self, path: str, json: Optional[Any] = None, **kw) -> Envelope:
        return await self.request("POST", path, json=json, **kw)

    async def put(self, path: str, json: Optional[Any] = None, **kw) -> Envelope:
        return await self.request("PUT", path, json=json, **kw)

    async def patch(self, path: str, json: Optional[Any] = None, **kw) -> Envelope:
        return await self.request("PATCH", path, json=json, **kw)

    async def delete(self, path: str, **kw) -> Envelope:
        return await self.request("DELETE", path, **kw)

    async def test_connection(self) -> Envelope:
        await self.get(f"/locations/{self._config.location_id}")
        return {"success": True, "data": {"status": "connected", "locationId": self._config.location_id}}
