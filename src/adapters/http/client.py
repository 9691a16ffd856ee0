"""Plugin API client using aiohttp."""

import json
import sys
from typing import Any, Dict, Optional

import aiohttp

from src.config import CONFIG, AppConfig
from src.domain.models import FetchResult
from src.ports.outbound import SessionTokenProvider

HEADER_X_CSRF_TOKEN = "X-CSRF-Token"
HEADER_REQUESTED_WITH = "X-Requested-With"


def _log(msg: str):
    print(msg, file=sys.stderr)


class Client:
    """Async client for the plugin's server API.

    The CSRF token is read once at construction. Requests without a valid
    token are still sent; rejecting them is up to the server.
    """

    def __init__(
        self,
        plugin_id: Optional[str] = None,
        site_url: Optional[str] = None,
        token_provider: Optional[SessionTokenProvider] = None,
        timeout: Optional[float] = None,
    ):
        plugin_id = plugin_id or CONFIG["plugin_id"]
        site_url = CONFIG["site_url"] if site_url is None else site_url.rstrip("/")
        self.url = AppConfig(plugin_id=plugin_id, site_url=site_url).api_base_path
        self.csrf = (token_provider() if token_provider else "") or ""
        if timeout is None:
            timeout = CONFIG["request_timeout"]
        self._timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None

    async def connected(self) -> FetchResult:
        return await self.do_fetch(f"{self.url}/connected", {"method": "POST"})

    async def do_fetch(self, url: str, options: Optional[Dict[str, Any]] = None) -> FetchResult:
        """Send a request and parse its JSON body.

        Never raises: network and parse failures come back as
        FetchResult.fail. The status code is not checked, so an error
        response with a JSON body is returned as data.
        """
        options = dict(options or {})
        method = (options.pop("method", None) or "GET").upper()
        headers = dict(options.pop("headers", None) or {})

        headers[HEADER_REQUESTED_WITH] = "XMLHttpRequest"
        if method != "GET":
            headers[HEADER_X_CSRF_TOKEN] = self.csrf

        session_kwargs = {"timeout": self._timeout} if self._timeout else {}
        try:
            async with aiohttp.ClientSession(**session_kwargs) as session:
                async with session.request(method, url, headers=headers, **options) as resp:
                    # An empty body is a parse failure, not a null result
                    data = json.loads(await resp.text())
            return FetchResult.ok(data)
        except Exception as e:
            _log(f"[client] {method} {url} failed: {e!r}")
            return FetchResult.fail(e)
