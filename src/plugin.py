"""Plugin bootstrap — wires config, API client and the startup handshake."""

import asyncio
import sys
from typing import Any, Mapping, Optional

from src.adapters.http.client import Client
from src.adapters.session.cookies import CookieTokenProvider
from src.config import AppConfig
from src.domain.survey import PostLike, SurveyPost
from src.domain.ui_actions import connected
from src.ports.outbound import SubmitCallback, TextFormatterPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class Plugin:
    """Client-side plugin instance created once per host session."""

    def __init__(
        self,
        client: Client,
        formatter: Optional[TextFormatterPort] = None,
    ):
        self.client = client
        self.formatter = formatter
        self.connected_task: Optional[asyncio.Task] = None

    def start(self) -> asyncio.Task:
        """Send the connected handshake in the background. Must run inside a loop."""
        if self.connected_task is None:
            self.connected_task = asyncio.create_task(connected(self.client)())
            _log(f"[plugin] handshake sent to {self.client.url}/connected")
        return self.connected_task

    def survey_post(
        self,
        post: PostLike,
        theme: Optional[Mapping[str, Any]],
        is_small: bool,
        submit: SubmitCallback,
    ) -> SurveyPost:
        return SurveyPost(post, theme, is_small, submit, formatter=self.formatter)


def initialize(
    config: Optional[AppConfig] = None,
    cookie_string: str = "",
    formatter: Optional[TextFormatterPort] = None,
) -> Plugin:
    config = config or AppConfig.from_env()
    client = Client(
        plugin_id=config.plugin_id,
        site_url=config.site_url,
        token_provider=CookieTokenProvider(cookie_string),
        timeout=config.request_timeout,
    )
    plugin = Plugin(client, formatter=formatter)
    plugin.start()
    return plugin
