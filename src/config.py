"""Configuration and shared state."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_PLUGIN_ID = "com.mattermost.nps"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default


CONFIG = {
    "port": int(os.getenv("PORT", "8065")),
    "plugin_id": os.getenv("NPS_PLUGIN_ID", DEFAULT_PLUGIN_ID).strip() or DEFAULT_PLUGIN_ID,
    # Empty site URL keeps request paths relative to the host origin
    "site_url": os.getenv("NPS_SITE_URL", "").strip().rstrip("/"),
    # 0 leaves aiohttp's own default timeout in place
    "request_timeout": _float_env("NPS_REQUEST_TIMEOUT", 0),
    "storage_dir": os.getenv("NPS_STORAGE_DIR", "memory"),
}


@dataclass
class AppConfig:
    """Typed configuration — mirrors CONFIG for code that takes it as a parameter."""

    port: int = 8065
    plugin_id: str = DEFAULT_PLUGIN_ID
    site_url: str = ""
    request_timeout: float = 0
    storage_dir: str = "memory"

    @property
    def api_base_path(self) -> str:
        return f"{self.site_url}/plugins/{self.plugin_id}/api/v1"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            plugin_id=CONFIG["plugin_id"],
            site_url=CONFIG["site_url"],
            request_timeout=CONFIG["request_timeout"],
            storage_dir=CONFIG["storage_dir"],
        )
