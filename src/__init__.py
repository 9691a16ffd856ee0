"""NPS Survey — chat post survey plugin package."""

from src.config import CONFIG, AppConfig
from src.adapters.http.client import Client
from src.adapters.session.cookies import CookieTokenProvider, get_csrf_from_cookie
from src.domain.models import FetchResult, Post
from src.domain.survey import SurveyPost
from src.plugin import Plugin, initialize

__all__ = [
    "CONFIG",
    "AppConfig",
    "Client",
    "CookieTokenProvider",
    "get_csrf_from_cookie",
    "FetchResult",
    "Post",
    "SurveyPost",
    "Plugin",
    "initialize",
]
