"""Session adapter — CSRF token from the session cookie."""

from src.adapters.session.cookies import CookieTokenProvider, get_csrf_from_cookie

__all__ = ["CookieTokenProvider", "get_csrf_from_cookie"]
