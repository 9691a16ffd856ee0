"""Session cookie adapter — supplies the CSRF token to the API client."""

from typing import Optional

CSRF_COOKIE_PREFIX = "MMCSRF="


def get_csrf_from_cookie(cookie_string: Optional[str]) -> str:
    """Return the MMCSRF token from a cookie header string, "" if absent."""
    if not cookie_string:
        return ""
    for cookie in (c.strip() for c in cookie_string.split(";")):
        if cookie.startswith(CSRF_COOKIE_PREFIX):
            return cookie[len(CSRF_COOKIE_PREFIX):]
    return ""


class CookieTokenProvider:
    """SessionTokenProvider backed by a cookie header string."""

    def __init__(self, cookie_string: Optional[str] = ""):
        self._cookie_string = cookie_string or ""

    def __call__(self) -> str:
        return get_csrf_from_cookie(self._cookie_string)
