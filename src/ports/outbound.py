"""Outbound ports — interfaces for host-application collaborators."""

from typing import Any, Callable, List, Mapping, Optional, Protocol, runtime_checkable

from src.domain.models import DirectoryUser, FetchResult

# Host post-action dispatch: (post_id, action_id, action_cookie, value) -> None
SubmitCallback = Callable[[str, str, str, str], None]

# Returns the session CSRF token, or "" when the session has none
SessionTokenProvider = Callable[[], str]


@runtime_checkable
class PluginAPIPort(Protocol):
    """Interface for the plugin's server API."""

    async def connected(self) -> FetchResult: ...


@runtime_checkable
class TextFormatterPort(Protocol):
    """Host text formatting utilities used to render the post message."""

    def format_text(self, message: str, options: Optional[Mapping[str, Any]] = None) -> Any: ...

    def message_html_to_component(self, fragment: Any) -> Any: ...


@runtime_checkable
class SurveyStorePort(Protocol):
    """Interface for persistent per-user survey state."""

    def get_user_state(self, user_id: str) -> Optional[dict]: ...
    def set_user_state(self, user_id: str, state: dict) -> None: ...


@runtime_checkable
class UserDirectoryPort(Protocol):
    """Paged user listing filtered by role."""

    def get_users(self, page: int, per_page: int, role: str) -> List[DirectoryUser]: ...
