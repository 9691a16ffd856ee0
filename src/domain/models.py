"""Domain data models — pure Python dataclasses."""

import re
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Optional

MIN_SCORE = 0
MAX_SCORE = 10
# Sentinel for "no score highlighted"
NO_SCORE = -1
# ASCII digits only: int() alone would also take "1_0" and full-width digits
SCORE_RE = re.compile(r"[+-]?[0-9]+")


def _as_mapping(value: Any) -> Mapping:
    return value if isinstance(value, Mapping) else {}


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


@dataclass
class PostAction:
    """Interactive action registered on a post attachment."""

    id: str
    cookie: str = ""
    default_option: Optional[str] = None  # string-encoded score

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["PostAction"]:
        if not isinstance(raw, Mapping):
            return None
        return cls(
            id=_as_optional_str(raw.get("id")) or "",
            cookie=_as_optional_str(raw.get("cookie")) or "",
            default_option=_as_optional_str(raw.get("default_option")),
        )


@dataclass
class Attachment:
    # Malformed entries stay in place as None so positions are preserved
    actions: List[Optional[PostAction]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any) -> "Attachment":
        if not isinstance(raw, Mapping):
            return cls()
        return cls(actions=[PostAction.from_dict(a) for a in _as_list(raw.get("actions"))])

    def first_action(self) -> Optional[PostAction]:
        return self.actions[0] if self.actions else None


@dataclass
class Post:
    """Chat post as delivered by the host. Never mutated here."""

    id: str
    message: str = ""
    attachments: List[Attachment] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any) -> Optional["Post"]:
        """Build a Post from the host's JSON payload.

        Malformed levels (non-dict props, non-list attachments, non-dict
        attachment or action entries) read as empty instead of raising.
        """
        if not isinstance(raw, Mapping):
            return None
        props = _as_mapping(raw.get("props"))
        attachments = [Attachment.from_dict(a) for a in _as_list(props.get("attachments"))]
        return cls(
            id=_as_optional_str(raw.get("id")) or "",
            message=_as_optional_str(raw.get("message")) or "",
            attachments=attachments,
        )

    def first_action(self) -> Optional[PostAction]:
        if not self.attachments:
            return None
        return self.attachments[0].first_action()


@dataclass(frozen=True)
class FetchResult:
    """Outcome of an API request: exactly one of data / error is set.

    Use FetchResult.ok() / FetchResult.fail() rather than the constructor.
    """

    data: Any = None
    error: Optional[BaseException] = None
    success: bool = True

    @classmethod
    def ok(cls, data: Any) -> "FetchResult":
        return cls(data=data, error=None, success=True)

    @classmethod
    def fail(cls, error: BaseException) -> "FetchResult":
        return cls(data=None, error=error, success=False)


@dataclass
class ScoreWidget:
    """One button of the 0–10 score row."""

    score: int
    selected: bool
    is_small: bool
    select_score: Callable[[int], None]

    def activate(self) -> None:
        self.select_score(self.score)


@dataclass
class ScoreLayout:
    container_width: int
    line_height: int
    is_small: bool


@dataclass
class SurveyView:
    """Rendered survey post ready for the host to draw."""

    message: Any
    title: str
    low_label: str
    high_label: str
    layout: ScoreLayout
    scores: List[ScoreWidget]

    @property
    def selected_scores(self) -> List[int]:
        return [w.score for w in self.scores if w.selected]


@dataclass
class DirectoryUser:
    """A user account as listed by the host's user directory."""

    id: str
    email: str = ""
    roles: str = ""  # space separated role ids
    delete_at: int = 0  # epoch millis, non-zero once deactivated

    @property
    def is_active(self) -> bool:
        return self.delete_at <= 0
