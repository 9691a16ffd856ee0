"""Survey post rendering — derives the 0–10 score row from a post payload.

Pure Python, no framework dependencies. Posts may arrive as host dicts or as
already-built Post instances; malformed payloads render as an unselected
picker instead of raising.
"""

from typing import Any, Mapping, Optional, Union

from src.domain.models import (
    MAX_SCORE,
    MIN_SCORE,
    NO_SCORE,
    SCORE_RE,
    Post,
    PostAction,
    ScoreLayout,
    ScoreWidget,
    SurveyView,
)
from src.ports.outbound import SubmitCallback, TextFormatterPort

SURVEY_TITLE = "How likely are you to recommend Mattermost?"
LOW_SCORE_LABEL = "Not Likely"
HIGH_SCORE_LABEL = "Very Likely"

SCORE_SIZE = 32
SCORE_SIZE_SMALL = 24
SCORE_MARGIN = 8
SCORE_COUNT = MAX_SCORE - MIN_SCORE + 1

PostLike = Union[Post, Mapping[str, Any], None]


def _to_post(post: PostLike) -> Optional[Post]:
    if isinstance(post, Post):
        return post
    return Post.from_dict(post)


def get_action(post: PostLike) -> Optional[PostAction]:
    """Return the first action of the first attachment, or None."""
    parsed = _to_post(post)
    if parsed is None:
        return None
    return parsed.first_action()


def parse_default_option(value: Optional[str]) -> int:
    """Parse a default_option string to a score, NO_SCORE if not a valid one."""
    if not value or not SCORE_RE.fullmatch(value.strip()):
        return NO_SCORE
    score = int(value.strip(), 10)
    if score < MIN_SCORE or score > MAX_SCORE:
        return NO_SCORE
    return score


def get_selected_score(post: PostLike) -> int:
    action = get_action(post)
    if action is None:
        return NO_SCORE
    return parse_default_option(action.default_option)


def score_layout(is_small: bool) -> ScoreLayout:
    if is_small:
        return ScoreLayout(
            container_width=SCORE_SIZE_SMALL * SCORE_COUNT,
            line_height=SCORE_SIZE_SMALL,
            is_small=True,
        )
    # All 11 buttons plus the margins between them
    return ScoreLayout(
        container_width=SCORE_SIZE * SCORE_COUNT + SCORE_MARGIN * (SCORE_COUNT - 1),
        line_height=SCORE_SIZE,
        is_small=False,
    )


class SurveyPost:
    """Renders an NPS survey post and forwards score selections to the host.

    Nothing is cached between renders: the selected score is always read
    back from the post's action default_option.
    """

    def __init__(
        self,
        post: PostLike,
        theme: Optional[Mapping[str, Any]],
        is_small: bool,
        submit: SubmitCallback,
        formatter: Optional[TextFormatterPort] = None,
    ):
        self.post = _to_post(post)
        self.theme = theme or {}
        self.is_small = is_small
        self._submit = submit
        self._formatter = formatter

    def get_action(self) -> Optional[PostAction]:
        return get_action(self.post)

    def get_selected_score(self) -> int:
        return get_selected_score(self.post)

    def select_score(self, score: int) -> None:
        action = self.get_action()
        if action is None or self.post is None:
            return
        self._submit(self.post.id, action.id, action.cookie, str(score))

    def render_message(self) -> Any:
        message = self.post.message if self.post else ""
        if self._formatter is None:
            return message
        fragment = self._formatter.format_text(message, {"at_mentions": True})
        return self._formatter.message_html_to_component(fragment)

    def render_scores(self) -> list:
        selected_score = self.get_selected_score()
        return [
            ScoreWidget(
                score=i,
                selected=i == selected_score,
                is_small=self.is_small,
                select_score=self.select_score,
            )
            for i in range(MIN_SCORE, MAX_SCORE + 1)
        ]

    def render(self) -> SurveyView:
        return SurveyView(
            message=self.render_message(),
            title=SURVEY_TITLE,
            low_label=LOW_SCORE_LABEL,
            high_label=HIGH_SCORE_LABEL,
            layout=score_layout(self.is_small),
            scores=self.render_scores(),
        )
