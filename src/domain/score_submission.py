"""Score submission handling for the survey post action.

Validates the selected option and builds the post update that re-renders
the survey with the chosen score.
"""

import sys
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from src.domain.models import MAX_SCORE, MIN_SCORE, NO_SCORE, SCORE_RE
from src.ports.inbound import PostActionRequest
from src.ports.outbound import SurveyStorePort

SURVEY_POST_TYPE = "custom_nps_survey"
SURVEY_ACTION_ID = "nps_score"

FEEDBACK_PROMPT = (
    "Thanks for your response! If you have any additional feedback, "
    "reply to this message and it will be shared with the product team."
)


def _log(msg: str):
    print(msg, file=sys.stderr)


class InvalidScore(ValueError):
    """Raised when a selected option is not an integer in [0, 10]"""
    pass


class MissingContext(ValueError):
    """Raised when a post action request carries no selected option"""
    pass


def parse_score(value: Any) -> int:
    if not isinstance(value, str) or not value.strip():
        raise InvalidScore(f"score must be a non-empty string, got {value!r}")
    if not SCORE_RE.fullmatch(value.strip()):
        raise InvalidScore(f"score is not an integer: {value!r}")
    score = int(value.strip(), 10)
    if score < MIN_SCORE or score > MAX_SCORE:
        raise InvalidScore(f"score out of range: {score}")
    return score


def selected_option(request: PostActionRequest) -> Any:
    if not request.context or "selected_option" not in request.context:
        raise MissingContext("post action request has no selected_option")
    return request.context["selected_option"]


def survey_post_props(plugin_id: str, score: int = NO_SCORE) -> Dict[str, Any]:
    """Props of a survey post whose single action submits to the score route."""
    action: Dict[str, Any] = {
        "id": SURVEY_ACTION_ID,
        "name": "Select a score",
        "integration": {
            "url": f"/plugins/{plugin_id}/api/v1/score",
            "context": {},
        },
    }
    if score != NO_SCORE:
        action["default_option"] = str(score)
    return {"attachments": [{"actions": [action]}]}


class ScoreSubmissionHandler:
    """Applies a score post action against the survey store."""

    def __init__(
        self,
        store: SurveyStorePort,
        plugin_id: str,
        now: Optional[Callable[[], datetime]] = None,
    ):
        self._store = store
        self._plugin_id = plugin_id
        self._now = now or (lambda: datetime.now(timezone.utc))

    def _mark_answered(self, user_id: str) -> bool:
        """Store the answer time. Returns True only for a first answer."""
        try:
            state = self._store.get_user_state(user_id) or {}
            first_answer = not state.get("answered_at")
            if first_answer:
                state["answered_at"] = self._now().isoformat()
            state["last_score_at"] = self._now().isoformat()
            self._store.set_user_state(user_id, state)
            return first_answer
        except Exception as e:
            _log(f"[score] failed to mark survey answered for user={user_id}: {e}")
            return False

    def submit(self, request: PostActionRequest) -> Dict[str, Any]:
        """Handle a post action. Raises MissingContext / InvalidScore on bad input."""
        score = parse_score(selected_option(request))
        first_answer = self._mark_answered(request.user_id)
        _log(f"[score] user={request.user_id} post={request.post_id} score={score}")

        response: Dict[str, Any] = {
            "update": {
                "type": SURVEY_POST_TYPE,
                "props": survey_post_props(self._plugin_id, score),
            },
        }
        # Changing an earlier score does not ask for feedback again
        if first_answer:
            response["ephemeral_text"] = FEEDBACK_PROMPT
        return response
