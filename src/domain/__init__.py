"""Domain layer — pure Python, no framework dependencies."""

from src.domain.models import (
    NO_SCORE,
    Attachment,
    DirectoryUser,
    FetchResult,
    Post,
    PostAction,
    ScoreLayout,
    ScoreWidget,
    SurveyView,
)
from src.domain.survey import SurveyPost, get_action, get_selected_score
from src.domain.score_submission import InvalidScore, ScoreSubmissionHandler, parse_score
from src.domain.survey_schedule import (
    ServerUpgrade,
    ServerVersion,
    get_admin_users,
    schedule_survey,
    should_schedule_survey,
    should_send_admin_notices,
)
from src.domain.ui_actions import (
    ActionType,
    connected,
    hide_confirmation_modal,
    show_confirmation_modal,
    window_resized,
)

__all__ = [
    "NO_SCORE",
    "Attachment",
    "DirectoryUser",
    "FetchResult",
    "Post",
    "PostAction",
    "ScoreLayout",
    "ScoreWidget",
    "SurveyView",
    "SurveyPost",
    "get_action",
    "get_selected_score",
    "InvalidScore",
    "ScoreSubmissionHandler",
    "parse_score",
    "ServerUpgrade",
    "ServerVersion",
    "get_admin_users",
    "schedule_survey",
    "should_schedule_survey",
    "should_send_admin_notices",
    "ActionType",
    "connected",
    "hide_confirmation_modal",
    "show_confirmation_modal",
    "window_resized",
]
