"""Port interfaces (Hexagonal Architecture)."""

from src.ports.inbound import PostActionRequest
from src.ports.outbound import (
    PluginAPIPort,
    SessionTokenProvider,
    SubmitCallback,
    SurveyStorePort,
    TextFormatterPort,
    UserDirectoryPort,
)

__all__ = [
    "PostActionRequest",
    "PluginAPIPort",
    "SessionTokenProvider",
    "SubmitCallback",
    "SurveyStorePort",
    "TextFormatterPort",
    "UserDirectoryPort",
]
