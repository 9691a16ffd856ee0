"""Inbound port — post action request as sent by the host server."""

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class PostActionRequest:
    """Host-agnostic representation of a post action integration call."""

    user_id: str
    post_id: str = ""
    context: Dict[str, Any] = field(default_factory=dict)
