"""Plugin server API routes (handshake + survey score post action)."""

import json
import sys
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from pydantic import BaseModel, ValidationError

from src.adapters.storage.json_store import JsonSurveyStore
from src.config import CONFIG
from src.domain.score_submission import InvalidScore, MissingContext, ScoreSubmissionHandler
from src.ports.inbound import PostActionRequest

USER_ID_HEADER = "Mattermost-User-ID"

plugin_router = APIRouter(prefix=f"/plugins/{CONFIG['plugin_id']}/api/v1", tags=["NPS"])

score_handler = ScoreSubmissionHandler(
    JsonSurveyStore(CONFIG["storage_dir"]),
    plugin_id=CONFIG["plugin_id"],
)


def _log(msg: str):
    print(msg, file=sys.stderr)


def requires_user_id(user_id: Optional[str] = Header(None, alias=USER_ID_HEADER)) -> str:
    """Return the authenticated user id set by the host, 401 when missing."""
    if not user_id:
        raise HTTPException(status_code=401, detail="Not authorized")
    return user_id


class PostActionIntegrationRequest(BaseModel):
    user_id: str = ""
    post_id: str = ""
    channel_id: str = ""
    team_id: str = ""
    context: Optional[Dict[str, Any]] = None


class PostActionIntegrationResponse(BaseModel):
    update: Optional[Dict[str, Any]] = None
    ephemeral_text: Optional[str] = None


class ConnectedResponse(BaseModel):
    status: str


async def _read_post_action(request: Request) -> PostActionIntegrationRequest:
    body = await request.body()
    if not body:
        _log("[routes] score request has an empty body")
        raise HTTPException(status_code=400, detail="Missing request body")
    try:
        return PostActionIntegrationRequest.model_validate(json.loads(body))
    except (ValueError, ValidationError) as e:
        _log(f"[routes] failed to decode score request: {e}")
        raise HTTPException(status_code=400, detail="Invalid request body")


@plugin_router.post("/connected", response_model=ConnectedResponse)
async def connected(user_id: str = Depends(requires_user_id)):
    _log(f"[routes] client connected: user={user_id}")
    return ConnectedResponse(status="OK")


@plugin_router.post(
    "/score",
    response_model=PostActionIntegrationResponse,
    response_model_exclude_none=True,
)
async def submit_score(request: Request, user_id: str = Depends(requires_user_id)):
    payload = await _read_post_action(request)

    action = PostActionRequest(
        user_id=user_id,
        post_id=payload.post_id,
        context=payload.context or {},
    )
    try:
        result = score_handler.submit(action)
    except (MissingContext, InvalidScore) as e:
        _log(f"[routes] rejected score from user={user_id}: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    return PostActionIntegrationResponse(**result)
