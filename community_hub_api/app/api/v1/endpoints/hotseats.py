"""
Hotseat endpoints for API v1.

These routes list, create and join hotseat sessions.  They rely on the
``HotseatService`` for capacity checks and participant bookkeeping and
map its failures to HTTP status codes (404 for unknown session or
member, 409 for a full session).
"""

from fastapi import APIRouter, Depends, Path, status

from community_hub_api.app.api.deps import get_hotseat_service, raise_for_failure
from community_hub_api.app.core.errors import Failure
from community_hub_api.app.schemas.hotseat import (
    HotseatCreate,
    HotseatOverview,
    HotseatRead,
    JoinRequest,
    JoinResult,
)
from community_hub_api.app.services.hotseat_service import HotseatService


router = APIRouter()


@router.get("/", response_model=HotseatOverview)
async def get_current_hotseats(
    service: HotseatService = Depends(get_hotseat_service),
) -> HotseatOverview:
    """Return sessions grouped into live, starting soon and scheduled."""
    return service.list_sessions()


@router.post("/", response_model=HotseatRead, status_code=status.HTTP_201_CREATED)
async def create_hotseat_session(
    data: HotseatCreate,
    service: HotseatService = Depends(get_hotseat_service),
) -> HotseatRead:
    """Create a new hotseat session.

    The session always starts ``scheduled`` with no participants.  Each
    call creates a new session, so clients should not retry blindly.
    """
    session = service.create_session(data)
    return service.to_read(session)


@router.post("/{session_id}/join", response_model=JoinResult)
async def join_hotseat_session(
    payload: JoinRequest,
    session_id: str = Path(..., description="ID of the hotseat to join"),
    service: HotseatService = Depends(get_hotseat_service),
) -> JoinResult:
    """Join a hotseat session.

    Joining a session you are already in succeeds without changes.
    """
    result = service.join_session(session_id, payload.member_id)
    if isinstance(result, Failure):
        raise_for_failure(result)
    return result
