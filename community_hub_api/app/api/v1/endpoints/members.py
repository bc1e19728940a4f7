"""
Member endpoints for API v1.

Read-only routes over the member directory: the listing with presence
and the top compatibility matches for one member.
"""

from fastapi import APIRouter, Depends, Path

from community_hub_api.app.api.deps import get_member_service, raise_for_failure
from community_hub_api.app.core.errors import Failure
from community_hub_api.app.schemas.match import MemberMatches
from community_hub_api.app.schemas.member import ActiveMembers
from community_hub_api.app.services.member_service import MemberService


router = APIRouter()


@router.get("/", response_model=ActiveMembers)
async def get_active_members(
    service: MemberService = Depends(get_member_service),
) -> ActiveMembers:
    """List all members with their online status."""
    return service.get_active_members()


@router.get("/{member_id}/matches", response_model=MemberMatches)
async def find_member_matches(
    member_id: str = Path(..., description="ID of the member to match"),
    service: MemberService = Depends(get_member_service),
) -> MemberMatches:
    """Return the best matches for a member.

    Responds with 404 and ``code = member_not_found`` when the member
    does not exist.
    """
    result = service.find_member_matches(member_id)
    if isinstance(result, Failure):
        raise_for_failure(result)
    return result
