"""
Business logic for the member directory.

``MemberService`` answers the two member queries of the API: the
directory listing with derived presence, and the top matches for one
member.  Ranking itself is delegated to ``MatchingService``.
"""

import logging
from typing import Union

from ..core.errors import Failure
from ..core.store import MemberDirectory
from ..schemas.match import MemberMatches
from ..schemas.member import ActiveMembers, Member, MemberRead
from .matching_service import MatchingService

logger = logging.getLogger(__name__)


class MemberService:
    """Read-only queries over a ``MemberDirectory``."""

    def __init__(self, directory: MemberDirectory, match_limit: int = 3) -> None:
        self.directory = directory
        self.match_limit = match_limit

    def to_read(self, member: Member) -> MemberRead:
        return MemberRead(
            **member.model_dump(exclude={"last_active"}),
            is_online=self.directory.is_online(member),
            last_seen=member.last_active,
        )

    def get_active_members(self) -> ActiveMembers:
        """List every member with presence computed against the directory clock."""
        members = [self.to_read(member) for member in self.directory.all()]
        return ActiveMembers(
            total_members=len(members),
            online_now=sum(1 for member in members if member.is_online),
            members=members,
        )

    def find_member_matches(self, member_id: str) -> Union[MemberMatches, Failure]:
        """Top matches for ``member_id``, at most ``match_limit`` of them."""
        ranked = MatchingService.find_matches(member_id, self.directory.all())
        if isinstance(ranked, Failure):
            return ranked
        logger.debug("Ranked %d candidates for member %s", len(ranked), member_id)
        return MemberMatches(
            member_id=member_id,
            matches=ranked[: self.match_limit],
            matching_criteria=list(MatchingService.MATCHING_CRITERIA),
        )
