"""
Business logic for hotseat sessions.

``HotseatService`` is the only writer of the ``HotseatStore``.  It
creates sessions and adds participants while keeping two invariants:

* a session never holds more than ``max_participants`` members;
* a member appears at most once in a session.

Sessions store member ids.  Display names are resolved from the
member directory only when a session is turned into a ``HotseatRead``.
Expected failures (unknown session, unknown member, full session) are
returned as ``Failure`` values, not raised.
"""

import logging
from typing import Dict, List, Union
from uuid import uuid4

from ..core.errors import Failure
from ..core.store import Clock, HotseatStore, MemberDirectory, utc_now
from ..schemas.hotseat import (
    HotseatCreate,
    HotseatOverview,
    HotseatRead,
    HotseatSession,
    JoinResult,
    SessionStatus,
)

logger = logging.getLogger(__name__)


class HotseatService:
    """Coordinator for hotseat lifecycle and capacity."""

    def __init__(self, store: HotseatStore, directory: MemberDirectory, clock: Clock = utc_now) -> None:
        self.store = store
        self.directory = directory
        self.clock = clock

    def to_read(self, session: HotseatSession) -> HotseatRead:
        participants: List[str] = []
        for member_id in session.participant_ids:
            member = self.directory.get(member_id)
            participants.append(member.name if member else member_id)
        return HotseatRead(
            **session.model_dump(exclude={"participant_ids"}),
            participants=participants,
        )

    def list_sessions(self) -> HotseatOverview:
        """Partition all sessions by status.

        ``total_active`` counts every stored session, ended ones
        included.
        """
        sessions = self.store.all()
        by_status: Dict[SessionStatus, List[HotseatRead]] = {status: [] for status in SessionStatus}
        for session in sessions:
            by_status[session.status].append(self.to_read(session))
        return HotseatOverview(
            live_now=by_status[SessionStatus.LIVE],
            starting_soon=by_status[SessionStatus.STARTING_SOON],
            scheduled=by_status[SessionStatus.SCHEDULED],
            total_active=len(sessions),
        )

    def _new_session_id(self) -> str:
        session_id = f"hotseat_{uuid4().hex[:12]}"
        while session_id in self.store:
            logger.warning("Hotseat id collision detected, regenerating: %s", session_id)
            session_id = f"hotseat_{uuid4().hex[:12]}"
        return session_id

    def create_session(self, data: HotseatCreate) -> HotseatSession:
        """Create a scheduled session with no participants.

        Every call allocates a new id, so retrying a create produces a
        second session.
        """
        session = HotseatSession(
            **data.model_dump(),
            id=self._new_session_id(),
            participant_ids=[],
            status=SessionStatus.SCHEDULED,
            created_at=self.clock(),
        )
        self.store.add(session)
        logger.info("Created hotseat %s '%s' hosted by %s", session.id, session.title, session.host)
        return session

    def join_session(self, session_id: str, member_id: str) -> Union[JoinResult, Failure]:
        """Add ``member_id`` to a session.

        Checks run in this order: the session exists, the member exists,
        the member is already in (success, nothing changes), the session
        has room.  The membership check and the append happen under the
        session's lock.
        """
        session = self.store.get(session_id)
        if session is None:
            logger.info("Join rejected: session %s not found", session_id)
            return Failure.session_not_found(session_id)

        member = self.directory.get(member_id)
        if member is None:
            logger.info("Join rejected: member %s not found", member_id)
            return Failure.member_not_found(member_id)

        with self.store.locks.hold(session_id):
            if member.id not in session.participant_ids:
                if len(session.participant_ids) >= session.max_participants:
                    logger.warning(
                        "Join rejected: hotseat %s is full (%d/%d)",
                        session_id,
                        len(session.participant_ids),
                        session.max_participants,
                    )
                    return Failure.session_full(session_id, session.max_participants)
                session.participant_ids.append(member.id)
                logger.info("Member %s joined hotseat %s", member.id, session_id)
            return JoinResult(
                session_id=session_id,
                member_name=member.name,
                total_participants=len(session.participant_ids),
                session=self.to_read(session),
            )
