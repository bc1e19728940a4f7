"""
In-memory storage for members and hotseat sessions.

The service keeps no state beyond the process lifetime.  Both stores
are ordinary objects built once by ``create_app`` (or by a test) and
handed to the services that use them; there are no module-level
singletons.  Insertion order is preserved, which the matching engine
relies on for tie-breaking.
"""

import logging
import threading
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Iterable, List, Optional

from .locks import KeyedLocks
from ..schemas.hotseat import HotseatSession
from ..schemas.member import Member

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MemberDirectory:
    """Directory of member profiles keyed by id.

    Presence is derived: a member is online when ``last_active`` lies
    within ``online_window`` of the directory clock.  Inject a fixed
    clock in tests to make it deterministic.
    """

    def __init__(
        self,
        members: Iterable[Member] = (),
        clock: Clock = utc_now,
        online_window: timedelta = timedelta(minutes=15),
    ) -> None:
        self._members: Dict[str, Member] = {}
        self.clock = clock
        self.online_window = online_window
        for member in members:
            self.add(member)

    def add(self, member: Member) -> None:
        if member.id in self._members:
            raise ValueError(f"Duplicate member id {member.id}")
        self._members[member.id] = member

    def get(self, member_id: str) -> Optional[Member]:
        return self._members.get(member_id)

    def all(self) -> List[Member]:
        return list(self._members.values())

    def is_online(self, member: Member) -> bool:
        return self.clock() - member.last_active <= self.online_window

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member_id: object) -> bool:
        return member_id in self._members


class HotseatStore:
    """Canonical list of hotseat sessions.

    ``locks`` hands out one lock per session id; the coordinator holds
    it around every check-then-mutate sequence on that session.
    """

    def __init__(self, sessions: Iterable[HotseatSession] = ()) -> None:
        self._sessions: Dict[str, HotseatSession] = {}
        self._write_lock = threading.Lock()
        self.locks = KeyedLocks()
        for session in sessions:
            self.add(session)

    def add(self, session: HotseatSession) -> None:
        with self._write_lock:
            if session.id in self._sessions:
                raise ValueError(f"Duplicate session id {session.id}")
            self._sessions[session.id] = session
        logger.debug("Stored hotseat %s", session.id)

    def get(self, session_id: str) -> Optional[HotseatSession]:
        return self._sessions.get(session_id)

    def all(self) -> List[HotseatSession]:
        with self._write_lock:
            return list(self._sessions.values())

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions
