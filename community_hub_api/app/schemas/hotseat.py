"""
Pydantic models for hotseat sessions.

A hotseat is a scheduled group conversation with bounded capacity.
``HotseatCreate`` is the validated creation request; it has no
``participants`` or ``status`` fields, so anything a client sends under
those names is dropped before it reaches the coordinator.
``HotseatSession`` is the in-memory record and stores participants by
member id.  ``HotseatRead`` is the API view, where ids have been
resolved to display names.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


class SessionStatus(str, Enum):
    """Lifecycle ``scheduled -> starting_soon -> live -> ended``."""

    SCHEDULED = "scheduled"
    STARTING_SOON = "starting_soon"
    LIVE = "live"
    ENDED = "ended"


class HotseatBase(CamelModel):
    title: str = Field(..., min_length=1, examples=["Liberation Through Tech"])
    host: str = Field(..., min_length=1, examples=["Jordan"])
    topic: str = Field(..., min_length=1, examples=["Building community-owned digital platforms"])
    description: str = Field("", examples=["How can technology serve liberation?"])
    max_participants: int = Field(..., ge=1, examples=[6])
    start_time: datetime = Field(..., examples=["2026-10-18T18:00:00Z"])


class HotseatCreate(HotseatBase):
    """Schema for creating a hotseat session."""
    pass


class HotseatSession(HotseatBase):
    """A hotseat session as stored in the hotseat store."""

    id: str
    participant_ids: List[str] = Field(default_factory=list)
    status: SessionStatus = SessionStatus.SCHEDULED
    created_at: Optional[datetime] = None


class HotseatRead(HotseatBase):
    """Schema for reading a hotseat session from the API."""

    id: str
    participants: List[str]
    status: SessionStatus
    created_at: Optional[datetime] = None


class HotseatOverview(CamelModel):
    live_now: List[HotseatRead]
    starting_soon: List[HotseatRead]
    scheduled: List[HotseatRead]
    # Counts every stored session, whatever its status.
    total_active: int


class JoinRequest(CamelModel):
    member_id: str = Field(..., min_length=1, examples=["mem_001"])


class JoinResult(CamelModel):
    session_id: str
    member_name: str
    total_participants: int
    session: HotseatRead
