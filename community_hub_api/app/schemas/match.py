"""
Pydantic models for compatibility matches.

Match results are derived on every query and never stored.
"""

from typing import List

from pydantic import Field

from .common import CamelModel
from .member import Member


class MatchResult(CamelModel):
    target_id: str
    candidate_id: str
    member: Member
    compatibility_score: int = Field(..., ge=0, le=100)
    shared_interests: List[str] = Field(default_factory=list)
    reasons_to_connect: List[str] = Field(default_factory=list, max_length=3)


class MemberMatches(CamelModel):
    member_id: str
    matches: List[MatchResult]
    matching_criteria: List[str]
