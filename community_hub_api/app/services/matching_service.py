"""
Member matching engine.

Scores every pair of members with a weighted heuristic and ranks the
candidates of a target member.  The score is an integer in [0, 100]:

=====================  ======  =============================================
Factor                 Weight  Computation
=====================  ======  =============================================
Shared interests       40      ``|A & B| / max(|A|, |B|, 1)``
Geographic proximity   30      30 same area, 15 same region bucket, else 0
Contribution level     20      ``min(avg contribution count / 5, 1)``
Age proximity          10      10 within 3 years, 5 within 7, else 0
=====================  ======  =============================================

The engine holds no state and never touches the member directory
itself; callers pass the candidate pool.  Nothing here is random, so
the same profiles always produce the same score.
"""

import logging
import math
from typing import Dict, List, Sequence, Tuple, Union

from ..core.errors import Failure
from ..schemas.match import MatchResult
from ..schemas.member import Member

logger = logging.getLogger(__name__)


class MatchingService:
    """Compatibility scoring and ranking for community members."""

    INTEREST_WEIGHT = 40
    PROXIMITY_WEIGHT = 30
    NEARBY_WEIGHT = 15
    CONTRIBUTION_WEIGHT = 20
    CONTRIBUTION_CEILING = 5
    MAX_REASONS = 3

    # Coarse fallback when two locations do not contain each other.
    REGION_BUCKETS: Dict[str, Tuple[str, ...]] = {
        "northern": ("manchester", "leeds", "liverpool", "birmingham"),
        "southern": ("london", "brighton", "bristol"),
    }

    MATCHING_CRITERIA = [
        "shared interests",
        "geographic proximity",
        "community contributions",
    ]

    @classmethod
    def find_shared_interests(cls, member1: Member, member2: Member) -> List[str]:
        """Interests of ``member1`` that ``member2`` also has, in ``member1``'s order."""
        other = set(member2.interests)
        return [interest for interest in member1.interests if interest in other]

    @classmethod
    def is_same_area(cls, location1: str, location2: str) -> bool:
        """Case-insensitive substring containment in either direction.

        An empty location never matches, since the empty string is
        contained in every place name.  Whitespace is compared as given.
        """
        loc1 = location1.lower()
        loc2 = location2.lower()
        if not loc1 or not loc2:
            return False
        return loc1 in loc2 or loc2 in loc1

    @classmethod
    def is_same_region(cls, location1: str, location2: str) -> bool:
        """True when some bucket names a place found in both locations.

        Each bucket is checked on its own, so a location mentioning places
        from two buckets belongs to both.
        """
        loc1 = location1.lower()
        loc2 = location2.lower()
        return any(
            any(place in loc1 for place in places) and any(place in loc2 for place in places)
            for places in cls.REGION_BUCKETS.values()
        )

    @classmethod
    def interest_factor(cls, member1: Member, member2: Member) -> float:
        shared = cls.find_shared_interests(member1, member2)
        denominator = max(len(member1.interests), len(member2.interests), 1)
        return len(shared) / denominator * cls.INTEREST_WEIGHT

    @classmethod
    def proximity_factor(cls, member1: Member, member2: Member) -> float:
        if cls.is_same_area(member1.location, member2.location):
            return cls.PROXIMITY_WEIGHT
        if cls.is_same_region(member1.location, member2.location):
            return cls.NEARBY_WEIGHT
        return 0

    @classmethod
    def contribution_factor(cls, member1: Member, member2: Member) -> float:
        average = (len(member1.contributions) + len(member2.contributions)) / 2
        return min(average / cls.CONTRIBUTION_CEILING, 1) * cls.CONTRIBUTION_WEIGHT

    @classmethod
    def age_factor(cls, member1: Member, member2: Member) -> float:
        age_diff = abs(member1.age - member2.age)
        if age_diff <= 3:
            return 10
        if age_diff <= 7:
            return 5
        return 0

    @classmethod
    def calculate_compatibility_score(cls, member1: Member, member2: Member) -> int:
        score = (
            cls.interest_factor(member1, member2)
            + cls.proximity_factor(member1, member2)
            + cls.contribution_factor(member1, member2)
            + cls.age_factor(member1, member2)
        )
        # Half up, not banker's rounding.
        return int(math.floor(score + 0.5))

    @classmethod
    def generate_connection_reasons(cls, member1: Member, member2: Member) -> List[str]:
        """Up to three reasons, checked in a fixed priority order."""
        reasons: List[str] = []
        shared = cls.find_shared_interests(member1, member2)
        if shared:
            reasons.append(f"Both passionate about {' and '.join(shared)}")
        if cls.is_same_area(member1.location, member2.location):
            reasons.append("Same local area - could meet up in person")
        if len(member1.contributions) > 2 and len(member2.contributions) > 2:
            reasons.append("Both active contributors to the community")
        if abs(member1.age - member2.age) <= 5:
            reasons.append("Similar life stage and experiences")
        return reasons[: cls.MAX_REASONS]

    @classmethod
    def build_match(cls, target: Member, candidate: Member) -> MatchResult:
        return MatchResult(
            target_id=target.id,
            candidate_id=candidate.id,
            member=candidate,
            compatibility_score=cls.calculate_compatibility_score(target, candidate),
            shared_interests=cls.find_shared_interests(target, candidate),
            reasons_to_connect=cls.generate_connection_reasons(target, candidate),
        )

    @classmethod
    def find_matches(cls, target_id: str, pool: Sequence[Member]) -> Union[List[MatchResult], Failure]:
        """Rank every other member of ``pool`` against ``target_id``.

        Results are sorted by descending score.  The sort is stable, so
        equal scores keep the candidates' order in ``pool``.  Returns a
        ``not_found`` failure when the target is not part of the pool.
        """
        target = next((member for member in pool if member.id == target_id), None)
        if target is None:
            logger.info("Match request for unknown member %s", target_id)
            return Failure.member_not_found(target_id)

        matches = [cls.build_match(target, candidate) for candidate in pool if candidate.id != target.id]
        matches.sort(key=lambda match: match.compatibility_score, reverse=True)
        return matches
