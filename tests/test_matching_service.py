# tests/test_matching_service.py
import unittest
import sys
import os

# Make the package and the shared helpers importable without installing
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from helpers import NOW, make_member
from community_hub_api.app.core.errors import ErrorKind, Failure
from community_hub_api.app.core.seed import seed_members
from community_hub_api.app.services.matching_service import MatchingService


class TestCompatibilityScore(unittest.TestCase):

    def setUp(self):
        self.marcus = make_member(
            "a",
            age=28,
            location="South London",
            interests=["music", "activism"],
            contributions=["Organized events", "Led workshop"],
        )
        self.riley = make_member(
            "b",
            age=30,
            location="London",
            interests=["music", "education"],
            contributions=["Mentored students"],
        )

    def test_reference_pair_scores_66(self):
        """Shared 20 + same area 30 + contributions 6 + age 10."""
        self.assertEqual(MatchingService.interest_factor(self.marcus, self.riley), 20)
        self.assertEqual(MatchingService.proximity_factor(self.marcus, self.riley), 30)
        self.assertAlmostEqual(MatchingService.contribution_factor(self.marcus, self.riley), 6)
        self.assertEqual(MatchingService.age_factor(self.marcus, self.riley), 10)
        self.assertEqual(MatchingService.calculate_compatibility_score(self.marcus, self.riley), 66)

    def test_score_is_deterministic_and_symmetric(self):
        first = MatchingService.calculate_compatibility_score(self.marcus, self.riley)
        for _ in range(5):
            self.assertEqual(MatchingService.calculate_compatibility_score(self.marcus, self.riley), first)
        self.assertEqual(MatchingService.calculate_compatibility_score(self.riley, self.marcus), first)

    def test_no_interests_does_not_divide_by_zero(self):
        a = make_member("a", interests=[])
        b = make_member("b", interests=[])
        self.assertEqual(MatchingService.interest_factor(a, b), 0)

    def test_region_bucket_gives_half_proximity(self):
        a = make_member("a", location="Leeds")
        b = make_member("b", location="Manchester")
        self.assertEqual(MatchingService.proximity_factor(a, b), 15)

    def test_region_match_is_case_insensitive(self):
        a = make_member("a", location="BRISTOL")
        b = make_member("b", location="brighton")
        self.assertTrue(MatchingService.is_same_region(a.location, b.location))

    def test_different_regions_give_no_proximity(self):
        a = make_member("a", location="Birmingham")
        b = make_member("b", location="South London")
        self.assertEqual(MatchingService.proximity_factor(a, b), 0)

    def test_location_in_two_buckets_matches_either(self):
        a = make_member("a", location="Leeds and Bristol")
        b = make_member("b", location="Brighton")
        c = make_member("c", location="Liverpool")
        self.assertEqual(MatchingService.proximity_factor(a, b), 15)
        self.assertEqual(MatchingService.proximity_factor(a, c), 15)
        self.assertEqual(MatchingService.proximity_factor(b, c), 0)

    def test_empty_location_never_counts_as_same_area(self):
        self.assertFalse(MatchingService.is_same_area("", "London"))
        self.assertFalse(MatchingService.is_same_area("London", ""))
        self.assertFalse(MatchingService.is_same_area("", ""))

    def test_whitespace_location_is_compared_as_given(self):
        self.assertFalse(MatchingService.is_same_area("  ", "London"))
        self.assertTrue(MatchingService.is_same_area(" ", "South London"))

    def test_contribution_factor_caps_at_weight(self):
        a = make_member("a", contributions=[f"c{i}" for i in range(9)])
        b = make_member("b", contributions=[f"c{i}" for i in range(7)])
        self.assertEqual(MatchingService.contribution_factor(a, b), 20)

    def test_age_tiers(self):
        base = make_member("a", age=30)
        self.assertEqual(MatchingService.age_factor(base, make_member("b", age=33)), 10)
        self.assertEqual(MatchingService.age_factor(base, make_member("b", age=37)), 5)
        self.assertEqual(MatchingService.age_factor(base, make_member("b", age=38)), 0)

    def test_score_rounds_half_up(self):
        # 3 of 16 interests shared: 3/16 * 40 = 7.5, every other factor 0
        interests_a = [f"i{i}" for i in range(16)]
        interests_b = interests_a[:3] + [f"x{i}" for i in range(13)]
        a = make_member("a", age=20, interests=interests_a)
        b = make_member("b", age=50, interests=interests_b)
        self.assertEqual(MatchingService.interest_factor(a, b), 7.5)
        self.assertEqual(MatchingService.calculate_compatibility_score(a, b), 8)

    def test_score_stays_within_bounds(self):
        a = make_member("a", location="Leeds", interests=["x"], contributions=["c"] * 10)
        b = make_member("b", location="Leeds", interests=["x"], contributions=["c"] * 10)
        self.assertEqual(MatchingService.calculate_compatibility_score(a, b), 100)


class TestConnectionReasons(unittest.TestCase):

    def test_reasons_follow_priority_and_cap_at_three(self):
        a = make_member("a", age=30, location="London", interests=["music", "art"], contributions=["1", "2", "3"])
        b = make_member("b", age=31, location="London", interests=["art", "music"], contributions=["1", "2", "3"])
        reasons = MatchingService.generate_connection_reasons(a, b)
        self.assertEqual(
            reasons,
            [
                "Both passionate about music and art",
                "Same local area - could meet up in person",
                "Both active contributors to the community",
            ],
        )

    def test_region_bucket_alone_is_not_same_area(self):
        a = make_member("a", age=20, location="Leeds")
        b = make_member("b", age=40, location="Manchester")
        self.assertEqual(MatchingService.generate_connection_reasons(a, b), [])

    def test_similar_life_stage(self):
        a = make_member("a", age=25)
        b = make_member("b", age=30)
        self.assertEqual(MatchingService.generate_connection_reasons(a, b), ["Similar life stage and experiences"])


class TestFindMatches(unittest.TestCase):

    def setUp(self):
        self.pool = seed_members(NOW)

    def test_target_is_never_its_own_match(self):
        for member in self.pool:
            matches = MatchingService.find_matches(member.id, self.pool)
            self.assertNotIn(member.id, [m.candidate_id for m in matches])
            self.assertEqual(len(matches), len(self.pool) - 1)

    def test_results_sorted_descending_with_stable_ties(self):
        matches = MatchingService.find_matches("mem_001", self.pool)
        # Kai and Devon both score 18 against Marcus; Kai was seeded first.
        self.assertEqual([m.candidate_id for m in matches], ["mem_003", "mem_004", "mem_002"])
        self.assertEqual([m.compatibility_score for m in matches], [18, 18, 13])

    def test_northern_members_rank_each_other_first(self):
        matches = MatchingService.find_matches("mem_003", self.pool)
        self.assertEqual([m.candidate_id for m in matches], ["mem_002", "mem_004", "mem_001"])
        self.assertEqual([m.compatibility_score for m in matches], [28, 28, 18])

    def test_ties_keep_pool_order(self):
        target = make_member("t")
        clones = [make_member(f"c{i}") for i in range(4)]
        matches = MatchingService.find_matches("t", [clones[0], target] + clones[1:])
        self.assertEqual([m.candidate_id for m in matches], ["c0", "c1", "c2", "c3"])

    def test_unknown_target_is_not_found(self):
        result = MatchingService.find_matches("nonexistent", self.pool)
        self.assertIsInstance(result, Failure)
        self.assertEqual(result.kind, ErrorKind.NOT_FOUND)
        self.assertEqual(result.code, "member_not_found")

    def test_shared_interests_are_subset_of_both(self):
        a = make_member("a", interests=["music", "activism", "art"])
        b = make_member("b", interests=["art", "music"])
        match = MatchingService.build_match(a, b)
        self.assertEqual(match.shared_interests, ["music", "art"])
        self.assertEqual(match.target_id, "a")
        self.assertEqual(match.candidate_id, "b")


if __name__ == '__main__':
    unittest.main()
