"""
test_validation.py — Cross-checks against the naive baselines

Randomized alignments are compared against plain-list DP scores and
run through check_alignment_validity under several scoring schemes.
"""

import dataclasses

import pytest

from dpalign.aligners import needleman_wunsch, smith_waterman
from dpalign.validation import (
    check_alignment_validity,
    nw_score_naive,
    path_to_alignment,
    recompute_identity,
    replay_trace,
    score_alignment,
    sw_score_naive,
    traceback_start,
)


class TestNaiveBaselines:
    """Engine scores agree with the textbook recurrences."""

    def test_global_matches_naive(self, rng, random_dna_factory, any_scoring):
        for _ in range(15):
            n = int(rng.integers(1, 20))
            m = int(rng.integers(1, 20))
            X = random_dna_factory(n, rng)
            Y = random_dna_factory(m, rng)
            result = needleman_wunsch(X, Y, any_scoring)
            assert result.score == nw_score_naive(X, Y, any_scoring)

    def test_local_matches_naive(self, rng_alt, random_dna_factory, any_scoring):
        for _ in range(15):
            n = int(rng_alt.integers(1, 20))
            m = int(rng_alt.integers(1, 20))
            X = random_dna_factory(n, rng_alt)
            Y = random_dna_factory(m, rng_alt)
            result = smith_waterman(X, Y, any_scoring)
            assert result.score == sw_score_naive(X, Y, any_scoring)

    def test_naive_known_values(self, unit_scoring):
        assert nw_score_naive("ACGT", "AC", unit_scoring) == 0
        assert nw_score_naive("AC", "GT", unit_scoring) == -2
        assert sw_score_naive("TTACGTT", "GGACGAA", unit_scoring) == 3
        assert sw_score_naive("AC", "GT", unit_scoring) == 0


class TestValidity:
    """check_alignment_validity on real and tampered results."""

    @pytest.mark.parametrize("align_fn", [needleman_wunsch, smith_waterman])
    def test_random_results_are_valid(self, align_fn, rng, random_dna_factory, any_scoring):
        for _ in range(10):
            X = random_dna_factory(int(rng.integers(1, 16)), rng)
            Y = random_dna_factory(int(rng.integers(1, 16)), rng)
            result = align_fn(X, Y, any_scoring)
            valid, msg = check_alignment_validity(result)
            assert valid, msg

    def test_score_tampering_detected(self, unit_scoring):
        result = needleman_wunsch("GATTACA", "GCATGCA", unit_scoring)
        bad = dataclasses.replace(result, score=result.score + 1)
        valid, msg = check_alignment_validity(bad)
        assert not valid
        assert "Score mismatch" in msg

    def test_identity_tampering_detected(self, unit_scoring):
        result = needleman_wunsch("GATTACA", "GCATGCA", unit_scoring)
        bad = dataclasses.replace(result, identity=result.identity + 0.5)
        valid, msg = check_alignment_validity(bad)
        assert not valid
        assert "Identity mismatch" in msg

    def test_length_mismatch_detected(self, unit_scoring):
        result = needleman_wunsch("ACGT", "AC", unit_scoring)
        bad = dataclasses.replace(result, aligned_seq2="AC-")
        valid, msg = check_alignment_validity(bad)
        assert not valid
        assert "Length mismatch" in msg

    def test_double_gap_detected(self, unit_scoring):
        result = needleman_wunsch("ACGT", "AC", unit_scoring)
        bad = dataclasses.replace(result, aligned_seq1="ACG-", aligned_seq2="AC--")
        valid, msg = check_alignment_validity(bad)
        assert not valid
        assert "Double gap" in msg

    def test_path_tampering_detected(self, unit_scoring):
        result = needleman_wunsch("ACGT", "AC", unit_scoring)
        bad = dataclasses.replace(result, path=((0, 0), (1, 0), (2, 1), (3, 2), (4, 2)))
        valid, msg = check_alignment_validity(bad)
        assert not valid
        assert "Replaying trace" in msg

    def test_empty_local_result_is_valid(self, unit_scoring):
        valid, msg = check_alignment_validity(smith_waterman("AC", "GT", unit_scoring))
        assert valid, msg


class TestRecomputation:
    """Helpers that derive quantities from aligned strings and paths."""

    def test_score_alignment(self, unit_scoring, default_scoring):
        assert score_alignment("ACGT", "AC--", unit_scoring) == 0
        assert score_alignment("ACGT", "AC--", default_scoring) == -2
        assert score_alignment("AC", "GT", unit_scoring) == -2

    def test_recompute_identity(self):
        assert recompute_identity("ACGT", "AC--") == 50.0
        assert recompute_identity("", "") == 0.0

    def test_replay_global(self, unit_scoring):
        result = needleman_wunsch("ACGT", "AC", unit_scoring)
        assert replay_trace(result) == [(0, 0), (1, 1), (2, 2), (3, 2), (4, 2)]

    def test_replay_local(self, unit_scoring):
        result = smith_waterman("TTACGTT", "GGACGAA", unit_scoring)
        assert replay_trace(result) == [(2, 2), (3, 3), (4, 4), (5, 5)]

    def test_path_to_alignment(self):
        path = ((0, 0), (1, 1), (2, 2), (3, 2), (4, 2))
        assert path_to_alignment("ACGT", "AC", path) == ("ACGT", "AC--")
        path = ((0, 0), (0, 1), (1, 2))
        assert path_to_alignment("C", "AC", path) == ("-C", "AC")

    def test_traceback_start(self, unit_scoring):
        assert traceback_start(needleman_wunsch("ACGT", "AC", unit_scoring)) == (4, 2)
        assert traceback_start(smith_waterman("A", "AA", unit_scoring)) == (1, 1)
        assert traceback_start(smith_waterman("AC", "GT", unit_scoring)) == (0, 0)


class TestLocalStartCell:
    """A local path must end at the first maximum in row-major order."""

    def test_last_maximum_rejected(self, unit_scoring):
        result = smith_waterman("A", "AA", unit_scoring)
        # (1,2) ties (1,1); a consistent path through it has the same strings
        bad = dataclasses.replace(result, path=((0, 1), (1, 2)))
        assert bad.aligned_seq1 == bad.aligned_seq2 == "A"
        valid, msg = check_alignment_validity(bad)
        assert not valid
        assert "traceback must start at (1, 1)" in msg

    def test_first_maximum_accepted(self, unit_scoring):
        valid, msg = check_alignment_validity(smith_waterman("A", "AA", unit_scoring))
        assert valid, msg
