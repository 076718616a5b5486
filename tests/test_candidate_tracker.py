"""
Tests for CandidateTracker.

Focus on best-time tracking and the repeat-performance tie-break.
"""

import itertools
from datetime import datetime, timedelta, timezone

from prize_judge.candidates import CandidateTracker
from prize_judge.models import Contestant

UNLOCK = datetime(2024, 1, 1, 12, 0, 0)


def observe(contestant_id: str, seconds_after_unlock: float) -> Contestant:
    """Build an observation relative to UNLOCK."""
    return Contestant(
        contestant_id=contestant_id,
        participation_date=UNLOCK + timedelta(seconds=seconds_after_unlock),
    )


def ids(tracker: CandidateTracker) -> dict[str, int]:
    """Candidate frequencies keyed by contestant_id."""
    return {c.contestant_id: f for c, f in tracker.candidates.items()}


class TestCandidateTracker:
    """Test CandidateTracker behavior through public interface."""

    def test_empty_tracker_has_no_candidate(self) -> None:
        """A fresh tracker yields no candidate and no best time."""
        tracker = CandidateTracker(UNLOCK)

        assert tracker.get_best_candidate() is None
        assert tracker.best_elapsed is None
        assert tracker.max_frequency_yet == 0
        assert len(tracker) == 0

    def test_walkthrough_repeat_best_time_wins_tie(self) -> None:
        """Better times replace, ties accumulate, repeats evict single-timers."""
        tracker = CandidateTracker(UNLOCK)

        # A is the only one so far
        tracker.update(observe("A", 5))
        assert ids(tracker) == {"A": 1}
        assert tracker.best_elapsed == timedelta(seconds=5)

        # B is faster and replaces A
        tracker.update(observe("B", 3))
        assert ids(tracker) == {"B": 1}
        assert tracker.best_elapsed == timedelta(seconds=3)

        # C ties B
        tracker.update(observe("C", 3))
        assert ids(tracker) == {"B": 1, "C": 1}

        # B repeats the best time, C drops out
        tracker.update(observe("B", 3))
        assert ids(tracker) == {"B": 2}
        assert tracker.max_frequency_yet == 2
        assert tracker.get_best_candidate() == observe("B", 3)

    def test_participation_before_unlock_is_ignored(self) -> None:
        """Observations before the unlock date never qualify."""
        tracker = CandidateTracker(datetime(2024, 1, 1, 0, 0, 10))

        tracker.update(Contestant("X", datetime(2024, 1, 1, 0, 0, 5)))

        assert tracker.get_best_candidate() is None
        assert len(tracker) == 0

    def test_participation_at_unlock_qualifies(self) -> None:
        """Zero elapsed time is a valid (and unbeatable) performance."""
        tracker = CandidateTracker(UNLOCK)

        tracker.update(observe("early", 0))
        tracker.update(observe("later", 1))

        assert tracker.get_best_candidate().contestant_id == "early"
        assert tracker.best_elapsed == timedelta(0)

    def test_newcomer_tying_repeat_holder_is_not_admitted(self) -> None:
        """A first-time tie against a proven repeat performer does not qualify."""
        tracker = CandidateTracker(UNLOCK)
        tracker.update(observe("B", 3))
        tracker.update(observe("B", 3))

        tracker.update(observe("D", 3))

        assert ids(tracker) == {"B": 2}
        assert tracker.get_best_candidate().contestant_id == "B"

    def test_worse_time_is_discarded(self) -> None:
        """A slower observation cannot unseat the current best."""
        tracker = CandidateTracker(UNLOCK)
        tracker.update(observe("fast", 2))

        tracker.update(observe("slow", 9))
        tracker.update(observe("fast", 9))

        assert ids(tracker) == {"fast": 1}
        assert tracker.best_elapsed == timedelta(seconds=2)

    def test_earliest_inserted_wins_unresolved_tie(self) -> None:
        """Among tied candidates the first one admitted is the best candidate."""
        forward = CandidateTracker(UNLOCK)
        for name in ["B", "C", "D"]:
            forward.update(observe(name, 4))

        backward = CandidateTracker(UNLOCK)
        for name in ["D", "C", "B"]:
            backward.update(observe(name, 4))

        assert forward.get_best_candidate().contestant_id == "B"
        assert backward.get_best_candidate().contestant_id == "D"
        assert set(ids(forward)) == set(ids(backward)) == {"B", "C", "D"}

    def test_further_repeats_keep_sole_candidate(self) -> None:
        """Every tied single-timer is evicted and later repeats keep counting."""
        tracker = CandidateTracker(UNLOCK)
        tracker.update(observe("B", 3))
        tracker.update(observe("C", 3))
        tracker.update(observe("E", 3))
        tracker.update(observe("B", 3))  # B: 2, C and E evicted

        tracker.update(observe("B", 3))

        assert ids(tracker) == {"B": 3}
        assert tracker.max_frequency_yet == 3

    def test_max_frequency_survives_new_best_time(self) -> None:
        """
        A repeat count from a superseded best still gates the new best.

        The count is deliberately carried over: once anyone repeated a best
        time, newcomers tying the new best once are not admitted.
        """
        tracker = CandidateTracker(UNLOCK)
        tracker.update(observe("B", 3))
        tracker.update(observe("B", 3))
        assert tracker.max_frequency_yet == 2

        # D sets a new best; the frequency gate is not reset
        tracker.update(observe("D", 1))
        assert ids(tracker) == {"D": 1}
        assert tracker.max_frequency_yet == 2

        tracker.update(observe("E", 1))
        assert ids(tracker) == {"D": 1}, "E should not join while max frequency is carried over"

    def test_max_frequency_follows_latest_repeat(self) -> None:
        """The frequency gate takes the latest repeat count, even when lower."""
        tracker = CandidateTracker(UNLOCK)
        for _ in range(3):
            tracker.update(observe("B", 3))
        assert tracker.max_frequency_yet == 3

        tracker.update(observe("D", 1))
        tracker.update(observe("D", 1))

        assert tracker.max_frequency_yet == 2
        assert ids(tracker) == {"D": 2}

    def test_pre_unlock_observations_do_not_change_outcome(self) -> None:
        """Adding pre-unlock observations leaves the result identical."""
        stream = [observe("A", 5), observe("B", 3), observe("C", 3), observe("B", 3)]
        noise = [observe("A", -1), observe("C", -10), observe("Z", -3)]

        clean = CandidateTracker(UNLOCK)
        for contestant in stream:
            clean.update(contestant)

        noisy = CandidateTracker(UNLOCK)
        for contestant in [noise[0], stream[0], noise[1], stream[1], stream[2], noise[2], stream[3]]:
            noisy.update(contestant)

        assert noisy.get_best_candidate() == clean.get_best_candidate()
        assert noisy.best_elapsed == clean.best_elapsed
        assert ids(noisy) == ids(clean)

    def test_arrival_order_does_not_change_best_time_or_members(self) -> None:
        """Every ordering of the same observations ends with the same state."""
        stream = [observe("A", 5), observe("B", 3), observe("C", 3), observe("B", 3)]

        outcomes = set()
        for ordering in itertools.permutations(stream):
            tracker = CandidateTracker(UNLOCK)
            for contestant in ordering:
                tracker.update(contestant)
            outcomes.add((tracker.best_elapsed, frozenset(ids(tracker))))

        assert outcomes == {(timedelta(seconds=3), frozenset({"B"}))}

    def test_candidates_property_is_a_copy(self) -> None:
        """Mutating the returned mapping leaves the tracker untouched."""
        tracker = CandidateTracker(UNLOCK)
        tracker.update(observe("A", 1))

        snapshot = tracker.candidates
        snapshot.clear()

        assert len(tracker) == 1

    def test_mixed_naive_and_aware_dates_do_not_raise(self) -> None:
        """Naive observations are compared as UTC against an aware unlock date."""
        tracker = CandidateTracker(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))

        tracker.update(Contestant("naive", datetime(2024, 1, 1, 12, 0, 5)))
        tracker.update(Contestant("early", datetime(2024, 1, 1, 11, 0)))
        tracker.update(
            Contestant("aware", datetime(2024, 1, 1, 13, 0, 3, tzinfo=timezone(timedelta(hours=1))))
        )

        assert ids(tracker) == {"aware": 1}
        assert tracker.best_elapsed == timedelta(seconds=3)

    def test_naive_unlock_date_read_as_utc(self) -> None:
        """A naive unlock date works with aware observations."""
        tracker = CandidateTracker(datetime(2024, 1, 1, 12, 0))

        tracker.update(Contestant("a", datetime(2024, 1, 1, 12, 0, 7, tzinfo=timezone.utc)))

        assert tracker.unlocked_date.tzinfo is timezone.utc
        assert tracker.best_elapsed == timedelta(seconds=7)
