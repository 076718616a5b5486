"""
Per-prize candidate tracking.

Keeps only the contestants currently tied for the best elapsed time after a
prize unlocks, along with how often each of them achieved that time. The full
observation history is never stored.
"""

from datetime import datetime, timedelta

from .logging_config import get_logger
from .models import Contestant, as_utc

# Module-level logger
logger = get_logger("candidates")


class CandidateTracker:
    """
    Incrementally tracks the best candidates for a single prize.

    An observation qualifies when it happens at or after the unlock date; its
    elapsed time is the distance from the unlock date, smaller being better.
    Among contestants tied on the best elapsed time, a contestant who achieved
    it repeatedly pushes out those who achieved it fewer times, and once some
    contestant has a repeat, newcomers matching the best time once are not
    admitted.

    When several contestants remain tied, the earliest-inserted one is the
    best candidate.

    Not thread-safe: calls to update() for one tracker must be serialized.
    """

    def __init__(self, unlocked_date: datetime):
        """
        Initialize tracker.

        Args:
            unlocked_date: Participations before this moment never qualify;
                a naive value is read as UTC
        """
        self.unlocked_date: datetime = as_utc(unlocked_date)
        self.best_elapsed_yet: timedelta = timedelta.max
        # Not reset when a new best time appears, so a repeat count from a
        # superseded best still gates newcomers at the new best.
        self.max_frequency_yet: int = 0
        self._candidates = dict[Contestant, int]()

    def update(self, contestant: Contestant) -> None:
        """Consider one contestant observation."""
        if contestant.participation_date < self.unlocked_date:
            logger.trace(f"Ignoring {contestant.contestant_id}: participated before unlock")
            return

        elapsed = contestant.participation_date - self.unlocked_date

        if elapsed < self.best_elapsed_yet:
            self._candidates = {contestant: 1}
            self.best_elapsed_yet = elapsed
        elif elapsed == self.best_elapsed_yet:
            if contestant in self._candidates:
                self._candidates[contestant] += 1
                self.max_frequency_yet = self._candidates[contestant]
                self._remove_less_frequent_than(self.max_frequency_yet)
            elif self.max_frequency_yet <= 1:
                self._candidates[contestant] = 1
            else:
                logger.trace(
                    f"Not admitting {contestant.contestant_id}: another candidate repeated the best time"
                )

    def _remove_less_frequent_than(self, frequency: int) -> None:
        for candidate in [c for c, f in self._candidates.items() if f < frequency]:
            del self._candidates[candidate]

    def get_best_candidate(self) -> Contestant | None:
        """Return the earliest-inserted surviving candidate, or None if there is none."""
        return next(iter(self._candidates), None)

    @property
    def best_elapsed(self) -> timedelta | None:
        """Best elapsed time seen so far, or None before any qualifying observation."""
        if self.best_elapsed_yet == timedelta.max:
            return None
        return self.best_elapsed_yet

    @property
    def candidates(self) -> dict[Contestant, int]:
        """Copy of the current candidate to frequency mapping."""
        return dict(self._candidates)

    def __len__(self) -> int:
        return len(self._candidates)

    def __repr__(self) -> str:
        return (
            f"CandidateTracker(unlocked_date={self.unlocked_date.isoformat()}, "
            f"best_elapsed={self.best_elapsed}, candidates={len(self._candidates)})"
        )
