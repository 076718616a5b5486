"""
Judging session.

Owns one CandidateTracker per registered prize, fans every contestant out to
all of them and writes the winners through a WinnerStorage on finalize.
"""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from typing_extensions import override

if TYPE_CHECKING:
    from loguru import Logger

from .candidates import CandidateTracker
from .interfaces import Judge, WinnerStorage
from .logging_config import get_logger
from .models import Contestant, Prize, Winner


class JudgingSession(Judge):
    """
    Judge that keeps the best candidates for every prize in memory.

    finalize() may be called repeatedly; without consider() calls in between
    it writes the same winners each time.
    """

    def __init__(self) -> None:
        """Initialize an empty session."""
        self._prize_candidates = list[tuple[Prize, CandidateTracker]]()
        self.logger: Logger = get_logger("session")

    @override
    def register_prizes(self, prizes: Iterable[Prize]) -> None:
        """
        Create a fresh tracker for each prize, leaving existing ones untouched.

        A prize_id that is already registered is skipped, so finalize writes
        at most one winner per prize.
        """
        registered = {prize.prize_id for prize, _ in self._prize_candidates}
        added = 0
        for prize in prizes:
            if prize.prize_id in registered:
                self.logger.warning(f"Prize {prize.prize_id} already registered, keeping first registration")
                continue
            self._prize_candidates.append((prize, CandidateTracker(prize.unlocked_date)))
            registered.add(prize.prize_id)
            added += 1
        self.logger.debug(f"Registered {added} prizes ({len(self._prize_candidates)} total)")

    @override
    def consider(self, contestant: Contestant) -> None:
        """Feed one contestant observation to every prize's tracker."""
        for _, tracker in self._prize_candidates:
            tracker.update(contestant)

    def consider_all(self, contestants: Iterable[Contestant]) -> int:
        """
        Consider every contestant of an iterable.

        Returns:
            Number of observations considered
        """
        count = 0
        for contestant in contestants:
            self.consider(contestant)
            count += 1
        return count

    @override
    def finalize(self, storage: WinnerStorage) -> list[Winner]:
        """Reset the storage, then write the best candidate of each prize."""
        # Discard winners from a previous finalize
        storage.reset()

        winners = list[Winner]()
        for prize, tracker in self._prize_candidates:
            contestant = tracker.get_best_candidate()

            # No qualifying contestant for this prize yet
            if contestant is None:
                self.logger.info(f"No winner for prize {prize.prize_id}")
                continue

            winner = Winner(contestant=contestant, prize=prize)
            storage.write(winner)
            winners.append(winner)
            self.logger.info(
                f"Prize {prize.prize_id} won by {contestant.contestant_id} "
                f"(elapsed {tracker.best_elapsed}, {len(tracker)} tied)"
            )

        self.logger.info(f"Finalized {len(winners)}/{len(self._prize_candidates)} prizes")
        return winners

    @property
    def prize_count(self) -> int:
        """Number of registered prizes."""
        return len(self._prize_candidates)

    def get_tracker(self, prize_id: str) -> CandidateTracker:
        """Get the tracker registered for this prize ID."""
        for prize, tracker in self._prize_candidates:
            if prize.prize_id == prize_id:
                return tracker
        raise KeyError(f"Prize not registered: {prize_id}")
