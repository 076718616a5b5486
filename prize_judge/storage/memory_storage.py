"""
In-memory winner storage.

Keeps winners in a list; useful for embedding the judge in another process
and for tests.
"""

from collections.abc import Iterable

from typing_extensions import override

from ..exceptions import DuplicateWinnerError
from ..interfaces import WinnerStorage
from ..models import Winner


class InMemoryWinnerStorage(WinnerStorage):
    """
    List-backed winner storage.

    Counts resets so callers can check that a judging pass cleared it first.
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self.winners = list[Winner]()
        self.reset_count: int = 0

    @override
    def reset(self) -> None:
        """Drop all recorded winners."""
        self.winners.clear()
        self.reset_count += 1

    @override
    def write(self, winner: Winner) -> None:
        """Record a winner, rejecting a second one for the same prize."""
        if any(w.prize.prize_id == winner.prize.prize_id for w in self.winners):
            raise DuplicateWinnerError(f"Winner already written for prize {winner.prize.prize_id}")
        self.winners.append(winner)

    @override
    def load_winners(self) -> Iterable[Winner]:
        """Return a copy of the recorded winners."""
        return list(self.winners)
