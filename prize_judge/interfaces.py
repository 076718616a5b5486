"""
Abstract base classes defining the interfaces for the prize judge system.

All interfaces are synchronous; judging is an in-memory fold with I/O only at
the edges (prize and contestant sources, winner storage).
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator

from .models import Contestant, Prize, Winner


class PrizeFetcher(ABC):
    """Interface for fetching the prizes to judge."""

    @abstractmethod
    def list_prizes(self) -> Iterable[Prize]:
        """Return all available prizes."""
        pass

    @abstractmethod
    def get_prize(self, prize_id: str) -> Prize:
        """Get a specific prize by ID."""
        pass


class ContestantFetcher(ABC):
    """Interface for streaming contestant observations."""

    @abstractmethod
    def iter_contestants(self) -> Iterator[Contestant]:
        """
        Yield contestant observations one at a time.

        No ordering with respect to participation_date is promised.
        """
        pass


class WinnerStorage(ABC):
    """Interface for persisting winner records."""

    @abstractmethod
    def reset(self) -> None:
        """
        Discard every previously written winner.

        Must be idempotent and safe to call when nothing was written.
        """
        pass

    @abstractmethod
    def write(self, winner: Winner) -> None:
        """Record one winner. A prize gets at most one winner per reset."""
        pass

    @abstractmethod
    def load_winners(self) -> Iterable[Winner]:
        """Load all winners written since the last reset."""
        pass


class Judge(ABC):
    """Interface for picking one winner per prize from contestant observations."""

    @abstractmethod
    def register_prizes(self, prizes: Iterable[Prize]) -> None:
        """Start tracking candidates for each prize."""
        pass

    @abstractmethod
    def consider(self, contestant: Contestant) -> None:
        """Feed one contestant observation to every tracked prize."""
        pass

    @abstractmethod
    def finalize(self, storage: WinnerStorage) -> list[Winner]:
        """
        Reset the storage and write the current winner of each prize.

        Prizes without a qualifying contestant are skipped.

        Returns:
            The winners written, in prize registration order
        """
        pass
