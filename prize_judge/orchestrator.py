"""
Orchestrator for prize judging.

Coordinates prize fetcher, contestant fetcher, judging session and winner
storage for a single judging run.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from loguru import Logger

from .interfaces import ContestantFetcher, PrizeFetcher, WinnerStorage
from .logging_config import get_logger
from .models import Winner
from .session import JudgingSession


@dataclass
class RunConfig:
    """Configuration for a judging run."""

    progress_every: int = 1000  # log progress every N contestants

    def __post_init__(self):
        """Validate configuration."""
        if self.progress_every <= 0:
            raise ValueError(f"progress_every must be positive, got {self.progress_every}")


class Orchestrator:
    """Main orchestrator for a judging run."""

    def __init__(
        self,
        prize_fetcher: PrizeFetcher,
        contestant_fetcher: ContestantFetcher,
        storage: WinnerStorage,
        config: RunConfig | None = None,
    ):
        """Initialize orchestrator with all components."""
        self.prize_fetcher: PrizeFetcher = prize_fetcher
        self.contestant_fetcher: ContestantFetcher = contestant_fetcher
        self.storage: WinnerStorage = storage
        self.config: RunConfig = config if config is not None else RunConfig()

        self.session: JudgingSession = JudgingSession()

        # Runtime state
        self.considered_contestants: int = 0

        # Setup logger
        self.logger: Logger = get_logger("orchestrator")

    def run(self) -> list[Winner]:
        """Register prizes, stream all contestants and write the winners."""
        self.logger.info(f"Starting judging run with config: {self.config}")

        prizes = list(self.prize_fetcher.list_prizes())
        self.session.register_prizes(prizes)
        self.logger.info(f"Registered {len(prizes)} prizes")

        for contestant in self.contestant_fetcher.iter_contestants():
            self.session.consider(contestant)
            self.considered_contestants += 1

            if self.considered_contestants % self.config.progress_every == 0:
                self.logger.info(f"Progress: {self.considered_contestants} contestants considered")

        self.logger.info(f"Considered {self.considered_contestants} contestants")

        winners = self.session.finalize(self.storage)
        self.logger.info(f"Judging complete: {len(winners)} winners for {len(prizes)} prizes")
        return winners
