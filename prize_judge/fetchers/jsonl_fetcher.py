"""
JSONL prize and contestant fetchers.

Reads one JSON object per line. Timestamps are ISO 8601 strings; records are
validated with pydantic and invalid lines are skipped with a warning.
"""

import json
from collections.abc import Iterable, Iterator
from datetime import datetime
from pathlib import Path

from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from typing_extensions import TypedDict, override

from ..exceptions import ValidationError
from ..interfaces import ContestantFetcher, PrizeFetcher
from ..logging_config import get_logger
from ..models import Contestant, Prize

# Module-level logger
logger = get_logger("jsonl_fetcher")


class PrizeRecord(TypedDict):
    """Type definition for a prize line."""

    prize_id: str
    unlocked_date: datetime


class ContestantRecord(TypedDict):
    """Type definition for a contestant line."""

    contestant_id: str
    participation_date: datetime


_prize_adapter = TypeAdapter(PrizeRecord)
_contestant_adapter = TypeAdapter(ContestantRecord)


def _iter_lines(path: Path) -> Iterator[tuple[int, str]]:
    """Yield (line number, stripped line) for every non-blank line."""
    with open(path, "r", encoding="utf-8") as f:
        for line_number, line in enumerate(f, 1):
            line = line.strip()
            if line:
                yield line_number, line


def _check_file(path: Path) -> Path:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file does not exist: {path}")
    if path.is_dir():
        raise IsADirectoryError(f"Path is a directory, not a file: {path}")
    return path


class JSONLPrizeFetcher(PrizeFetcher):
    """
    Prize fetcher that reads a JSONL file.

    Prizes are loaded once and cached. When a prize_id appears more than once
    the first definition is kept.
    """

    def __init__(self, prizes_path: Path):
        """
        Initialize JSONL prize fetcher.

        Args:
            prizes_path: JSONL file with prize_id and unlocked_date per line
        """
        self.prizes_path: Path = _check_file(prizes_path)

        # Cache for loaded prizes
        self._cache = dict[str, Prize]()
        self._cache_loaded: bool = False

    def _load_prizes(self) -> None:
        """Load all prizes from file into cache."""
        if self._cache_loaded:
            return

        for line_number, line in _iter_lines(self.prizes_path):
            try:
                record = _prize_adapter.validate_python(json.loads(line))
                prize = Prize(prize_id=record["prize_id"], unlocked_date=record["unlocked_date"])
            except (json.JSONDecodeError, PydanticValidationError, ValidationError) as e:
                logger.warning(f"Skipping invalid prize on line {line_number} of {self.prizes_path}: {e}")
                continue

            if prize.prize_id in self._cache:
                logger.warning(f"Duplicate prize {prize.prize_id} on line {line_number}, keeping first definition")
                continue

            self._cache[prize.prize_id] = prize

        self._cache_loaded = True
        logger.info(f"Loaded {len(self._cache)} prizes from {self.prizes_path}")

    @override
    def list_prizes(self) -> Iterable[Prize]:
        """Return all available prizes."""
        self._load_prizes()
        return self._cache.values()

    @override
    def get_prize(self, prize_id: str) -> Prize:
        """Get a specific prize by ID."""
        self._load_prizes()

        if prize_id not in self._cache:
            raise KeyError(f"Prize not found: {prize_id}")

        return self._cache[prize_id]

    def get_prize_count(self) -> int:
        """Get total number of available prizes."""
        self._load_prizes()
        return len(self._cache)


class JSONLContestantFetcher(ContestantFetcher):
    """
    Contestant fetcher that streams a JSONL file.

    Observations are read lazily, one line at a time, and never cached.
    """

    def __init__(self, contestants_path: Path):
        """
        Initialize JSONL contestant fetcher.

        Args:
            contestants_path: JSONL file with contestant_id and participation_date per line
        """
        self.contestants_path: Path = _check_file(contestants_path)

    @override
    def iter_contestants(self) -> Iterator[Contestant]:
        """Yield contestant observations in file order."""
        for line_number, line in _iter_lines(self.contestants_path):
            try:
                record = _contestant_adapter.validate_python(json.loads(line))
                contestant = Contestant(
                    contestant_id=record["contestant_id"],
                    participation_date=record["participation_date"],
                )
            except (json.JSONDecodeError, PydanticValidationError, ValidationError) as e:
                logger.warning(
                    f"Skipping invalid contestant on line {line_number} of {self.contestants_path}: {e}"
                )
                continue

            yield contestant
