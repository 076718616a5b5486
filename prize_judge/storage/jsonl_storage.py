"""
JSONL winner storage implementation.

Persists one winner per line. Reset removes the file so a new judging pass
starts from a clean slate.
"""

import json
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from typing_extensions import TypedDict, override

from ..exceptions import DuplicateWinnerError, ValidationError
from ..interfaces import WinnerStorage
from ..logging_config import get_logger
from ..models import Contestant, Prize, Winner

# Module-level logger
logger = get_logger("jsonl_storage")


class WinnerRecord(TypedDict):
    """Type definition for a persisted winner line."""

    prize_id: str
    unlocked_date: datetime
    contestant_id: str
    participation_date: datetime


_winner_adapter = TypeAdapter(WinnerRecord)


class JSONLWinnerStorage(WinnerStorage):
    """
    JSONL-based winner storage.

    Winners are appended to a single JSONL file. Writing a second winner for a
    prize before the next reset raises DuplicateWinnerError.
    """

    winners_path: Path

    def __init__(self, winners_path: Path):
        """
        Initialize JSONL winner storage.

        Args:
            winners_path: Path to JSONL file for winners
        """
        self.winners_path = Path(winners_path)
        self._written_prize_ids = set[str]()

        # Ensure parent directory exists
        self.winners_path.parent.mkdir(parents=True, exist_ok=True)

        logger.info(f"JSONL winner storage initialized: winners={self.winners_path}")

    @override
    def reset(self) -> None:
        """Remove all written winners."""
        if self.winners_path.exists():
            self.winners_path.unlink()
            logger.debug(f"Removed previous winners file {self.winners_path}")
        self._written_prize_ids.clear()

    @override
    def write(self, winner: Winner) -> None:
        """Append a winner to JSONL."""
        prize_id = winner.prize.prize_id
        if prize_id in self._written_prize_ids:
            raise DuplicateWinnerError(f"Winner already written for prize {prize_id}")

        data = {
            "prize_id": prize_id,
            "unlocked_date": winner.prize.unlocked_date.isoformat(),
            "contestant_id": winner.contestant.contestant_id,
            "participation_date": winner.contestant.participation_date.isoformat(),
        }

        with open(self.winners_path, "a", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False)
            f.write("\n")

        self._written_prize_ids.add(prize_id)
        logger.debug(f"Persisted winner {winner.contestant.contestant_id} for prize {prize_id}")

    @override
    def load_winners(self) -> Iterable[Winner]:
        """Load all persisted winners from JSONL."""
        if not self.winners_path.exists():
            return

        with open(self.winners_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue

                try:
                    record = _winner_adapter.validate_python(json.loads(line))
                    winner = Winner(
                        contestant=Contestant(
                            contestant_id=record["contestant_id"],
                            participation_date=record["participation_date"],
                        ),
                        prize=Prize(
                            prize_id=record["prize_id"],
                            unlocked_date=record["unlocked_date"],
                        ),
                    )
                except (json.JSONDecodeError, PydanticValidationError, ValidationError) as e:
                    # Skip corrupted or invalid lines
                    logger.warning(f"Skipping invalid JSON line in {self.winners_path}: {e}")
                    continue

                yield winner

    def get_winner_count(self) -> int:
        """Get number of stored winners."""
        if not self.winners_path.exists():
            return 0

        count = 0
        with open(self.winners_path, "r", encoding="utf-8") as f:
            for line in f:
                if line.strip():
                    count += 1
        return count
