"""
Core dataclasses for the prize judge system.

Defines Prize, Contestant and Winner models with validation.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from .exceptions import ValidationError


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC so naive and aware inputs stay comparable."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class Prize:
    """A prize that can be won by participating after it unlocks."""

    prize_id: str
    unlocked_date: datetime

    def __post_init__(self) -> None:
        """Validate prize data and read a naive unlocked_date as UTC."""
        if not self.prize_id:
            raise ValidationError("prize_id cannot be empty")
        if not isinstance(self.unlocked_date, datetime):
            raise ValidationError(
                f"unlocked_date must be a datetime, got {type(self.unlocked_date).__name__}"
            )
        object.__setattr__(self, "unlocked_date", as_utc(self.unlocked_date))


@dataclass(frozen=True)
class Contestant:
    """
    One observation of a contestant participating.

    Equality and hashing only look at contestant_id, so repeated observations
    of the same contestant compare equal regardless of when they happened.
    """

    contestant_id: str
    participation_date: datetime = field(compare=False)

    def __post_init__(self) -> None:
        """Validate contestant data and read a naive participation_date as UTC."""
        if not self.contestant_id:
            raise ValidationError("contestant_id cannot be empty")
        if not isinstance(self.participation_date, datetime):
            raise ValidationError(
                f"participation_date must be a datetime, got {type(self.participation_date).__name__}"
            )
        object.__setattr__(self, "participation_date", as_utc(self.participation_date))


@dataclass(frozen=True)
class Winner:
    """Pairing of the chosen contestant and the prize they won."""

    contestant: Contestant
    prize: Prize

    @property
    def elapsed(self) -> timedelta:
        """Time between the prize unlocking and the winning participation."""
        return self.contestant.participation_date - self.prize.unlocked_date
