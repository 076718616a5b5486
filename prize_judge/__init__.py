"""
Prize Judge - Incremental Prize Winner Selection

Picks one winner per prize from a stream of contestant observations: the
fastest participation after the prize unlocks, with repeated best times
breaking ties.
"""

from .models import Contestant, Prize, Winner
from .interfaces import ContestantFetcher, Judge, PrizeFetcher, WinnerStorage
from .candidates import CandidateTracker
from .session import JudgingSession
from .orchestrator import Orchestrator, RunConfig

__version__ = "0.1.0"
__all__ = [
    "Contestant",
    "Prize",
    "Winner",
    "ContestantFetcher",
    "Judge",
    "PrizeFetcher",
    "WinnerStorage",
    "CandidateTracker",
    "JudgingSession",
    "Orchestrator",
    "RunConfig",
]
