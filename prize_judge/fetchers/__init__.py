"""
Prize and contestant fetcher implementations.

Provides implementations of the PrizeFetcher and ContestantFetcher interfaces
for loading judging input from various sources.

Available implementations:
- JSONLPrizeFetcher: Loads prizes from a JSONL file
- JSONLContestantFetcher: Streams contestant observations from a JSONL file
"""

from .jsonl_fetcher import JSONLContestantFetcher, JSONLPrizeFetcher

__all__ = ["JSONLPrizeFetcher", "JSONLContestantFetcher"]
