"""
Winner storage implementations.

Provides implementations of the WinnerStorage interface for recording the
winners of a judging pass.

Available implementations:
- JSONLWinnerStorage: Persists winners to a JSONL file
- InMemoryWinnerStorage: Keeps winners in memory
"""

from .jsonl_storage import JSONLWinnerStorage
from .memory_storage import InMemoryWinnerStorage

__all__ = ["JSONLWinnerStorage", "InMemoryWinnerStorage"]
