"""Concurrent pull request creation.

This module provides:
- BatchExecutor: Creates one pull request per request, isolating failures
- run_batch: Synchronous wrapper around BatchExecutor.execute
"""

from .executor import BatchExecutor, run_batch

__all__ = [
    "BatchExecutor",
    "run_batch",
]
