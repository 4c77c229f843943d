"""Test doubles for code built on paged sources."""

from .fetchers import AsyncRecordingFetcher, RecordingFetcher

__all__ = [
    "RecordingFetcher",
    "AsyncRecordingFetcher",
]
