"""
Core services for the application.

This package contains the reading pipelines: free-text parsing into readings,
and summarizing a window of readings into category, trend and alerts.
"""

from .parser import ReadingTextParser, parse_reading_text
from .reading_service import ReadingService, ReadingStore
from .result import Result
from .summary import build_graph_points, build_summary

__all__ = [
    "ReadingTextParser",
    "parse_reading_text",
    "ReadingService",
    "ReadingStore",
    "Result",
    "build_summary",
    "build_graph_points",
]
