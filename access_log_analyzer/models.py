"""Access Log Analyzer - Data models"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LogEntry:
    """Parsed access log line"""
    ip: str
    path: str
    status_code: str
    user_agent: str


@dataclass(frozen=True)
class RankedItem:
    """Field value with its number of occurrences"""
    value: str
    count: int
