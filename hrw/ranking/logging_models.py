"""
Structured logging models for ranking operations.

Follows the Entry-based pattern from hrw/logging/models.
"""

from hrw.logging.models import Entry, LogLevel


class RankingTrace(Entry, kw_only=True):
    """Trace-level logging for a single ranking call."""
    operation: str
    node_count: int
    key_digest: int
    selected: int = 0
    strategy: str = ""
    level: LogLevel = LogLevel.TRACE


class RankingDebug(Entry, kw_only=True):
    """Debug-level logging for ranker lifecycle events."""
    strategy: str
    log_level: str = ""
    level: LogLevel = LogLevel.DEBUG


class RankingRejected(Entry, kw_only=True):
    """Debug-level logging for calls rejected with InvalidArgument."""
    operation: str
    node_count: int
    requested: int | str
    level: LogLevel = LogLevel.DEBUG
