"""Application services."""

from .sessions import SessionStatsService, create_session_stats_service

__all__ = [
    "SessionStatsService",
    "create_session_stats_service",
]
