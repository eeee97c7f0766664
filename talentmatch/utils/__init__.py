"""
Utility modules for TalentMatch.

This package contains shared utilities used across the application:
- config: Configuration management
- logger: Logging infrastructure
- constants: Application-wide constants
"""

from talentmatch.utils.config import (
    AppSettings,
    get_settings,
    reload_settings,
    settings,
    ROOT_DIR,
)
from talentmatch.utils.constants import (
    JobStatus,
    MatchScoreLevel,
    AuditAction,
)
from talentmatch.utils.logger import (
    setup_logging,
    get_logger,
    audit_log,
    LoggerMixin,
    log,
)

__all__ = [
    # Config
    "AppSettings",
    "get_settings",
    "reload_settings",
    "settings",
    "ROOT_DIR",
    # Constants
    "JobStatus",
    "MatchScoreLevel",
    "AuditAction",
    # Logger
    "setup_logging",
    "get_logger",
    "audit_log",
    "LoggerMixin",
    "log",
]
