"""
Logging for TalentMatch, built on Loguru.

Application messages go to the console and a rotating log file. Ranking
runs are additionally written to an audit file: any record bound with an
``audit_type`` lands there, with contact details and secrets redacted.
"""

import sys
from typing import Any, Optional

from loguru import logger

from talentmatch.utils.config import AppSettings, LoggingSettings, get_settings

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan> | "
    "<level>{message}</level>"
)
AUDIT_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {extra[audit_type]} | {message}"
AUDIT_FILE_NAME = "audit.log"

REDACTED = "***REDACTED***"
SENSITIVE_KEYS = frozenset(
    {"password", "secret", "token", "api_key", "apikey", "credential", "email", "phone"}
)


def _is_audit_record(record: dict[str, Any]) -> bool:
    return "audit_type" in record["extra"]


def _add_file_sinks(log_settings: LoggingSettings, diagnose: bool) -> None:
    log_file = log_settings.file_path
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logger.add(
        log_file,
        format=log_settings.format,
        level=log_settings.level,
        rotation=log_settings.rotation,
        retention=log_settings.retention,
        compression="zip",
        diagnose=diagnose,
        enqueue=True,
    )
    logger.add(
        log_file.parent / AUDIT_FILE_NAME,
        format=AUDIT_FORMAT,
        level="INFO",
        filter=_is_audit_record,
        rotation="1 week",
        retention="1 year",
        compression="zip",
        enqueue=True,
    )


def setup_logging(settings: Optional[AppSettings] = None) -> None:
    """
    Replace Loguru's default handler with the configured sinks.

    Tracebacks include local variables only in debug development runs.
    """
    settings = settings or get_settings()
    log_settings = settings.logging
    diagnose = settings.debug and settings.environment == "development"

    logger.remove()
    logger.configure(extra={"name": "talentmatch"})

    if log_settings.console_output:
        logger.add(
            sys.stderr,
            format=CONSOLE_FORMAT,
            level=log_settings.level,
            colorize=True,
            diagnose=diagnose,
        )

    if log_settings.file_output:
        _add_file_sinks(log_settings, diagnose)

    logger.debug(
        f"Logging configured (level={log_settings.level}, file={log_settings.file_output})"
    )


def get_logger(name: str) -> Any:
    """Logger bound to a component name, shown in the console format."""
    return logger.bind(name=name)


def redact(data: Any) -> Any:
    """Copy of ``data`` with values under sensitive keys masked, recursively."""
    if isinstance(data, dict):
        return {
            key: REDACTED
            if any(s in str(key).lower() for s in SENSITIVE_KEYS)
            else redact(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [redact(item) for item in data]
    return data


def audit_log(action: str, details: dict[str, Any], audit_type: str = "RANKING") -> None:
    """
    Record an auditable action.

    Args:
        action: What happened, e.g. ``jobs_ranked``
        details: Identifiers and counts describing the action
        audit_type: Category shown in the audit file
    """
    logger.bind(name="audit", audit_type=audit_type).info(f"{action} | {redact(details)}")


class LoggerMixin:
    """Gives a class a ``logger`` bound to its class name."""

    @property
    def logger(self) -> Any:
        if not hasattr(self, "_logger"):
            self._logger = get_logger(type(self).__name__)
        return self._logger


log = get_logger("talentmatch")


try:
    setup_logging()
except (OSError, ValueError) as e:
    # Unwritable log directory or invalid LOG_* settings: keep Loguru's default sink
    logger.warning(f"Logging setup failed, using defaults: {e}")
