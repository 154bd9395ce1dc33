"""
Logging setup and event logger utility for authentication events.
"""
from typing import Optional
import sys
import logging
import os

from ..config import Settings

logger = logging.getLogger(__name__)


ALLOWED_EVENT_TYPES = {
    "register",
    "login_success",
    "login_failure",
    "token_rejected",
}

_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(settings: Settings) -> None:
    """
    Configure stdout logging for the process.

    When LOG_DIR is set, authentication events are also written to
    ``<LOG_DIR>/auth_events.log``.
    """
    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format=_FORMAT,
        datefmt=_DATEFMT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if not settings.LOG_DIR:
        return

    log_path = os.path.abspath(os.path.join(settings.LOG_DIR, "auth_events.log"))
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
            return

    # Try to add file handler, but continue without it if directory creation fails
    try:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
    except OSError as e:
        print(f"WARNING: Could not set up file logging: {e}", file=sys.stderr)
        return
    file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
    logger.addHandler(file_handler)
    logger.setLevel(logging.INFO)


def client_ip(request) -> Optional[str]:
    """Client address, falling back to the first X-Forwarded-For entry."""
    if request is None:
        return None
    ip_address = request.client.host if request.client else None
    forwarded = request.headers.get("x-forwarded-for")
    if not ip_address and forwarded:
        ip_address = forwarded.split(",")[0].strip()
    return ip_address


def log_auth_event(event_type: str, username: Optional[str], request=None, **extra) -> None:
    """
    Log an authentication event.

    Args:
        event_type: One of: register, login_success, login_failure, token_rejected
        username: Account name the event is about, if known
        request: FastAPI Request the event came from
        extra: Additional key=value context appended to the line

    Raises:
        ValueError: If event_type is invalid
    """
    if event_type not in ALLOWED_EVENT_TYPES:
        raise ValueError(
            f"Invalid event_type '{event_type}'. Must be one of: {', '.join(sorted(ALLOWED_EVENT_TYPES))}"
        )

    context = "".join(f" {key}={value}" for key, value in sorted(extra.items()))
    level = logging.INFO if event_type in ("register", "login_success") else logging.WARNING
    logger.log(
        level,
        "AUTH %s username=%s ip=%s%s",
        event_type, username, client_ip(request), context,
    )
