"""
Request context
Stores the request-id in a contextvar so every log line of a request carries it
"""
import contextvars
import uuid
from loguru import logger

from libur_api.config import settings

request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar(
    "request_id", default=""
)


def get_request_id() -> str:
    """
    Return the request-id of the current request

    Returns:
        The current request-id, or an empty string outside a request
    """
    return request_id_var.get()


def set_request_id(request_id: str) -> None:
    """
    Set the request-id of the current request

    Args:
        request_id: the request-id to store
    """
    request_id_var.set(request_id)


def generate_request_id() -> str:
    """Generate a new uuid4 request-id"""
    return str(uuid.uuid4())


def configure_logger_with_request_id():
    """
    Configure loguru so every record includes the request-id

    Sinks:
    - console: coloured, level from settings.LOG_LEVEL
    - file: {LOG_DIR}/app_{date}.log, INFO, rotated daily, kept 30 days
    """

    def formatter(record):
        """Format a record with the current request-id"""
        # Request-id from the contextvar, "N/A" outside a request
        request_id = get_request_id()
        record["extra"]["request_id"] = request_id or "N/A"

        # Format: [time] [level] [request-id] [module:function:line] message
        return (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>[{extra[request_id]}]</cyan> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
            "{message}\n"
        )

    # Drop the default handler
    logger.remove()

    # Console output
    logger.add(
        sink=lambda msg: print(msg, end=""),
        format=formatter,
        level=settings.LOG_LEVEL,
        colorize=True,
    )

    if not settings.LOG_TO_FILE:
        return

    # Make sure the log directory exists
    log_dir = settings.LOG_DIR
    log_dir.mkdir(parents=True, exist_ok=True)

    # File output with rotation
    logger.add(
        sink=log_dir / "app_{time:YYYY-MM-DD}.log",
        format=formatter,
        level="INFO",
        rotation="00:00",  # rotate at midnight
        retention="30 days",  # keep 30 days
        compression="zip",  # compress old logs
        colorize=False,  # no colours in files
    )
