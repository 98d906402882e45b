"""
Logging infrastructure.

Modules log through ``logging.getLogger(__name__)``; process entry points
call ``configure_logging`` once.
"""
import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Root logging setup.

    Args:
        level: Level name, e.g. "INFO" or "debug"
    """
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # SQL echo is driven by DB_ECHO_SQL, not the API log level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
