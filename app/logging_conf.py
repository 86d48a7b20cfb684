"""
Logging setup shared by the API server and the maintenance scripts.
"""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once; later calls only adjust the level."""
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    root.setLevel(level.upper())

    # SQL echo is controlled by the db_echo setting, not the log level
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
