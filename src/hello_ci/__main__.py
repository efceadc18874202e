import logging
import sys
from typing import Mapping, Optional

import uvicorn

from .config import ConfigurationError, get_host, get_log_level, get_port, log_level_number
from .server import app

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=log_level_number(level), format=LOG_FORMAT)


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Start the demo service.

    Returns 0 once the server stops, or 2 when the environment is misconfigured.
    """
    try:
        level = get_log_level(environ)
        host = get_host(environ)
        port = get_port(environ)
    except ConfigurationError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        return 2

    configure_logging(level)
    logger.info(f"Listening on http://{host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=level.lower())
    return 0


if __name__ == "__main__":
    sys.exit(main())
