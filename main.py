"""Entry point for the log router ingestion service."""

import logging
import sys

from log_router.app import create_app
from log_router.config import load_config


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)

    config = load_config()
    app = create_app(config)
    logger.info(
        "Starting log router on %s:%d, path=%s, collection=%s",
        config.host, config.port, config.serve_path, config.collection_name,
    )
    try:
        app.run(host=config.host, port=config.port)
    finally:
        app.config["components"]["syslog"].close()


if __name__ == "__main__":
    main()
