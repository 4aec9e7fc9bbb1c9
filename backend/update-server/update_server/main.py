"""Main entry point for the update server."""

import logging
import os
import sys
from typing import Optional, Sequence

from .config import load_config
from .server import create_app

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Parse the configuration, set up logging and run the server."""
    config = load_config(argv)

    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    logger.info("Starting update server")
    logger.info(f"Images directory: {config.images_directory}")
    if not os.path.isdir(config.images_directory):
        logger.warning(f"Images directory {config.images_directory} does not exist (yet)")
    logger.info(
        f"Filename layout: separator={config.layout.separator!r}, "
        f"image={config.layout.image_field_index}, "
        f"device={config.layout.device_field_index}, "
        f"version={config.layout.version_field_index}"
    )
    logger.info(f"Listening on {config.listen_ip}:{config.listen_port}")

    app = create_app(config)
    try:
        app.run(host=config.listen_ip, port=config.listen_port, threaded=True)
    except OSError as e:
        logger.error(f"Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
