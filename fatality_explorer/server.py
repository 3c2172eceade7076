import logging
import sys

from . import config
from .dashboard import create_app
from .loader import LoadError
from .pipeline import build_traffic

logger = logging.getLogger(__name__)


def configure_logging(level=logging.INFO):
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def build_app(data_dir=config.DATA_DIR):
    """Load the Traffic table and build the Dash app, or exit on a load failure."""
    try:
        traffic = build_traffic(data_dir)
    except LoadError as exc:
        logger.error("Cannot start dashboard: %s", exc)
        sys.exit(1)
    return create_app(traffic)


def main():
    configure_logging(logging.DEBUG if config.DEBUG else logging.INFO)
    app = build_app()
    logger.info("Dashboard running at http://%s:%s", config.HOST, config.PORT)
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)


if __name__ == "__main__":
    main()
