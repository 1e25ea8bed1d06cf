"""RaspiPass configuration page - main entry point.

Serves the configuration page over HTTP, or with ``--render`` writes the
rendered page to stdout once and exits.
"""
import sys

from .config import load_config
from .logger import setup_logging
from .page import INDEX_TEMPLATE, build_index
from .webapp import main as serve


def main(argv=None):
    """Main application entry point."""
    argv = sys.argv[1:] if argv is None else argv

    config = load_config()
    logger = setup_logging(config.logging)

    if "--render" in argv:
        build_index(config.paths).display(INDEX_TEMPLATE)
        return 0

    logger.info("Serving configuration page on %s:%d", config.server.host, config.server.port)
    serve(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
