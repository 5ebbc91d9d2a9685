import logging
import sys

LOG_FORMAT = "[forge] %(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Route forge logs to stderr. WARNING by default, DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
