import logging

from emporium.core.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(format=LOG_FORMAT)
    # basicConfig is a no-op once a handler exists, the level still has to apply
    logging.getLogger().setLevel(level)
