import logging
import sys

import sentry_sdk

from . import __version__


logging_formatter = logging.Formatter("[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s")

_handler = logging.StreamHandler(sys.stdout)
_handler.setFormatter(logging_formatter)

_root = logging.getLogger("portfolio_api")
_root.addHandler(_handler)
_root.propagate = False


def get_logger(name: str) -> logging.Logger:
    if not name.startswith("portfolio_api"):
        name = f"portfolio_api.{name}"
    return logging.getLogger(name)


def setup_logging(level: str) -> None:
    _root.setLevel(level)


def setup_sentry(dsn: str, environment: str) -> None:
    sentry_sdk.init(dsn=dsn, environment=environment, release=f"portfolio-backend@{__version__}")
