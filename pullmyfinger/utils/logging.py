import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = 'pullmyfinger'
HTTP_LOGGER_NAME = 'urllib3'

# Handler installed by the last setup_logging call
_handler: Optional[logging.Handler] = None


def get_handler() -> Optional[logging.Handler]:
    return _handler


def setup_logging(debug: bool = False) -> logging.Logger:
    """Configure the package logger; `debug` turns on verbose tracing.

    Log records go to stderr so stdout only carries command output.
    Calling it again replaces the handler installed by the previous call.
    """
    global _handler

    level = logging.DEBUG if debug else logging.WARNING

    logger = logging.getLogger(LOGGER_NAME)
    http_logger = logging.getLogger(HTTP_LOGGER_NAME)
    if _handler is not None:
        logger.removeHandler(_handler)
        http_logger.removeHandler(_handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=debug,
        show_path=debug,
        markup=False,
        rich_tracebacks=debug,
    )
    handler.setFormatter(logging.Formatter('%(message)s', datefmt='%Y-%m-%d %H:%M:%S'))
    handler.setLevel(level)
    _handler = handler

    logger.setLevel(level)
    logger.addHandler(handler)

    # HTTP wire tracing only in debug mode
    if debug:
        http_logger.setLevel(logging.DEBUG)
        http_logger.addHandler(handler)

    return logger
