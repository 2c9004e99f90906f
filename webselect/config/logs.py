"""
Logging setup for webselect.

The library only ever logs through ``logging.getLogger(__name__)``; nothing
is configured on import. Applications that want webselect's records routed
somewhere call ``configure_logging``.
"""

import logging
from typing import Optional

from .options import LoggingOptions, WebselectConfig

LOGGER_NAME = "webselect"


def configure_logging(
    config: Optional[WebselectConfig] = None,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Apply logging options to the ``webselect`` logger.

    Args:
        config: Configuration whose ``logging`` section is applied.
            Defaults are used when omitted.
        handler: Handler to attach. A stream handler is created when omitted.

    Returns:
        The configured package logger.
    """
    options = config.logging if config is not None else LoggingOptions()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(options.level_number)

    if handler is None:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(options.format))

    for existing in list(logger.handlers):
        if getattr(existing, "_webselect_handler", False):
            logger.removeHandler(existing)

    handler._webselect_handler = True  # type: ignore[attr-defined]
    logger.addHandler(handler)

    return logger
