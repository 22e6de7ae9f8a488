"""Sender that writes records through a standard library logger."""

import logging

from log_router.inspector import DEFAULT_DEPTH, inspect, validate_depth
from log_router.levels import level_name
from log_router.senders.base import SenderBase

# RFC 5424 severity -> stdlib logging level
SEVERITY_TO_LOGGING = {
    0: logging.CRITICAL,
    1: logging.CRITICAL,
    2: logging.CRITICAL,
    3: logging.ERROR,
    4: logging.WARNING,
    5: logging.INFO,
    6: logging.INFO,
    7: logging.DEBUG,
}


class ConsoleSender(SenderBase):
    """Emit each record as one line on a ``logging`` logger.

    The line is ``[<level name>] <message> <context>``, with the context
    rendered by ``inspect()`` up to *depth* levels. Handlers and formatting
    are whatever the process configured with ``logging.basicConfig``.
    """

    def __init__(
        self,
        accepted_levels=None,
        logger_name: str = "log_router.console",
        depth: int | None = DEFAULT_DEPTH,
    ):
        super().__init__(accepted_levels)
        self._logger = logging.getLogger(logger_name)
        self._depth = validate_depth(depth)

    def write(self, level, message, context):
        self._logger.log(
            SEVERITY_TO_LOGGING[level],
            "[%s] %s %s",
            level_name(level),
            message,
            inspect(context if context is not None else {}, self._depth),
        )
