"""Logger: validates a record's level and fans it out to the strategy's senders."""

import logging

from log_router import levels
from log_router.exceptions import InvalidArgumentError
from log_router.levels import validate_level
from log_router.senders.base import require_sender
from log_router.strategies.base import Strategy

logger = logging.getLogger(__name__)


class Logger:
    """Front-end for ``log(level, message, context)`` calls.

    The strategy decides which senders receive each record. The logger does
    not normalize anything: every selected sender gets the same message and
    the same context object, and senders needing derived fields work on
    copies. ``log()`` returns once every ``send()`` has been issued; it does
    not wait for, or report on, the senders' own I/O.
    """

    def __init__(self, strategy, senders=()):
        if not isinstance(strategy, Strategy):
            raise InvalidArgumentError(
                "Logger: strategy must implement select_senders(), "
                "customize_senders() and customize_logger()"
            )
        installed = list(senders)
        for sender in installed:
            require_sender(sender, "Logger")

        self.strategy = strategy
        self.senders = installed + list(strategy.customize_senders(installed))
        strategy.customize_logger(self)
        logger.debug(
            "Logger ready with %s and %d sender(s)",
            type(strategy).__name__, len(self.senders),
        )

    def log(self, level, message, context=None) -> None:
        """Send one record to every sender the strategy selects for *level*.

        Raises:
            InvalidArgumentError: If *level* is not an int in [0, 7]. No
                sender is contacted in that case.
        """
        validate_level(level)
        if context is None:
            context = {}
        for sender in self.strategy.select_senders(level):
            sender.send(level, message, context)

    def emergency(self, message, context=None) -> None:
        self.log(levels.EMERGENCY, message, context)

    def alert(self, message, context=None) -> None:
        self.log(levels.ALERT, message, context)

    def critical(self, message, context=None) -> None:
        self.log(levels.CRITICAL, message, context)

    def error(self, message, context=None) -> None:
        self.log(levels.ERROR, message, context)

    def warning(self, message, context=None) -> None:
        self.log(levels.WARNING, message, context)

    warn = warning

    def notice(self, message, context=None) -> None:
        self.log(levels.NOTICE, message, context)

    def info(self, message, context=None) -> None:
        self.log(levels.INFORMATIONAL, message, context)

    def debug(self, message, context=None) -> None:
        self.log(levels.DEBUG, message, context)
