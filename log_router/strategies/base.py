"""Strategy capability: which senders receive a record of a given level."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Strategy(Protocol):
    def select_senders(self, level: int) -> list: ...

    def customize_senders(self, senders: list) -> list: ...

    def customize_logger(self, logger) -> None: ...


class StrategyBase:
    """Default hooks for strategies; subclasses implement ``select_senders``."""

    def select_senders(self, level: int) -> list:
        raise NotImplementedError

    def customize_senders(self, senders: list) -> list:
        """Return senders to install on the logger in addition to *senders*."""
        return []

    def customize_logger(self, logger) -> None:
        """Hook run once when a logger adopts this strategy."""
