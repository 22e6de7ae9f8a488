"""Route each level to one of three senders by interest band."""

from log_router.levels import DEBUG, WARNING
from log_router.senders.base import require_sender
from log_router.strategies.base import StrategyBase


class LeveledStrategy(StrategyBase):
    """One sender per band: low, medium or high interest.

    Severity grows toward 0, so the low-interest band holds the numerically
    largest levels: ``level >= min_low`` goes to *low*, ``level <= max_high``
    goes to *high*, everything in between goes to *medium*. The thresholds
    are not checked against each other; with ``max_high >= min_low`` the
    medium sender never receives anything.

    With the defaults (``min_low=DEBUG``, ``max_high=WARNING``, RFC 5424
    numbering) levels 0-4 go to *high*, 5-6 to *medium* and 7 to *low*.
    """

    def __init__(self, low, medium, high, min_low: int = DEBUG, max_high: int = WARNING):
        for sender in (low, medium, high):
            require_sender(sender, "LeveledStrategy")
        self.low = low
        self.medium = medium
        self.high = high
        self.min_low = min_low
        self.max_high = max_high

    def select_senders(self, level: int) -> list:
        if level >= self.min_low:
            return [self.low]
        if level <= self.max_high:
            return [self.high]
        return [self.medium]

    def customize_senders(self, senders: list) -> list:
        """Install each band sender once, unless the logger already has it."""
        added = []
        for sender in (self.low, self.medium, self.high):
            if not any(sender is s for s in senders) and not any(sender is s for s in added):
                added.append(sender)
        return added
