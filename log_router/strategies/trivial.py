"""Send every record, whatever its level, to the same sender."""

from log_router.senders.base import require_sender
from log_router.senders.null import NullSender
from log_router.strategies.base import StrategyBase


class TrivialStrategy(StrategyBase):
    def __init__(self, sender=None):
        if sender is None:
            sender = NullSender()
        require_sender(sender, "TrivialStrategy")
        self.sender = sender

    def select_senders(self, level: int) -> list:
        return [self.sender]

    def customize_senders(self, senders: list) -> list:
        return [] if any(self.sender is s for s in senders) else [self.sender]
