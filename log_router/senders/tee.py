"""Sender that forwards each record to several senders in order."""

from log_router.senders.base import SenderBase, require_sender


class TeeSender(SenderBase):
    def __init__(self, senders, accepted_levels=None):
        super().__init__(accepted_levels)
        senders = list(senders)
        for sender in senders:
            require_sender(sender, "TeeSender")
        self._senders = senders

    @property
    def senders(self) -> list:
        return list(self._senders)

    def write(self, level, message, context):
        for sender in self._senders:
            sender.send(level, message, context)
