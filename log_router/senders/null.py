"""Sender that discards every record."""

from log_router.senders.base import SenderBase


class NullSender(SenderBase):
    def write(self, level, message, context):
        pass
