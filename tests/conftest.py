import pytest
from unittest.mock import MagicMock

from log_router.senders.base import SenderBase

LOCAL0 = 16


class RecordingSender(SenderBase):
    """Sender keeping every written record in memory."""

    def __init__(self, accepted_levels=None):
        super().__init__(accepted_levels)
        self.calls = []

    def write(self, level, message, context):
        self.calls.append((level, message, context))


class StubStrategy:
    """Strategy returning a fixed sender list for every level."""

    def __init__(self, senders=None):
        self.senders = list(senders or [])
        self.customized_loggers = []

    def select_senders(self, level):
        return list(self.senders)

    def customize_senders(self, senders):
        return []

    def customize_logger(self, logger):
        self.customized_loggers.append(logger)


@pytest.fixture
def recording_sender():
    return RecordingSender()


@pytest.fixture
def syslog():
    """Syslog backend double with name tables and mocked open/log."""
    backend = MagicMock()
    backend.level = {3: "err", 4: "warning", 7: "debug"}
    backend.facility = {LOCAL0: "local0"}
    return backend


@pytest.fixture
def collection():
    return MagicMock(spec=["insert_one"])


@pytest.fixture
def deep_context():
    return {
        "level1": {
            "level2": {
                "level3": {
                    "level4": {
                        "level5": {
                            "level6": "world",
                        },
                    },
                },
            },
        },
    }
