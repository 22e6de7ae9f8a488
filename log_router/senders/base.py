"""Sender capability and the shared accepted-level filter."""

from typing import Any, Iterable, Protocol, runtime_checkable

from log_router.exceptions import InvalidArgumentError
from log_router.levels import validate_level


@runtime_checkable
class Sender(Protocol):
    """Anything that can write one log record to a backend."""

    def send(self, level: int, message: Any, context: dict) -> None: ...


def require_sender(sender, owner: str) -> None:
    """Raise InvalidArgumentError unless *sender* satisfies the Sender protocol."""
    if not isinstance(sender, Sender):
        raise InvalidArgumentError(
            f"{owner}: senders must implement send(level, message, context), "
            f"got {type(sender).__name__}"
        )


class SenderBase:
    """Base class for senders.

    Subclasses implement ``write()``. ``send()`` skips records whose level is
    not in ``accepted_levels``; an empty list accepts every level.
    """

    def __init__(self, accepted_levels: Iterable[int] | None = None):
        levels = tuple(accepted_levels or ())
        for level in levels:
            validate_level(level)
        self._accepted_levels = levels

    @property
    def accepted_levels(self) -> tuple[int, ...]:
        return self._accepted_levels

    def accepts(self, level: int) -> bool:
        return not self._accepted_levels or level in self._accepted_levels

    def send(self, level: int, message: Any, context: dict) -> None:
        if not self.accepts(level):
            return
        self.write(level, message, context)

    def write(self, level: int, message: Any, context: dict) -> None:
        raise NotImplementedError
