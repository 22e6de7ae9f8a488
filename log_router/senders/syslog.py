"""Sender that writes one depth-limited text line per record to syslog."""

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

from log_router.exceptions import InvalidArgumentError
from log_router.inspector import DEFAULT_DEPTH, inspect, validate_depth
from log_router.senders.base import SenderBase

DEFAULT_OPTIONS = {
    "depth": DEFAULT_DEPTH,
}


@runtime_checkable
class SyslogBackend(Protocol):
    """What SyslogSender needs from a syslog client.

    ``level`` and ``facility`` map numeric codes to their textual names.
    """

    level: Mapping
    facility: Mapping

    def open(self, ident: str, facility: int) -> None: ...

    def log(self, level: int, text: str) -> None: ...


class SyslogSender(SenderBase):
    """Serialize ``{**context, "message": message}`` and log it to syslog.

    The written line is ``<facility name>.<level name> <rendered record>``.
    Context properties nested deeper than ``options["depth"]`` are replaced
    by an elision marker such as ``[Object]``.

    Args:
        accepted_levels: Levels to forward; empty forwards everything.
        name: Identity passed to ``syslog.open()``.
        facilities: Extra facility-code -> name entries, consulted before
            ``syslog.facility``.
        facility: Numeric syslog facility, e.g. 16 for local0.
        syslog: Backend satisfying ``SyslogBackend``.
        options: Formatting options; only ``depth`` is recognized
            (None for unlimited).
    """

    def __init__(self, accepted_levels, name, facilities, facility, syslog, options=None):
        super().__init__(accepted_levels)
        if not isinstance(syslog, SyslogBackend):
            raise InvalidArgumentError(
                "SyslogSender: syslog backend must provide open(), log() "
                "and level/facility name tables"
            )
        if isinstance(facility, bool) or not isinstance(facility, int):
            raise InvalidArgumentError(
                f"SyslogSender: facility must be an integer, got {facility!r}"
            )

        merged = dict(DEFAULT_OPTIONS)
        merged.update(options or {})
        self.options = merged
        self.depth = validate_depth(merged["depth"])

        self.name = name
        self.facility = facility
        self.syslog = syslog
        facilities = facilities or {}
        self.facility_name = facilities.get(
            facility, syslog.facility.get(facility, str(facility))
        )
        self.syslog.open(name, facility)

    def serialize(self, message, context) -> str:
        """Render the record as one line, honouring the depth option.

        The message is rendered as the ``message`` key of the context, so it
        replaces any ``message`` key the caller's context carries.
        """
        doc = dict(context) if context else {}
        doc["message"] = message
        return inspect(doc, self.depth)

    def write(self, level, message, context):
        level_name = self.syslog.level.get(level, str(level))
        line = f"{self.facility_name}.{level_name} {self.serialize(message, context)}"
        self.syslog.log(level, line)
