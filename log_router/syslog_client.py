"""Syslog backend built on the standard library's SysLogHandler."""

import logging
import logging.handlers
import socket

# RFC 5424 severity code -> SysLogHandler priority name
LEVEL_NAMES = {
    0: "emerg",
    1: "alert",
    2: "crit",
    3: "err",
    4: "warning",
    5: "notice",
    6: "info",
    7: "debug",
}

FACILITY_NAMES = {
    0: "kern",
    1: "user",
    2: "mail",
    3: "daemon",
    4: "auth",
    5: "syslog",
    6: "lpr",
    7: "news",
    8: "uucp",
    9: "cron",
    10: "authpriv",
    11: "ftp",
    12: "ntp",
    13: "security",
    14: "console",
    15: "solaris-cron",
    16: "local0",
    17: "local1",
    18: "local2",
    19: "local3",
    20: "local4",
    21: "local5",
    22: "local6",
    23: "local7",
}


class _PriorityHandler(logging.handlers.SysLogHandler):
    """SysLogHandler taking the syslog priority straight from levelname."""

    def mapPriority(self, levelName):
        if levelName in self.priority_names:
            return levelName
        return super().mapPriority(levelName)


class SyslogClient:
    """Minimal syslog client: ``open(ident, facility)`` then ``log(level, text)``.

    Messages go over UDP to ``address`` (``(host, port)``) or to a Unix socket
    path such as ``/dev/log``. The PRI header carries the facility and
    severity; the body is ``ident[pid]: text``.
    """

    level = LEVEL_NAMES
    facility = FACILITY_NAMES

    def __init__(self, address=("localhost", 514), socktype=socket.SOCK_DGRAM):
        self._address = address
        self._socktype = socktype
        self._handler = None
        self.ident = None

    def open(self, ident: str, facility: int) -> None:
        """(Re)connect to the daemon, tagging messages with *ident*."""
        self.close()
        self.ident = ident
        handler = _PriorityHandler(
            address=self._address, facility=facility, socktype=self._socktype
        )
        safe_ident = ident.replace("%", "%%")
        handler.setFormatter(logging.Formatter(f"{safe_ident}[%(process)d]: %(message)s"))
        self._handler = handler

    def log(self, level: int, text: str) -> None:
        if self._handler is None:
            raise RuntimeError("SyslogClient.log() called before open()")
        record = logging.LogRecord(
            name=self.ident or "syslog",
            level=logging.INFO,
            pathname=__file__,
            lineno=0,
            msg=text,
            args=None,
            exc_info=None,
        )
        record.levelname = self.level[level]
        self._handler.emit(record)

    def close(self) -> None:
        if self._handler is not None:
            self._handler.close()
            self._handler = None
