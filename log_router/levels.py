"""RFC 5424 severity scale: 0 is the most severe, 7 the least."""

from log_router.exceptions import InvalidArgumentError

EMERGENCY = 0
ALERT = 1
CRITICAL = 2
ERROR = 3
WARNING = 4
NOTICE = 5
INFORMATIONAL = 6
DEBUG = 7

LEVEL_NAMES = (
    "emergency",
    "alert",
    "critical",
    "error",
    "warning",
    "notice",
    "informational",
    "debug",
)

MOST_SEVERE = EMERGENCY
LEAST_SEVERE = DEBUG


def is_valid_level(level) -> bool:
    """Return True if *level* is an int (not a bool) within [0, 7]."""
    try:
        validate_level(level)
    except InvalidArgumentError:
        return False
    return True


def validate_level(level) -> int:
    """Return *level* unchanged, or raise InvalidArgumentError.

    No coercion is attempted: "5", 4.0 and True are all rejected.
    """
    if isinstance(level, bool) or not isinstance(level, int):
        raise InvalidArgumentError(
            f"Level must be an integer, got {type(level).__name__}: {level!r}"
        )
    if not MOST_SEVERE <= level <= LEAST_SEVERE:
        raise InvalidArgumentError(
            f"Level must be in [{MOST_SEVERE}, {LEAST_SEVERE}], got {level}"
        )
    return level


def level_name(level: int) -> str:
    """Return the lowercase RFC 5424 name of a valid level."""
    return LEVEL_NAMES[validate_level(level)]
