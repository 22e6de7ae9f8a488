"""Normalize arbitrary inbound values into storable contexts and messages."""

import datetime
import functools
import numbers
from collections.abc import Mapping

from log_router.inspector import inspect, instance_attributes


@functools.singledispatch
def objectify(value):
    """Return a plain dict for any kind of context value.

    - plain dicts are returned as-is (same object, no copy)
    - other mappings, dict subclasses included, become a new dict with the
      same items
    - lists and tuples become ``{"0": first, "1": second, ...}``
    - scalars (str, bytes, numbers, bools, None) become ``{"value": value}``
    - datetimes and dates become an ISO-8601 UTC string, the only
      non-dict result
    - any other object becomes a new dict of its own attributes
    """
    return instance_attributes(value)


@objectify.register(dict)
def _objectify_dict(value):
    # dict subclasses (OrderedDict, defaultdict...) are downgraded too.
    return value if type(value) is dict else dict(value)


@objectify.register(Mapping)
def _objectify_mapping(value):
    return dict(value)


@objectify.register(list)
@objectify.register(tuple)
def _objectify_sequence(value):
    return {str(index): item for index, item in enumerate(value)}


@objectify.register(type(None))
@objectify.register(str)
@objectify.register(bytes)
@objectify.register(numbers.Number)
def _objectify_scalar(value):
    return {"value": value}


@objectify.register(datetime.datetime)
def _objectify_datetime(value):
    return to_iso_utc(value)


@objectify.register(datetime.date)
def _objectify_date(value):
    return to_iso_utc(datetime.datetime(value.year, value.month, value.day))


def to_iso_utc(value: datetime.datetime) -> str:
    """Format a datetime as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC.

    Naive datetimes are assumed to already be UTC.
    """
    if value.tzinfo is not None:
        value = value.astimezone(datetime.timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def stringify(record) -> str:
    """Return a plain message string from any shape of record.

    A string is its own message. A mapping contributes its ``message`` entry,
    converted with ``str()`` when it is not already a string. Mappings without
    a message, and sequences, are dumped structurally for diagnostics.
    """
    if isinstance(record, str):
        return record
    if isinstance(record, Mapping):
        message = record.get("message")
        if message is None:
            return inspect(record)
        return message if isinstance(message, str) else str(message)
    if isinstance(record, (list, tuple)):
        return inspect(record)
    return str(record)
