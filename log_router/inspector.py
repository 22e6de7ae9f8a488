"""Depth-limited structural rendering of arbitrary values on a single line.

Used wherever a context has to become text: syslog lines, console output,
and the diagnostic fallback of ``stringify``.

Rendering rules:
    - mappings render as ``{ key: value, ... }``
    - lists and tuples render as ``[ a, b ]``
    - sets render as ``Set { a, b }``
    - other objects render as ``ClassName { attr: value }``
    - strings, numbers, bytes and None render with ``repr()``

The top-level container is always expanded. A nested container is expanded
while the remaining depth budget is non-negative; past that it is replaced by
an elision marker (``[Object]``, ``[Array]``, ``[Set]`` or ``[ClassName]``).
A container that contains itself renders as ``[Circular]``.
"""

import dataclasses
import datetime
import numbers
import re
import types
from collections.abc import Mapping

from log_router.exceptions import InvalidArgumentError

DEFAULT_DEPTH = 2

CIRCULAR = "[Circular]"

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_ROUTINE_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.BuiltinMethodType,
)


def validate_depth(depth):
    """Return *depth* if it is None or a non-negative int, else raise."""
    if depth is None:
        return None
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        raise InvalidArgumentError(
            f"Depth must be a non-negative integer or None, got {depth!r}"
        )
    return depth


def instance_attributes(value) -> dict:
    """Return a new plain dict of an object's own attributes.

    Dataclass fields win over ``vars()``, which wins over ``__slots__``.
    Objects exposing none of these give an empty dict.
    """
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    try:
        return dict(vars(value))
    except TypeError:
        pass

    attrs = {}
    for cls in type(value).__mro__:
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for slot in slots:
            if slot in ("__dict__", "__weakref__") or slot in attrs:
                continue
            if hasattr(value, slot):
                attrs[slot] = getattr(value, slot)
    return attrs


def _has_attributes(value) -> bool:
    if dataclasses.is_dataclass(value):
        return True
    if hasattr(value, "__dict__"):
        return True
    return any(cls.__dict__.get("__slots__") for cls in type(value).__mro__)


def inspect(value, depth=DEFAULT_DEPTH) -> str:
    """Render *value* on one line, expanding at most *depth* nested levels.

    Args:
        value: Anything.
        depth: Nesting budget below the top-level container. None means
            unlimited.

    Raises:
        InvalidArgumentError: If depth is neither None nor a non-negative int.
    """
    return _render(value, validate_depth(depth), set())


def _format_key(key) -> str:
    if isinstance(key, str) and _IDENTIFIER_RE.match(key):
        return key
    return repr(key)


def _render(value, remaining, seen: set) -> str:
    if value is None or isinstance(value, (str, bytes, bytearray, numbers.Number)):
        return repr(value)
    if isinstance(value, (datetime.date, datetime.time)):
        return value.isoformat()
    if isinstance(value, type):
        return f"[class {value.__name__}]"
    if isinstance(value, _ROUTINE_TYPES):
        return f"[Function: {getattr(value, '__qualname__', value.__name__)}]"

    if isinstance(value, Mapping):
        kind, marker = "mapping", "[Object]"
    elif isinstance(value, (list, tuple)):
        kind, marker = "sequence", "[Array]"
    elif isinstance(value, (set, frozenset)):
        kind, marker = "set", "[Set]"
    elif _has_attributes(value):
        kind, marker = "object", f"[{type(value).__name__}]"
    else:
        return repr(value)

    if id(value) in seen:
        return CIRCULAR
    if remaining is not None and remaining < 0:
        return marker

    child_budget = None if remaining is None else remaining - 1
    seen.add(id(value))
    try:
        if kind == "mapping":
            parts = [
                f"{_format_key(k)}: {_render(v, child_budget, seen)}"
                for k, v in value.items()
            ]
            prefix = "" if type(value) is dict else f"{type(value).__name__} "
            return prefix + (f"{{ {', '.join(parts)} }}" if parts else "{}")

        if kind == "sequence":
            parts = [_render(item, child_budget, seen) for item in value]
            return f"[ {', '.join(parts)} ]" if parts else "[]"

        if kind == "set":
            parts = [_render(item, child_budget, seen) for item in value]
            return f"Set {{ {', '.join(parts)} }}" if parts else "Set {}"

        attrs = instance_attributes(value)
        parts = [
            f"{_format_key(k)}: {_render(v, child_budget, seen)}"
            for k, v in attrs.items()
        ]
        body = f"{{ {', '.join(parts)} }}" if parts else "{}"
        return f"{type(value).__name__} {body}"
    finally:
        seen.discard(id(value))
