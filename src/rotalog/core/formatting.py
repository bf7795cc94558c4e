from __future__ import annotations

"""
Message Formatting Engine.

Turns the variadic arguments of a log call into a single message body
and lays out the final line. Two modes are supported:

1. Template mode: the first argument is a string carrying printf-style
   directives (%s, %d, %i, %f, %j, %o, %O, %c, %%). Directives consume
   the following arguments in order.
2. Join mode: every argument is rendered and joined by a single space.

Composite values (mappings, sequences, sets, dataclasses) are rendered
as indented JSON before either mode runs, so directives always see the
rendered text. Scalars pass through unchanged.
"""

import dataclasses
import json
import logging
import math
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Iterator, Optional, Union

_DIRECTIVE_RE = re.compile(r"%[sdifjoOc%]")
_COMPOSITE_TYPES = (Mapping, list, tuple, set, frozenset)
_JSON_INDENT = 2

# -----------------------------------------------------------------------------
# ARGUMENT RENDERING
# -----------------------------------------------------------------------------

def is_composite(value: Any) -> bool:
    """Return True for values rendered as structured text."""
    if isinstance(value, _COMPOSITE_TYPES):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def render_argument(value: Any) -> Any:
    """
    Render a single log argument.

    Args:
        value: Any object passed to a log call.

    Returns:
        Any: Indented JSON text for composite values, the value itself otherwise.
    """
    if is_composite(value):
        return _to_json(value, indent=_JSON_INDENT)
    return value


def format_message(*args: Any) -> str:
    """
    Combine log call arguments into one message body.

    Args:
        *args: Positional arguments of the log call.

    Returns:
        str: The formatted message.
    """
    if not args:
        return ""

    rendered = [render_argument(a) for a in args]

    first = rendered[0]
    if isinstance(first, str) and len(rendered) > 1 and _DIRECTIVE_RE.search(first):
        remaining = iter(rendered[1:])
        body = _DIRECTIVE_RE.sub(lambda m: _substitute(m.group(0), remaining), first)
        leftovers = [str(a) for a in remaining]
        return " ".join([body] + leftovers)

    return " ".join(str(a) for a in rendered)


# -----------------------------------------------------------------------------
# LINE LAYOUT
# -----------------------------------------------------------------------------

def format_timestamp(moment: datetime) -> str:
    """Render 'YYYY-M-D H:M:S' without zero padding."""
    return (
        f"{moment.year}-{moment.month}-{moment.day} "
        f"{moment.hour}:{moment.minute}:{moment.second}"
    )


def build_line(timestamp: str, context: Optional[str], tag: str, message: str) -> str:
    """Assemble '<timestamp> | <context >| <LEVEL> | <message>'."""
    label = f"{context} " if context else ""
    return f"{timestamp} | {label}| {tag} | {message}"


class LineFormatter(logging.Formatter):
    """
    Formatter producing the plain (unstyled) line layout.

    The printed level tag is read from the record's 'level_tag' attribute,
    falling back to the stdlib level name for foreign records.
    """

    def __init__(self, context: Optional[str] = None) -> None:
        super().__init__()
        self.context = context

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        return format_timestamp(datetime.fromtimestamp(record.created))

    def format(self, record: logging.LogRecord) -> str:
        tag = getattr(record, "level_tag", record.levelname)
        return build_line(self.formatTime(record), self.context, tag, record.getMessage())


# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _substitute(directive: str, remaining: Iterator[Any]) -> str:
    if directive == "%%":
        return "%"

    sentinel = object()
    value = next(remaining, sentinel)
    if value is sentinel:
        return directive

    if directive == "%s":
        return str(value)
    if directive == "%d":
        return _number_text(_to_number(value))
    if directive == "%i":
        number = _to_number(value)
        if number is None or not math.isfinite(number):
            return "NaN"
        return str(int(number))
    if directive == "%f":
        number = _to_number(value)
        return "NaN" if number is None else _number_text(float(number))
    if directive == "%j":
        return _to_json(value)
    if directive in ("%o", "%O"):
        return _to_json(value, indent=_JSON_INDENT)
    # %c carries CSS styling in browsers; consumed and dropped
    return ""


def _to_json(value: Any, indent: Optional[int] = None) -> str:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = dataclasses.asdict(value)
    return json.dumps(value, indent=indent, ensure_ascii=False, default=_json_default)


def _json_default(value: Any) -> Any:
    if isinstance(value, (set, frozenset)):
        return list(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    return str(value)


def _to_number(value: Any) -> Optional[Union[int, float]]:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return number
    return int(number) if number.is_integer() else number


def _number_text(number: Optional[Union[int, float]]) -> str:
    if number is None or number != number:
        return "NaN"
    if isinstance(number, float) and number.is_integer():
        return str(int(number))
    return str(number)
