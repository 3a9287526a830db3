"""Exceptions raised by qlogview.

Misuse errors signal an integration bug and propagate immediately. Data
errors concern a single event and are recoverable: the index build skips
the offending event and reports a diagnostic instead of aborting.
"""

from dataclasses import dataclass
from typing import Any, Optional


class QlogViewError(Exception):
    """Base class for all qlogview errors."""


class TraceMisuseError(QlogViewError, RuntimeError):
    """A trace or parser was used in the wrong order."""


class ParserNotAttachedError(TraceMisuseError):
    """A trace was asked to parse events before a parser was attached."""

    def __init__(self, title: Optional[str] = None):
        message = "no event parser attached to trace"
        if title:
            message = f"{message} '{title}'"
        super().__init__(message + "; call set_event_parser() first")


class ParserNotInitializedError(TraceMisuseError):
    """A parser was asked to load an event before init(trace) was called."""


class EventDataError(QlogViewError, ValueError):
    """A single event could not be interpreted."""


class EventResolutionError(EventDataError):
    """The category or name of an event could not be resolved.

    Attributes:
        field: Name of the field that failed to resolve.
        raw_event: The positional record that was being parsed.
    """

    def __init__(self, field: str, raw_event: Any, detail: str = ""):
        self.field = field
        self.raw_event = raw_event
        message = f"cannot resolve '{field}' for event {raw_event!r}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


@dataclass
class BuildDiagnostic:
    """An event skipped while building the lookup table."""

    index: int  # position in the trace's event list
    raw_event: Any
    reason: str
