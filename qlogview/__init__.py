"""Trace model and category/type lookup for qlog event logs."""

from qlogview.errors import (
    BuildDiagnostic,
    EventDataError,
    EventResolutionError,
    ParserNotAttachedError,
    ParserNotInitializedError,
    QlogViewError,
    TraceMisuseError,
)
from qlogview.group import TraceGroup
from qlogview.trace import (
    Configuration,
    EventCategory,
    LookupTable,
    ParsedEvent,
    PositionalEventParser,
    Trace,
    VantagePoint,
    VantagePointType,
)

__version__ = "0.1.0"

__all__ = [
    "Trace",
    "TraceGroup",
    "LookupTable",
    "PositionalEventParser",
    "ParsedEvent",
    "Configuration",
    "EventCategory",
    "VantagePoint",
    "VantagePointType",
    "QlogViewError",
    "TraceMisuseError",
    "ParserNotAttachedError",
    "ParserNotInitializedError",
    "EventDataError",
    "EventResolutionError",
    "BuildDiagnostic",
]
