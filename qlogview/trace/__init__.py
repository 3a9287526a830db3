"""qlog traces and their category/type lookup."""

from qlogview.trace.connection import Trace
from qlogview.trace.lookup import LookupTable
from qlogview.trace.parser import PositionalEventParser
from qlogview.trace.schema import (
    Configuration,
    EventCategory,
    ParsedEvent,
    RawEvent,
    VantagePoint,
    VantagePointType,
)

__all__ = [
    "Trace",
    "LookupTable",
    "PositionalEventParser",
    "Configuration",
    "EventCategory",
    "ParsedEvent",
    "RawEvent",
    "VantagePoint",
    "VantagePointType",
]
