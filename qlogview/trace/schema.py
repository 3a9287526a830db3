"""Schema for qlog trace metadata and parsed events."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from qlogview.config import DEFAULT_TIME_OFFSET, DEFAULT_TIME_UNITS

# A positional ("flat") qlog event. Field meanings come from the trace's
# event_field_names declaration, not from the record itself.
RawEvent = List[Any]


class EventCategory(str, Enum):
    """Well-known qlog event categories."""

    CONNECTIVITY = "connectivity"
    SECURITY = "security"
    TRANSPORT = "transport"
    RECOVERY = "recovery"
    HTTP = "http"
    QPACK = "qpack"
    SIMULATION = "simulation"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"
    VERBOSE = "verbose"


class VantagePointType(str, Enum):
    """Role of the endpoint that captured a trace."""

    CLIENT = "client"
    SERVER = "server"
    NETWORK = "network"
    UNKNOWN = "unknown"


class VantagePoint(BaseModel):
    """Who captured the trace."""

    model_config = ConfigDict(extra="allow", use_enum_values=True)

    name: Optional[str] = Field(None, description="Human readable vantage point name")
    type: VantagePointType = Field(VantagePointType.UNKNOWN, description="Vantage point role")
    flow: Optional[VantagePointType] = Field(
        None, description="Perspective of the data when type is network"
    )


class Configuration(BaseModel):
    """Time unit and offset semantics of a trace."""

    model_config = ConfigDict(extra="allow")

    time_offset: str = Field(DEFAULT_TIME_OFFSET, description="Offset added to every timestamp")
    time_units: str = Field(DEFAULT_TIME_UNITS, description="Unit of timestamps, ms or us")
    original_uris: List[str] = Field(default_factory=list, description="Where the trace came from")


@dataclass(frozen=True)
class ParsedEvent:
    """Read-only, named view of one positional event.

    Attributes:
        timestamp: Event time, already offset by the trace reference time
            where the declaration uses relative times.
        category: Event category (e.g. "transport").
        name: Event type within the category (e.g. "packet_sent").
        data: Opaque event payload.
        extra: Trailing positional values the declaration does not name.
        raw: The positional record this view was produced from.
    """

    timestamp: Any
    category: str
    name: str
    data: Any = None
    extra: Tuple[Any, ...] = ()
    raw: RawEvent = field(default_factory=list, repr=False, compare=False)
