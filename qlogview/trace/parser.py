"""Declaration-driven parser for positional qlog events."""

from numbers import Number
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from qlogview.config import NAME_FIELDS, TIME_FIELDS
from qlogview.errors import EventResolutionError, ParserNotInitializedError
from qlogview.trace.schema import ParsedEvent, RawEvent

if TYPE_CHECKING:
    from qlogview.core.interfaces import FieldDeclarationSource


def _first_declared(field_names: List[str], candidates: Tuple[str, ...], common_fields: Dict[str, Any]) -> Optional[str]:
    """Pick the first candidate that is declared per event or in common fields."""
    for candidate in candidates:
        if candidate in field_names:
            return candidate
    for candidate in candidates:
        if candidate in common_fields:
            return candidate
    return None


def _is_number(value: Any) -> bool:
    return isinstance(value, Number) and not isinstance(value, bool)


class PositionalEventParser:
    """Resolve positional events purely from the trace's field declaration.

    The parser has no notion of a specific qlog draft: it looks up each
    named field by its declared position and falls back to the trace's
    common fields when an event is shorter than the declaration. Values
    beyond the declaration are kept in ParsedEvent.extra.

    A parser holds no per-event state, so one instance can be shared by a
    trace and its clones.
    """

    def __init__(self):
        """Initialize an unbound parser."""
        self._positions: Optional[Dict[str, int]] = None
        self._field_count = 0
        self._common_fields: Dict[str, Any] = {}
        self._time_field: Optional[str] = None
        self._name_field: Optional[str] = None

    @property
    def initialized(self) -> bool:
        return self._positions is not None

    def init(self, trace: "FieldDeclarationSource") -> None:
        """Bind to a trace's declaration.

        Calling init again re-reads the declaration.

        Args:
            trace: Trace providing event_field_names and common_fields.
        """
        field_names = list(trace.event_field_names)
        self._positions = {}
        for position, field_name in enumerate(field_names):
            # first declaration of a duplicated name wins
            self._positions.setdefault(field_name, position)
        self._field_count = len(field_names)
        self._common_fields = trace.common_fields
        self._time_field = _first_declared(field_names, TIME_FIELDS, self._common_fields)
        self._name_field = _first_declared(field_names, NAME_FIELDS, self._common_fields)

    def load(self, raw_event: RawEvent) -> ParsedEvent:
        """Produce the named view of a positional event.

        Args:
            raw_event: Positional record.

        Returns:
            ParsedEvent for the record.

        Raises:
            ParserNotInitializedError: If init() was never called.
            EventResolutionError: If category or name cannot be resolved.
        """
        if self._positions is None:
            raise ParserNotInitializedError("PositionalEventParser.load() called before init()")
        if not isinstance(raw_event, (list, tuple)):
            raise EventResolutionError("category", raw_event, "event is not a positional list")

        category = self._resolve_label("category", raw_event)
        if self._name_field is None:
            raise EventResolutionError("name", raw_event, "no name field declared")
        name = self._resolve_label(self._name_field, raw_event)

        data = self.get_field("data", raw_event)
        if data is None:
            data = {}

        return ParsedEvent(
            timestamp=self._resolve_timestamp(raw_event),
            category=category,
            name=name,
            data=data,
            extra=tuple(raw_event[self._field_count:]),
            raw=raw_event,
        )

    def get_field(self, field_name: str, raw_event: RawEvent) -> Any:
        """Get a named field of a positional event.

        Args:
            field_name: Declared field name.
            raw_event: Positional record.

        Returns:
            The positional value, the common-field default when the event
            omits it, or None when neither exists.
        """
        position = self._positions.get(field_name) if self._positions else None
        if position is not None and position < len(raw_event):
            return raw_event[position]
        return self._common_fields.get(field_name)

    def _resolve_label(self, field_name: str, raw_event: RawEvent) -> str:
        value = self.get_field(field_name, raw_event)
        if value is None:
            raise EventResolutionError(field_name, raw_event, "field missing")
        if not isinstance(value, str) or not value:
            raise EventResolutionError(field_name, raw_event, f"expected non-empty string, got {value!r}")
        return value

    def _resolve_timestamp(self, raw_event: RawEvent) -> Any:
        if self._time_field is None:
            return None
        value = self.get_field(self._time_field, raw_event)
        if self._time_field != "relative_time":
            return value

        # relative times are offsets from the trace's reference_time
        reference = self._common_fields.get("reference_time", 0)
        if _is_number(reference) and _is_number(value):
            return reference + value
        try:
            return float(reference) + float(value)
        except (TypeError, ValueError):
            return value
