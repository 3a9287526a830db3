"""A single qlog trace: raw events, parser, lookup table and metadata."""

import copy
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

from qlogview.config import DEFAULT_TITLE
from qlogview.errors import BuildDiagnostic, ParserNotAttachedError
from qlogview.logging_config import get_logger
from qlogview.trace.lookup import LookupTable
from qlogview.trace.schema import Configuration, ParsedEvent, RawEvent, VantagePoint

if TYPE_CHECKING:
    from qlogview.core.interfaces import ConnectionOwner, EventParser

logger = get_logger(__name__)


class Trace:
    """One captured sequence of events from a single vantage point.

    Events are stored as given: plain lists, never wrapped or instrumented
    for change tracking. Consumers re-read them explicitly. get_events()
    returns the live list, so replace events through set_events() or the
    lookup table silently goes stale.
    """

    def __init__(self, parent: "ConnectionOwner"):
        """Initialize an empty trace and register it with its group.

        Args:
            parent: Group owning this trace. Only a back-reference is kept.
        """
        self.parent = parent
        self.title = DEFAULT_TITLE
        self.description = ""

        self.event_field_names: List[str] = []
        self.common_fields: Dict[str, Any] = {}
        self._configuration = Configuration()
        self._vantage_point: Optional[VantagePoint] = None

        self._events: List[RawEvent] = []
        self._event_parser: Optional["EventParser"] = None
        self._lookup_table = LookupTable()

        self.parent.add_connection(self)

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @configuration.setter
    def configuration(self, value: Union[Configuration, Dict[str, Any], None]):
        # qlog metadata usually arrives as plain dicts
        self._configuration = Configuration() if value is None else Configuration.model_validate(value)

    @property
    def vantage_point(self) -> Optional[VantagePoint]:
        return self._vantage_point

    @vantage_point.setter
    def vantage_point(self, value: Union[VantagePoint, Dict[str, Any], None]):
        self._vantage_point = None if value is None else VantagePoint.model_validate(value)

    def clone(self) -> "Trace":
        """Create a deep copy of this trace under the same parent.

        This copies every event and is slow on large traces: use it
        sparingly. The parser is shared with the clone (parsers are
        stateless per format). The lookup table is not copied; the clone
        starts unbuilt.

        Returns:
            New Trace, already registered with the parent.
        """
        output = Trace(self.parent)

        output.title = self.title
        output.description = self.description
        output.event_field_names = list(self.event_field_names)
        output.common_fields = copy.deepcopy(self.common_fields)
        output.configuration = self.configuration.model_copy(deep=True)
        if self.vantage_point is not None:
            output.vantage_point = self.vantage_point.model_copy(deep=True)
        output._events = copy.deepcopy(self._events)

        output._event_parser = self._event_parser

        return output

    def set_event_parser(self, parser: "EventParser"):
        """Attach a parser and bind it to this trace's declaration.

        A lookup table built with a previous parser is dropped, since the
        new parser may classify events differently.

        Args:
            parser: Parser for this trace's format.
        """
        with self._lookup_table.lock:
            if self._lookup_table.built and parser is not self._event_parser:
                logger.debug("Parser replaced on trace '%s', clearing lookup table", self.title)
                self._lookup_table.clear()

            self._event_parser = parser
            self._event_parser.init(self)

    def get_event_parser(self) -> Optional["EventParser"]:
        return self._event_parser

    def parse_event(self, evt: RawEvent) -> ParsedEvent:
        """Parse one raw event with the attached parser.

        Raises:
            ParserNotAttachedError: If no parser is attached.
        """
        if self._event_parser is None:
            raise ParserNotAttachedError(self.title)
        return self._event_parser.load(evt)

    def set_events(self, events: List[RawEvent]):
        """Replace all events and invalidate the lookup table.

        Args:
            events: New positional events, stored as given.
        """
        with self._lookup_table.lock:
            self._events = events
            self._lookup_table.clear()

    def get_events(self) -> List[RawEvent]:
        return self._events

    def setup_lookup_table(self) -> List[BuildDiagnostic]:
        """Build the category/type lookup table, once.

        Events whose category or name cannot be resolved are skipped.

        Returns:
            Diagnostics for skipped events.

        Raises:
            ParserNotAttachedError: If no parser is attached.
        """
        if self._event_parser is None:
            raise ParserNotAttachedError(self.title)
        return self._lookup_table.build(self.get_events, self.parse_event)

    @property
    def is_lookup_table_built(self) -> bool:
        return self._lookup_table.built

    @property
    def lookup_table(self) -> LookupTable:
        return self._lookup_table

    @property
    def diagnostics(self) -> List[BuildDiagnostic]:
        """Events skipped by the last lookup table build."""
        return self._lookup_table.diagnostics

    def lookup(self, category: Union[str, Enum], event_type: Union[str, Enum]) -> List[RawEvent]:
        """Get all events of a category and type, in trace order.

        Does not build the lookup table: on an unbuilt table every lookup
        returns an empty list. Call setup_lookup_table() first.

        Args:
            category: Event category (e.g. "transport").
            event_type: Event type (e.g. "packet_sent").

        Returns:
            Matching raw events, or an empty list.
        """
        return self._lookup_table.lookup(category, event_type)

    def __repr__(self) -> str:
        return f"Trace(title={self.title!r}, events={len(self._events)})"
