"""Category/type lookup table over a trace's raw events."""

import threading
from enum import Enum
from typing import Callable, Dict, Iterable, List, Union

from qlogview.errors import BuildDiagnostic, EventDataError
from qlogview.logging_config import get_logger
from qlogview.trace.schema import ParsedEvent, RawEvent

logger = get_logger(__name__)


class LookupTable:
    """Two-level index: category -> event type -> raw events in trace order.

    The table is built once from a full pass over the events and is then
    read many times. Every successfully parsed event is referenced from
    exactly one bucket; events the parser cannot classify are skipped and
    reported as diagnostics.
    """

    def __init__(self):
        """Initialize an empty (unbuilt) lookup table."""
        self._table: Dict[str, Dict[str, List[RawEvent]]] = {}
        self._built = False
        self._lock = threading.RLock()
        self.diagnostics: List[BuildDiagnostic] = []

    @property
    def built(self) -> bool:
        return self._built

    @property
    def lock(self):
        """Lock held while the table is built or cleared.

        Owners hold it while replacing the inputs the table is derived from.
        """
        return self._lock

    def build(
        self,
        events: Union[Iterable[RawEvent], Callable[[], Iterable[RawEvent]]],
        parse: Callable[[RawEvent], ParsedEvent],
    ) -> List[BuildDiagnostic]:
        """Populate the table from events, unless it is already built.

        Args:
            events: Raw events in trace order, or a callable returning them.
                A callable is read under the lock.
            parse: Callable producing the parsed view of a raw event.

        Returns:
            Diagnostics for events that were skipped (empty if none).
        """
        with self._lock:
            if self._built:
                return self.diagnostics

            if callable(events):
                events = events()

            table: Dict[str, Dict[str, List[RawEvent]]] = {}
            diagnostics: List[BuildDiagnostic] = []
            indexed = 0

            for index, evt in enumerate(events):
                try:
                    parsed = parse(evt)
                except EventDataError as e:
                    diagnostics.append(BuildDiagnostic(index=index, raw_event=evt, reason=str(e)))
                    logger.warning(
                        "Skipping event %d in lookup table: %s",
                        index,
                        e,
                        extra={"context": {"index": index}},
                    )
                    continue

                category_table = table.setdefault(parsed.category, {})
                category_table.setdefault(parsed.name, []).append(evt)
                indexed += 1

            self._table = table
            self.diagnostics = diagnostics
            self._built = True

            logger.debug(
                "Built lookup table: %d events in %d categories, %d skipped",
                indexed,
                len(table),
                len(diagnostics),
            )
            return diagnostics

    def lookup(self, category: Union[str, Enum], event_type: Union[str, Enum]) -> List[RawEvent]:
        """Get the events of a category and type.

        Args:
            category: Event category.
            event_type: Event type within the category.

        Returns:
            The bucket (in trace order), or an empty list if there is none.
        """
        if isinstance(category, Enum):
            category = category.value
        if isinstance(event_type, Enum):
            event_type = event_type.value

        category_table = self._table.get(category)
        if category_table is None:
            return []
        return category_table.get(event_type, [])

    def categories(self) -> List[str]:
        """Get indexed categories in first-seen order."""
        return list(self._table.keys())

    def event_types(self, category: Union[str, Enum]) -> List[str]:
        """Get indexed event types of a category in first-seen order."""
        if isinstance(category, Enum):
            category = category.value
        return list(self._table.get(category, {}).keys())

    def clear(self):
        """Drop all buckets and return to the unbuilt state."""
        with self._lock:
            self._table = {}
            self.diagnostics = []
            self._built = False

    def __len__(self) -> int:
        return sum(len(bucket) for category_table in self._table.values() for bucket in category_table.values())
