"""
Protocol-based interfaces for qlogview collaborators.

These protocols define the contracts that event parsers and trace groups
must implement to work with a Trace.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Protocol

from qlogview.trace.schema import ParsedEvent, RawEvent

if TYPE_CHECKING:
    from qlogview.trace.connection import Trace


class EventParser(Protocol):
    """
    Protocol for interpreting positional events.

    qlog events are flat lists whose member names are declared separately
    (event_fields), and the declaration can differ between format versions.
    A parser figures out which index means what, so the trace and its
    lookup table never assume a field order.
    """

    def init(self, trace: "Trace") -> None:
        """
        Bind the parser to a trace's field declaration and common fields.

        Args:
            trace: Trace whose event_field_names and common_fields apply.
        """
        ...

    def load(self, raw_event: RawEvent) -> ParsedEvent:
        """
        Produce the named view of a positional event.

        Args:
            raw_event: Positional record from the bound trace.

        Returns:
            ParsedEvent with timestamp, category, name and data resolved.

        Raises:
            ParserNotInitializedError: If init() was never called.
            EventResolutionError: If category or name cannot be resolved.
        """
        ...


class FieldDeclarationSource(Protocol):
    """Anything carrying a qlog field declaration (normally a Trace)."""

    event_field_names: List[str]
    common_fields: Dict[str, Any]


class ConnectionOwner(Protocol):
    """
    Protocol for the group a trace belongs to.

    A trace registers itself with its owner on construction and keeps a
    non-owning back-reference to it.
    """

    def add_connection(self, trace: "Trace") -> None:
        """Register a trace with this group."""
        ...
