"""Group of traces loaded together (e.g. from one qlog file)."""

from typing import List, Optional

from qlogview.logging_config import get_logger
from qlogview.trace.connection import Trace

logger = get_logger(__name__)


class TraceGroup:
    """Owns the traces of one qlog file.

    Traces register themselves on construction through add_connection, so
    creating a Trace(group) is enough to add it.
    """

    def __init__(self, title: str = "NewGroup", description: str = ""):
        """Initialize an empty group.

        Args:
            title: Group title (usually the file name).
            description: Free text description.
        """
        self.title = title
        self.description = description
        self.connections: List[Trace] = []

    def add_connection(self, trace: Trace):
        """Register a trace with this group.

        Args:
            trace: Trace to add. Adding the same trace twice is a no-op.
        """
        if any(existing is trace for existing in self.connections):
            return
        self.connections.append(trace)
        logger.debug("Added trace #%d to group '%s'", len(self.connections), self.title)

    def remove_connection(self, trace: Trace) -> bool:
        """Remove a trace from this group.

        Args:
            trace: Trace to remove.

        Returns:
            True if the trace was part of the group.
        """
        for i, existing in enumerate(self.connections):
            if existing is trace:
                del self.connections[i]
                return True
        return False

    def find_connection(self, title: str) -> Optional[Trace]:
        """Get the first trace with the given title, or None."""
        for trace in self.connections:
            if trace.title == title:
                return trace
        return None

    def __len__(self) -> int:
        return len(self.connections)
