"""Pytest configuration and fixtures."""

import pytest

from qlogview.group import TraceGroup
from qlogview.trace.connection import Trace
from qlogview.trace.parser import PositionalEventParser

FIELD_NAMES = ["time", "category", "name", "data"]


@pytest.fixture
def sample_events():
    """Three events in two categories."""
    return [
        [0, "transport", "packet_sent", {}],
        [1, "transport", "packet_received", {}],
        [2, "http", "frame_sent", {}],
    ]


@pytest.fixture
def group():
    """Create an empty trace group."""
    return TraceGroup(title="test.qlog")


@pytest.fixture
def trace(group, sample_events):
    """Create a trace with sample events and a positional parser attached."""
    t = Trace(group)
    t.title = "client trace"
    t.event_field_names = list(FIELD_NAMES)
    t.set_events(sample_events)
    t.set_event_parser(PositionalEventParser())
    return t


class RecordingParser:
    """Parser wrapper that counts load() calls."""

    def __init__(self):
        self.inner = PositionalEventParser()
        self.init_calls = 0
        self.load_calls = 0

    def init(self, trace):
        self.init_calls += 1
        self.inner.init(trace)

    def load(self, raw_event):
        self.load_calls += 1
        return self.inner.load(raw_event)


@pytest.fixture
def recording_parser():
    return RecordingParser()
