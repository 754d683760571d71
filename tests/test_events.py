# coding: utf-8

# ====================================================
# imports
import logging
import pytest

from kiln import Event
from kiln import EventKind
from kiln import InvalidConfiguration
from kiln import LoggingSink
from kiln import SimpleCoolingSchedule
from kiln import SimulatedAnnealing
from kiln.events import format_event
from kiln.events import parse_sinks

from conftest import WalkSystem


# ====================================================
# code
def test_parse_sinks():
    def sink(event):
        pass

    assert parse_sinks(None) == ()
    assert parse_sinks(sink) == (sink,)
    assert parse_sinks([sink, print]) == (sink, print)

    with pytest.raises(InvalidConfiguration):
        parse_sinks(42)

    with pytest.raises(InvalidConfiguration):
        parse_sinks([sink, "print"])


def test_event_sequence():
    events = []
    schedule = SimpleCoolingSchedule(10, 1, 0.5)

    SimulatedAnnealing(WalkSystem(start=50), schedule, 4, seed=0, sinks=events.append).optimize()

    kinds = [e.kind for e in events]

    assert kinds[0] is EventKind.INITIAL
    assert kinds[-1] is EventKind.FINAL
    assert kinds.count(EventKind.DECREASED) == schedule.nb_steps()
    assert kinds.count(EventKind.ACCEPTED) + kinds.count(EventKind.REJECTED) == 4 * schedule.nb_steps()

    assert events[0].temperature == 10 and events[0].minimum == 1 and events[0].cost == 50

    for event in events:
        if event.kind in (EventKind.ACCEPTED, EventKind.REJECTED):
            assert 0 <= event.acceptance_probability <= 1
            assert 0 <= event.iteration < 4
            assert event.cost == abs(event.value)


def test_logging_sink(caplog):
    schedule = SimpleCoolingSchedule(10, 1, 0.5)

    with caplog.at_level(logging.INFO, logger="kiln.events"):
        SimulatedAnnealing(WalkSystem(start=50), schedule, 2, seed=0, sinks=LoggingSink()).optimize()

    messages = [record.getMessage() for record in caplog.records]

    assert messages[0] == "Initial solution 50 (cost=50.0) at T=10.0 until 1.0"
    assert messages[-1].startswith("Accepted solution")
    assert sum(m.startswith("Decreased temperature to") for m in messages) == 4
    assert sum(m.startswith(("Accepted ", "Rejected ")) for m in messages) == 2 * 4 + 1


def test_logging_sink_level():
    logger = logging.getLogger("kiln.test")
    records = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    logger.addHandler(ListHandler())
    logger.setLevel(logging.INFO)

    try:
        LoggingSink(logger, level=logging.DEBUG)(Event(kind=EventKind.DECREASED, temperature=2.0))
        assert records == []

        LoggingSink(logger, level=logging.WARNING)(Event(kind=EventKind.DECREASED, temperature=2.0))
        assert records[0].getMessage() == "Decreased temperature to 2.0"
        assert records[0].levelno == logging.WARNING

    finally:
        logger.handlers.clear()


def test_format_event():
    assert (
        format_event(Event(kind=EventKind.INITIAL, value=0, cost=0.0))
        == "Initial solution 0 (cost=0.0)"
    )
    assert (
        format_event(
            Event(
                kind=EventKind.REJECTED,
                value=3,
                cost=3.0,
                temperature=1.5,
                iteration=2,
                acceptance_probability=0.25,
            )
        )
        == "Rejected 3 (cost=3.0, ap=0.25) at T=1.5, iter=2"
    )
    assert (
        format_event(Event(kind=EventKind.FINAL, value=0, cost=0.0))
        == "Accepted solution 0 (cost=0.0, initial)"
    )
    assert (
        format_event(Event(kind=EventKind.FINAL, value=0, cost=0.0, temperature=4.0, iteration=7))
        == "Accepted solution 0 (cost=0) at T=4.0, iter=7"
    )
    assert (
        format_event(Event(kind=EventKind.FINAL, value=2, cost=2.0, temperature=0.5, best=True))
        == "Accepted solution 2 (cost=2.0, best so far)"
    )
