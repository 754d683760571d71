# coding: utf-8

"""
Events emitted by the optimizer while it runs, and sinks for consuming them.
"""

# ====================================================
# imports
from __future__ import annotations

import enum
import logging
import collections.abc
from attrs import frozen

from typing import Any
from typing import Generic
from typing import Optional
from typing import Sequence

from kiln.errors import InvalidConfiguration
from kiln.typing import SINK
from kiln.typing import T


# ====================================================
# code
class EventKind(enum.Enum):
    INITIAL = "initial"  #: an initial solution was computed.
    ACCEPTED = "accepted"  #: a candidate replaced the current solution.
    REJECTED = "rejected"  #: a candidate was discarded.
    DECREASED = "decreased"  #: the temperature was decreased.
    FINAL = "final"  #: the run terminated with this solution.


@frozen(kw_only=True)
class Event(Generic[T]):
    """
    Object describing a notable transition during a run.

    Args:
        kind: the type of transition.
        value: the candidate solution concerned by this event.
        cost: the cost of that solution.
        temperature: the temperature at the time of the event.
        iteration: index of the iteration within the current temperature step.
        step: index of the temperature step.
        acceptance_probability: the acceptance probability computed for a candidate.
        minimum: the temperature floor (INITIAL events only).
        best: for FINAL events, was the returned solution the best-so-far rather than the current one ?
    """

    kind: EventKind
    value: Optional[T] = None
    cost: Optional[float] = None
    temperature: Optional[float] = None
    iteration: Optional[int] = None
    step: Optional[int] = None
    acceptance_probability: Optional[float] = None
    minimum: Optional[float] = None
    best: bool = False


class LoggingSink:
    """
    Sink writing one log record per event.

    Args:
        logger: the logger to write to (defaults to this module's logger).
        level: logging level of the records.
    """

    # region magic methods
    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.logger = logging.getLogger(__name__) if logger is None else logger
        self.level = level

    def __repr__(self) -> str:
        return f"LoggingSink({self.logger.name}, {logging.getLevelName(self.level)})"

    def __call__(self, event: Event[Any]) -> None:
        if self.logger.isEnabledFor(self.level):
            self.logger.log(self.level, format_event(event))

    # endregion


def format_event(event: Event[Any]) -> str:
    """
    Get a one line description of an event.
    """
    if event.kind is EventKind.INITIAL:
        if event.temperature is None:
            return f"Initial solution {event.value} (cost={event.cost})"

        return (
            f"Initial solution {event.value} (cost={event.cost}) at T={event.temperature} "
            f"until {event.minimum}"
        )

    if event.kind in (EventKind.ACCEPTED, EventKind.REJECTED):
        return (
            f"{event.kind.value.capitalize()} {event.value} (cost={event.cost}, "
            f"ap={event.acceptance_probability}) at T={event.temperature}, iter={event.iteration}"
        )

    if event.kind is EventKind.DECREASED:
        return f"Decreased temperature to {event.temperature}"

    if event.temperature is None:
        return f"Accepted solution {event.value} (cost={event.cost}, initial)"

    if event.cost == 0 and event.iteration is not None:
        return (
            f"Accepted solution {event.value} (cost=0) at T={event.temperature}, "
            f"iter={event.iteration}"
        )

    if event.best:
        return f"Accepted solution {event.value} (cost={event.cost}, best so far)"

    return f"Accepted solution {event.value} (cost={event.cost})"


def parse_sinks(sinks: SINK | Sequence[SINK] | None) -> tuple[SINK, ...]:
    """
    Parse sinks given by the user to obtain a tuple of callables.

    Args:
        sinks: None (events are dropped), a single callable or a sequence of callables receiving Events.

    Returns:
        The tuple of sinks.
    """
    if sinks is None:
        return ()

    if callable(sinks):
        return (sinks,)

    if isinstance(sinks, collections.abc.Sequence) and not isinstance(sinks, str):
        for sink in sinks:
            if not callable(sink):
                raise InvalidConfiguration(
                    f"Invalid object '{sink}' of type '{type(sink)}' encountered in the sequence of sinks, "
                    f"expected a callable."
                )

        return tuple(sinks)

    raise InvalidConfiguration(
        f"Invalid object '{sinks}' of type '{type(sinks)}' for defining sinks, expected a callable or a "
        f"sequence of callables."
    )
