# coding: utf-8

# ====================================================
# imports
from __future__ import annotations

import numbers
from attrs import frozen

from typing import Any
from typing import Generic
from typing import Optional

from kiln.cooling.base import CoolingSchedule
from kiln.errors import InvalidConfiguration
from kiln.system.base import AnnealingSystem
from kiln.typing import SINK
from kiln.typing import T


# ====================================================
# code
@frozen(kw_only=True)
class SAParameters(Generic[T]):
    """
    Object for storing the parameters used for running the SA algorithm.
    """

    system: AnnealingSystem[T]
    schedule: CoolingSchedule
    iterations_per_step: int
    seed: Optional[int]
    sinks: tuple[SINK, ...]


def check_iterations_per_step(iterations_per_step: Any) -> int:
    """
    Check validity of the number of iterations to run at each temperature step.

    Args:
        iterations_per_step: the number of candidates to explore at each temperature.

    Returns:
        The number of iterations as an int.
    """
    if isinstance(iterations_per_step, bool) or not isinstance(iterations_per_step, numbers.Integral):
        raise InvalidConfiguration(
            f"Number of iterations per step must be an integer (got {iterations_per_step!r})."
        )

    if iterations_per_step <= 0:
        raise InvalidConfiguration(
            f"Number of iterations per step must be strictly positive (got {iterations_per_step})."
        )

    return int(iterations_per_step)


def check_base_parameters(
    system: Any,
    schedule: Any,
    iterations_per_step: Any,
    seed: Optional[int],
    sinks: tuple[SINK, ...],
) -> SAParameters[Any]:
    """
    Check validity of base parameters.

    Args:
        system: the annealing system to optimize.
        schedule: the cooling schedule.
        iterations_per_step: the number of candidates to explore at each temperature.
        seed: an optional seed for the random generator.
        sinks: parsed event sinks.

    Returns:
        SAParameters.
    """
    if not isinstance(system, AnnealingSystem):
        raise InvalidConfiguration(
            f"'system' must be an AnnealingSystem, got '{type(system).__name__}'."
        )

    if not isinstance(schedule, CoolingSchedule):
        raise InvalidConfiguration(
            f"'schedule' must be a CoolingSchedule, got '{type(schedule).__name__}'."
        )

    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, numbers.Integral) or seed < 0):
        raise InvalidConfiguration(f"'seed' must be a positive integer (got {seed!r}).")

    return SAParameters(
        system=system,
        schedule=schedule,
        iterations_per_step=check_iterations_per_step(iterations_per_step),
        seed=seed,
        sinks=sinks,
    )
