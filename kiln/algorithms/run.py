# coding: utf-8

"""
Core Simulated Annealing loop.
"""

# ====================================================
# imports
from __future__ import annotations

import math
import numpy as np
from tqdm.autonotebook import tqdm

from typing import Any

from kiln.errors import InvalidAcceptanceProbability
from kiln.events import Event
from kiln.events import EventKind
from kiln.storage.parameters import SAParameters
from kiln.storage.result import Result
from kiln.system.base import AnnealingSystem
from kiln.typing import T


# ====================================================
# code
def _evaluate(system: AnnealingSystem[T], solution: T) -> Result[T]:
    return Result(solution, system.cost(solution))


def _emit(params: SAParameters[Any], kind: EventKind, **kwargs: Any) -> None:
    if not params.sinks:
        return

    event: Event[Any] = Event(kind=kind, **kwargs)
    for sink in params.sinks:
        sink(event)


def run_simulated_annealing(
    params: SAParameters[T],
    rng: np.random.Generator,
    progress_bar: tqdm[Any],
) -> Result[T]:
    """
    Run the SA algorithm.

    Args:
        params: parameters of an SA run.
        rng: the random generator from which acceptance thresholds are drawn (one draw per explored candidate).
        progress_bar: a progress bar, updated once per temperature step.

    Returns:
        The best solution found, or the first solution with a cost of 0.
    """
    system, schedule = params.system, params.schedule

    current = _evaluate(system, system.initial_solution())

    if current.cost == 0:
        _emit(params, EventKind.INITIAL, value=current.value, cost=current.cost)
        _emit(params, EventKind.FINAL, value=current.value, cost=current.cost)
        return current

    temperature = schedule.start
    minimum = schedule.minimum
    _emit(
        params,
        EventKind.INITIAL,
        value=current.value,
        cost=current.cost,
        temperature=temperature,
        minimum=minimum,
    )

    best = current
    step = 0

    while temperature > minimum:
        for iteration in range(params.iterations_per_step):
            candidate = _evaluate(system, system.neighbor(current.value))

            if candidate.cost == 0:
                _emit(
                    params,
                    EventKind.FINAL,
                    value=candidate.value,
                    cost=candidate.cost,
                    temperature=temperature,
                    iteration=iteration,
                    step=step,
                )
                return candidate

            ap = system.acceptance_probability(current.cost, candidate.cost, temperature)

            if math.isnan(ap) or ap < 0 or ap > 1:
                raise InvalidAcceptanceProbability(ap, current.cost, candidate.cost, temperature)

            threshold = rng.random()

            if ap == 1 or ap >= threshold:
                current = candidate
                if current < best:
                    best = current

                kind = EventKind.ACCEPTED

            else:
                kind = EventKind.REJECTED

            _emit(
                params,
                kind,
                value=candidate.value,
                cost=candidate.cost,
                temperature=temperature,
                iteration=iteration,
                step=step,
                acceptance_probability=ap,
            )

        temperature = schedule.decrease(temperature)
        step += 1
        _emit(params, EventKind.DECREASED, temperature=temperature, step=step)

        progress_bar.update()
        progress_bar.set_description(
            f"T: {temperature:.4f}  Best: {best.cost:.4f}  Current: {current.cost:.4f}"
        )

    if best < current:
        _emit(params, EventKind.FINAL, value=best.value, cost=best.cost, temperature=temperature, best=True)
        return best

    _emit(params, EventKind.FINAL, value=current.value, cost=current.cost, temperature=temperature)
    return current
