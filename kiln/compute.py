# coding: utf-8

# ====================================================
# imports
from __future__ import annotations

import numpy as np


# ====================================================
# code
def metropolis(delta: float, temperature: float) -> float:
    """
    Compute the logistic Metropolis acceptance 1 / (1 + exp(delta / temperature)).

    Args:
        delta: the cost increase (new cost - current cost).
        temperature: the current temperature.

    Returns:
        The probability of acceptance, in [0, 1].
    """
    with np.errstate(over="ignore"):
        return float(1.0 / (1.0 + np.exp(np.float64(delta) / temperature)))


def acceptance_probability(old_cost: float, new_cost: float, temperature: float) -> float:
    """
    Compute the acceptance probability for a new proposed cost, given the current cost and a temperature.

    Improvements are always accepted. Worse (or equal) costs are accepted with the Metropolis probability
    1 / (1 + exp((new_cost - old_cost) / temperature)), which is 0.5 for equal costs.
    A current cost of exactly 0 is never left: this cannot happen during a run since the optimizer returns as soon
    as a zero cost is reached.

    Args:
        old_cost: the current cost.
        new_cost: the new proposed cost.
        temperature: the current temperature.

    Returns:
        The probability of acceptance of the new proposed cost.
    """
    if old_cost == 0:
        return 0.0

    if new_cost < old_cost:
        return 1.0

    if new_cost == old_cost:
        return 0.5

    return metropolis(new_cost - old_cost, temperature)


def geometric_nb_steps(start: float, minimum: float, rate: float) -> int | None:
    """
    Compute the number of temperature decreases needed by a geometric schedule to go from <start> to at most
    <minimum>.

    Args:
        start: initial temperature value.
        minimum: temperature floor.
        rate: multiplicative cooling rate in (0, 1].

    Returns:
        The number of steps, or None if the floor is never reached (rate of 1).
    """
    if start <= minimum:
        return 0

    if rate == 1:
        return None

    # repeated products, as computed during a run, can drift from start * rate ** k
    steps = 0
    temperature = start

    while temperature > minimum:
        temperature *= rate
        steps += 1

    return steps
