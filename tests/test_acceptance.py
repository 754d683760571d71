# coding: utf-8

# ====================================================
# imports
import pytest
import numpy as np

from kiln import acceptance_probability
from kiln.compute import metropolis

from conftest import WalkSystem


# ====================================================
# code
@pytest.mark.parametrize("temperature", [1e-6, 0.5, 1, 100])
def test_improvement_always_accepted(temperature):
    assert acceptance_probability(5, 3, temperature) == 1


@pytest.mark.parametrize("new_cost, temperature", [(3, 1), (0, 10), (100, 1e-3), (-1, 5)])
def test_zero_cost_is_never_left(new_cost, temperature):
    assert acceptance_probability(0, new_cost, temperature) == 0


@pytest.mark.parametrize("temperature", [1e-3, 1, 1000])
def test_equal_cost(temperature):
    assert acceptance_probability(5, 5, temperature) == 0.5


def test_worse_cost_depends_on_temperature():
    probabilities = [acceptance_probability(5, 6, T) for T in (100, 10, 1, 0.1)]

    assert all(0 <= p < 0.5 for p in probabilities)
    assert probabilities == sorted(probabilities, reverse=True)
    assert probabilities[2] == pytest.approx(1 / (1 + np.e))


def test_no_overflow_for_large_cost_increases():
    assert metropolis(1e6, 1e-9) == 0.0
    assert acceptance_probability(1, 1e300, 1e-300) == 0.0


def test_system_default_acceptance_probability():
    system = WalkSystem()

    assert system.acceptance_probability(5, 3, 1) == 1
    assert system.acceptance_probability(0, 3, 1) == 0
    assert system.acceptance_probability(5, 5, 1) == 0.5


@pytest.mark.parametrize("temperature", [1e-3, 1, 1000])
def test_infinite_costs(temperature):
    inf = float("inf")

    assert acceptance_probability(inf, inf, temperature) == 0.5
    assert acceptance_probability(inf, 3, temperature) == 1
    assert acceptance_probability(3, inf, temperature) == 0.0
