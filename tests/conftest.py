# coding: utf-8

# ====================================================
# imports
import pytest
import numpy as np

import numpy.typing as npt
from typing import Any

from kiln import AnnealingSystem
from kiln import SimpleCoolingSchedule


# ====================================================
# code
class WalkSystem(AnnealingSystem[int]):
    """Random walk on integers, the cost is the distance to 0."""

    def __init__(self, seed: int = 0, start: int | None = None, offset: float = 0):
        self.rng = np.random.default_rng(seed)
        self.start = start
        self.offset = offset
        self.initial: int | None = None
        self.nb_cost_calls = 0
        self.nb_neighbor_calls = 0

    def initial_solution(self) -> int:
        if self.start is not None:
            self.initial = self.start

        else:
            self.initial = int(self.rng.integers(20, 60)) * int(self.rng.choice([-1, 1]))

        return self.initial

    def cost(self, solution: int) -> float:
        self.nb_cost_calls += 1
        return abs(solution) + self.offset

    def neighbor(self, solution: int) -> int:
        self.nb_neighbor_calls += 1
        return solution + int(self.rng.choice([-1, 1]))


class ConstantProbabilitySystem(WalkSystem):
    """Random walk with a fixed acceptance probability."""

    def __init__(self, probability: float, seed: int = 0, start: int | None = 30):
        super().__init__(seed=seed, start=start)
        self.probability = probability

    def acceptance_probability(self, old_cost: float, new_cost: float, temperature: float) -> float:
        return self.probability


@pytest.fixture
def walk_system():
    return WalkSystem(seed=1)


@pytest.fixture
def schedule():
    return SimpleCoolingSchedule(100, 1, 0.9)


@pytest.fixture
def BOUNDS():
    return [(-3, 3), (0.5, 5)]


def _cost_function(x: npt.NDArray[Any]) -> float:
    return float(np.sum(x**2)) + 1.0


@pytest.fixture
def cost_function():
    return _cost_function
