# coding: utf-8

# ====================================================
# imports
from __future__ import annotations

from abc import ABC
from abc import abstractmethod

from typing import Generic

from kiln.compute import acceptance_probability
from kiln.typing import T


# ====================================================
# code
class AnnealingSystem(ABC, Generic[T]):
    """
    Base abstract class for the problem being optimized through simulated annealing.

    A system knows how to build an initial candidate solution, how to derive a neighboring candidate from an existing
    one and how to score candidates. The optimizer never looks inside candidate solutions.
    """

    # region methods
    @abstractmethod
    def initial_solution(self) -> T:
        """
        Generate an initial solution. It should include some randomness.
        """

    @abstractmethod
    def cost(self, solution: T) -> float:
        """
        Compute the cost of a solution. It must be deterministic, lower is better and a cost of 0 stops the run.

        Args:
            solution: a solution to evaluate.
        """

    @abstractmethod
    def neighbor(self, solution: T) -> T:
        """
        Generate a neighboring solution. It should include some randomness and must not modify <solution>.

        Args:
            solution: the current solution.
        """

    def acceptance_probability(
        self, old_cost: float, new_cost: float, temperature: float
    ) -> float:
        """
        Compute the probability of replacing the current solution by a candidate. Override this to use another
        acceptance rule, returned values must lie in [0, 1].

        Args:
            old_cost: cost of the current solution.
            new_cost: cost of the candidate solution.
            temperature: the current temperature.

        Returns:
            A probability for the candidate to be accepted.
        """
        return acceptance_probability(old_cost, new_cost, temperature)

    # endregion
