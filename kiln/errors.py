# coding: utf-8

"""
Defines custom errors.
"""

# ====================================================
# imports
from __future__ import annotations


# ====================================================
# code
class KilnError(Exception):
    """
    Base class for all errors raised by kiln.
    """


class InvalidConfiguration(KilnError, ValueError):
    """
    Raised when an optimizer, a cooling schedule or a move is built with invalid parameters.
    """


class InvalidAcceptanceProbability(KilnError, ValueError):
    """
    Raised during a run when an annealing system returns an acceptance probability outside of [0, 1].
    """

    # region magic methods
    def __init__(
        self, probability: float, old_cost: float, new_cost: float, temperature: float
    ):
        super().__init__(
            f"Acceptance probability must be in [0, 1] (got {probability} for old_cost={old_cost}, "
            f"new_cost={new_cost}, T={temperature})"
        )

        self.probability = probability
        self.old_cost = old_cost
        self.new_cost = new_cost
        self.temperature = temperature

    # endregion
