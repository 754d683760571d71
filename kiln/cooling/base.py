# coding: utf-8

# ====================================================
# imports
from __future__ import annotations

from abc import ABC
from abc import abstractmethod


# ====================================================
# code
class CoolingSchedule(ABC):
    """
    Base abstract class for defining how the temperature evolves during a run.

    The optimizer starts at <start>, calls decrease() after each temperature step and stops once the temperature is
    lower than or equal to <minimum>.
    decrease() must never return a temperature higher than the one it received : a schedule that does not decrease
    the temperature makes the optimizer run forever.
    """

    # region attributes
    @property
    @abstractmethod
    def start(self) -> float:
        """Initial temperature value."""

    @property
    @abstractmethod
    def minimum(self) -> float:
        """Temperature floor, the run stops when it is reached."""

    # endregion

    # region methods
    @abstractmethod
    def decrease(self, temperature: float) -> float:
        """
        Compute the next temperature.

        Args:
            temperature: the current temperature.

        Returns:
            The new temperature.
        """

    def nb_steps(self) -> int | None:
        """
        Number of temperature steps before reaching the floor, if it can be known in advance.
        """
        return None

    # endregion
