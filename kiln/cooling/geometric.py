# coding: utf-8

"""Geometric cooling schedule."""

# ====================================================
# imports
from __future__ import annotations

import math
from attrs import field
from attrs import frozen

from kiln.compute import geometric_nb_steps
from kiln.cooling.base import CoolingSchedule
from kiln.errors import InvalidConfiguration


# ====================================================
# code
@frozen
class SimpleCoolingSchedule(CoolingSchedule):
    """
    Cooling schedule multiplying the temperature by a constant rate after each step.

    Args:
        start: initial temperature value.
        minimum: minimum temperature, the run stops when it is reached.
        rate: cooling rate in (0, 1], the temperature is multiplied by this factor after each step.
    """

    _start: float = field(converter=float)
    _minimum: float = field(converter=float)
    rate: float = field(converter=float)

    def __attrs_post_init__(self) -> None:
        if not self._minimum > 0:
            raise InvalidConfiguration(
                f"Minimum temperature must be strictly positive (got {self._minimum})."
            )

        if not math.isfinite(self._start):
            raise InvalidConfiguration(
                f"Initial temperature must be finite (got {self._start})."
            )

        if not self._start >= self._minimum:
            raise InvalidConfiguration(
                f"Initial temperature must be greater than minimum temperature (got start={self._start}, "
                f"minimum={self._minimum})."
            )

        if not 0 < self.rate <= 1:
            raise InvalidConfiguration(
                f"Cooling rate must be in (0, 1] (got {self.rate})."
            )

    # region attributes
    @property
    def start(self) -> float:
        return self._start

    @property
    def minimum(self) -> float:
        return self._minimum

    # endregion

    # region methods
    def decrease(self, temperature: float) -> float:
        return temperature * self.rate

    def nb_steps(self) -> int | None:
        return geometric_nb_steps(self._start, self._minimum, self.rate)

    # endregion
