# coding: utf-8

"""Simple moves on continuous position vectors."""

# ====================================================
# imports
from __future__ import annotations

import numpy as np

import numpy.typing as npt
from typing import Any
from typing import Optional

import kiln.typing as kt
from kiln.errors import InvalidConfiguration
from kiln.moves.base import Move


# ====================================================
# code
class RandomStep(Move):
    """
    Simple random step within a radius of (-0.5 * magnitude) to (+0.5 * magnitude) around x, along one randomly
    chosen dimension.
    """

    # region magic methods
    def __init__(
        self,
        *,
        magnitude: float,
        bounds: Optional[npt.NDArray[kt.DType]] = None,
        repr_attributes: tuple[str, ...] = (),
        **kwargs: Any,
    ):
        """
        Instantiate a Move.

        Args:
            magnitude: size of the random step is (-0.5 * magnitude) to (+0.5 * magnitude)
            bounds: optional sequence of (min, max) bounds for values to propose in each dimension.
            repr_attributes: list of attribute names to include in the string representation of this Move.
        """
        super().__init__(
            bounds=bounds, repr_attributes=("_magnitude",) + repr_attributes, **kwargs
        )

        if magnitude <= 0:
            raise InvalidConfiguration(
                f"'magnitude' parameter must be strictly positive (got {magnitude})."
            )

        self._magnitude = float(magnitude)

    # endregion

    # region methods
    def _get_proposal(
        self, x: npt.NDArray[kt.DT_ARR], rng: np.random.Generator
    ) -> npt.NDArray[kt.DT_ARR]:
        target_dim = rng.integers(len(x))
        x[target_dim] += self._magnitude * (rng.random() - 0.5)

        return x

    # endregion


class Metropolis1D(Move):
    """
    Metropolis step obtained from a uni-variate normal distribution with mean x[d] and variance <variance>, along one
    randomly chosen dimension d.
    """

    # region magic methods
    def __init__(
        self,
        *,
        variance: float,
        bounds: Optional[npt.NDArray[kt.DType]] = None,
        repr_attributes: tuple[str, ...] = (),
        **kwargs: Any,
    ):
        """
        Instantiate a Move.

        Args:
            variance: the variance for the normal distribution.
            bounds: optional sequence of (min, max) bounds for values to propose in each dimension.
            repr_attributes: list of attribute names to include in the string representation of this Move.
        """
        super().__init__(
            bounds=bounds, repr_attributes=("_var",) + repr_attributes, **kwargs
        )

        if variance < 0:
            raise InvalidConfiguration(
                f"'variance' parameter must be positive (got {variance})."
            )

        self._var = float(variance)

    # endregion

    # region methods
    def _get_proposal(
        self, x: npt.NDArray[kt.DT_ARR], rng: np.random.Generator
    ) -> npt.NDArray[kt.DT_ARR]:
        target_dim = rng.integers(len(x))
        x[target_dim] = rng.normal(x[target_dim], np.sqrt(self._var))

        return x

    # endregion
