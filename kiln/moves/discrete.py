# coding: utf-8

"""Moves that work on a discrete set of possible positions."""

# ====================================================
# imports
from __future__ import annotations

import numpy as np

import numpy.typing as npt
from typing import Any
from typing import Sequence
from typing import Optional

import kiln.typing as kt
from kiln.errors import InvalidConfiguration
from kiln.moves.base import Move


# ====================================================
# code
class SetStep(Move):
    """
    Step within a fixed set of possible values for x. One dimension is chosen at random and moved to the value
    immediately before or after its current value.
    """

    # region magic methods
    def __init__(
        self,
        *,
        position_set: Sequence[Sequence[float]],
        bounds: Optional[npt.NDArray[kt.DType]] = None,
        repr_attributes: tuple[str, ...] = (),
        **kwargs: Any,
    ):
        """
        Instantiate a Move.

        Args:
            position_set: sets of only possible values for x in each dimension.
            bounds: optional sequence of (min, max) bounds for values to propose in each dimension.
            repr_attributes: tuple of attribute names to include in the move's representation.
        """
        super().__init__(
            bounds=bounds,
            repr_attributes=("_position_set",) + repr_attributes,
            **kwargs,
        )

        if not all(isinstance(p, (Sequence, np.ndarray)) and len(p) for p in position_set):
            raise InvalidConfiguration(
                "'position_set' parameter should be a sequence of non-empty sequences of possible values, one per "
                "dimension (the number of values can be different for each dimension)."
            )

        self._position_set = [np.sort(np.asarray(p)) for p in position_set]

    # endregion

    # region methods
    def _get_proposal(
        self, x: npt.NDArray[kt.DT_ARR], rng: np.random.Generator
    ) -> npt.NDArray[kt.DT_ARR]:
        if len(x) != len(self._position_set):
            raise InvalidConfiguration(
                f"'position_set' defines {len(self._position_set)} dimension(s) but x has {len(x)}."
            )

        target_dim = rng.integers(len(x))
        values = self._position_set[target_dim]

        if rng.random() > 0.5:
            candidates = values[values > x[target_dim]]
            if len(candidates):
                x[target_dim] = candidates[0]

        else:
            candidates = values[values < x[target_dim]]
            if len(candidates):
                x[target_dim] = candidates[-1]

        return x

    # endregion
