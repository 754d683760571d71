# coding: utf-8

# ====================================================
# imports
from __future__ import annotations

import numpy as np
from abc import ABC
from abc import abstractmethod

import numpy.typing as npt
from typing import Any
from typing import Union
from typing import Sequence
from typing import Optional

import kiln.typing as kt
from kiln.errors import InvalidConfiguration


# ====================================================
# code
class Move(ABC):
    """
    Base abstract class for defining how position vectors evolve in a FunctionSystem.
    """

    # region magic methods
    def __init__(
        self,
        *,
        bounds: Optional[npt.NDArray[kt.DType]] = None,
        repr_attributes: tuple[str, ...] = (),
        **kwargs: Any,
    ):
        """
        Instantiate a Move.

        Args:
            bounds: optional sequence of (min, max) bounds for values to propose in each dimension.
            repr_attributes: list of attribute names to include in the string representation of this Move.
        """
        self._bounds: Optional[npt.NDArray[Any]] = None
        self._repr_attributes = tuple(repr_attributes)

        self.set_bounds(bounds)

    def __repr__(self) -> str:
        with np.printoptions(precision=4):
            repr_str = (
                f"[Move] {type(self).__name__}("
                f"{', '.join([str(getattr(self, attr_name)) for attr_name in self._repr_attributes])}"
                f")"
            )

        return repr_str

    # endregion

    # region methods
    def set_bounds(
        self, bounds: Union[tuple[float, float], Sequence[tuple[float, float]], None]
    ) -> None:
        """
        Set bounds for the move.

        Args:
            bounds: a single (min, max) tuple for all dimensions or a sequence of (min, max) bounds, one per
                dimension.
        """
        if bounds is None:
            return

        bounds_arr = np.array(bounds, dtype=np.float64)

        if bounds_arr.ndim == 1:
            bounds_arr = bounds_arr[np.newaxis, :]

        if bounds_arr.ndim != 2 or bounds_arr.shape[1] != 2:
            raise InvalidConfiguration(f"Invalid bounds with shape {bounds_arr.shape}.")

        if np.any(bounds_arr[:, 0] > bounds_arr[:, 1]):
            raise InvalidConfiguration(
                "Lower bounds must be smaller than upper bounds."
            )

        self._bounds = bounds_arr

    @abstractmethod
    def _get_proposal(
        self, x: npt.NDArray[kt.DT_ARR], rng: np.random.Generator
    ) -> npt.NDArray[kt.DT_ARR]:
        """
        Generate a new proposed vector x.

        Args:
            x: a copy of the current vector x of shape (ndim,), free to be modified.
            rng: the random generator to draw from.

        Returns:
            New proposed vector x of shape (ndim,).
        """

    def get_proposal(
        self, x: npt.NDArray[kt.DT_ARR], rng: np.random.Generator
    ) -> npt.NDArray[kt.DT_ARR]:
        """
        Generate a new proposed vector x. <x> is left untouched.

        Args:
            x: current vector x of shape (ndim,).
            rng: the random generator to draw from.

        Returns:
            New proposed vector x of shape (ndim,).
        """
        return self._valid_proposal(self._get_proposal(x.copy(), rng).astype(x.dtype))

    def _valid_proposal(self, x: npt.NDArray[kt.DT_ARR]) -> npt.NDArray[kt.DT_ARR]:
        """
        Get valid proposal within defined bounds.

        Args:
            x: a 'raw' proposal.

        Returns
            A proposal with values restricted with the defined bounds.
        """
        if self._bounds is not None:
            return np.minimum(np.maximum(x, self._bounds[:, 0]), self._bounds[:, 1])  # type: ignore[return-value]

        return x

    # endregion
