# coding: utf-8

"""
Annealing system minimizing a function over numerical position vectors.
"""

# ====================================================
# imports
from __future__ import annotations

import numpy as np

import numpy.typing as npt
from typing import Any
from typing import Optional
from typing import Sequence
from typing import Union

import kiln.typing as kt
from kiln.errors import InvalidConfiguration
from kiln.moves.base import Move
from kiln.moves.parse import parse_moves
from kiln.moves.sequential import RandomStep
from kiln.system.base import AnnealingSystem


# ====================================================
# code
class FunctionSystem(AnnealingSystem[npt.NDArray[Any]]):
    """
    Annealing system for minimizing <fun>(x, *args) where x is a <d> dimensional vector of values.

    Costs are expected to be positive, a cost of exactly 0 is considered optimal and stops the run.
    """

    # region magic methods
    def __init__(
        self,
        fun: kt.FUN_TYPE[...],
        x0: npt.ArrayLike,
        moves: Optional[Union[Move, Sequence[Move], Sequence[tuple[float, Move]]]] = None,
        *,
        args: Optional[tuple[Any, ...]] = None,
        bounds: Optional[Union[tuple[float, float], Sequence[tuple[float, float]]]] = None,
        randomize: bool = False,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
    ):
        """
        Instantiate a FunctionSystem.

        Args:
            fun: a <d> dimensional function to minimize.
            x0: a <d> dimensional vector of initial values.
            moves:
                - a single kiln.Move object
                - a sequence of kiln.Move objects (all Moves have the same probability of being selected at each
                    step for proposing a new candidate vector x)
                - a sequence of tuples with the following format :
                    (selection probability, kiln.Move)
                Defaults to small random steps (probability 0.8) mixed with larger ones (probability 0.2).
            args: an optional sequence of arguments to pass to the function to minimize.
            bounds: an optional sequence of bounds (one for each <d> dimensions) with the following format:
                (lower_bound, upper_bound)
                or a single (lower_bound, upper_bound) tuple of bounds to set for all dimensions.
            randomize: apply one move to <x0> for generating the initial solution ?
            seed: a seed for the random generator.
            rng: a random generator to use instead of creating one from <seed>.
        """
        if seed is not None and rng is not None:
            raise InvalidConfiguration("Only one of 'seed' and 'rng' can be given.")

        self.fun = fun
        self.args = tuple(args) if args is not None else ()
        self.x0 = np.array(x0)
        self.randomize = randomize
        self.rng = rng if rng is not None else np.random.default_rng(seed)

        if self.x0.ndim != 1 or not len(self.x0):
            raise InvalidConfiguration(
                f"'x0' must be a non-empty vector of values, got shape {self.x0.shape}."
            )

        if not np.issubdtype(self.x0.dtype, np.number):
            raise InvalidConfiguration(f"'x0' must hold numerical values, got {self.x0.dtype}.")

        if moves is None:
            moves = ((0.8, RandomStep(magnitude=0.05)), (0.2, RandomStep(magnitude=0.5)))

        self.probabilities, self.moves = parse_moves(moves)

        for move in self.moves:
            move.set_bounds(bounds)

        if bounds is not None:
            self._check_bounds(np.array(bounds, dtype=np.float64))

    def __repr__(self) -> str:
        return (
            f"FunctionSystem({getattr(self.fun, '__name__', self.fun)}, "
            f"{len(self.x0)} dimension(s), {len(self.moves)} move(s))"
        )

    # endregion

    # region methods
    def _check_bounds(self, bounds: npt.NDArray[np.float64]) -> None:
        if bounds.ndim == 2 and len(bounds) != len(self.x0):
            raise InvalidConfiguration(
                f"Bounds must be defined for all dimensions, but only {len(bounds)} out of {len(self.x0)} were "
                f"defined."
            )

        lower, upper = (bounds[0], bounds[1]) if bounds.ndim == 1 else (bounds[:, 0], bounds[:, 1])

        if np.any(self.x0 < lower) or np.any(self.x0 > upper):
            raise InvalidConfiguration("Some values in x0 do not lie in between defined bounds.")

    def _draw_move(self) -> Move:
        return self.moves[self.rng.choice(len(self.moves), p=self.probabilities)]

    def initial_solution(self) -> npt.NDArray[Any]:
        if self.randomize:
            return self._draw_move().get_proposal(self.x0, self.rng)

        return self.x0.copy()

    def cost(self, solution: npt.NDArray[Any]) -> float:
        return float(self.fun(solution, *self.args))

    def neighbor(self, solution: npt.NDArray[Any]) -> npt.NDArray[Any]:
        return self._draw_move().get_proposal(solution, self.rng)

    # endregion
