# coding: utf-8

# ====================================================
# imports
from __future__ import annotations

from attrs import field
from attrs import frozen

from typing import Generic

from kiln.typing import T


# ====================================================
# code
@frozen(order=True, repr=False)
class Result(Generic[T]):
    """
    Object for storing a scored candidate solution.

    Results are compared on their cost only (lower is better), two results with the same cost are equal whatever
    their values.

    Args:
        value: the candidate solution.
        cost: the cost of this solution.
    """

    value: T = field(eq=False, order=False)  #: the candidate solution.
    cost: float = field(converter=float)  #: the cost of this solution.

    # region magic methods
    def __repr__(self) -> str:
        return f"Result(value={self.value!r}, cost={self.cost})"

    # endregion
