from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Concatenate, ParamSpec, TypeAlias, TypeVar, Union

import numpy
from numpy.typing import NDArray

if TYPE_CHECKING:
    from kiln.events import Event


T = TypeVar("T")

DType: TypeAlias = Union[numpy.float64, numpy.int64]
DT_ARR = TypeVar("DT_ARR", bound=DType)

SINK: TypeAlias = Callable[["Event[Any]"], None]


if TYPE_CHECKING:
    _P = ParamSpec("_P")

    FUN_TYPE: TypeAlias = Callable[Concatenate[NDArray[DType], _P], float]
