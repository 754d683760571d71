# coding: utf-8

# ====================================================
# imports
from __future__ import annotations

import numpy as np
from tqdm.autonotebook import tqdm

from typing import Generic
from typing import Optional
from typing import Sequence
from typing import Union

from kiln.algorithms.run import run_simulated_annealing
from kiln.cooling.base import CoolingSchedule
from kiln.errors import InvalidConfiguration
from kiln.events import parse_sinks
from kiln.storage.parameters import check_base_parameters
from kiln.storage.result import Result
from kiln.system.base import AnnealingSystem
from kiln.typing import SINK
from kiln.typing import T


# ====================================================
# code
class SimulatedAnnealing(Generic[T]):
    """
    Simulated Annealing optimizer. Approximates the global minimum of a system's cost without exploring the whole
    search space, by accepting worse solutions with a probability that shrinks as the temperature decreases.

    All parameters are checked when the optimizer is built, the only error that can happen during a run is an
    InvalidAcceptanceProbability raised when the system returns a probability outside of [0, 1].
    """

    # region magic methods
    def __init__(
        self,
        system: AnnealingSystem[T],
        schedule: CoolingSchedule,
        iterations_per_step: int,
        *,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        sinks: Union[SINK, Sequence[SINK], None] = None,
        verbose: bool = False,
    ):
        """
        Instantiate an optimizer.

        Args:
            system: the system to optimize.
            schedule: the cooling schedule.
            iterations_per_step: number of candidates to explore at each temperature.
            seed: a seed for the random generator, each run starts from a fresh generator seeded with it.
            rng: a random generator to draw acceptance thresholds from, shared by all runs. Cannot be used with
                <seed>.
            sinks: an optional callable, or sequence of callables, receiving the Events of each run.
            verbose: print progress bar ?
        """
        if seed is not None and rng is not None:
            raise InvalidConfiguration("Only one of 'seed' and 'rng' can be given.")

        self.parameters = check_base_parameters(
            system, schedule, iterations_per_step, seed, parse_sinks(sinks)
        )
        self._rng = rng
        self.verbose = verbose

    def __repr__(self) -> str:
        return (
            f"SimulatedAnnealing({self.parameters.system!r}, {self.parameters.schedule!r}, "
            f"iterations_per_step={self.parameters.iterations_per_step})"
        )

    # endregion

    # region attributes
    @property
    def system(self) -> AnnealingSystem[T]:
        return self.parameters.system

    @property
    def schedule(self) -> CoolingSchedule:
        return self.parameters.schedule

    @property
    def iterations_per_step(self) -> int:
        return self.parameters.iterations_per_step

    # endregion

    # region methods
    def optimize(self) -> Result[T]:
        """
        Run the optimization.

        Returns:
            The best solution found with its cost.
        """
        rng = self._rng if self._rng is not None else np.random.default_rng(self.parameters.seed)

        with tqdm(
            total=self.parameters.schedule.nb_steps() if self.verbose else None,
            unit="step",
            disable=not self.verbose,
        ) as progress_bar:
            return run_simulated_annealing(self.parameters, rng, progress_bar)

    # endregion


def sa(
    system: AnnealingSystem[T],
    schedule: CoolingSchedule,
    iterations_per_step: int = 100,
    *,
    seed: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    sinks: Union[SINK, Sequence[SINK], None] = None,
    verbose: bool = False,
) -> Result[T]:
    """
    Simulated Annealing algorithm.

    Args:
        system: the system to optimize.
        schedule: the cooling schedule.
        iterations_per_step: number of candidates to explore at each temperature.
        seed: a seed for the random generator.
        rng: a random generator to draw acceptance thresholds from. Cannot be used with <seed>.
        sinks: an optional callable, or sequence of callables, receiving the Events of the run.
        verbose: print progress bar ?

    Returns:
        The best solution found with its cost.
    """
    return SimulatedAnnealing(
        system,
        schedule,
        iterations_per_step,
        seed=seed,
        rng=rng,
        sinks=sinks,
        verbose=verbose,
    ).optimize()
