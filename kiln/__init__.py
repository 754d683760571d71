"""
Simulated annealing for any problem that can build, perturb and score candidate solutions.
"""

from importlib import metadata

from kiln.algorithms.sa import SimulatedAnnealing, sa
from kiln.compute import acceptance_probability
from kiln.cooling import CoolingSchedule, SimpleCoolingSchedule
from kiln.errors import InvalidAcceptanceProbability, InvalidConfiguration, KilnError
from kiln.events import Event, EventKind, LoggingSink
from kiln.moves import Metropolis1D, Move, RandomStep, SetStep
from kiln.storage.result import Result
from kiln.storage.trace import Trace
from kiln.system import AnnealingSystem, FunctionSystem

__all__ = [
    "sa",
    "SimulatedAnnealing",
    "AnnealingSystem",
    "FunctionSystem",
    "CoolingSchedule",
    "SimpleCoolingSchedule",
    "acceptance_probability",
    "Result",
    "Trace",
    "Event",
    "EventKind",
    "LoggingSink",
    "Move",
    "RandomStep",
    "Metropolis1D",
    "SetStep",
    "KilnError",
    "InvalidConfiguration",
    "InvalidAcceptanceProbability",
]

__version__ = metadata.version("kiln")
