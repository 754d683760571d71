from kiln.cooling.base import CoolingSchedule
from kiln.cooling.geometric import SimpleCoolingSchedule

__all__ = ["CoolingSchedule", "SimpleCoolingSchedule"]
