from kiln.system.base import AnnealingSystem
from kiln.system.function import FunctionSystem

__all__ = ["AnnealingSystem", "FunctionSystem"]
