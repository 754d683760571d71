from kiln.algorithms.sa import SimulatedAnnealing, sa

__all__ = ["SimulatedAnnealing", "sa"]
