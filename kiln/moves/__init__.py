from kiln.moves.base import Move
from kiln.moves.discrete import SetStep
from kiln.moves.parse import parse_moves
from kiln.moves.sequential import Metropolis1D, RandomStep

__all__ = ["Move", "RandomStep", "Metropolis1D", "SetStep", "parse_moves"]
