# coding: utf-8

# ====================================================
# imports
from __future__ import annotations

import collections.abc

from typing import Sequence

from kiln.errors import InvalidConfiguration
from kiln.moves.base import Move


# ====================================================
# code
def parse_moves(
    moves: Move | Sequence[Move] | Sequence[tuple[float, Move]]
) -> tuple[list[float], list[Move]]:
    """
    Parse moves given by the user to obtain a list of moves and associated probabilities of drawing those moves.

    Args:
        moves: a single Move object, a sequence of Moves (uniform probabilities are assumed on all Moves) or a
            sequence of tuples with format (probability: float, Move).

    Returns:
        The list of probabilities and the list of associated moves.
    """
    if not isinstance(moves, collections.abc.Sequence) or isinstance(moves, str):
        if isinstance(moves, Move):
            return [1.0], [moves]

        raise InvalidConfiguration(
            f"Invalid object '{moves}' of type '{type(moves)}' for defining moves, expected a "
            f"'Move', a sequence of 'Move's or a sequence of tuples "
            f"'(probability: float, 'Move')'."
        )

    parsed_probabilities = []
    parsed_moves = []

    for move in moves:
        if isinstance(move, Move):
            parsed_probabilities.append(1.0)
            parsed_moves.append(move)

        elif isinstance(move, tuple):
            if (
                len(move) == 2
                and isinstance(move[0], (int, float))
                and move[0] >= 0
                and isinstance(move[1], Move)
            ):
                parsed_probabilities.append(float(move[0]))
                parsed_moves.append(move[1])

            else:
                raise InvalidConfiguration(
                    f"Invalid format for tuple '{move}', expected '(probability: float, Move)'."
                )

        else:
            raise InvalidConfiguration(
                f"Invalid object '{move}' of type '{type(move)}' encountered in the sequence of moves for "
                f"defining a move, expected a 'Move' or tuple '(probability: float, 'Move')'."
            )

    _sum = sum(parsed_probabilities)

    if not parsed_moves or _sum == 0:
        raise InvalidConfiguration("At least one move with a non-zero probability is required.")

    if _sum != 1:
        parsed_probabilities = [proba / _sum for proba in parsed_probabilities]

    return parsed_probabilities, parsed_moves
