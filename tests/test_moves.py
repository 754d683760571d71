# coding: utf-8

# ====================================================
# imports
import pytest
import numpy as np

from kiln import FunctionSystem
from kiln import InvalidConfiguration
from kiln import Metropolis1D
from kiln import RandomStep
from kiln import SetStep
from kiln.moves import parse_moves


# ====================================================
# code
@pytest.fixture
def rng():
    return np.random.default_rng(42)


def test_RandomStep(rng):
    move = RandomStep(magnitude=2)
    x = np.array([1.0, 2.0, 3.0])

    for _ in range(50):
        new_x = move.get_proposal(x, rng)

        assert np.array_equal(x, [1.0, 2.0, 3.0])
        assert np.sum(new_x != x) <= 1
        assert np.all(np.abs(new_x - x) <= 1)


def test_RandomStep_bounds(rng, BOUNDS):
    move = RandomStep(magnitude=100, bounds=BOUNDS)
    x = np.array([0.0, 1.0])

    for _ in range(50):
        new_x = move.get_proposal(x, rng)

        assert -3 <= new_x[0] <= 3
        assert 0.5 <= new_x[1] <= 5


def test_Metropolis1D(rng):
    move = Metropolis1D(variance=0.5)
    x = np.zeros(4)

    new_x = move.get_proposal(x, rng)

    assert np.all(x == 0)
    assert np.sum(new_x != 0) == 1


def test_SetStep(rng):
    position_set = [np.linspace(-3, 3, 25), np.linspace(0.5, 5, 19)]
    move = SetStep(position_set=position_set)
    x = np.array([0.0, 0.5])

    for _ in range(50):
        new_x = move.get_proposal(x, rng)

        assert new_x[0] in position_set[0] and new_x[1] in position_set[1]
        assert np.sum(np.abs(new_x - x)) in (0, 0.25)

        x = new_x


def test_SetStep_dimension_mismatch(rng):
    move = SetStep(position_set=[[0, 1, 2]])

    with pytest.raises(InvalidConfiguration):
        move.get_proposal(np.array([0.0, 1.0]), rng)


@pytest.mark.parametrize(
    "build",
    [
        lambda: RandomStep(magnitude=0),
        lambda: Metropolis1D(variance=-1),
        lambda: SetStep(position_set=[[]]),
        lambda: RandomStep(magnitude=1, bounds=[(1, 0)]),
        lambda: RandomStep(magnitude=1, bounds=[(0, 1, 2)]),
    ],
)
def test_invalid_moves(build):
    with pytest.raises(InvalidConfiguration):
        build()


def test_parse_moves():
    small, large = RandomStep(magnitude=0.1), RandomStep(magnitude=1)

    assert parse_moves(small) == ([1.0], [small])
    assert parse_moves([small, large]) == ([0.5, 0.5], [small, large])

    probabilities, moves = parse_moves([(3.0, small), (1.0, large)])
    assert probabilities == [0.75, 0.25]
    assert moves == [small, large]

    for invalid in ("move", [], [(0.5,)], [(0.0, small)], [small, 3]):
        with pytest.raises(InvalidConfiguration):
            parse_moves(invalid)


def test_FunctionSystem(cost_function, BOUNDS):
    x0 = np.array([1.0, 2.0])
    system = FunctionSystem(cost_function, x0, bounds=BOUNDS, seed=0)

    initial = system.initial_solution()
    assert np.array_equal(initial, x0) and initial is not system.x0
    assert system.cost(initial) == 6.0

    neighbor = system.neighbor(initial)
    assert np.array_equal(initial, x0)
    assert np.sum(neighbor != initial) <= 1

    randomized = FunctionSystem(cost_function, x0, RandomStep(magnitude=1), randomize=True, seed=0)
    assert not np.array_equal(randomized.initial_solution(), x0)


def test_FunctionSystem_args():
    system = FunctionSystem(lambda x, a, b: a * float(np.sum(x)) + b, [1.0, 1.0], args=(2, 3))

    assert system.cost(np.array([1.0, 1.0])) == 7.0


def test_invalid_FunctionSystem(cost_function, BOUNDS):
    with pytest.raises(InvalidConfiguration):
        FunctionSystem(cost_function, np.zeros((2, 2)))

    with pytest.raises(InvalidConfiguration):
        FunctionSystem(cost_function, np.array([10.0, 1.0]), bounds=BOUNDS)

    with pytest.raises(InvalidConfiguration):
        FunctionSystem(cost_function, np.array([0.0, 1.0, 2.0]), bounds=BOUNDS)

    with pytest.raises(InvalidConfiguration):
        FunctionSystem(cost_function, [1.0], seed=1, rng=np.random.default_rng(1))
