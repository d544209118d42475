import random

import pytest

from doors import apply_doors, door_capacity, place_doors
from errors import InvalidDoorCountError, MalformedGridError
from maze import generate_maze_map
from solver import find_solution
from helpers import ScriptedRandom, blank_grid

PATH = [(0, 0), (0, 1), (1, 1), (1, 2), (2, 2)]


@pytest.mark.parametrize("seed", range(10))
def test_two_doors_on_interior_cells(seed):
    doors = place_doors(PATH, 2, random.Random(seed))
    assert len(doors) == 2
    assert doors <= {(0, 1), (1, 1), (1, 2)}


def test_scripted_draws_reject_ends_and_repeats():
    rng = ScriptedRandom([0, 4, 1, 1, 3])
    doors = place_doors(PATH, 2, rng)
    assert doors == {(0, 1), (1, 2)}
    assert rng.draws == []
    assert rng.calls == [5] * 5


def test_count_above_capacity_is_capped():
    doors = place_doors(PATH, 10, random.Random(0))
    assert doors == {(0, 1), (1, 1), (1, 2)}


@pytest.mark.parametrize("path", [[], [(0, 0)], [(0, 0), (0, 1)]])
def test_short_paths_get_no_doors(path):
    assert place_doors(path, 3, random.Random(0)) == frozenset()
    assert door_capacity(path) == 0


def test_zero_doors_draws_nothing():
    rng = ScriptedRandom([])
    assert place_doors(PATH, 0, rng) == frozenset()
    assert rng.calls == []


@pytest.mark.parametrize("count", [-1, 1.5, "2", None])
def test_bad_count_rejected(count):
    with pytest.raises(InvalidDoorCountError):
        place_doors(PATH, count, random.Random(0))


def test_capacity_ignores_repeats_of_endpoints():
    path = [(0, 0), (0, 1), (0, 0), (0, 1), (1, 1)]
    assert door_capacity(path) == 1
    assert place_doors(path, 5, random.Random(3)) == {(0, 1)}


def test_accepts_list_coordinates():
    doors = place_doors([[0, 0], [0, 1], [1, 1]], 1, random.Random(0))
    assert doors == {(0, 1)}


@pytest.mark.parametrize("seed", range(5))
def test_doors_on_generated_solution(seed):
    rng = random.Random(seed)
    cells = generate_maze_map(12, 12, rng).cells
    path = find_solution(cells)
    doors = place_doors(path, 10, rng)
    assert len(doors) == min(10, len(path) - 2)
    assert path[0] not in doors and path[-1] not in doors
    assert doors <= set(path)


def test_same_seed_same_doors():
    assert place_doors(PATH, 2, random.Random(77)) == place_doors(PATH, 2, random.Random(77))


def test_apply_doors_sets_flags():
    cells = blank_grid(3, 3)
    apply_doors(cells, {(0, 1), (2, 2)})
    flagged = {(r, c) for r in range(3) for c in range(3) if cells[r][c].door}
    assert flagged == {(0, 1), (2, 2)}
    assert cells[0][1].walls == [True, True, True, True]


def test_apply_doors_outside_grid():
    with pytest.raises(MalformedGridError):
        apply_doors(blank_grid(2, 2), [(2, 0)])
