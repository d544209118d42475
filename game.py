# game.py
"""One round of the trivia maze: maze, solution path, doors and master keys."""
import logging
import random
from dataclasses import dataclass

import config
from doors import apply_doors, place_doors
from errors import InvalidParameterError
from maze import format_grid, generate_maze_map, grid_to_dict
from solver import find_solution

logger = logging.getLogger(__name__)


@dataclass
class Round:
    cells: list
    solution: list
    doors: frozenset
    master_keys: int

    def to_dict(self):
        return {
            "size": len(self.cells),
            "cells": grid_to_dict(self.cells),
            "solution": [list(p) for p in self.solution],
            "doors": [list(p) for p in sorted(self.doors)],
            "master_keys": self.master_keys,
        }


def new_round(size=config.MAZE_SIZE, num_doors=config.NUM_DOORS,
              num_keys=config.NUM_MASTER_KEYS, rng=None):
    """Generate a size x size maze, solve it and put doors on the solution path."""
    if num_keys < 0:
        raise InvalidParameterError(f"master key count must be >= 0, got {num_keys}")
    if rng is None:
        rng = random.Random()

    maze = generate_maze_map(size, size, rng)
    solution = find_solution(maze.cells)
    doors = place_doors(solution, num_doors, rng)
    apply_doors(maze.cells, doors)
    logger.debug("New round: %dx%d, %d doors, %d master keys", size, size, len(doors), num_keys)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("maze=>\n%s", format_grid(maze.cells, solution))
    return Round(cells=maze.cells, solution=solution, doors=doors, master_keys=num_keys)
