# maze.py
"""
Perfect maze generation over a rows x cols grid of cells.

Each cell carries four wall flags indexed by Direction (True = wall present)
and a door flag. Generation is a randomized depth-first carve (recursive
backtracker), so the open passages always form a spanning tree.
"""
import logging
import random
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Protocol, Tuple

from errors import InternalInconsistencyError, InvalidDimensionError, MalformedGridError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class RandomSource(Protocol):
    """Anything with ``randrange(n)`` returning a uniform int in [0, n)."""

    def randrange(self, n: int) -> int:
        ...


class Direction(IntEnum):
    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]

    @property
    def delta(self) -> Position:
        """(row, col) step taken when moving in this direction."""
        return _DELTAS[self]


_OPPOSITES = {
    Direction.TOP: Direction.BOTTOM,
    Direction.RIGHT: Direction.LEFT,
    Direction.BOTTOM: Direction.TOP,
    Direction.LEFT: Direction.RIGHT,
}

_DELTAS = {
    Direction.TOP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.BOTTOM: (1, 0),
    Direction.LEFT: (0, -1),
}


@dataclass
class Cell:
    walls: List[bool] = field(default_factory=lambda: [True, True, True, True])
    door: bool = False

    def is_open(self, direction: Direction) -> bool:
        return not self.walls[direction]

    def to_dict(self) -> dict:
        return {"walls": list(self.walls), "door": self.door}

    @classmethod
    def from_dict(cls, data) -> "Cell":
        if not isinstance(data, dict):
            raise MalformedGridError("cell must be an object")
        walls = data.get("walls")
        if not isinstance(walls, list) or len(walls) != 4 or not all(isinstance(w, bool) for w in walls):
            raise MalformedGridError("cell walls must be a list of 4 booleans")
        door = data.get("door", False)
        if not isinstance(door, bool):
            raise MalformedGridError("cell door must be a boolean")
        return cls(walls=list(walls), door=door)


Grid = List[List[Cell]]


@dataclass
class MazeMap:
    """Generated grid plus every cell pushed while carving, in push order."""
    cells: Grid
    carve_path: List[Position]

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])


def _check_dimension(name, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidDimensionError(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidDimensionError(f"{name} must be >= 1, got {value}")


def generate_maze_map(rows: int, cols: int, rng: Optional[RandomSource] = None) -> MazeMap:
    """
    Carve a perfect maze with a randomized depth-first walk.

    Starts from a random cell, repeatedly knocks down the wall pair towards a
    random unvisited neighbour and backtracks when the current cell is boxed in.
    """
    _check_dimension("rows", rows)
    _check_dimension("cols", cols)
    if rng is None:
        rng = random.Random()

    cells = [[Cell() for _ in range(cols)] for _ in range(rows)]
    unvisited = [[True for _ in range(cols)] for _ in range(rows)]
    total = rows * cols

    current = (rng.randrange(rows), rng.randrange(cols))
    unvisited[current[0]][current[1]] = False
    visited = 1
    stack = [current]
    carve_path = [current]

    while visited < total:
        r, c = current
        neighbors = []
        for direction in Direction:
            dr, dc = direction.delta
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and unvisited[nr][nc]:
                neighbors.append((nr, nc, direction))

        if neighbors:
            nr, nc, direction = neighbors[rng.randrange(len(neighbors))]
            # break the walls on both sides of the shared edge
            cells[r][c].walls[direction] = False
            cells[nr][nc].walls[direction.opposite] = False
            unvisited[nr][nc] = False
            visited += 1
            current = (nr, nc)
            stack.append(current)
            carve_path.append(current)
        else:
            stack.pop()
            if not stack:
                raise InternalInconsistencyError(
                    f"carving stack emptied with {visited}/{total} cells visited"
                )
            current = stack[-1]

    logger.debug("Generated %dx%d maze, %d cells carved", rows, cols, len(carve_path))
    return MazeMap(cells=cells, carve_path=carve_path)


def count_passages(cells: Grid) -> int:
    """Number of open wall pairs (each shared edge counted once)."""
    passages = 0
    for r, row in enumerate(cells):
        for c, cell in enumerate(row):
            if c + 1 < len(row) and cell.is_open(Direction.RIGHT):
                passages += 1
            if r + 1 < len(cells) and cell.is_open(Direction.BOTTOM):
                passages += 1
    return passages


def format_grid(cells: Grid, path=None) -> str:
    """ASCII dump of the grid for debugging. Doors show as D, path cells as *."""
    marked = set(map(tuple, path or []))
    lines = []
    for r, row in enumerate(cells):
        top = "+"
        middle = "|" if row[0].walls[Direction.LEFT] else " "
        for c, cell in enumerate(row):
            top += "---+" if cell.walls[Direction.TOP] else "   +"
            if cell.door:
                mark = " D "
            elif (r, c) in marked:
                mark = " * "
            else:
                mark = "   "
            middle += mark + ("|" if cell.walls[Direction.RIGHT] else " ")
        lines.append(top)
        lines.append(middle)
    bottom = "+"
    for cell in cells[-1]:
        bottom += "---+" if cell.walls[Direction.BOTTOM] else "   +"
    lines.append(bottom)
    return "\n".join(lines)


def grid_to_dict(cells: Grid) -> list:
    return [[cell.to_dict() for cell in row] for row in cells]


def grid_from_dict(data) -> Grid:
    """Rebuild a grid from its JSON shape, checking it is a non-empty rectangle."""
    if not isinstance(data, list) or not data:
        raise MalformedGridError("grid must be a non-empty list of rows")
    width = None
    cells = []
    for row in data:
        if not isinstance(row, list) or not row:
            raise MalformedGridError("grid rows must be non-empty lists")
        if width is None:
            width = len(row)
        elif len(row) != width:
            raise MalformedGridError("grid rows must all have the same length")
        cells.append([Cell.from_dict(item) for item in row])
    return cells
