# solver.py
"""
Walks a maze from (0, 0) to (rows-1, cols-1).

Depth-first with a fixed move priority (right, down, left, up) and explicit
backtracking. On a perfect maze this always ends with the unique simple path.
"""
import logging

from errors import DisconnectedGridError, MalformedGridError
from maze import Direction

logger = logging.getLogger(__name__)

MOVE_PRIORITY = (Direction.RIGHT, Direction.BOTTOM, Direction.LEFT, Direction.TOP)


def _check_grid(cells):
    if not cells or not cells[0]:
        raise MalformedGridError("grid must have at least one row and one column")
    width = len(cells[0])
    if any(len(row) != width for row in cells):
        raise MalformedGridError("grid rows must all have the same length")


def find_solution_trace(cells):
    """
    Returns (solution, visited_steps).

    visited_steps lists every cell entered, in order, including dead-end
    branches that were later abandoned.
    """
    _check_grid(cells)
    rows, cols = len(cells), len(cells[0])
    goal = (rows - 1, cols - 1)

    current = (0, 0)
    solution = [current]
    visited = {current}
    visited_steps = [current]

    while current != goal:
        r, c = current
        walls = cells[r][c].walls
        next_cell = None
        for direction in MOVE_PRIORITY:
            dr, dc = direction.delta
            nr, nc = r + dr, c + dc
            if (0 <= nr < rows and 0 <= nc < cols
                    and (nr, nc) not in visited and not walls[direction]):
                next_cell = (nr, nc)
                break

        if next_cell is not None:
            current = next_cell
            visited.add(current)
            visited_steps.append(current)
            solution.append(current)
        else:
            # dead end: step back, the cell stays visited
            solution.pop()
            if not solution:
                raise DisconnectedGridError(
                    f"no path from (0, 0) to {goal}; {len(visited)} cells reachable"
                )
            current = solution[-1]

    logger.debug("Solution found: %d cells, %d explored", len(solution), len(visited_steps))
    return solution, visited_steps


def find_solution(cells):
    solution, _ = find_solution_trace(cells)
    return solution
