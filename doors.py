# doors.py
"""Random door placement along a path, excluding its first and last cells."""
import logging
import random

from errors import InvalidDoorCountError, MalformedGridError

logger = logging.getLogger(__name__)


def _interior(path):
    if len(path) < 3:
        return set()
    ends = {path[0], path[-1]}
    return {pos for pos in path[1:-1] if pos not in ends}


def door_capacity(path):
    """How many distinct doors fit on the path (len(path) - 2 for a simple path)."""
    return len(_interior([tuple(p) for p in path]))


def place_doors(path, count, rng=None):
    """
    Pick ``count`` distinct interior cells of ``path`` by rejection sampling.

    Requests above the path's capacity are capped to it.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidDoorCountError(f"door count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidDoorCountError(f"door count must be >= 0, got {count}")
    if rng is None:
        rng = random.Random()

    path = [tuple(p) for p in path]
    candidates = _interior(path)
    if count > len(candidates):
        logger.debug("Capping door count %d to %d", count, len(candidates))
        count = len(candidates)

    chosen = set()
    while len(chosen) < count:
        index = rng.randrange(len(path))
        # redraw on start, end or an already chosen cell
        position = path[index]
        if position in candidates and position not in chosen:
            chosen.add(position)

    logger.debug("Placed %d doors: %s", len(chosen), sorted(chosen))
    return frozenset(chosen)


def apply_doors(cells, doors):
    """Set the door flag on each listed cell, in place."""
    rows, cols = len(cells), len(cells[0]) if cells else 0
    for r, c in doors:
        if not (0 <= r < rows and 0 <= c < cols):
            raise MalformedGridError(f"door position {(r, c)} is outside the grid")
        cells[r][c].door = True
