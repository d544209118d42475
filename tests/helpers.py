from collections import deque

from maze import Cell, Direction


class ScriptedRandom:
    """Random source that replays a fixed list of draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = []

    def randrange(self, n):
        value = self.draws.pop(0)
        assert 0 <= value < n, f"scripted draw {value} out of range for {n}"
        self.calls.append(n)
        return value


def blank_grid(rows, cols):
    return [[Cell() for _ in range(cols)] for _ in range(rows)]


def carve(cells, pos, direction):
    r, c = pos
    dr, dc = direction.delta
    cells[r][c].walls[direction] = False
    cells[r + dr][c + dc].walls[direction.opposite] = False


def open_neighbours(cells, pos):
    r, c = pos
    for direction in Direction:
        dr, dc = direction.delta
        nr, nc = r + dr, c + dc
        if 0 <= nr < len(cells) and 0 <= nc < len(cells[0]) and not cells[r][c].walls[direction]:
            yield nr, nc


def reachable(cells, start=(0, 0)):
    seen = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        for nxt in open_neighbours(cells, cur):
            if nxt not in seen:
                seen.add(nxt)
                q.append(nxt)
    return seen
