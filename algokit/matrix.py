"""Grid and matrix manipulation."""

from __future__ import annotations

from collections.abc import Sequence


def rotate_image(matrix: list[list[int]]) -> None:
    """Rotate a square matrix 90 degrees clockwise, in place."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    rotated = [list(column) for column in zip(*reversed(matrix))]
    for row, new_row in zip(matrix, rotated):
        row[:] = new_row


def construct_2d(original: Sequence[int], m: int, n: int) -> list[list[int]]:
    """Reshape ``original`` into ``m`` rows of ``n``; [] if the sizes do not match."""
    if m * n != len(original):
        return []
    return [list(original[row * n:(row + 1) * n]) for row in range(m)]


def count_sub_islands(
    grid1: Sequence[Sequence[int]], grid2: Sequence[Sequence[int]]
) -> int:
    """Number of islands in ``grid2`` whose every cell is land in ``grid1``."""
    rows = len(grid2)
    cols = len(grid2[0]) if rows else 0
    if len(grid1) != rows or any(len(row) != cols for row in (*grid1, *grid2)):
        raise ValueError("grids must have the same shape")

    seen: set[tuple[int, int]] = set()
    count = 0
    for r in range(rows):
        for c in range(cols):
            if grid2[r][c] != 1 or (r, c) in seen:
                continue
            seen.add((r, c))
            pending = [(r, c)]
            contained = True
            while pending:
                y, x = pending.pop()
                if grid1[y][x] != 1:
                    contained = False
                for ny, nx in ((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)):
                    if (
                        0 <= ny < rows
                        and 0 <= nx < cols
                        and grid2[ny][nx] == 1
                        and (ny, nx) not in seen
                    ):
                        seen.add((ny, nx))
                        pending.append((ny, nx))
            if contained:
                count += 1
    return count