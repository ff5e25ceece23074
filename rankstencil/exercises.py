"""Small numerical exercises: series, sorting, smoothing, integration, heat flow."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

Grid2D = list[list[float]]
Grid3D = list[list[list[float]]]

SERIES_LIMIT = 4.0 / 5.0


def alternating_series_sum(terms: int = 100) -> float:
    """Sum the first ``terms`` terms of 1 - 1/4 + 1/16 - ... = sum((-1/4) ** i)."""
    if terms < 1:
        raise ValueError(f"terms must be at least 1, got {terms}")
    return 1.0 + sum((-1.0) ** i / 2.0 ** (2 * i) for i in range(1, terms))


def series_converges(terms: int = 100, tol: float = 1e-12) -> bool:
    """Tell whether the partial sum lies within ``tol`` of its limit 4/5."""
    return abs(alternating_series_sum(terms) - SERIES_LIMIT) < tol


def index_cube(nx: int = 3, ny: int = 4, nz: int = 5) -> list[list[list[int]]]:
    """Return an nx x ny x nz cube whose entries hold their row-major offset."""
    if nx < 0 or ny < 0 or nz < 0:
        raise ValueError(f"dimensions must not be negative, got {nx}, {ny}, {nz}")
    return [
        [[i * ny * nz + j * nz + k for k in range(nz)] for j in range(ny)]
        for i in range(nx)
    ]


def temperature_extremes(
    lines: Iterable[str],
) -> tuple[tuple[float, str], tuple[float, str]]:
    """Find the lowest and highest readings in ``<time> <value>`` records.

    Returns ``((min_value, min_time), (max_value, max_time))``. The first
    reading seeds both; a reading only replaces the maximum when it did not
    already replace the minimum.
    """
    tokens = [token for line in lines for token in line.split()]
    if len(tokens) < 2:
        raise ValueError("no temperature readings found")
    if len(tokens) % 2:
        raise ValueError(f"reading without a value: {tokens[-1]!r}")
    pairs = iter(zip(tokens[::2], tokens[1::2]))

    first_time, first_value = next(pairs)
    try:
        low = high = float(first_value)
    except ValueError as exc:
        raise ValueError(f"not a temperature: {first_value!r}") from exc
    low_time = high_time = first_time

    for time, text in pairs:
        try:
            value = float(text)
        except ValueError as exc:
            raise ValueError(f"not a temperature: {text!r}") from exc
        if value < low:
            low, low_time = value, time
        elif value > high:
            high, high_time = value, time
    return (low, low_time), (high, high_time)


def smooth(v: Sequence[Sequence[float]], c: float) -> Grid2D:
    """Apply one explicit diffusion step to the interior of a 2D grid.

    The result has the shape of ``v``; its boundary entries are 0.0.
    """
    n = len(v)
    m = len(v[0]) if n else 0
    result = [[0.0] * m for _ in range(n)]
    for i in range(1, n - 1):
        above, row, below = v[i - 1], v[i], v[i + 1]
        out = result[i]
        for j in range(1, m - 1):
            out[j] = row[j] + c * (
                above[j] + row[j - 1] - 4 * row[j] + row[j + 1] + below[j]
            )
    return result


def quicksort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order, sorted by quicksort on the first item."""
    items = list(values)
    if len(items) <= 1:
        return items
    pivot, *rest = items
    lower = [x for x in rest if x <= pivot]
    upper = [x for x in rest if x > pivot]
    return quicksort(lower) + [pivot] + quicksort(upper)


def sort_permutation(values: Iterable[int]) -> tuple[list[int], list[int]]:
    """Sort the values and return them with the original index of each one."""

    def _sort(pairs: list[tuple[int, int]]) -> list[tuple[int, int]]:
        if len(pairs) <= 1:
            return pairs
        pivot, *rest = pairs
        lower = [p for p in rest if p[1] <= pivot[1]]
        upper = [p for p in rest if p[1] > pivot[1]]
        return _sort(lower) + [pivot] + _sort(upper)

    ordered = _sort(list(enumerate(values)))
    return [value for _, value in ordered], [index for index, _ in ordered]


def numerical_integration(x_min: float, x_max: float, slices: int) -> float:
    """Integrate 4 / (1 + x^2) over [x_min, x_max] with the midpoint rule."""
    if slices <= 0:
        raise ValueError(f"slices must be positive, got {slices}")
    delta_x = (x_max - x_min) / slices
    total = sum(
        4.0 / (1.0 + x * x)
        for x in (x_min + (i + 0.5) * delta_x for i in range(slices))
    )
    return total * delta_x


def heat_initial_values(m: int, n: int, o: int) -> Grid3D:
    """Return the m x n x o grid with u[i][j][k] = 2 + sin(i*j*k / ((m-1)(n-1)(o-1)))."""
    if m < 2 or n < 2 or o < 2:
        raise ValueError(f"every dimension must be at least 2, got {m}, {n}, {o}")
    denom = 1.0 / ((m - 1) * (n - 1) * (o - 1))
    return [
        [[2.0 + math.sin(i * j * k * denom) for k in range(o)] for j in range(n)]
        for i in range(m)
    ]


def heat_solve(u: Sequence[Sequence[Sequence[float]]], c: float, num_iter: int) -> Grid3D:
    """Advance the 3D heat equation ``num_iter`` explicit steps and return the grid.

    The input is not changed; boundary values stay fixed.
    """
    if num_iter < 0:
        raise ValueError(f"num_iter must not be negative, got {num_iter}")
    prev = [[list(row) for row in plane] for plane in u]
    curr = [[list(row) for row in plane] for plane in u]
    m = len(prev)
    for _ in range(num_iter):
        for i in range(1, m - 1):
            below, plane, above = prev[i - 1], prev[i], prev[i + 1]
            out_plane = curr[i]
            for j in range(1, len(plane) - 1):
                row, left, right = plane[j], plane[j - 1], plane[j + 1]
                out = out_plane[j]
                for k in range(1, len(row) - 1):
                    centre = row[k]
                    out[k] = centre + c * (
                        row[k - 1]
                        + row[k + 1]
                        + left[k]
                        + right[k]
                        + below[j][k]
                        + above[j][k]
                        - 6 * centre
                    )
        prev, curr = curr, prev
    return prev