"""Gauss-Seidel sweeps of the 3D Laplace stencil over nested-list grids.

A grid is indexed ``phi[k][j][i]``. Only interior points are updated; the
outer layer in every direction is left as a fixed boundary.
"""

from __future__ import annotations

import math

Grid = list[list[list[float]]]


def _shape(arr: Grid) -> tuple[int, int, int]:
    kmax = len(arr)
    jmax = len(arr[0]) if kmax else 0
    imax = len(arr[0][0]) if jmax else 0
    return kmax, jmax, imax


def _require_levels(phi: Grid) -> None:
    if len(phi) < 3:
        raise ValueError(f"the grid needs at least 3 levels in k, got {len(phi)}")


def _relax_level(phi: Grid, k: int) -> None:
    """Update the interior of level ``k`` in place, in j-then-i order."""
    below, plane, above = phi[k - 1], phi[k], phi[k + 1]
    jmax = len(plane)
    for j in range(1, jmax - 1):
        row, before, after = plane[j], plane[j - 1], plane[j + 1]
        for i in range(1, len(row) - 1):
            row[i] = (
                below[j][i]
                + before[i]
                + row[i - 1]
                + row[i + 1]
                + after[i]
                + above[j][i]
            ) / 6.0


def allocate_array3d(kmax: int, jmax: int, imax: int) -> Grid:
    """Return a kmax x jmax x imax grid whose entries hold their flattened index."""
    if kmax < 0 or jmax < 0 or imax < 0:
        raise ValueError(
            f"dimensions must not be negative, got {kmax}, {jmax}, {imax}"
        )
    return [
        [
            [float(k * jmax * imax + j * imax + i) for i in range(imax)]
            for j in range(jmax)
        ]
        for k in range(kmax)
    ]


def gs_iteration_normal(phi: Grid) -> None:
    """Make one Gauss-Seidel sweep over all interior levels, in place."""
    for k in range(1, len(phi) - 1):
        _relax_level(phi, k)


def gs_iteration_2_chunks(phi: Grid) -> None:
    """Make two pipelined Gauss-Seidel sweeps in place, as a two-chunk wavefront.

    The left chunk sweeps level ``k`` while the right chunk trails one level
    behind at ``k - 1``.
    """
    _require_levels(phi)
    kmax = len(phi)
    _relax_level(phi, 1)
    for k in range(2, kmax - 1):
        _relax_level(phi, k)
        _relax_level(phi, k - 1)
    _relax_level(phi, kmax - 2)


def gs_iteration_2_chunks_rank(rank: int, phi: Grid) -> None:
    """Do the share of the two-chunk wavefront that belongs to ``rank`` (0 or 1).

    Rank 0 runs the leading chunk, rank 1 the trailing one; each sweeps its
    own grid once over all interior levels.
    """
    if rank not in (0, 1):
        raise ValueError(f"rank must be 0 or 1, got {rank}")
    _require_levels(phi)
    kmax = len(phi)
    if rank == 0:
        _relax_level(phi, 1)
        for k in range(2, kmax - 1):
            _relax_level(phi, k)
    else:
        for k in range(2, kmax - 1):
            _relax_level(phi, k - 1)
        _relax_level(phi, kmax - 2)


def euclidean_distance(arr1: Grid, arr2: Grid) -> float:
    """Return the Euclidean norm of the difference between two equal-shaped grids."""
    if _shape(arr1) != _shape(arr2):
        raise ValueError(
            f"grids differ in shape: {_shape(arr1)} and {_shape(arr2)}"
        )
    total = 0.0
    for plane1, plane2 in zip(arr1, arr2):
        for row1, row2 in zip(plane1, plane2, strict=True):
            for a, b in zip(row1, row2, strict=True):
                diff = a - b
                total += diff * diff
    return math.sqrt(total)


def format_array3d(arr: Grid) -> str:
    """Render a grid as text: one line per row, a blank line after each level."""
    parts: list[str] = []
    for plane in arr:
        for row in plane:
            parts.append("".join("%g " % value for value in row) + "\n")
        parts.append("\n")
    return "".join(parts)