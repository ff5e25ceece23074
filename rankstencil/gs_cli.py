"""Command line front end comparing plain and two-chunk Gauss-Seidel sweeps."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from rankstencil.stencil import (
    allocate_array3d,
    euclidean_distance,
    format_array3d,
    gs_iteration_2_chunks,
    gs_iteration_normal,
)

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")

_USAGE = "Usage: gs [num_iters] [kmax] [jmax] [imax]"


class InputError(ValueError):
    """Raised when the command line arguments are missing or out of range."""


@dataclass(frozen=True)
class GridConfig:
    """Number of sweeps and the grid dimensions."""

    num_iters: int = 1000
    kmax: int = 4
    jmax: int = 6
    imax: int = 8


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(0)) if match else 0


def handle_input(args: Sequence[str]) -> GridConfig:
    """Build the run configuration from the arguments after the program name.

    No arguments give the defaults; four give num_iters, kmax, jmax and imax,
    which must satisfy num_iters > 0, kmax > 2, jmax > 0 and imax > 0.
    """
    args = list(args)
    if not args:
        return GridConfig()
    if len(args) != 4:
        raise InputError(
            "Invalid number of arguments. Enter no args for default values "
            "or 4 args for custom values."
        )
    num_iters, kmax, jmax, imax = (_leading_int(arg) for arg in args)
    if num_iters <= 0 or kmax <= 2 or jmax <= 0 or imax <= 0:
        raise InputError(
            "Invalid input values. Valid values are num_iters > 0, kmax > 2, "
            "jmax > 0, imax > 0. "
            f"Received: num_iters={num_iters}, kmax={kmax}, jmax={jmax}, imax={imax}"
        )
    return GridConfig(num_iters=num_iters, kmax=kmax, jmax=jmax, imax=imax)


def _default_notice(config: GridConfig) -> str:
    message = (
        "* No args provided. Using default values: "
        f"num_iters={config.num_iters}, kmax={config.kmax}, "
        f"jmax={config.jmax}, imax={config.imax} *"
    )
    border = "*" * len(message)
    blank = "*" + " " * (len(message) - 2) + "*"
    return "\n".join([border, blank, message, blank, border]) + "\n"


def main(argv: Sequence[str] | None = None) -> int:
    """Run both sweep variants on equal grids and print how far apart they end."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = handle_input(args)
    except InputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 1

    if not args:
        print(_default_notice(config))

    arr1 = allocate_array3d(config.kmax, config.jmax, config.imax)
    arr2 = allocate_array3d(config.kmax, config.jmax, config.imax)
    print("Initial values of arr1:")
    print(format_array3d(arr1), end="")
    print("Initial values of arr2::")
    print(format_array3d(arr2), end="")

    for _ in range(config.num_iters):
        gs_iteration_normal(arr1)
        gs_iteration_2_chunks(arr2)

    diff = euclidean_distance(arr1, arr2)
    print(
        f"num iters={config.num_iters}, kmax={config.kmax}, "
        f"jmax={config.jmax}, imax={config.imax}, diff={'%g' % diff}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())