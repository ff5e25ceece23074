"""Command line front end: rank the pages of web graphs kept in ``webgraphs/``."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Sequence
from pathlib import Path

from rankstencil.graph import read_csr_graph, read_dense_graph
from rankstencil.pagerank import (
    format_top_table,
    pagerank_csr,
    pagerank_dense,
    top_n_webpages,
)

GRAPH_DIRECTORY = "webgraphs"

_USAGE = (
    "Usage: <small_graph_name> <large_graph_name> <damping_constant> <epsilon> <num_pages>\n"
    "   or: <graph_name> <damping_constant> <epsilon> <num_pages>\n"
    "Example: main small-webgraph.txt 0.85 0.0001 10"
)

_FLOAT_PREFIX = re.compile(r"\s*[+-]?(\d+\.?\d*([eE][+-]?\d+)?|\.\d+([eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")


class ArgumentError(ValueError):
    """Raised when a command line argument has an unacceptable value."""

    def __init__(self, message: str, available: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.available = list(available)


def _leading_float(text: str) -> float:
    """Read the number at the start of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else 0.0


def _leading_int(text: str) -> int:
    """Read the integer at the start of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(0)) if match else 0


def check_args(
    filename: str,
    d: float,
    epsilon: float,
    num_pages: int,
    directory: str | os.PathLike[str] = GRAPH_DIRECTORY,
) -> Path:
    """Validate the arguments and return the path of the graph file.

    The file must be a ``.txt`` entry of ``directory``; ``d`` must lie in
    [0, 1], ``epsilon`` must be positive and ``num_pages`` at least 1.
    """
    folder = Path(directory)
    try:
        with os.scandir(folder) as entries:
            names = [entry.name for entry in entries]
    except OSError as exc:
        raise ArgumentError(f"Could not open '{folder.name}/' directory") from exc

    available = sorted(name for name in names if ".txt" in name)
    if filename not in available:
        raise ArgumentError(
            f"File {filename} not found in {folder.name}/ directory.",
            available=available,
        )
    if d < 0.0 or d > 1.0:
        raise ArgumentError(
            f"Damping constant must be between 0.0 and 1.0. Got: {d:f}"
        )
    if epsilon <= 0.0:
        raise ArgumentError(f"Epsilon must be greater than 0.0. Got: {epsilon:f}")
    if num_pages <= 0:
        raise ArgumentError(
            f"Number of pages must be greater than 0. Got: {num_pages}"
        )
    return folder / filename


def _rank_dense(path: Path, d: float, epsilon: float, num_pages: int) -> None:
    print(f"Reading graph from file {path.name}...")
    matrix = read_dense_graph(path)
    print("Calculating PageRank scores...")
    result = pagerank_dense(matrix, d, epsilon)
    print(f"Converged in {result.iterations} iterations")
    print("PageRank scores:")
    print(format_top_table(top_n_webpages(result.scores, num_pages)), end="")


def _rank_csr(path: Path, d: float, epsilon: float, num_pages: int) -> None:
    print(f"Reading graph from file {path.name}...")
    csr = read_csr_graph(path)
    print("Calculating PageRank scores (CSR)...")
    result = pagerank_csr(csr, d, epsilon)
    print(f"Convergence reached in {result.iterations} iterations")
    print("PageRank scores (CSR):")
    print(format_top_table(top_n_webpages(result.scores, num_pages)), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Rank one graph (CSR) or a small (dense) and a large (CSR) graph."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) == 5:
        small, large, *rest = args
    elif len(args) == 4:
        small, large, *rest = None, *args
    else:
        print(_USAGE, file=sys.stderr)
        return 1

    d = _leading_float(rest[0])
    epsilon = _leading_float(rest[1])
    num_pages = _leading_int(rest[2])

    print("Checking arguments...")
    try:
        small_path = (
            check_args(small, d, epsilon, num_pages) if small is not None else None
        )
        large_path = check_args(large, d, epsilon, num_pages)
        if small_path is not None:
            _rank_dense(small_path, d, epsilon, num_pages)
            print()
        _rank_csr(large_path, d, epsilon, num_pages)
    except ArgumentError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        if exc.available:
            print("The only files available are:", file=sys.stderr)
            for name in exc.available:
                print(name)
        return 1
    except (ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())