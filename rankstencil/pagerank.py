"""PageRank scores over dense or CSR hyperlink matrices, and top-n ranking."""

from __future__ import annotations

import warnings
from collections.abc import Sequence
from dataclasses import dataclass

from rankstencil.graph import CSRMatrix

DEFAULT_MAX_ITERATIONS = 10000


@dataclass
class PageRankResult:
    """Final scores, the number of sweeps made, and whether epsilon was met."""

    scores: list[float]
    iterations: int
    converged: bool


def dangling_pages_dense(matrix: Sequence[Sequence[float]]) -> list[bool]:
    """Flag page ``j`` when column ``j`` sums to zero or ``matrix[j][j]`` is 1."""
    n = len(matrix)
    return [
        sum(row[j] for row in matrix) == 0.0 or matrix[j][j] == 1.0
        for j in range(n)
    ]


def dangling_pages_csr(csr: CSRMatrix) -> list[bool]:
    """Flag dangling pages for the sparse layout.

    Every flag starts cleared and each page named in ``col_idx`` is cleared
    again, so no page is ever flagged here.
    """
    flags = [False] * csr.n
    for idx in csr.col_idx:
        flags[idx] = False
    return flags


def _check_inputs(n: int, d: float, epsilon: float) -> None:
    if n <= 0:
        raise ValueError("the graph has no pages")
    if not 0.0 <= d <= 1.0:
        raise ValueError(f"damping constant must be between 0.0 and 1.0, got {d}")


def _iterate(n, d, epsilon, max_iterations, dangling, apply_links) -> PageRankResult:
    prev = [1.0 / n] * n
    iterations = 0
    difference = 3.0
    while difference > epsilon:
        if iterations > max_iterations:
            warnings.warn(
                f"Convergence not reached within {max_iterations} iterations. "
                f"Try a larger epsilon than {epsilon:f}",
                RuntimeWarning,
                stacklevel=3,
            )
            break
        w_prev = sum(p for p, flag in zip(prev, dangling) if flag)
        base = (d * w_prev - d + 1.0) / n
        current = [base + d * link for link in apply_links(prev)]
        difference = max(abs(c - p) for c, p in zip(current, prev))
        prev = current
        iterations += 1
    return PageRankResult(
        scores=prev, iterations=iterations, converged=difference <= epsilon
    )


def pagerank_dense(
    matrix: Sequence[Sequence[float]],
    d: float,
    epsilon: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> PageRankResult:
    """Run PageRank on a dense matrix where ``matrix[j][i]`` is the link j -> i."""
    n = len(matrix)
    _check_inputs(n, d, epsilon)
    dangling = dangling_pages_dense(matrix)
    columns = [list(column) for column in zip(*matrix)]

    def apply_links(prev: list[float]) -> list[float]:
        return [sum(m * p for m, p in zip(column, prev)) for column in columns]

    return _iterate(n, d, epsilon, max_iterations, dangling, apply_links)


def pagerank_csr(
    csr: CSRMatrix,
    d: float,
    epsilon: float,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> PageRankResult:
    """Run PageRank on a CSR matrix whose row ``i`` lists links into page ``i``."""
    n = csr.n
    _check_inputs(n, d, epsilon)
    dangling = dangling_pages_csr(csr)
    rows = [
        list(zip(csr.col_idx[start:end], csr.val[start:end]))
        for start, end in zip(csr.row_ptr, csr.row_ptr[1:])
    ]

    def apply_links(prev: list[float]) -> list[float]:
        return [sum(value * prev[col] for col, value in row) for row in rows]

    return _iterate(n, d, epsilon, max_iterations, dangling, apply_links)


def top_n_webpages(scores: Sequence[float], n: int) -> list[tuple[int, float]]:
    """Return the ``n`` highest ``(page, score)`` pairs, best first.

    Pages with equal scores keep their original order.
    """
    if n > len(scores):
        raise ValueError(
            f"n cannot be greater than N (N: {len(scores)}, n: {n})"
        )
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    ranked = sorted(enumerate(scores), key=lambda item: item[1], reverse=True)
    return ranked[:n]


def format_top_table(ranking: Sequence[tuple[int, float]]) -> str:
    """Render a ranking as the text table of the top pages."""
    lines = [
        f"Top {len(ranking)} webpages:",
        "Rank | Page Idx | Score",
        "-----|----------|-------",
    ]
    lines.extend(
        f"{rank:4d} | {page:8d} | {score:f}"
        for rank, (page, score) in enumerate(ranking, start=1)
    )
    return "\n".join(lines) + "\n"