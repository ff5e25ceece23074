"""Reading web graphs into dense or compressed-sparse-row hyperlink matrices.

A graph file has two free-form lines, then a header line such as
``# Nodes: 8   Edges: 17``, one more free-form line, and then one edge per
line written as ``<from_node> <to_node>``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike

_HEADER = re.compile(r"#\s*Nodes:\s*([+-]?\d+)\s*Edges:\s*([+-]?\d+)")
_EDGE = re.compile(r"\s*([+-]?\d+)\s+([+-]?\d+)")


class GraphFormatError(ValueError):
    """Raised when a graph file does not follow the expected layout."""


@dataclass
class CSRMatrix:
    """Hyperlink matrix in compressed sparse row form.

    Row ``i`` holds the links *into* page ``i``: ``col_idx`` names the
    linking page and ``val`` the share of its score it passes on.
    """

    n: int
    row_ptr: list[int] = field(default_factory=list)
    col_idx: list[int] = field(default_factory=list)
    val: list[float] = field(default_factory=list)


def _read_header(lines: Iterator[str]) -> tuple[int, int]:
    for number in (1, 2):
        if next(lines, None) is None:
            raise GraphFormatError(f"missing line {number} of the graph header")
    header = next(lines, None)
    if header is None:
        raise GraphFormatError("missing the line with the number of nodes")
    match = _HEADER.match(header.strip())
    if match is None:
        raise GraphFormatError(f"cannot read node and edge counts from {header!r}")
    nodes, edges = int(match.group(1)), int(match.group(2))
    if nodes < 0 or edges < 0:
        raise GraphFormatError(f"negative counts in header: {header.strip()!r}")
    return nodes, edges


def _edges(lines: Iterable[str], n: int) -> Iterator[tuple[int, int]]:
    for line in lines:
        if not line.strip():
            continue
        match = _EDGE.match(line)
        if match is None:
            raise GraphFormatError(f"cannot read an edge from {line!r}")
        source, target = int(match.group(1)), int(match.group(2))
        if not (0 <= source < n and 0 <= target < n):
            raise GraphFormatError(
                f"Edge ({source}, {target}) out of bounds. "
                f"Node indices should be between 0 and {n - 1}."
            )
        yield source, target


def parse_dense_graph(lines: Iterable[str]) -> list[list[float]]:
    """Build the dense N x N hyperlink matrix from the lines of a graph file.

    ``matrix[i][j]`` is ``1 / outdegree(i)`` when page ``i`` links to ``j``.
    Every edge line after the header is read, whatever the edge count says.
    """
    it = iter(lines)
    n, _ = _read_header(it)
    next(it, None)
    edges = list(_edges(it, n))

    outgoing = [0] * n
    for source, _target in edges:
        outgoing[source] += 1

    matrix = [[0.0] * n for _ in range(n)]
    for source, target in edges:
        matrix[source][target] = 1.0 / outgoing[source]
    return matrix


def parse_csr_graph(lines: Iterable[str]) -> CSRMatrix:
    """Build the CSR hyperlink matrix from the lines of a graph file.

    At most as many edges as the header announces are read. Each row's
    entries are ordered by column.
    """
    it = iter(lines)
    n, n_edges = _read_header(it)
    if next(it, None) is None:
        raise GraphFormatError("missing line 4 of the graph file")

    edges: list[tuple[int, int]] = []
    for edge in _edges(it, n):
        if len(edges) >= n_edges:
            break
        edges.append(edge)

    outgoing = [0] * n
    for source, _target in edges:
        outgoing[source] += 1

    rows: list[list[tuple[int, float]]] = [[] for _ in range(n)]
    for source, target in edges:
        rows[target].append((source, 1.0 / outgoing[source]))

    csr = CSRMatrix(n=n, row_ptr=[0])
    for row in rows:
        for col, value in sorted(row, key=lambda entry: entry[0]):
            csr.col_idx.append(col)
            csr.val.append(value)
        csr.row_ptr.append(len(csr.col_idx))
    return csr


def read_dense_graph(path: str | PathLike[str]) -> list[list[float]]:
    """Read a graph file into a dense hyperlink matrix."""
    with open(path, encoding="utf-8") as handle:
        return parse_dense_graph(handle)


def read_csr_graph(path: str | PathLike[str]) -> CSRMatrix:
    """Read a graph file into a CSR hyperlink matrix."""
    with open(path, encoding="utf-8") as handle:
        return parse_csr_graph(handle)