# rankstencil

Small numerical toolkits in one pure-Python package (no third-party
dependencies):

* **PageRank** for directed web graphs (`rankstencil.graph`,
  `rankstencil.pagerank`), with a dense-matrix and a compressed-sparse-row
  (CSR) implementation and a top-N ranking table.
* **Gauss-Seidel stencil sweeps** on 3D grids (`rankstencil.stencil`), in
  plain lexicographic order and in a two-chunk wavefront order.
* **Exercise routines** (`rankstencil.exercises`): series convergence,
  an index cube, temperature extremes, 2D smoothing, quicksort with a
  permutation, midpoint integration of π and an explicit 3D heat solver.

## Installation

```
pip install .
```

Tests run with `pip install .[test]` and then `pytest`.

## Web graph files

Graphs are plain text. The first two lines are free-form, the third gives
the size, the fourth is free-form again, and every following line is one
link `from to` with zero-based node numbers:

```
# Directed graph
# Example web graph
# Nodes: 8   Edges: 17
# FromNodeId    ToNodeId
0 1
0 2
1 3
...
```

Blank edge lines are skipped. A missing header line, an unreadable header
or edge line, negative counts, or a node number outside `0 .. N-1` raises
`GraphFormatError` (a `ValueError`). The dense reader takes every edge line;
the CSR reader stops after the number of edges given in the header.

## PageRank from the command line

The `rankstencil` command looks for graph files among the `.txt` entries of
a `webgraphs/` directory under the current directory.

```
rankstencil small-webgraph.txt large-webgraph.txt 0.85 0.0001 10
rankstencil large-webgraph.txt 0.85 0.0001 10
```

With five arguments the first graph is ranked with the dense implementation
and the second with the CSR implementation; with four, the single graph is
ranked with the CSR implementation. The remaining arguments are the damping
constant (between 0 and 1), the convergence threshold epsilon (greater than
0) and the number of pages to show (greater than 0 and at most the number of
nodes). Numeric arguments are read from their leading digits, so text that
is not a number counts as 0 and is then rejected.

If a file is not found, the command prints an error and lists the `.txt`
files that are available. Any error makes the command exit with status 1.

## PageRank from Python

```python
from rankstencil.graph import read_csr_graph
from rankstencil.pagerank import pagerank_csr, top_n_webpages, format_top_table

csr = read_csr_graph("webgraphs/small-webgraph.txt")
result = pagerank_csr(csr, 0.85, 1e-4)
print(result.iterations, result.converged)
print(format_top_table(top_n_webpages(result.scores, 5)), end="")
```

* `read_dense_graph(path)` / `parse_dense_graph(lines)` return an N×N list
  of lists where `matrix[i][j]` is `1 / outdegree(i)` if page `i` links to
  page `j`.
* `read_csr_graph(path)` / `parse_csr_graph(lines)` return a `CSRMatrix`
  (`n`, `row_ptr`, `col_idx`, `val`) whose row `i` lists the links *into*
  page `i`, ordered by column.
* `pagerank_dense(matrix, d, epsilon, max_iterations=10000)` and
  `pagerank_csr(csr, d, epsilon, max_iterations=10000)` start from uniform
  scores and iterate until the largest change of any score is no more than
  `epsilon`. If more than `max_iterations` iterations run, they stop with a
  `RuntimeWarning`. They return a `PageRankResult` with `scores`,
  `iterations` and `converged`. An empty graph or a damping constant
  outside [0, 1] raises `ValueError`.
* `dangling_pages_dense(matrix)` flags page `j` when column `j` sums to zero
  or `matrix[j][j]` is 1; their scores are spread over all pages.
  `dangling_pages_csr(csr)` flags no page, so the CSR variant adds no
  dangling-page share.
* `top_n_webpages(scores, n)` returns the `n` highest `(page, score)` pairs,
  best first, keeping the original order for equal scores; `n` larger than
  the number of scores, or negative, raises `ValueError`.
* `format_top_table(ranking)` renders such a list as a
  `Rank | Page Idx | Score` table.

## Gauss-Seidel sweeps from the command line

```
rankstencil-gs
rankstencil-gs 1000 4 6 8
```

With no arguments the defaults `num_iters=1000, kmax=4, jmax=6, imax=8`
are used and announced; otherwise give all four values (`num_iters > 0`,
`kmax > 2`, `jmax > 0`, `imax > 0`). The command prints both initial grids,
runs `num_iters` calls of the plain sweep on one grid and of the two-chunk
sweep on the other, and prints the Euclidean distance between the results.
Bad input prints an error and a usage line and exits with status 1.

`rankstencil.gs_cli.handle_input(args)` returns the `GridConfig` for a list
of arguments, or raises `InputError`.

## Gauss-Seidel sweeps from Python

```python
from rankstencil.stencil import (
    allocate_array3d,
    gs_iteration_normal,
    gs_iteration_2_chunks,
    euclidean_distance,
)

a = allocate_array3d(4, 6, 8)   # every cell holds its flattened index
b = allocate_array3d(4, 6, 8)
for _ in range(100):
    gs_iteration_normal(a)
    gs_iteration_2_chunks(b)
print(euclidean_distance(a, b))
```

Grids are nested lists indexed `phi[k][j][i]` and are updated in place;
every interior cell becomes the mean of its six neighbours, and the outer
layer stays fixed. `gs_iteration_normal` makes one sweep over all interior
levels. `gs_iteration_2_chunks` makes two pipelined sweeps as a wavefront,
the second trailing the first by one level. `gs_iteration_2_chunks_rank(rank,
phi)` runs only the leading (rank 0) or trailing (rank 1) half of that
wavefront on the given grid. The two-chunk functions need at least three
levels in `k`. `euclidean_distance` raises `ValueError` for grids of
different shape, and `format_array3d` renders a grid as text.

## Exercise routines

`rankstencil.exercises` provides `alternating_series_sum`,
`series_converges`, `index_cube`, `temperature_extremes` (for
`<time> <value>` records), `smooth`, `quicksort`, `sort_permutation`,
`numerical_integration` (midpoint rule for 4 / (1 + x²)),
`heat_initial_values` and `heat_solve`. All of them return new values and
leave their inputs unchanged.

## What the package does not do

Everything runs in a single Python process. `gs_iteration_2_chunks_rank`
computes one rank's share on a grid it is given, but the package does not
distribute work between processes, exchange grid parts or assemble a
global grid from them, and it has no multithreaded PageRank. The exercise
routines do not time or benchmark anything.