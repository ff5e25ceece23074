"""PageRank on web graphs, Gauss-Seidel stencil sweeps on 3D grids and small numerical exercises."""

__version__ = "0.1.0"