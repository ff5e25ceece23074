import pytest

from rankstencil.graph import parse_csr_graph, parse_dense_graph
from rankstencil.pagerank import (
    PageRankResult,
    dangling_pages_csr,
    dangling_pages_dense,
    format_top_table,
    pagerank_csr,
    pagerank_dense,
    top_n_webpages,
)


def _graph(n, edges):
    lines = [
        "# Directed graph",
        "# Sample web graph",
        f"# Nodes: {n}   Edges: {len(edges)}",
        "# FromNodeId ToNodeId",
    ]
    lines.extend(f"{a} {b}" for a, b in edges)
    return [line + "\n" for line in lines]


CYCLE = _graph(3, [(0, 1), (1, 2), (2, 0)])
MIXED = _graph(4, [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 0), (3, 1)])


def test_dangling_dense_flags_empty_column_and_self_loop():
    matrix = [
        [1.0, 0.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.0, 1.0, 0.0],
    ]
    assert dangling_pages_dense(matrix) == [True, False, False]
    matrix = [
        [0.0, 1.0, 0.0],
        [0.0, 0.0, 1.0],
        [0.0, 1.0, 0.0],
    ]
    assert dangling_pages_dense(matrix) == [True, False, False]


def test_dangling_dense_none_in_cycle():
    assert dangling_pages_dense(parse_dense_graph(CYCLE)) == [False, False, False]


def test_dangling_csr_flags_nothing():
    csr = parse_csr_graph(_graph(3, [(0, 1), (1, 1)]))
    assert dangling_pages_csr(csr) == [False, False, False]


def test_cycle_gives_uniform_scores():
    result = pagerank_csr(parse_csr_graph(CYCLE), 0.85, 1e-10)
    assert isinstance(result, PageRankResult)
    assert result.converged
    assert result.scores == pytest.approx([1 / 3] * 3)


def test_dense_and_csr_agree():
    dense = pagerank_dense(parse_dense_graph(MIXED), 0.85, 1e-12)
    sparse = pagerank_csr(parse_csr_graph(MIXED), 0.85, 1e-12)
    assert dense.scores == pytest.approx(sparse.scores, abs=1e-9)
    assert dense.iterations == sparse.iterations


def test_scores_sum_to_one_without_dangling_pages():
    result = pagerank_csr(parse_csr_graph(MIXED), 0.85, 1e-12)
    assert sum(result.scores) == pytest.approx(1.0)
    assert all(score > 0 for score in result.scores)


def test_zero_damping_stops_after_one_sweep():
    result = pagerank_dense(parse_dense_graph(MIXED), 0.0, 1e-6)
    assert result.iterations == 1
    assert result.scores == pytest.approx([0.25] * 4)


def test_iteration_limit_warns_and_stops():
    with pytest.warns(RuntimeWarning):
        result = pagerank_csr(parse_csr_graph(MIXED), 0.85, 1e-300, max_iterations=2)
    assert result.iterations == 3
    assert not result.converged


def test_large_epsilon_returns_initial_scores():
    result = pagerank_csr(parse_csr_graph(MIXED), 0.85, 5.0)
    assert result.iterations == 0
    assert result.scores == [0.25] * 4


def test_empty_graph_rejected():
    with pytest.raises(ValueError):
        pagerank_dense([], 0.85, 1e-6)


def test_top_n_orders_by_score():
    assert top_n_webpages([0.1, 0.5, 0.3], 2) == [(1, 0.5), (2, 0.3)]


def test_top_n_ties_keep_index_order():
    assert top_n_webpages([0.2, 0.4, 0.2], 3) == [(1, 0.4), (0, 0.2), (2, 0.2)]


def test_top_n_too_many_raises():
    with pytest.raises(ValueError):
        top_n_webpages([0.1, 0.2], 3)


def test_top_n_on_pagerank_is_sorted_descending():
    scores = pagerank_csr(parse_csr_graph(MIXED), 0.85, 1e-10).scores
    ranking = top_n_webpages(scores, 4)
    values = [score for _, score in ranking]
    assert values == sorted(values, reverse=True)
    assert sorted(page for page, _ in ranking) == [0, 1, 2, 3]


def test_format_top_table():
    text = format_top_table([(1, 0.5), (2, 0.25)])
    lines = text.splitlines()
    assert lines[0] == "Top 2 webpages:"
    assert lines[1] == "Rank | Page Idx | Score"
    assert lines[2] == "-----|----------|-------"
    assert lines[3] == "   1 |        1 | 0.500000"
    assert lines[4] == "   2 |        2 | 0.250000"
    assert text.endswith("\n")