import pytest

from graphkit.algorithms import kruskal, prim
from graphkit.cli import build_sample_graph, main


def test_sample_graph_shape():
    graph = build_sample_graph()
    assert graph.num_vertices == 5
    assert graph.visit_order == ()
    assert kruskal(graph).total_weight() == 7


def test_main_returns_zero_and_prints_sections(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    headings = [
        "Original Graph:",
        "Kruskal's MST:",
        "Prim's MST:",
        "Dijkstra's Shortest Paths from Node 0:",
    ]
    positions = [out.index(h) for h in headings]
    assert positions == sorted(positions)
    assert out.startswith("Original Graph:\n\nKruskal's MST:\n")


def test_main_prints_algorithm_results(capsys):
    main([])
    out = capsys.readouterr().out
    graph = build_sample_graph()
    kruskal_text = kruskal(graph).format()
    prim_text = prim(graph).format()
    assert f"Kruskal's MST:\n{kruskal_text}\nPrim's MST:\n{prim_text}\n" in out
    assert "Dijkstra Tree built successfully" in out


def test_main_rejects_unknown_option():
    with pytest.raises(SystemExit):
        main(["--bogus"])