"""Tests for GraphViz graphs."""

import shutil
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from dotgraph.core import (
    Edge,
    Graph,
    GraphType,
    InvalidArgument,
    Node,
    RenderError,
    UnrecognizedAccessor,
)

requires_graphviz = pytest.mark.skipif(
    shutil.which("dot") is None,
    reason="Graphviz 'dot' executable not installed",
)


@pytest.fixture
def graph():
    return Graph()


def test_create():
    """Test the Graph factory method."""
    fixture = Graph.create()
    assert fixture.get_name() == "G"
    assert fixture.get_type() == "digraph"

    fixture = Graph.create("MyName", False)
    assert fixture.get_name() == "MyName"
    assert fixture.get_type() == "graph"


def test_name(graph):
    """Test getting and setting the graph name."""
    assert graph.get_name() == "G"
    assert graph.set_name("otherName") is graph
    assert graph.get_name() == "otherName"


@pytest.mark.parametrize("graph_type", ["digraph", "graph", "subgraph", GraphType.GRAPH])
def test_set_type(graph, graph_type):
    """Test valid graph types are accepted."""
    assert graph.set_type(graph_type) is graph
    assert graph.get_type() == GraphType(graph_type).value


def test_set_type_rejects_unknown(graph):
    """Test unknown graph types raise InvalidArgument."""
    with pytest.raises(InvalidArgument, match="Type must be"):
        graph.set_type("fakegraph")

    with pytest.raises(ValueError):
        graph.set_type("fakegraphg")

    assert graph.get_type() == "digraph"


def test_strict(graph):
    """Test the strict flag."""
    assert graph.is_strict() is False
    assert graph.set_strict(True) is graph
    assert graph.is_strict() is True


def test_set_path(graph, tmp_path):
    """Test the renderer path is resolved to an absolute path."""
    assert graph.get_path() is None
    assert graph.set_path(tmp_path) is graph
    assert graph.get_path() == tmp_path.resolve()

    graph.set_path(tmp_path / "missing")
    assert graph.get_path() == tmp_path.resolve()

    graph.set_path("")
    assert graph.get_path() is None


def test_dynamic_accessors(graph):
    """Test attribute accessors on graphs."""
    assert graph.set_bgcolor("black") is graph
    assert graph.get_bgcolor().get_value() == "black"

    with pytest.raises(UnrecognizedAccessor):
        graph.some_non_existing_method()


def test_add_graph_forces_subgraph_type(graph):
    """Test added graphs always become subgraphs."""
    child = Graph.create("MyName", directional=True)

    assert graph.has_graph("MyName") is False
    assert graph.add_graph(child) is graph
    assert graph.has_graph("MyName") is True
    assert graph.get_graph("MyName") is child
    assert child.get_type() == "subgraph"


def test_add_graph_uses_mock(graph):
    """Test add_graph only relies on set_type and get_name."""
    mock = Mock(spec=Graph)
    mock.get_name.return_value = "Mocked"

    graph.add_graph(mock)

    mock.set_type.assert_called_once_with(GraphType.SUBGRAPH)
    assert graph.get_graph("Mocked") is mock


def test_add_graph_last_write_wins(graph):
    """Test subgraphs with the same name replace each other."""
    first = Graph.create("cluster_a")
    second = Graph.create("cluster_a")

    graph.add_graph(first).add_graph(second)

    assert graph.get_graph("cluster_a") is second
    assert len(graph.get_graphs()) == 1


def test_get_missing_graph(graph):
    """Test looking up an unknown subgraph raises KeyError."""
    with pytest.raises(KeyError):
        graph.get_graph("missing")


def test_set_node_replaces(graph):
    """Test nodes are indexed by name and replaced wholesale."""
    first = Node("MyName").set_color("red")
    second = Node("MyName")

    assert graph.set_node(first) is graph
    graph.set_node(second)

    assert graph.get_nodes() == {"MyName": second}


def test_find_node(graph):
    """Test nodes are found locally and in nested subgraphs."""
    assert graph.find_node("MyNode") is None

    node = Node("MyName")
    graph.set_node(node)
    assert graph.find_node("MyName") is node

    nested = Node("Deep")
    inner = Graph.create("inner").set_node(nested)
    outer = Graph.create("outer").add_graph(inner)
    graph.add_graph(outer)

    assert graph.find_node("Deep") is nested
    assert graph.find_node("Missing") is None


def test_find_node_prefers_local(graph):
    """Test local nodes win over subgraph nodes with the same name."""
    local = Node("shared")
    graph.add_graph(Graph.create("sub").set_node(Node("shared")))
    graph.set_node(local)

    assert graph.find_node("shared") is local


def test_item_access(graph):
    """Test nodes can be stored and read under a custom name."""
    node = Node("actual")
    graph["myNode"] = node

    assert graph["myNode"] is node
    assert "myNode" in graph
    assert "actual" not in graph

    with pytest.raises(KeyError):
        graph["missing"]


def test_link(graph):
    """Test edges are appended in link order."""
    first = Edge(Node("a"), Node("b"))
    second = Edge(Node("b"), Node("c"))

    assert graph.link(first) is graph
    graph.link(second)

    assert graph.get_edges() == [first, second]


def test_to_string():
    """Test DOT generation for an empty graph, with a label and strict."""
    graph = Graph.create("My First Graph")
    assert str(graph) == 'digraph "My First Graph" {\n\n}'

    graph.set_label("PigeonPost")
    assert str(graph) == 'digraph "My First Graph" {\nlabel="PigeonPost"\n}'

    graph.set_strict(True)
    assert str(graph) == 'strict digraph "My First Graph" {\nlabel="PigeonPost"\n}'


def test_to_string_element_order():
    """Test subgraphs, attributes, edges and nodes are written in that order."""
    graph = Graph.create("G")
    a = Node("a")
    b = Node("b", "B")
    graph.set_node(a).set_node(b)
    graph.link(Edge(a, b))
    graph.set_label("L")
    graph.add_graph(Graph.create("cluster_x").set_node(Node("x")))

    assert graph.to_string() == (
        'digraph "G" {\n'
        'subgraph "cluster_x" {\n"x" []\n}\n'
        'label="L"\n'
        '"a" -> "b" []\n'
        '"a" []\n'
        '"b" [label="B"]\n'
        "}"
    )


def test_to_string_undirected():
    """Test undirected graphs use '--' for edges, including in subgraphs."""
    graph = Graph.create("U", directional=False)
    a, b = Node("a"), Node("b")
    graph.link(Edge(a, b))
    graph.add_graph(Graph.create("sub").link(Edge(b, a)))

    assert graph.to_string() == (
        'graph "U" {\nsubgraph "sub" {\n"b" -- "a" []\n}\n"a" -- "b" []\n}'
    )


def test_to_string_escapes_name():
    """Test quotes in graph names are escaped."""
    assert Graph.create('My "G"').to_string() == 'digraph "My \\"G\\"" {\n\n}'


@patch("dotgraph.visualization.renderer.subprocess.run")
def test_export_invokes_dot(mock_run, tmp_path):
    """Test export writes a temp file, runs dot and removes the file."""
    written = {}

    def run(command, **kwargs):
        written["source"] = Path(command[-1]).read_text(encoding="utf-8")
        return Mock(returncode=0, stdout="")

    mock_run.side_effect = run
    output = tmp_path / "graph.png"
    graph = Graph.create("My First Graph")

    assert graph.export("png", output) is graph

    command = mock_run.call_args[0][0]
    assert command[:3] == ["dot", "-Tpng", f"-o{output}"]
    assert written["source"] == graph.to_string()
    assert not Path(command[3]).exists()


@patch("dotgraph.visualization.renderer.subprocess.run")
def test_export_uses_path(mock_run, tmp_path):
    """Test the configured path qualifies the executable."""
    mock_run.return_value = Mock(returncode=0, stdout="")

    Graph.create().set_path(tmp_path).export("svg", tmp_path / "out.svg")

    assert mock_run.call_args[0][0][0] == str(tmp_path.resolve() / "dot")


@patch("dotgraph.visualization.renderer.subprocess.run")
def test_export_failure(mock_run, tmp_path):
    """Test a failing renderer raises RenderError and still cleans up."""
    mock_run.return_value = Mock(returncode=1, stdout='Format: "fpd" not recognized.\n')

    with pytest.raises(RenderError) as excinfo:
        Graph.create().export("fpd", tmp_path / "out")

    assert excinfo.value.returncode == 1
    assert 'Format: "fpd" not recognized.' in excinfo.value.output
    assert str(excinfo.value).startswith("GraphViz error:")
    assert not Path(mock_run.call_args[0][0][3]).exists()


@patch("dotgraph.visualization.renderer.subprocess.run")
def test_export_missing_executable(mock_run, tmp_path):
    """Test a missing dot executable raises RenderError."""
    mock_run.side_effect = FileNotFoundError("dot")

    with pytest.raises(RenderError):
        Graph.create().export("png", tmp_path / "out.png")

    assert not Path(mock_run.call_args[0][0][3]).exists()


def test_save(tmp_path):
    """Test saving the DOT source."""
    graph = Graph.create().set_label("PigeonPost")

    path = graph.save(tmp_path / "graph")

    assert path == tmp_path / "graph.dot"
    assert path.read_text(encoding="utf-8") == graph.to_string()


@requires_graphviz
def test_export_pdf(tmp_path):
    """Test exporting a real PDF."""
    output = tmp_path / "graph.pdf"
    graph = Graph.create("My First Graph")

    assert graph.export("pdf", output) is graph
    assert output.is_file()
    assert output.stat().st_size > 0


@requires_graphviz
def test_export_unknown_format(tmp_path):
    """Test exporting to an unknown format fails."""
    with pytest.raises(RenderError):
        Graph.create("My First Graph").export("fpd", tmp_path / "graph.fpd")


@patch("dotgraph.visualization.renderer.subprocess.run")
def test_export_cleans_up_when_write_fails(mock_run, tmp_path, monkeypatch):
    """Test the temporary DOT file is removed when it cannot be written."""
    temp_dir = tmp_path / "tmp"
    temp_dir.mkdir()
    monkeypatch.setattr("tempfile.tempdir", str(temp_dir))
    graph = Graph.create("G").set_node(Node("bad\ud800"))

    with pytest.raises(UnicodeEncodeError):
        graph.export("png", tmp_path / "out.png")

    assert list(temp_dir.iterdir()) == []
    mock_run.assert_not_called()


def test_collection_getters_return_copies(graph):
    """Test subgraph, node and edge getters do not alias the graph's state."""
    graph.add_graph(Graph.create("sub")).set_node(Node("a"))
    graph.link(Edge(Node("a"), Node("b")))

    graph.get_graphs().clear()
    graph.get_nodes().clear()
    graph.get_edges().clear()

    assert graph.has_graph("sub")
    assert "a" in graph
    assert len(graph.get_edges()) == 1
