"""Tests for TGF serialization and round-tripping."""

import io
import tempfile

import pytest

from tgfgraph.graph import (
    EdgeValue,
    Graph,
    GraphIOError,
    GraphMode,
    Vertex,
    dump,
    from_tgf,
    load,
    serialize,
    to_tgf,
)
from tgfgraph.graph.serialize import iter_lines
from tests.core.graph_test_helpers import build_graph


def line_set(text: str) -> set[str]:
    return set(text.splitlines())


class TestSerialize:
    """Tests for serialize() and to_tgf()."""

    def test_vertex_lines_then_delimiter_then_edges(self):
        graph = Graph()
        graph.add_vertex(Vertex(1, "January"))
        graph.add_vertex(Vertex(2))
        graph.add_edge(1, 2, "spring")

        lines = to_tgf(graph).splitlines()

        assert set(lines[:2]) == {"1 January", "2"}
        assert lines[2] == "#"
        assert lines[3:] == ["1 2 spring"]

    def test_weak_mirrors_not_written(self, chain_graph):
        edge_lines = to_tgf(chain_graph).split("#\n", 1)[1].splitlines()

        assert sorted(edge_lines) == ["1 2", "2 3"]

    def test_directed_edges_written_once_each(self):
        graph = build_graph([1, 2], [(1, 2), (2, 1)], mode=GraphMode.DIRECTED)

        assert line_set(to_tgf(graph)) == {"1", "2", "#", "1 2", "2 1"}

    def test_empty_graph(self):
        assert to_tgf(Graph()) == "#\n"

    def test_dangling_direction_skipped(self, chain_graph):
        chain_graph.get_vertex(1).add_direction(99, EdgeValue("ghost"))

        assert "1 99 ghost" not in line_set(to_tgf(chain_graph))

    def test_non_string_payloads_rendered(self):
        graph: Graph = Graph()
        graph.add_vertex(Vertex(1, 3.5))
        graph.add_vertex(Vertex(2, 0))
        graph.add_edge(1, 2, 10)

        assert line_set(to_tgf(graph)) == {"1 3.5", "2 0", "#", "1 2 10"}

    def test_empty_string_value_omitted(self):
        graph = Graph()
        graph.add_vertex(Vertex(1, ""))

        assert to_tgf(graph) == "1\n#\n"

    def test_binary_writer(self):
        graph = Graph()
        graph.add_vertex(Vertex(1, "Jänner"))
        buffer = io.BytesIO()

        serialize(graph, buffer)

        assert buffer.getvalue() == "1 Jänner\n#\n".encode("utf-8")

    def test_spooled_binary_writer(self):
        graph = Graph()
        graph.add_vertex(Vertex(1, "Jänner"))

        with tempfile.SpooledTemporaryFile(mode="w+b") as f:
            serialize(graph, f)
            f.seek(0)
            assert f.read() == "1 Jänner\n#\n".encode("utf-8")

    def test_plain_byte_sink(self):
        class ByteSink:
            def __init__(self):
                self.chunks = []

            def write(self, data):
                assert isinstance(data, bytes)
                self.chunks.append(data)

        graph = Graph()
        graph.add_vertex(Vertex(1, "January"))
        sink = ByteSink()

        serialize(graph, sink)

        assert b"".join(sink.chunks) == b"1 January\n#\n"

    def test_spooled_text_writer(self):
        graph = Graph()
        graph.add_vertex(Vertex(1, "January"))

        with tempfile.SpooledTemporaryFile(mode="w+", encoding="utf-8") as f:
            serialize(graph, f)
            f.seek(0)
            assert f.read() == "1 January\n#\n"

    def test_write_failure_wrapped(self, chain_graph):
        class BrokenWriter(io.StringIO):
            def write(self, s):
                raise OSError("disk full")

        with pytest.raises(GraphIOError) as exc_info:
            serialize(chain_graph, BrokenWriter())

        assert "disk full" in str(exc_info.value)

    def test_iter_lines_has_no_terminators(self, chain_graph):
        assert all("\n" not in line for line in iter_lines(chain_graph))


class TestRoundTrip:
    """deserialize -> serialize keeps the same set of lines."""

    def test_months_round_trip(self, months_tgf):
        graph = from_tgf(months_tgf)

        assert line_set(to_tgf(graph)) == line_set(months_tgf)

    def test_round_trip_twice(self, months_tgf):
        once = to_tgf(from_tgf(months_tgf))
        twice = to_tgf(from_tgf(once))

        assert line_set(twice) == line_set(months_tgf)

    def test_directed_round_trip_needs_directed_mode(self):
        graph = build_graph([1, 2, 3], [(1, 2), (3, 2)], mode=GraphMode.DIRECTED)
        text = to_tgf(graph)

        directed = from_tgf(text, mode=GraphMode.DIRECTED)
        undirected = from_tgf(text)

        assert line_set(to_tgf(directed)) == line_set(text)
        assert [r.id for r in directed.bfs(2)] == [2]
        assert sorted(r.id for r in undirected.bfs(2)) == [1, 2, 3]

    def test_unicode_line_separator_in_value(self):
        graph = Graph()
        graph.add_vertex(Vertex(1, "a\u2028b"))
        graph.add_vertex(Vertex(2, "c\x0cd"))
        graph.add_edge(1, 2, "e\x85f")

        restored = from_tgf(to_tgf(graph))

        assert restored.get_vertex(1).value == "a\u2028b"
        assert restored.get_vertex(2).value == "c\x0cd"
        assert restored.get_vertex(1).get_direction(2).value == "e\x85f"

    def test_after_mutation(self, months_tgf):
        graph = from_tgf(months_tgf)
        graph.delete_vertex(7)
        graph.delete_edge(1, 5)

        lines = line_set(to_tgf(graph))

        assert "7 September" not in lines
        assert not any(line.startswith("7 ") for line in lines)
        assert "5 1 Happy New Year!" not in lines
        assert "5 3 April Fools Day" in lines


class TestDump:
    """Tests for dump()."""

    def test_dump_then_load(self, tmp_path, months_tgf):
        path = tmp_path / "out.tgf"

        dump(from_tgf(months_tgf), path)

        assert line_set(path.read_text(encoding="utf-8")) == line_set(months_tgf)
        assert load(path).edge_count() == 10

    def test_dump_to_missing_directory(self, tmp_path, chain_graph):
        with pytest.raises(GraphIOError):
            dump(chain_graph, tmp_path / "missing" / "out.tgf")
