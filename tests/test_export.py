"""
导出层测试：样式、DOT、PNG 渲染
"""

import subprocess
from pathlib import Path

import pytest

from gossip_graph.export import (
    EDGE_STYLES,
    DotExporter,
    EdgeStyle,
    GraphvizRenderer,
    NullRenderer,
    resolve_style,
)
from gossip_graph.export.dot_exporter import quote
from gossip_graph.extraction import GraphBuilder, RelationGraph, RelationKind


class TestStyles:
    """样式映射测试"""

    def test_every_kind_has_style(self):
        assert set(EDGE_STYLES) == set(RelationKind)

    def test_betray_style(self):
        assert resolve_style(RelationKind.BETRAY) == EdgeStyle("#e53935", 3, "solid", "vee")

    @pytest.mark.parametrize(
        "value, kind",
        [
            ("love", RelationKind.LOVE),
            (" Couple ", RelationKind.COUPLE),
            ("背叛", RelationKind.BETRAY),
            ("情敌", RelationKind.RIVAL),
        ],
    )
    def test_string_values(self, value: str, kind: RelationKind):
        assert resolve_style(value) == EDGE_STYLES[kind]

    def test_unknown_falls_back_to_support(self):
        assert resolve_style("friendship") == EDGE_STYLES[RelationKind.SUPPORT]

    @pytest.mark.parametrize("value", [None, 42])
    def test_non_string_falls_back_to_support(self, value):
        assert resolve_style(value) == EDGE_STYLES[RelationKind.SUPPORT]


class TestDotExporter:
    """DOT 导出测试"""

    def test_export(self, english_text: str):
        graph = GraphBuilder().build_from_text(english_text)

        dot = DotExporter().export(graph)

        assert dot.startswith("strict digraph G {\n")
        assert dot.rstrip().endswith("}")
        assert '  n1 [ label="A" shape="box" style="rounded" ];' in dot
        assert '  n3 [ label="C" shape="box" style="rounded" ];' in dot
        assert (
            '  n1 -> n2 [ label="love" color="#d81b60" penwidth="2" '
            'style="solid" arrowhead="normal" ];'
        ) in dot
        assert (
            '  n2 -> n3 [ label="betray" color="#e53935" penwidth="3" '
            'style="solid" arrowhead="vee" ];'
        ) in dot

    def test_merged_label_and_dominant_style(self, sample_graph: RelationGraph):
        dot = DotExporter(label_delimiter="/").export(sample_graph)

        assert 'n1 -> n2 [ label="love/rival" color="#3949ab"' in dot

    def test_empty_graph(self):
        assert DotExporter().export(RelationGraph()) == "strict digraph G {\n}\n"

    def test_quote_escaping(self):
        assert quote('say "hi"') == '"say \\"hi\\""'
        assert quote("back\\slash") == '"back\\\\slash"'

    def test_write_utf8(self, temp_dir: Path, chinese_text: str):
        graph = GraphBuilder().build_from_text(chinese_text)
        path = temp_dir / "nested" / "graph.dot"

        written = DotExporter().write(graph, path)

        assert written == path
        content = path.read_text(encoding="utf-8")
        assert 'label="甄嬛"' in content
        assert 'label="果郡王"' in content


class TestRenderer:
    """PNG 渲染测试"""

    def test_null_renderer(self, temp_dir: Path):
        assert NullRenderer().render(temp_dir / "g.dot", temp_dir / "g.png") is False

    def test_missing_graphviz_is_swallowed(self, temp_dir: Path, monkeypatch):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append(cmd[0])
            raise FileNotFoundError(cmd[0])

        monkeypatch.setattr(subprocess, "run", fake_run)
        renderer = GraphvizRenderer(["dot", "/opt/graphviz/bin/dot"])

        assert renderer.render(temp_dir / "g.dot", temp_dir / "g.png") is False
        assert calls == ["dot", "/opt/graphviz/bin/dot"]

    def test_nonzero_exit_tries_next(self, temp_dir: Path, monkeypatch):
        png = temp_dir / "g.png"
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append(cmd)
            if cmd[0] == "broken-dot":
                return subprocess.CompletedProcess(cmd, 1, stdout=b"syntax error")
            png.write_bytes(b"\x89PNG")
            return subprocess.CompletedProcess(cmd, 0, stdout=b"")

        monkeypatch.setattr(subprocess, "run", fake_run)
        renderer = GraphvizRenderer(["broken-dot", "dot"])

        assert renderer.render(temp_dir / "g.dot", png) is True
        assert calls[1] == ["dot", "-Tpng", str(temp_dir / "g.dot"), "-o", str(png)]

    def test_success_requires_png(self, temp_dir: Path, monkeypatch):
        monkeypatch.setattr(
            subprocess,
            "run",
            lambda cmd, **kwargs: subprocess.CompletedProcess(cmd, 0, stdout=b""),
        )

        assert GraphvizRenderer(["dot"]).render(temp_dir / "g.dot", temp_dir / "g.png") is False

    def test_executables_from_settings(self, monkeypatch):
        monkeypatch.setenv("GRAPHVIZ_EXECUTABLES", '["/usr/local/bin/dot"]')

        assert GraphvizRenderer().executables == ("/usr/local/bin/dot",)
