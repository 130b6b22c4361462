"""
DOT 导出器

把人物关系图写成 Graphviz DOT：节点使用 ASCII 安全的 ID，
中英文原名放在 label 中，边按主导关系加样式
"""

from pathlib import Path

from gossip_graph.extraction.graph_builder import RelationEdge, RelationGraph
from gossip_graph.utils import get_logger, save_text_file

from .styles import resolve_style

logger = get_logger(__name__)

NODE_ATTRIBUTES: dict[str, str] = {"shape": "box", "style": "rounded"}


def quote(value: str) -> str:
    """DOT 双引号字符串转义"""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def _format_attributes(attributes: dict[str, str]) -> str:
    return " ".join(f"{key}={quote(value)}" for key, value in attributes.items())


class DotExporter:
    """DOT 导出器"""

    def __init__(self, label_delimiter: str = "|", graph_name: str = "G"):
        """
        初始化导出器

        Args:
            label_delimiter: 多种关系合并成标签时的分隔符
            graph_name: DOT 图名称
        """
        self.label_delimiter = label_delimiter
        self.graph_name = graph_name

    def node_ids(self, graph: RelationGraph) -> dict[str, str]:
        """按人物出现顺序分配 n1, n2, ... 作为节点 ID"""
        return {name: f"n{index}" for index, name in enumerate(graph.entities, start=1)}

    def edge_attributes(self, edge: RelationEdge) -> dict[str, str]:
        """边属性：组合标签 + 主导关系样式"""
        attributes: dict[str, str] = {}
        label = edge.label(self.label_delimiter)
        if label:
            attributes["label"] = label
        style = resolve_style(edge.dominant)
        attributes["color"] = style.color
        attributes["penwidth"] = str(style.penwidth)
        attributes["style"] = style.style
        attributes["arrowhead"] = style.arrowhead
        return attributes

    def export(self, graph: RelationGraph) -> str:
        """
        生成 DOT 文本

        Args:
            graph: 人物关系图

        Returns:
            DOT 文本
        """
        ids = self.node_ids(graph)
        lines = [f"strict digraph {self.graph_name} {{"]

        for name, node_id in ids.items():
            attributes = {"label": name, **NODE_ATTRIBUTES}
            lines.append(f"  {node_id} [ {_format_attributes(attributes)} ];")

        for edge in graph.edges():
            attributes = self.edge_attributes(edge)
            lines.append(
                f"  {ids[edge.source]} -> {ids[edge.target]} [ {_format_attributes(attributes)} ];"
            )

        lines.append("}")
        return "\n".join(lines) + "\n"

    def write(self, graph: RelationGraph, file_path: str | Path) -> Path:
        """
        导出 DOT 文件（UTF-8）

        Args:
            graph: 人物关系图
            file_path: 输出路径

        Returns:
            写入的文件路径
        """
        path = save_text_file(self.export(graph), file_path)
        logger.info(
            "DOT exported",
            path=str(path),
            node_count=len(graph.entities),
            edge_count=len(graph),
        )
        return path
