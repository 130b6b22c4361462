"""
关系样式（Graphviz）
"""

from typing import NamedTuple

from gossip_graph.extraction.types import RelationKind, normalize_relation_kind
from gossip_graph.utils import get_logger

logger = get_logger(__name__)


class EdgeStyle(NamedTuple):
    """边样式：颜色、线宽、线型、箭头"""

    color: str
    penwidth: int
    style: str
    arrowhead: str


EDGE_STYLES: dict[RelationKind, EdgeStyle] = {
    RelationKind.LOVE: EdgeStyle("#d81b60", 2, "solid", "normal"),  # 洋红
    RelationKind.COUPLE: EdgeStyle("#8e24aa", 3, "bold", "normal"),  # 紫色粗线
    RelationKind.RIVAL: EdgeStyle("#3949ab", 2, "dashed", "normal"),  # 蓝色虚线
    RelationKind.BETRAY: EdgeStyle("#e53935", 3, "solid", "vee"),  # 红色尖箭头
    RelationKind.SUPPORT: EdgeStyle("#00897b", 2, "dotted", "normal"),  # 绿色点线
}


def resolve_style(kind: RelationKind | str | None) -> EdgeStyle:
    """
    获取关系类型对应的边样式

    Args:
        kind: 关系类型（枚举、取值或中文别名）

    Returns:
        边样式；无法识别的类型使用 support 样式
    """
    normalized = normalize_relation_kind(kind)
    if isinstance(normalized, RelationKind):
        return EDGE_STYLES[normalized]

    logger.warning("Unknown relation kind, using support style", kind=kind)
    return EDGE_STYLES[RelationKind.SUPPORT]
