"""
人物关系图构建器

把关系三元组合并为有向图：同一有序人物对只保留一条边，
边上记录全部出现过的关系类型，并按固定优先级选出主导关系
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

import networkx as nx

from gossip_graph.utils import get_logger

from .models import RelationTriple
from .relation_extractor import RelationExtractor
from .types import RelationKind, pick_dominant

logger = get_logger(__name__)

# networkx 边属性中保存 RelationEdge 的键
EDGE_KEY = "relation"


@dataclass
class RelationEdge:
    """有序人物对 (source, target) 上合并后的边"""

    source: str
    target: str
    kinds: list[RelationKind] = field(default_factory=list)

    def add_kind(self, kind: RelationKind) -> None:
        """记录一种关系类型，保持首次出现顺序，不重复"""
        if kind not in self.kinds:
            self.kinds.append(kind)

    @property
    def dominant(self) -> RelationKind:
        """主导关系类型"""
        return pick_dominant(self.kinds)

    def label(self, delimiter: str = "|") -> str:
        """组合标签，如 "love|betray" """
        return delimiter.join(kind.value for kind in self.kinds)

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        return {
            "source": self.source,
            "target": self.target,
            "kinds": [kind.value for kind in self.kinds],
            "dominant": self.dominant.value,
        }


class RelationGraph:
    """人物关系图（基于 networkx.DiGraph）"""

    def __init__(self) -> None:
        self._graph = nx.DiGraph()

    @property
    def entities(self) -> list[str]:
        """全部人物，按首次出现顺序"""
        return list(self._graph.nodes)

    def add_entity(self, name: str) -> None:
        """加入人物（已存在则忽略）"""
        if name not in self._graph:
            self._graph.add_node(name)

    def has_entity(self, name: str) -> bool:
        return name in self._graph

    def get_edge(self, source: str, target: str) -> RelationEdge | None:
        """获取有序人物对上的边，不存在时返回 None"""
        if not self._graph.has_edge(source, target):
            return None
        return self._graph.edges[source, target][EDGE_KEY]

    def ensure_edge(self, source: str, target: str) -> RelationEdge:
        """获取或创建有序人物对上的边"""
        edge = self.get_edge(source, target)
        if edge is None:
            edge = RelationEdge(source=source, target=target)
            self._graph.add_edge(source, target, **{EDGE_KEY: edge})
        return edge

    def edges(self) -> Iterator[RelationEdge]:
        """按创建顺序遍历所有边"""
        for _, _, edge in self._graph.edges(data=EDGE_KEY):
            yield edge

    def __len__(self) -> int:
        return self._graph.number_of_edges()

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        return {
            "entities": self.entities,
            "edges": [edge.to_dict() for edge in self.edges()],
        }


class GraphBuilder:
    """人物关系图构建器"""

    def __init__(self, extractor: RelationExtractor | None = None):
        """
        初始化图构建器

        Args:
            extractor: 关系抽取器，build_from_text 使用
        """
        self.extractor = extractor or RelationExtractor()

    def merge(
        self,
        triples: Iterable[RelationTriple],
        graph: RelationGraph | None = None,
    ) -> RelationGraph:
        """
        按输入顺序把三元组合并进关系图

        三元组的主语和宾语在抽取阶段已保证不同，这里不再校验。

        Args:
            triples: 关系三元组
            graph: 要继续合并的已有关系图，为空时新建

        Returns:
            关系图
        """
        graph = graph if graph is not None else RelationGraph()
        count = 0
        for triple in triples:
            graph.add_entity(triple.source)
            graph.add_entity(triple.target)
            graph.ensure_edge(triple.source, triple.target).add_kind(triple.kind)
            count += 1

        logger.info(
            "Graph merged",
            triple_count=count,
            entity_count=len(graph.entities),
            edge_count=len(graph),
        )
        return graph

    def build_from_text(self, text: str) -> RelationGraph:
        """从文本抽取关系并构建关系图"""
        return self.merge(self.extractor.extract(text))
