"""
关系抽取模块

规则抽取人物关系三元组，并合并为人物关系图
"""

# 类型定义
from .types import (
    DOMINANCE_ORDER,
    RELATION_KIND_ALIASES,
    RelationKind,
    normalize_relation_kind,
    pick_dominant,
)

# 数据模型
from .models import RelationTriple

# 人名匹配与规则表
from .patterns import RELATION_RULES, RelationRule, is_entity_name, match_entity_name

# 抽取器
from .relation_extractor import RelationExtractor, extract_relations, normalize_text

# 图构建
from .graph_builder import GraphBuilder, RelationEdge, RelationGraph

__all__ = [
    # 类型定义
    "RelationKind",
    "DOMINANCE_ORDER",
    "RELATION_KIND_ALIASES",
    "normalize_relation_kind",
    "pick_dominant",
    # 数据模型
    "RelationTriple",
    # 人名匹配与规则表
    "RELATION_RULES",
    "RelationRule",
    "match_entity_name",
    "is_entity_name",
    # 抽取器
    "RelationExtractor",
    "extract_relations",
    "normalize_text",
    # 图构建
    "GraphBuilder",
    "RelationEdge",
    "RelationGraph",
]
