"""
GossipGraph

从中英文叙事文本中抽取人物关系，合并为带类型的有向关系图
"""

from .extraction import (
    GraphBuilder,
    RelationEdge,
    RelationExtractor,
    RelationGraph,
    RelationKind,
    RelationTriple,
    extract_relations,
)
from .pipeline import GossipGraphPipeline, PipelineResult

__version__ = "0.1.0"

__all__ = [
    "RelationKind",
    "RelationTriple",
    "RelationExtractor",
    "extract_relations",
    "GraphBuilder",
    "RelationEdge",
    "RelationGraph",
    "GossipGraphPipeline",
    "PipelineResult",
]
