"""
关系抽取器

基于规则从中英文混合文本中抽取人物关系三元组
"""

import re
from collections.abc import Sequence

from gossip_graph.utils import get_logger

from .models import RelationTriple
from .patterns import RELATION_RULES, RelationRule

logger = get_logger(__name__)

_LIST_SEPARATORS = re.compile(r"[，、；;]")
_SENTENCE_TERMINATORS = re.compile(r"[。！？!?]")
_PERIOD_WITHOUT_SPACE = re.compile(r"\.(?=\S)")
_WHITESPACE_RUN = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """
    标点标准化

    中文分隔符变空格，句末标点统一为 ". "，句号后保证有空白，
    连续空白合并为一个空格，首尾去空白。
    """
    normalized = _LIST_SEPARATORS.sub(" ", text)
    normalized = _SENTENCE_TERMINATORS.sub(". ", normalized)
    normalized = _PERIOD_WITHOUT_SPACE.sub(". ", normalized)
    normalized = _WHITESPACE_RUN.sub(" ", normalized)
    return normalized.strip()


class RelationExtractor:
    """规则关系抽取器"""

    def __init__(self, rules: Sequence[RelationRule] = RELATION_RULES):
        """
        初始化关系抽取器

        Args:
            rules: 有序规则表，默认使用内置中英文规则
        """
        self.rules = tuple(rules)

    def extract(self, text: str) -> list[RelationTriple]:
        """
        从文本中抽取关系三元组

        结果按规则顺序排列，同一规则内按匹配位置排列。
        主语或宾语为空、主语等于宾语的匹配直接丢弃。

        Args:
            text: 输入文本

        Returns:
            关系三元组列表
        """
        normalized = normalize_text(text)
        if not normalized:
            return []

        triples: list[RelationTriple] = []
        for rule in self.rules:
            for match in rule.finditer(normalized):
                source = (match.group("subject") or "").strip()
                target = (match.group("object") or "").strip()
                if not source or not target or source == target:
                    continue
                triples.append(RelationTriple(source=source, target=target, kind=rule.kind))

        logger.debug("Extracted relations", count=len(triples), text_length=len(normalized))
        return triples


_default_extractor = RelationExtractor()


def extract_relations(text: str) -> list[RelationTriple]:
    """使用内置规则抽取关系三元组"""
    return _default_extractor.extract(text)
