"""
人名匹配与关系规则

中英双语的人名正则和按固定顺序排列的关系规则表
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Literal

from .types import RelationKind

# 汉字范围：基本区、扩展A、兼容区、扩展B-F、兼容补充区，以及 々〇 和苏州码子
HAN_CHARS = (
    "\u3005\u3007\u3021-\u3029\u3038-\u303b"
    "\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff"
    "\U00020000-\U0002ebef\U0002f800-\U0002fa1f"
)

EN_WORD = r"[A-Za-z][A-Za-z0-9_]*"
# 英文名最多 3 个词
EN_NAME = rf"{EN_WORD}(?:\s+{EN_WORD}){{0,2}}"
ZH_NAME = rf"[{HAN_CHARS}A-Za-z0-9_]{{1,16}}"

ENTITY_NAME = rf"(?:{EN_NAME}|{ZH_NAME})"

_ENTITY_NAME_RE = re.compile(ENTITY_NAME)


def _subject() -> str:
    # 主语取能连上关系词的最短名字，避免把 "is"、"陷" 之类吞进名字
    return rf"(?P<subject>{EN_WORD}(?:\s+{EN_WORD}){{0,2}}?|[{HAN_CHARS}A-Za-z0-9_]{{1,16}}?)"


def _object() -> str:
    return rf"(?P<object>{EN_NAME}|{ZH_NAME})"


def match_entity_name(window: str, pos: int = 0) -> str | None:
    """
    识别文本窗口开头的人名

    Args:
        window: 文本窗口
        pos: 起始位置

    Returns:
        匹配到的人名；不符合人名形态时返回 None
    """
    m = _ENTITY_NAME_RE.match(window, pos)
    return m.group(0) if m else None


def is_entity_name(token: str) -> bool:
    """判断整个字符串是否符合人名形态"""
    return _ENTITY_NAME_RE.fullmatch(token) is not None


@dataclass(frozen=True)
class RelationRule:
    """单条关系规则：正则 + 关系类型"""

    kind: RelationKind
    pattern: re.Pattern[str]
    language: Literal["en", "zh"]

    def finditer(self, text: str) -> Iterator[re.Match[str]]:
        """返回文本中全部不重叠的匹配"""
        return self.pattern.finditer(text)


def _en(kind: RelationKind, connector: str) -> RelationRule:
    pattern = re.compile(rf"{_subject()}\s+{connector}\s+{_object()}", re.IGNORECASE)
    return RelationRule(kind=kind, pattern=pattern, language="en")


def _zh(kind: RelationKind, connector: str, suffix: str = "") -> RelationRule:
    pattern = re.compile(rf"{_subject()}\s*{connector}\s*{_object()}{suffix}")
    return RelationRule(kind=kind, pattern=pattern, language="zh")


# 顺序即优先顺序：按类型 love, couple, rival, betray, support；同类型先英文后中文
RELATION_RULES: tuple[RelationRule, ...] = (
    # love
    _en(RelationKind.LOVE, r"(?:loves?|likes|is in love with)"),
    _zh(RelationKind.LOVE, r"(?:喜欢|爱上了?|爱了|暗恋)"),
    # couple
    _en(
        RelationKind.COUPLE,
        r"(?:is|are)?\s*(?:together with|with|dating|married to|in a relationship with)",
    ),
    _zh(RelationKind.COUPLE, r"(?:和|与)", suffix=r"\s*(?:在一起|成亲|结婚)"),
    # rival
    RelationRule(
        kind=RelationKind.RIVAL,
        pattern=re.compile(
            rf"{_subject()}\s+(?:is\s+)?(?:jealous|envious)\s*(?:of\s+)?{_object()}",
            re.IGNORECASE,
        ),
        language="en",
    ),
    _en(
        RelationKind.RIVAL,
        r"(?:hates?|dislikes?|is\s+hostile\s+(?:to|towards)|feuds?\s+with|is\s+against)",
    ),
    _zh(RelationKind.RIVAL, r"(?:嫉妒|吃醋|妒忌|敌视|仇恨)"),
    # betray
    _en(
        RelationKind.BETRAY,
        r"(?:betray(?:ed|s)?|backstabbed|framed|set\s+up|cheated\s+on)",
    ),
    _zh(RelationKind.BETRAY, r"(?:背叛|陷害|害)了?"),
    # support
    _en(
        RelationKind.SUPPORT,
        r"(?:supports?|helps?|protects?|backs|stands\s+by)",
    ),
    _zh(RelationKind.SUPPORT, r"(?:支持|帮助|维护|偏向)"),
)
