"""
人物关系类型定义

五种固定的人物关系类型及其优先级
"""

from collections.abc import Iterable
from enum import Enum
from typing import Any


class RelationKind(str, Enum):
    """
    人物关系类型

    分类:
    - 情感关系: 爱慕、情侣
    - 冲突关系: 敌对、背叛
    - 协作关系: 支持
    """

    LOVE = "love"
    COUPLE = "couple"
    RIVAL = "rival"
    BETRAY = "betray"
    SUPPORT = "support"


# 同一条边出现多种关系时的优先级（从高到低）
DOMINANCE_ORDER: tuple[RelationKind, ...] = (
    RelationKind.BETRAY,
    RelationKind.RIVAL,
    RelationKind.COUPLE,
    RelationKind.LOVE,
    RelationKind.SUPPORT,
)

# 类型别名映射（中文关系名）
RELATION_KIND_ALIASES: dict[str, RelationKind] = {
    "爱慕": RelationKind.LOVE,
    "喜欢": RelationKind.LOVE,
    "情侣": RelationKind.COUPLE,
    "夫妻": RelationKind.COUPLE,
    "敌对": RelationKind.RIVAL,
    "情敌": RelationKind.RIVAL,
    "背叛": RelationKind.BETRAY,
    "陷害": RelationKind.BETRAY,
    "支持": RelationKind.SUPPORT,
    "帮助": RelationKind.SUPPORT,
}


def normalize_relation_kind(kind_value: Any) -> Any:
    """
    标准化关系类型

    Args:
        kind_value: 关系类型值（枚举、字符串或其他任意值）

    Returns:
        标准化后的 RelationKind，无法识别时原样返回
    """
    if isinstance(kind_value, RelationKind):
        return kind_value

    if not isinstance(kind_value, str):
        return kind_value

    if kind_value in RELATION_KIND_ALIASES:
        return RELATION_KIND_ALIASES[kind_value]

    try:
        return RelationKind(kind_value.strip().lower())
    except ValueError:
        return kind_value


def pick_dominant(kinds: Iterable[RelationKind]) -> RelationKind:
    """
    按固定优先级选出主导关系

    结果只取决于关系集合本身，与加入顺序无关。

    Args:
        kinds: 一条边上观察到的关系类型

    Returns:
        优先级最高的关系类型；集合为空时返回 SUPPORT
    """
    present = set(kinds)
    for kind in DOMINANCE_ORDER:
        if kind in present:
            return kind
    return RelationKind.SUPPORT
