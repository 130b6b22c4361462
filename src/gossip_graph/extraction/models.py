"""
关系三元组数据模型
"""

from dataclasses import dataclass
from typing import Any

from .types import RelationKind


@dataclass(frozen=True)
class RelationTriple:
    """
    有向关系三元组 (主语, 宾语, 关系类型)

    Attributes:
        source: 主语实体名称
        target: 宾语实体名称
        kind: 关系类型
    """

    source: str
    target: str
    kind: RelationKind

    def as_tuple(self) -> tuple[str, str, str]:
        """转换为 (source, target, kind) 元组"""
        return self.source, self.target, self.kind.value

    def to_dict(self) -> dict[str, Any]:
        """转换为字典"""
        return {
            "source": self.source,
            "target": self.target,
            "kind": self.kind.value,
        }
