"""
时间线

解析 "YYYY-MM-DD 事件描述" 格式的事件，按日期排序输出
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date
from pathlib import Path

from gossip_graph.utils import get_logger, load_text_lines

logger = get_logger(__name__)

TIMELINE_HEADER = "—— Timeline ——"

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_FIELD_SPLIT_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class TimelineEvent:
    """时间线事件"""

    date: date
    description: str

    def format(self) -> str:
        return f"{self.date.isoformat()}  {self.description}"


def parse_date(value: str) -> date | None:
    """
    解析严格的 YYYY-MM-DD 日期

    Args:
        value: 日期字符串

    Returns:
        日期；格式不符或日期非法时返回 None
    """
    if not _DATE_RE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def parse_events(lines: Iterable[str]) -> list[TimelineEvent]:
    """
    解析事件行

    空行、缺少描述或日期非法的行会被跳过。

    Args:
        lines: 文本行

    Returns:
        事件列表（保持输入顺序）
    """
    events: list[TimelineEvent] = []
    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue
        parts = _FIELD_SPLIT_RE.split(stripped, maxsplit=1)
        if len(parts) < 2:
            logger.debug("Timeline line without description skipped", line=stripped)
            continue
        event_date = parse_date(parts[0])
        if event_date is None:
            logger.debug("Timeline line with invalid date skipped", line=stripped)
            continue
        events.append(TimelineEvent(date=event_date, description=parts[1]))
    return events


def sort_events(events: Iterable[TimelineEvent]) -> list[TimelineEvent]:
    """按日期排序（同日期保持原顺序）"""
    return sorted(events, key=lambda e: e.date)


def format_events(events: Iterable[TimelineEvent]) -> str:
    """格式化为可打印的时间线文本"""
    lines = [TIMELINE_HEADER]
    lines.extend(event.format() for event in events)
    return "\n".join(lines)


def load_events(file_path: str | Path, encoding: str = "utf-8") -> list[TimelineEvent]:
    """从文件加载事件并按日期排序"""
    events = parse_events(load_text_lines(file_path, encoding=encoding))
    logger.info("Timeline loaded", path=str(file_path), count=len(events))
    return sort_events(events)
