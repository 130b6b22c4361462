"""
时间线测试
"""

from datetime import date
from pathlib import Path

import pytest

from gossip_graph.timeline import (
    TIMELINE_HEADER,
    TimelineEvent,
    format_events,
    load_events,
    parse_date,
    parse_events,
    sort_events,
)


class TestParseEvents:
    """事件解析测试"""

    def test_skips_invalid_lines(self):
        lines = [
            "2024-01-10 B happens",
            "",
            "lonely-line",
            "2023-13-01 invalid month",
            "1720-06-01   A enters   the palace",
            "2024-02-30 no such day",
            "2020-1-1 short date",
        ]

        events = parse_events(lines)

        assert events == [
            TimelineEvent(date(2024, 1, 10), "B happens"),
            TimelineEvent(date(1720, 6, 1), "A enters   the palace"),
        ]

    def test_date_without_description(self):
        assert parse_events(["2024-01-10"]) == []

    @pytest.mark.parametrize("value", ["20240110", "2024/01/10", "24-01-10", ""])
    def test_parse_date_strict(self, value: str):
        assert parse_date(value) is None


class TestSortAndFormat:
    """排序与输出测试"""

    def test_sort_is_stable(self):
        events = [
            TimelineEvent(date(1724, 1, 10), "late"),
            TimelineEvent(date(1720, 6, 1), "first"),
            TimelineEvent(date(1720, 6, 1), "second"),
        ]

        assert [e.description for e in sort_events(events)] == ["first", "second", "late"]

    def test_format(self):
        text = format_events([TimelineEvent(date(1720, 6, 1), "ZhenHuan enters the palace")])

        assert text.splitlines() == [TIMELINE_HEADER, "1720-06-01  ZhenHuan enters the palace"]

    def test_format_empty(self):
        assert format_events([]) == TIMELINE_HEADER


class TestLoadEvents:
    """事件文件测试"""

    def test_load_sorted(self, events_file: Path):
        events = load_events(events_file)

        assert [e.description for e in events] == [
            "ZhenHuan enters the palace",
            "雍正登基",
            "HuaFei falls from favor",
        ]

    def test_missing_file(self, temp_dir: Path):
        with pytest.raises(FileNotFoundError):
            load_events(temp_dir / "missing.txt")
