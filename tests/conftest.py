"""
测试配置和fixtures
"""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from gossip_graph.config import Settings, get_settings
from gossip_graph.extraction import GraphBuilder, RelationGraph, RelationKind, RelationTriple


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """每个测试前后清空配置缓存，便于用环境变量覆盖配置"""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """获取测试配置"""
    return get_settings()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """创建临时目录"""
    temp_path = Path(tempfile.mkdtemp())
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def english_text() -> str:
    """英文示例文本"""
    return "A loves B. B betrayed C."


@pytest.fixture
def chinese_text() -> str:
    """中文示例文本"""
    return "甄嬛爱上了果郡王. 雍正喜欢甄嬛."


@pytest.fixture
def palace_text() -> str:
    """英文宫斗示例文本"""
    return (
        "ZhenHuan loves King GuoJun. "
        "YongZheng loves ZhenHuan. "
        "HuaFei is jealous of ZhenHuan. "
        "AnLingRong betrayed ZhenHuan. "
        "ZhenHuan is together with YongZheng. "
        "King GuoJun is hostile to YongZheng. "
        "ShenMeiZhuang supports ZhenHuan."
    )


@pytest.fixture
def sample_triples() -> list[RelationTriple]:
    """示例三元组"""
    return [
        RelationTriple("A", "B", RelationKind.LOVE),
        RelationTriple("B", "C", RelationKind.BETRAY),
        RelationTriple("A", "B", RelationKind.RIVAL),
    ]


@pytest.fixture
def sample_graph(sample_triples: list[RelationTriple]) -> RelationGraph:
    """示例关系图"""
    return GraphBuilder().merge(sample_triples)


@pytest.fixture
def events_file(temp_dir: Path) -> Path:
    """示例时间线文件"""
    path = temp_dir / "events.txt"
    path.write_text(
        "1724-01-10 HuaFei falls from favor\n"
        "\n"
        "1720-06-01 ZhenHuan enters the palace\n"
        "not-a-date something happened\n"
        "1722-12-20 雍正登基\n",
        encoding="utf-8",
    )
    return path
