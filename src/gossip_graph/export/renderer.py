"""
Graphviz PNG 渲染

尽力调用本机 dot 生成 PNG，失败不抛异常，不影响流程
"""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from gossip_graph.config import get_settings
from gossip_graph.utils import get_logger

logger = get_logger(__name__)


class Renderer(Protocol):
    """渲染器接口"""

    def render(self, dot_path: str | Path, png_path: str | Path) -> bool:
        """渲染 DOT 文件为 PNG，成功返回 True"""
        ...


class NullRenderer:
    """不渲染（关闭 PNG 输出时使用）"""

    def render(self, dot_path: str | Path, png_path: str | Path) -> bool:
        return False


class GraphvizRenderer:
    """Graphviz dot 渲染器"""

    def __init__(self, executables: Sequence[str] | None = None):
        """
        初始化渲染器

        Args:
            executables: 按顺序尝试的 dot 可执行文件，为空时读取配置
        """
        if executables is None:
            executables = get_settings().graphviz_executables
        self.executables = tuple(executables)

    def render(self, dot_path: str | Path, png_path: str | Path) -> bool:
        """
        依次尝试候选的 dot，生成 PNG

        Args:
            dot_path: DOT 文件路径
            png_path: PNG 输出路径

        Returns:
            是否成功生成 PNG
        """
        png = Path(png_path)
        for exe in self.executables:
            try:
                result = subprocess.run(
                    [exe, "-Tpng", str(dot_path), "-o", str(png)],
                    stdout=subprocess.PIPE,
                    stderr=subprocess.STDOUT,
                    check=False,
                )
            except (OSError, subprocess.SubprocessError) as e:
                logger.debug("Graphviz executable unavailable", executable=exe, error=str(e))
                continue

            if result.returncode == 0 and png.exists():
                logger.info("PNG rendered", path=str(png), executable=exe)
                return True

            logger.debug(
                "Graphviz render failed",
                executable=exe,
                returncode=result.returncode,
                output=result.stdout.decode("utf-8", errors="replace").strip(),
            )

        # 没有可用 Graphviz：静默跳过
        logger.info("Graphviz not available, PNG skipped", path=str(png))
        return False
