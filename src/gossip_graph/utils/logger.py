"""
日志配置模块

使用 structlog 进行结构化日志记录。日志统一写入 stderr，
stdout 只留给命令行输出（Generated 提示、时间线）。
"""

import logging
import sys
from typing import Any

import structlog


def _final_renderer(json_format: bool) -> list[Any]:
    """选择末端渲染器：JSON 保留中文人名，控制台仅在终端下着色"""
    if json_format:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(ensure_ascii=False),
        ]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def setup_logging(log_level: str = "INFO", json_format: bool = False) -> None:
    """
    配置日志系统

    可重复调用（测试中每次 main() 都会调用），后一次配置覆盖前一次。

    Args:
        log_level: 日志级别
        json_format: 是否使用JSON格式输出
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            *_final_renderer(json_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """获取结构化日志记录器"""
    return structlog.get_logger(name)
