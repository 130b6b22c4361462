"""
应用配置管理

使用 Pydantic Settings 管理所有配置项
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用配置类"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ============ 应用配置 ============
    app_version: str = "0.1.0"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    log_json: bool = Field(default=False, description="是否输出JSON格式日志")

    # ============ 输入配置 ============
    text_encoding: str = "utf-8"

    # ============ 导出配置 ============
    dot_output_path: str = "graph.dot"
    png_output_path: str = "graph.png"
    label_delimiter: str = Field(default="|", description="合并多种关系时的标签分隔符")

    # ============ Graphviz配置 ============
    render_png: bool = Field(default=True, description="是否尝试调用Graphviz生成PNG")
    graphviz_executables: list[str] = Field(
        default_factory=lambda: [
            "dot",
            r"C:\Program Files\Graphviz\bin\dot.exe",
            r"C:\Program Files (x86)\Graphviz\bin\dot.exe",
        ],
        description="按顺序尝试的dot可执行文件",
    )


@lru_cache
def get_settings() -> Settings:
    """获取配置单例"""
    return Settings()
