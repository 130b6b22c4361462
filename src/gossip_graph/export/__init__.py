"""导出模块：样式、DOT 导出、PNG 渲染"""

from .dot_exporter import DotExporter
from .renderer import GraphvizRenderer, NullRenderer, Renderer
from .styles import EDGE_STYLES, EdgeStyle, resolve_style

__all__ = [
    "DotExporter",
    "Renderer",
    "GraphvizRenderer",
    "NullRenderer",
    "EdgeStyle",
    "EDGE_STYLES",
    "resolve_style",
]
