"""
通用工具函数
"""

import json
from pathlib import Path
from typing import Any


def load_text_file(file_path: str | Path, encoding: str = "utf-8") -> str:
    """
    加载文本文件

    Args:
        file_path: 文件路径
        encoding: 文件编码

    Returns:
        文件全文

    Raises:
        FileNotFoundError: 文件不存在
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding=encoding) as f:
        return f.read()


def load_text_lines(file_path: str | Path, encoding: str = "utf-8") -> list[str]:
    """按行加载文本文件（去掉行尾换行符）"""
    return load_text_file(file_path, encoding=encoding).splitlines()


def save_text_file(content: str, file_path: str | Path, encoding: str = "utf-8") -> Path:
    """
    保存文本到文件，自动创建父目录

    Args:
        content: 文本内容
        file_path: 文件路径
        encoding: 文件编码

    Returns:
        写入的文件路径
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding=encoding) as f:
        f.write(content)
    return path


def save_json_file(data: Any, file_path: str | Path, indent: int = 2) -> Path:
    """
    保存数据到JSON文件

    Args:
        data: 要保存的数据
        file_path: 文件路径
        indent: 缩进空格数

    Returns:
        写入的文件路径
    """
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=indent)
    return path
