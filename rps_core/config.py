"""
配置加载

从 YAML 文件读取动作模块配置（例如 config/basic.yaml）。
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import pathlib

import yaml


@dataclass
class BasicConfig:
    """
    basic 模块配置。

    Attributes:
        log_dir: 日志输出目录。
        log_level: 最低日志等级（DEBUG/INFO/WARNING/ERROR）。
        eval_function: eval 动作未指定 `function` 选项时使用的默认值。
                       None 表示按是否有绑定参数/自由变量自动决定。
    """

    log_dir: str = "logs"
    log_level: str = "DEBUG"
    eval_function: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BasicConfig":
        """从字典构造配置，忽略未知键。"""
        known = {f.name for f in fields(cls)}
        return cls(**{key: value for key, value in data.items() if key in known})


def load_config(path: str | pathlib.Path) -> BasicConfig:
    """
    从 YAML 文件解析 BasicConfig。

    空文件返回默认配置。

    Args:
        path: 配置文件路径。
    """
    path_obj = pathlib.Path(path)
    with path_obj.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return BasicConfig.from_dict(data)
