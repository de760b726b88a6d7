"""
执行上下文模块

由宿主为每次脚本运行创建，动作通过它读写变量和上一次结果。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class RpsContext:
    """
    单次脚本运行的上下文。

    Attributes:
        variables: 变量名 -> 值。赋值动作会同时写入 "name" 和 "$name"。
        result: 最近一次动作的返回值（脚本中的 $RESULT）。
    """

    variables: Dict[str, Any] = field(default_factory=dict)
    result: Any = None

    def get_variable(self, name: str, default: Any = None) -> Any:
        """
        按名称读取变量。

        找不到时再尝试带/不带 `$` 前缀的别名。
        """
        if name in self.variables:
            return self.variables[name]
        alias = name[1:] if name.startswith("$") else f"${name}"
        return self.variables.get(alias, default)

    def snapshot(self) -> Dict[str, Any]:
        """导出当前所有变量的浅拷贝。"""
        return dict(self.variables)
