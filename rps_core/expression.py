"""
表达式求值

eval 动作的底层实现，解析与计算全部交给 simpleeval：
- 四则运算、小括号、比较、`^` 乘方
- 列表/字典等复合类型
- 函数调用：ActionRegistry 中注册的无状态函数（abs、sqrt 等）
- 常量：pi、e、tau、inf、nan、true、false

表达式只解析一次（compile），之后可以用不同的变量作用域多次求值。
"""

from __future__ import annotations

import ast
import math
from typing import Any, Dict, FrozenSet, Optional, Sequence

from simpleeval import DEFAULT_NAMES, DEFAULT_OPERATORS, EvalWithCompoundTypes, safe_power

from .registry import ActionRegistry


class ExpressionError(Exception):
    """表达式解析或执行相关错误。"""


#: 表达式中可直接使用的常量
CONSTANTS: Dict[str, Any] = {
    **DEFAULT_NAMES,
    "pi": math.pi,
    "e": math.e,
    "tau": math.tau,
    "inf": math.inf,
    "nan": math.nan,
    "true": True,
    "false": False,
}

# `^` 按数学表达式习惯视为乘方，而不是按位异或
OPERATORS = {**DEFAULT_OPERATORS, ast.BitXor: safe_power}


def arg_map_to_obj(args: Optional[Sequence[Any]]) -> Optional[Dict[str, Any]]:
    """
    把位置参数映射为单字母变量。

    Examples:
        arg_map_to_obj([1, 2]) -> {"a": 1, "b": 2}
        arg_map_to_obj([]) -> None
    """
    if not args:
        return None
    return {chr(ord("a") + index): value for index, value in enumerate(args)}


class CompiledExpression:
    """
    已解析的表达式。

    Attributes:
        source: 原始表达式字符串。
        free_variables: 表达式引用的、既不是常量也不是已注册函数的名称。
    """

    def __init__(self, source: str, node: ast.AST) -> None:
        self.source = source
        self._node = node
        self.free_variables: FrozenSet[str] = self._extract_variable_names(node)

    def evaluate(self, scope: Optional[Dict[str, Any]] = None) -> Any:
        """
        在给定变量作用域下求值。

        Args:
            scope: 变量名 -> 值，例如 arg_map_to_obj 的结果；None 表示空作用域。

        Returns:
            计算结果（数值、布尔、列表等，取决于表达式）

        Raises:
            ExpressionError: 变量未定义、类型错误、除零等
        """
        evaluator = EvalWithCompoundTypes(
            operators=OPERATORS,
            functions=_registered_functions(),
            names={**CONSTANTS, **(scope or {})},
        )
        try:
            return evaluator.eval(self.source, previously_parsed=self._node)
        except ZeroDivisionError as exc:
            raise ExpressionError(f"表达式除零错误: {self.source}, 错误: {exc}") from exc
        except TypeError as exc:
            raise ExpressionError(f"表达式类型错误: {self.source}, 错误: {exc}") from exc
        except Exception as exc:  # noqa: BLE001
            raise ExpressionError(f"表达式执行失败: {self.source}, 错误: {exc}") from exc

    @staticmethod
    def _extract_variable_names(node: ast.AST) -> FrozenSet[str]:
        """提取表达式中读取的自由变量名。"""
        functions = ActionRegistry.list_functions()
        # 推导式中的循环变量由表达式自身绑定
        bound = {
            target.id
            for comp in ast.walk(node)
            if isinstance(comp, ast.comprehension)
            for target in ast.walk(comp.target)
            if isinstance(target, ast.Name)
        }
        return frozenset(
            child.id
            for child in ast.walk(node)
            if isinstance(child, ast.Name)
            and child.id not in bound
            and isinstance(child.ctx, ast.Load)
            and child.id not in CONSTANTS
            and child.id not in functions
        )

    def __repr__(self) -> str:
        return f"<CompiledExpression {self.source!r}>"


class ExpressionEvaluator:
    """表达式求值器（simpleeval 的薄封装）。"""

    def compile(self, expression: str) -> CompiledExpression:
        """
        解析表达式。

        Raises:
            ExpressionError: 语法错误或空表达式
        """
        parser = EvalWithCompoundTypes(operators=OPERATORS)
        try:
            node = parser.parse(expression)
        except SyntaxError as exc:
            raise ExpressionError(f"表达式语法错误: {expression}, 错误: {exc}") from exc
        except Exception as exc:  # noqa: BLE001
            raise ExpressionError(f"表达式解析失败: {expression}, 错误: {exc}") from exc
        return CompiledExpression(expression, node)

    def evaluate(self, expression: str, scope: Optional[Dict[str, Any]] = None) -> Any:
        """解析并立即求值。"""
        return self.compile(expression).evaluate(scope)


def _registered_functions() -> Dict[str, Any]:
    """收集 ActionRegistry 中的全部无状态函数。"""
    return {name: ActionRegistry.get_function(name) for name in ActionRegistry.list_functions()}
