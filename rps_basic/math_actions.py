"""
数学动作

abs、ceil、floor、round、trunc、min、max、pow、random。
每个动作都是对 math / random 标准库的一对一包装，不做参数校验，
类型错误等异常直接向上传递。

注意：ceil、floor、round、trunc 遇到 inf 会抛出 OverflowError，
遇到 nan 会抛出 ValueError，不会像 JavaScript 的 Math.* 那样原样返回。

同步版本（js_round 等）同时注册为 eval 表达式中的函数。
"""

from __future__ import annotations

import math
import random as _random
from typing import Any, Dict, Union

from rps_core.context import RpsContext

Number = Union[int, float]


def js_round(x: Number) -> int:
    """
    四舍五入，.5 一律向正无穷方向进位。

    Examples:
        js_round(1.3) -> 1
        js_round(2.5) -> 3
        js_round(-2.5) -> -2
    """
    if isinstance(x, int):
        return x
    # 浮点数的 x - floor(x) 是精确值
    r = math.floor(x)
    return r + 1 if x - r >= 0.5 else r


def js_min(*nums: Number) -> Number:
    """最小值；没有参数时返回 +inf。"""
    return min(nums, default=math.inf)


def js_max(*nums: Number) -> Number:
    """最大值；没有参数时返回 -inf。"""
    return max(nums, default=-math.inf)


async def abs_action(ctx: RpsContext, opts: Dict[str, Any], num: Number) -> Number:
    """绝对值。abs -5.1 -> 5.1"""
    return abs(num)


async def ceil_action(ctx: RpsContext, opts: Dict[str, Any], num: Number) -> int:
    """向上取整。ceil 5.1 -> 6"""
    return math.ceil(num)


async def floor_action(ctx: RpsContext, opts: Dict[str, Any], num: Number) -> int:
    """向下取整。floor 5.1 -> 5"""
    return math.floor(num)


async def round_action(ctx: RpsContext, opts: Dict[str, Any], num: Number) -> int:
    """四舍五入。round 1.3 -> 1"""
    return js_round(num)


async def trunc_action(ctx: RpsContext, opts: Dict[str, Any], num: Number) -> int:
    """截断小数部分。trunc 1.3 -> 1"""
    return math.trunc(num)


async def max_action(ctx: RpsContext, opts: Dict[str, Any], *nums: Number) -> Number:
    """最大值。max 5.1 1.2 3.3 -> 5.1"""
    return js_max(*nums)


async def min_action(ctx: RpsContext, opts: Dict[str, Any], *nums: Number) -> Number:
    """最小值。min 5.1 1.2 3.3 -> 1.2"""
    return js_min(*nums)


async def pow_action(ctx: RpsContext, opts: Dict[str, Any], x: Number, y: Number) -> float:
    """乘方。pow 5 3 -> 125"""
    return math.pow(x, y)


async def random_action(ctx: RpsContext, opts: Dict[str, Any]) -> float:
    """[0, 1) 区间内的伪随机数。"""
    return _random.random()
