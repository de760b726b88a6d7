"""
基础动作

- console-log：打印到终端
- as / assign：变量赋值
- once / on：事件监听
- wait：暂停一段时间
- eval：数学表达式求值

事件源按鸭子类型使用，只要求提供 on(name, listener) 和 once(name, listener)。
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional, Protocol, Union

from rps_core.config import BasicConfig
from rps_core.context import RpsContext
from rps_core.expression import ExpressionEvaluator, arg_map_to_obj
from rps_utils.logger import get_logger

logger = get_logger()

_evaluator = ExpressionEvaluator()
_config = BasicConfig()


class EventSource(Protocol):
    """可监听的事件源（宿主提供的事件对象）。"""

    def on(self, event: str, listener: Callable[..., Any]) -> Any: ...

    def once(self, event: str, listener: Callable[..., Any]) -> Any: ...


def set_config(config: BasicConfig) -> None:
    """替换当前生效的配置（由 rps_basic.configure 调用）。"""
    global _config
    _config = config


def get_config() -> BasicConfig:
    """返回当前生效的配置。"""
    return _config


async def print_action(ctx: RpsContext, opts: Dict[str, Any], text: Any) -> Any:
    """把 text 打印到标准输出，并原样返回。"""
    print(text)
    return text


async def as_action(ctx: RpsContext, opts: Dict[str, Any], variable: str, value: Any) -> Any:
    """
    变量赋值。

    同时写入去掉首尾空白的变量名和带 `$` 前缀的别名，
    已经以 `$` 开头的名称不会重复加前缀。

    Returns:
        被赋的值
    """
    variable = variable.strip()
    ctx.variables[variable] = value

    if not variable.startswith("$"):
        variable = "$" + variable
    ctx.variables[variable] = value

    logger.debug("变量赋值: %s", variable)
    return value


# assign 是 as 的同义词
assign_action = as_action


async def once_action(ctx: RpsContext, opts: Dict[str, Any], event: EventSource, evt_name: str) -> List[Any]:
    """
    等待事件源触发一次 evt_name。

    监听器可能在其他线程中被调用，结果统一回到当前事件循环中设置。

    Returns:
        事件携带的参数列表
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future = loop.create_future()

    def _resolve(params: List[Any]) -> None:
        if not future.done():
            future.set_result(params)

    def _listener(*params: Any) -> None:
        if not loop.is_closed():
            loop.call_soon_threadsafe(_resolve, list(params))

    event.once(evt_name, _listener)
    logger.debug("等待事件: %s", evt_name)
    return await future


async def on_action(
    ctx: RpsContext,
    opts: Dict[str, Any],
    event: EventSource,
    evt_name: str,
    cb: Callable[[List[Any]], Any],
) -> EventSource:
    """
    注册持久监听器，每次触发时以参数列表调用 cb。

    Returns:
        事件源本身
    """
    event.on(evt_name, lambda *params: cb(list(params)))
    logger.debug("注册事件监听: %s", evt_name)
    return event


async def wait_action(ctx: RpsContext, opts: Dict[str, Any], period: float) -> Any:
    """
    暂停 period 秒。

    Returns:
        调用时 ctx.result 中保存的上一次结果
    """
    previous = ctx.result
    await asyncio.sleep(period)
    return previous


async def eval_action(
    ctx: RpsContext, opts: Dict[str, Any], expression: str, *args: Any
) -> Union[Any, Callable[..., Any]]:
    """
    计算数学表达式。

    位置参数依次绑定为变量 a、b、c...。
    opts["function"]：
      - True：返回延迟求值函数 f(*more)，调用时以 args + more 绑定变量
      - False：立即求值
      - 未指定（取配置中的 eval_function，默认 None）：有绑定参数时立即求值；
        没有绑定参数时，表达式不含自由变量则立即求值，否则返回延迟求值函数
    """
    ret_fn: Optional[bool] = opts.get("function", _config.eval_function)
    expr = _evaluator.compile(expression)
    obj_arg = arg_map_to_obj(args)

    def late_fn(*fn_args: Any) -> Any:
        return expr.evaluate(arg_map_to_obj(list(args) + list(fn_args)))

    if ret_fn is True:
        return late_fn
    if ret_fn is False or obj_arg:
        return expr.evaluate(obj_arg)
    if not expr.free_variables:
        return expr.evaluate()
    return late_fn
