"""
basic 动作模块

rpscript 的基础工具：终端打印、变量赋值、事件监听、等待、
表达式求值以及常用数学函数。

导入本包即完成注册：
- 动作注册到 ActionRegistry 的 "basic" 模块下
- 数学函数注册为 eval 表达式中可直接调用的函数
"""

import math
import random

from rps_core.config import BasicConfig
from rps_core.registry import ActionRegistry
from rps_utils.logger import close_logger, get_logger

from . import actions, math_actions
from .action_docs import attach_doc_metadata

MODULE_NAME = "basic"

ActionRegistry.register_module(
    MODULE_NAME,
    "Basic utility for rpscript: terminal print, variable assignment, event listening, wait and math.",
)

_ACTIONS = {
    "console-log": actions.print_action,
    "as": actions.as_action,
    "assign": actions.assign_action,
    "once": actions.once_action,
    "on": actions.on_action,
    "wait": actions.wait_action,
    "eval": actions.eval_action,
    "abs": math_actions.abs_action,
    "ceil": math_actions.ceil_action,
    "floor": math_actions.floor_action,
    "round": math_actions.round_action,
    "trunc": math_actions.trunc_action,
    "max": math_actions.max_action,
    "min": math_actions.min_action,
    "pow": math_actions.pow_action,
    "random": math_actions.random_action,
}

for _verb, _handler in _ACTIONS.items():
    ActionRegistry.register_action(MODULE_NAME, _verb, _handler)
    attach_doc_metadata(_handler, _verb)

# eval 表达式中可直接调用的函数
ActionRegistry.register_function("abs", abs)
ActionRegistry.register_function("ceil", math.ceil)
ActionRegistry.register_function("floor", math.floor)
ActionRegistry.register_function("round", math_actions.js_round)
ActionRegistry.register_function("trunc", math.trunc)
ActionRegistry.register_function("min", math_actions.js_min)
ActionRegistry.register_function("max", math_actions.js_max)
ActionRegistry.register_function("pow", math.pow)
ActionRegistry.register_function("random", random.random)
ActionRegistry.register_function("sqrt", math.sqrt)
ActionRegistry.register_function("sin", math.sin)
ActionRegistry.register_function("cos", math.cos)
ActionRegistry.register_function("tan", math.tan)
ActionRegistry.register_function("asin", math.asin)
ActionRegistry.register_function("acos", math.acos)
ActionRegistry.register_function("atan", math.atan)
ActionRegistry.register_function("log", math.log)
ActionRegistry.register_function("exp", math.exp)


def configure(config: BasicConfig) -> None:
    """
    应用配置：重建日志输出，并设置 eval 的默认 function 选项。

    Args:
        config: 通常由 rps_core.config.load_config 读取。
    """
    close_logger()
    get_logger(config.log_dir, level=config.log_level).info(
        "basic 模块配置已更新: log_dir=%s, eval_function=%s", config.log_dir, config.eval_function
    )
    actions.set_config(config)


__all__ = ["MODULE_NAME", "configure"]
