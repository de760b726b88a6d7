"""
动作注册表

本模块只负责「注册与分发」，不承载具体动作逻辑：
- ActionRegistry：统一管理 {模块名 -> {动词 -> 处理函数}} 的映射，
  以及可在 eval 表达式中直接调用的无状态函数。

具体动作（console-log、as、wait 等）放在 rps_basic 包中，
导入该包时通过 ActionRegistry 完成注册。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, List, Optional

from rps_utils.logger import get_logger

if TYPE_CHECKING:
    from rps_core.context import RpsContext

#: 动作处理函数签名：(ctx, opts, *args) -> awaitable
ActionHandler = Callable[..., Awaitable[Any]]

logger = get_logger()


class UnknownActionError(LookupError):
    """模块或动词未注册。"""


class ActionRegistry:
    """
    动作注册表。

    - modules：模块名 -> 描述
    - actions：模块名 -> {动词 -> 处理函数}
    - functions：无状态函数（abs、sqrt 等），供表达式求值使用

    所有注册/获取都通过类方法完成，便于在不同模块中统一使用。
    """

    _modules: Dict[str, str] = {}
    _actions: Dict[str, Dict[str, ActionHandler]] = {}
    _functions: Dict[str, Callable[..., Any]] = {}

    # ---- 模块注册/获取 -------------------------------------------------
    @classmethod
    def register_module(cls, name: str, description: str = "") -> None:
        """
        注册动作模块。

        Args:
            name: 模块名称，例如 "basic"。
            description: 模块说明（用于文档展示）。
        """
        cls._modules[name] = description
        cls._actions.setdefault(name, {})

    @classmethod
    def list_modules(cls) -> List[str]:
        """返回已注册的模块名称列表。"""
        return sorted(cls._modules.keys())

    @classmethod
    def get_module_description(cls, name: str) -> Optional[str]:
        """根据模块名获取描述，找不到时返回 None。"""
        return cls._modules.get(name)

    # ---- 动作注册/获取 -------------------------------------------------
    @classmethod
    def register_action(cls, module: str, verb: str, handler: ActionHandler) -> None:
        """
        注册动作。

        Args:
            module: 所属模块名称（未注册时自动注册，描述为空）。
            verb: 脚本中使用的动词（区分大小写），例如 "console-log"。
            handler: 异步处理函数，签名为 (ctx, opts, *args)。
        """
        if module not in cls._modules:
            cls.register_module(module)
        cls._actions[module][verb] = handler

    @classmethod
    def get_action(cls, module: str, verb: str) -> Optional[ActionHandler]:
        """根据模块名和动词获取处理函数，找不到时返回 None。"""
        return cls._actions.get(module, {}).get(verb)

    @classmethod
    def list_actions(cls, module: str) -> List[str]:
        """返回模块下已注册的动词列表。"""
        return sorted(cls._actions.get(module, {}).keys())

    # ---- 无状态函数注册/获取 -------------------------------------------
    @classmethod
    def register_function(cls, name: str, func: Callable[..., Any]) -> None:
        """
        注册无状态函数。

        这些函数可以直接在 eval 表达式中调用，例如 abs、sqrt 等。
        """
        cls._functions[name] = func

    @classmethod
    def get_function(cls, name: str) -> Optional[Callable[..., Any]]:
        """根据名称获取无状态函数，找不到时返回 None。"""
        return cls._functions.get(name)

    @classmethod
    def list_functions(cls) -> List[str]:
        """返回已注册的无状态函数名称列表。"""
        return sorted(cls._functions.keys())

    # ---- 分发 ----------------------------------------------------------
    @classmethod
    async def invoke(
        cls,
        module: str,
        verb: str,
        ctx: "RpsContext",
        opts: Optional[Dict[str, Any]] = None,
        *args: Any,
    ) -> Any:
        """
        调用已注册的动作，并把返回值写入 ctx.result。

        处理函数抛出的异常原样向上传递。

        Raises:
            UnknownActionError: 模块或动词未注册。
        """
        handler = cls.get_action(module, verb)
        if handler is None:
            raise UnknownActionError(f"未注册的动作: {module}.{verb}")

        logger.debug("调用动作 %s.%s, 参数数量=%d", module, verb, len(args))
        try:
            value = await handler(ctx, opts or {}, *args)
        except Exception:
            logger.error("动作执行失败: %s.%s", module, verb, exc_info=True)
            raise

        ctx.result = value
        return value
