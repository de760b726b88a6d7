"""
动作文档元数据

为 basic 模块的每个动词提供文档元数据，用于生成模块说明。
"""

from typing import Any, Callable


def _params(*rows: tuple) -> str:
    """生成 markdown 参数表。"""
    lines = ["", "| 参数名 | 含义 | 类型 |", "|--------|------|------|"]
    lines.extend(f"| {name} | {meaning} | {type_} |" for name, meaning, type_ in rows)
    return "\n".join(lines) + "\n"


def _unary_math_doc(verb: str, chinese_name: str, summary: str, example: str, result: str) -> dict:
    return {
        "name": verb,
        "chinese_name": chinese_name,
        "doc": f"""
# {verb}

{summary}

## 使用示例

```
{verb} {example}   ; 返回 {result}
```
""",
        "params_table": _params(("number", "输入数值", "int 或 float")),
    }


ACTION_DOCS = {
    "console-log": {
        "name": "console-log",
        "chinese_name": "打印",
        "doc": """
# console-log

把内容打印到终端，并原样返回，便于在管道中继续使用。

## 使用示例

```
console-log 'Hello'
console-log $RESULT   ; 再打印一次上一次的结果
```
""",
        "params_table": _params(("text", "需要打印的内容", "任意")),
    },
    "as": {
        "name": "as",
        "chinese_name": "变量赋值",
        "doc": """
# as

变量赋值。赋值后可以通过在变量名前加 `$` 访问。

## 使用示例

```
as 'varName' 1
console-log $varName   ; 打印 1

read 'filename.txt' | as 'content'
```
""",
        "params_table": _params(("variable", "变量名", "str"), ("value", "变量值", "任意")),
    },
    "assign": {
        "name": "assign",
        "chinese_name": "变量赋值",
        "doc": """
# assign

as 的同义词。
""",
        "params_table": _params(("variable", "变量名", "str"), ("value", "变量值", "任意")),
    },
    "once": {
        "name": "once",
        "chinese_name": "单次事件监听",
        "doc": """
# once

等待事件源触发一次指定事件，返回事件参数列表。

## 使用示例

```
once $emitter 'connected'
```
""",
        "params_table": _params(("event", "事件源", "带 on/once 的对象"), ("eventName", "事件名", "str")),
    },
    "on": {
        "name": "on",
        "chinese_name": "事件监听",
        "doc": """
# on

持续监听事件，每次触发都以参数列表调用回调，立即返回事件源。

## 使用示例

```
on $emitter 'start' @ $output { console-log $output }
```
""",
        "params_table": _params(
            ("event", "事件源", "带 on/once 的对象"),
            ("eventName", "事件名", "str"),
            ("callback", "回调", "callable"),
        ),
    },
    "wait": {
        "name": "wait",
        "chinese_name": "等待",
        "doc": """
# wait

暂停一段时间（秒），返回调用时的上一次结果。

## 使用示例

```
wait 5
```
""",
        "params_table": _params(("period", "等待时长（秒）", "int 或 float")),
    },
    "eval": {
        "name": "eval",
        "chinese_name": "表达式求值",
        "doc": """
# eval

计算数学表达式。额外的位置参数依次绑定为 a、b、c...

选项 `function` 为 true 时返回可复用的求值函数，为 false 时立即求值。

## 使用示例

```
eval '1 + 2'        ; 返回 3
eval 'a * b' 3 4    ; 返回 12
eval 'a ^ 2'        ; 返回求值函数
```
""",
        "params_table": _params(("expression", "表达式", "str"), ("...args", "绑定参数", "任意")),
    },
    "abs": _unary_math_doc("abs", "绝对值", "返回数值的绝对值。", "-5.1", "5.1"),
    "ceil": _unary_math_doc("ceil", "向上取整", "返回不小于输入的最小整数。", "5.1", "6"),
    "floor": _unary_math_doc("floor", "向下取整", "返回不大于输入的最大整数。", "5.1", "5"),
    "round": _unary_math_doc("round", "四舍五入", "四舍五入到整数，.5 向正无穷方向进位。", "1.3", "1"),
    "trunc": _unary_math_doc("trunc", "截断", "去掉小数部分。", "1.3", "1"),
    "max": {
        "name": "max",
        "chinese_name": "最大值",
        "doc": """
# max

返回参数中的最大值，没有参数时返回 -inf。

## 使用示例

```
max 5.1 1.2 3.3   ; 返回 5.1
```
""",
        "params_table": _params(("...number", "输入数值", "int 或 float")),
    },
    "min": {
        "name": "min",
        "chinese_name": "最小值",
        "doc": """
# min

返回参数中的最小值，没有参数时返回 inf。

## 使用示例

```
min 5.1 1.2 3.3   ; 返回 1.2
```
""",
        "params_table": _params(("...number", "输入数值", "int 或 float")),
    },
    "pow": {
        "name": "pow",
        "chinese_name": "乘方",
        "doc": """
# pow

返回 x 的 y 次方。

## 使用示例

```
pow 5 3   ; 返回 125
```
""",
        "params_table": _params(("x", "底数", "int 或 float"), ("y", "指数", "int 或 float")),
    },
    "random": {
        "name": "random",
        "chinese_name": "随机数",
        "doc": """
# random

返回 [0, 1) 区间内的伪随机数。
""",
        "params_table": "",
    },
}


def attach_doc_metadata(handler: Callable[..., Any], verb: str) -> None:
    """
    把文档元数据附加到动作处理函数上（`__doc_metadata__`）。

    as 与 assign 共用同一个处理函数，因此以最后注册的动词为准；
    查询时优先使用 get_action_doc_metadata。
    """
    if verb in ACTION_DOCS:
        handler.__doc_metadata__ = ACTION_DOCS[verb]


def get_action_doc_metadata(verb: str) -> dict | None:
    """按动词获取文档元数据，不存在时返回 None。"""
    return ACTION_DOCS.get(verb)
