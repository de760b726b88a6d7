"""
console-log / as / assign 测试
"""

import asyncio

from rps_core.registry import ActionRegistry


def run(verb, ctx, *args):
    return asyncio.run(ActionRegistry.invoke("basic", verb, ctx, None, *args))


def test_as_writes_bare_and_prefixed_name(ctx):
    assert run("as", ctx, "x", 1) == 1
    assert ctx.variables["x"] == 1
    assert ctx.variables["$x"] == 1
    assert ctx.get_variable("$x") == 1


def test_as_trims_name(ctx):
    run("as", ctx, "  name ", "value")
    assert ctx.variables == {"name": "value", "$name": "value"}


def test_as_does_not_double_prefix(ctx):
    run("as", ctx, "$y", 2)
    assert ctx.variables == {"$y": 2}
    assert ctx.get_variable("y") == 2


def test_assign_is_synonym(ctx):
    assert run("assign", ctx, "z", [1, 2]) == [1, 2]
    assert ctx.variables["$z"] == [1, 2]


def test_console_log_prints_and_returns(ctx, capsys):
    assert run("console-log", ctx, "Hello") == "Hello"
    assert capsys.readouterr().out == "Hello\n"
    assert ctx.result == "Hello"


def test_get_variable_default(ctx):
    assert ctx.get_variable("missing", 42) == 42
