"""
数学动作测试
"""

import asyncio
import math

import pytest

from rps_core.registry import ActionRegistry


def run(verb, ctx, *args, opts=None):
    return asyncio.run(ActionRegistry.invoke("basic", verb, ctx, opts, *args))


def test_unary_actions(ctx):
    assert run("abs", ctx, -5.1) == 5.1
    assert run("ceil", ctx, 5.1) == 6
    assert run("floor", ctx, 5.1) == 5
    assert run("round", ctx, 1.3) == 1
    assert run("trunc", ctx, 1.3) == 1


def test_round_half_goes_up(ctx):
    assert run("round", ctx, 2.5) == 3
    assert run("round", ctx, -2.5) == -2
    assert run("round", ctx, 1.7) == 2


def test_trunc_negative(ctx):
    assert run("trunc", ctx, -1.7) == -1


def test_min_max(ctx):
    assert run("max", ctx, 5.1, 1.2, 3.3) == 5.1
    assert run("min", ctx, 5.1, 1.2, 3.3) == 1.2


def test_min_max_without_numbers(ctx):
    assert run("min", ctx) == math.inf
    assert run("max", ctx) == -math.inf


def test_pow(ctx):
    assert run("pow", ctx, 5, 3) == 125


def test_random_in_unit_interval(ctx):
    for _ in range(200):
        value = run("random", ctx)
        assert 0 <= value < 1


def test_type_error_propagates(ctx):
    with pytest.raises(TypeError):
        run("abs", ctx, "x")


def test_result_slot_updated(ctx):
    run("pow", ctx, 2, 10)
    assert ctx.result == 1024


def test_round_near_half_boundary(ctx):
    assert run("round", ctx, 0.49999999999999994) == 0


def test_round_keeps_large_integers_exact(ctx):
    assert run("round", ctx, 2**53 + 1) == 2**53 + 1
    assert run("round", ctx, 4503599627370497.0) == 4503599627370497


def test_non_finite_inputs_raise(ctx):
    with pytest.raises(OverflowError):
        run("round", ctx, math.inf)
    with pytest.raises(OverflowError):
        run("ceil", ctx, -math.inf)
    with pytest.raises(ValueError):
        run("floor", ctx, math.nan)
