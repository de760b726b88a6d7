"""
表达式求值器测试
"""

import pytest

from rps_core.expression import ExpressionError, ExpressionEvaluator, arg_map_to_obj


def test_arg_map_to_obj():
    assert arg_map_to_obj([1, "x", None]) == {"a": 1, "b": "x", "c": None}
    assert arg_map_to_obj([]) is None
    assert arg_map_to_obj(None) is None


def test_compile_once_evaluate_many():
    expr = ExpressionEvaluator().compile("a * 10 + b")
    assert expr.free_variables == frozenset({"a", "b"})
    assert expr.evaluate({"a": 1, "b": 2}) == 12
    assert expr.evaluate({"a": 3, "b": 0}) == 30


def test_registered_functions_are_not_free_variables():
    expr = ExpressionEvaluator().compile("sqrt(x) + pi")
    assert expr.free_variables == frozenset({"x"})


def test_comparison_and_booleans():
    evaluator = ExpressionEvaluator()
    assert evaluator.evaluate("a > 1 and true", {"a": 2}) is True


def test_zero_division():
    with pytest.raises(ExpressionError) as info:
        ExpressionEvaluator().evaluate("1 / 0")
    assert isinstance(info.value.__cause__, ZeroDivisionError)


def test_undefined_name():
    with pytest.raises(ExpressionError):
        ExpressionEvaluator().evaluate("undefined_name + 1")


def test_empty_expression():
    with pytest.raises(ExpressionError):
        ExpressionEvaluator().compile("   ")


def test_comprehension_targets_are_not_free_variables():
    expr = ExpressionEvaluator().compile("[x * 2 for x in [1, 2]]")
    assert expr.free_variables == frozenset()
    assert expr.evaluate() == [2, 4]


def test_comprehension_over_free_variable():
    expr = ExpressionEvaluator().compile("[x + 1 for x in a]")
    assert expr.free_variables == frozenset({"a"})
