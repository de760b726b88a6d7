"""
注册表、文档与配置测试
"""

import asyncio

import pytest

from rps_core.config import BasicConfig, load_config
from rps_core.context import RpsContext
from rps_core.registry import ActionRegistry, UnknownActionError
from rps_utils.doc_helper import DocHelper

VERBS = [
    "abs", "as", "assign", "ceil", "console-log", "eval", "floor", "max",
    "min", "on", "once", "pow", "random", "round", "trunc", "wait",
]


def test_basic_module_registered():
    assert "basic" in ActionRegistry.list_modules()
    assert ActionRegistry.list_actions("basic") == sorted(VERBS)


def test_unknown_verb():
    with pytest.raises(UnknownActionError):
        asyncio.run(ActionRegistry.invoke("basic", "nope", RpsContext()))
    assert ActionRegistry.get_action("missing", "abs") is None


def test_invoke_passes_empty_options():
    seen = {}

    async def probe(ctx, opts):
        seen["opts"] = opts
        return "ok"

    ActionRegistry.register_action("test-probe", "probe", probe)
    ctx = RpsContext()
    assert asyncio.run(ActionRegistry.invoke("test-probe", "probe", ctx)) == "ok"
    assert seen["opts"] == {}
    assert ctx.result == "ok"


def test_every_action_documented():
    docs = DocHelper.get_all_action_docs("basic")
    assert sorted(docs) == sorted(VERBS)
    assert DocHelper.get_action_doc("basic", "as").name == "as"
    assert DocHelper.get_action_doc("basic", "assign").name == "assign"
    assert docs["pow"].to_dict()["chinese_name"] == "乘方"


def test_render_module_markdown():
    text = DocHelper.render_module_markdown("basic")
    assert text.startswith("# basic")
    assert "## console-log" in text


def test_load_config(tmp_path):
    path = tmp_path / "basic.yaml"
    path.write_text("log_dir: custom\neval_function: false\nunknown: 1\n", encoding="utf-8")
    config = load_config(path)
    assert config == BasicConfig(log_dir="custom", log_level="DEBUG", eval_function=False)


def test_load_empty_config(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == BasicConfig()
