"""
测试公共配置

把项目根目录加入路径，并导入 rps_basic 触发动作注册。
"""

import pathlib
import sys

project_root = pathlib.Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest

import rps_basic  # noqa: F401,E402
from rps_core.context import RpsContext  # noqa: E402


@pytest.fixture
def ctx() -> RpsContext:
    return RpsContext()
