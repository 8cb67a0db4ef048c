"""Pytest 配置"""

import json

import pytest

from futurebuddy_desktop import target
from futurebuddy_desktop.context import generate_context
from futurebuddy_desktop.runtime import bootstrap
from futurebuddy_desktop.runtime.base import RuntimeBackend
from futurebuddy_desktop.telemetry import metrics


@pytest.fixture
def anyio_backend():
    """指定 anyio 只使用 asyncio backend"""
    return "asyncio"


@pytest.fixture(autouse=True)
def reset_state():
    """每次测试前重置启动状态和指标"""
    bootstrap._reset_for_testing()
    metrics.reset()
    yield
    bootstrap._reset_for_testing()
    target._reset_for_testing()
    metrics.reset()


@pytest.fixture
def app_conf():
    """最小可用的 app.conf.json 内容"""
    return {
        "product_name": "FutureBuddy Desktop",
        "version": "0.1.0",
        "identifier": "com.1future.futurebuddy",
        "build": {"frontend_dist": "dist", "dev_url": "http://localhost:5173"},
        "windows": [{"label": "main", "title": "FutureBuddy", "width": 1024, "height": 768}],
    }


@pytest.fixture
def conf_path(tmp_path, app_conf):
    """写入临时目录的 app.conf.json"""
    path = tmp_path / "app.conf.json"
    path.write_text(json.dumps(app_conf), encoding="utf-8")
    return path


@pytest.fixture
def context(conf_path):
    return generate_context(conf_path)


class FakeBackend(RuntimeBackend):
    """记录调用的测试后端"""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.calls = []

    @property
    def name(self) -> str:
        return "fake"

    def run(self, context) -> None:
        self.calls.append(context)
        if self.error is not None:
            raise self.error


@pytest.fixture
def fake_backend():
    return FakeBackend()
