"""Telemetry - 统一日志和指标入口

提供统一的日志工厂和指标 facade，便于观测启动流程。

日志格式: [module] msg
指标示例: runtime.start, runtime.start_failed, runtime.exit, asset_server.started
"""

import logging

from . import config

# 全局日志配置
_LOG_FORMAT = "[%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """获取带模块前缀的 logger

    Args:
        name: 模块名（通常使用 __name__）

    Returns:
        Logger 实例
    """
    return logging.getLogger(name)


def resolve_log_level(name: str) -> int:
    """把级别名（含 WARN 等别名）转换为数值级别，无法识别时回退到 INFO"""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        return logging.INFO
    return level


def setup_logging(level: str | None = None) -> None:
    """配置根 logger（仅在进程入口调用一次）

    Args:
        level: 日志级别，None 使用 config.LOG_LEVEL
    """
    logging.basicConfig(
        level=resolve_log_level(level or config.LOG_LEVEL),
        format=_LOG_FORMAT,
    )


class Metrics:
    """启动流程计数器

    只在进程内存中累加，进程退出即丢弃；按 "名称 + 标签" 区分不同计数。
    """

    def __init__(self):
        self._counters: dict[str, int] = {}

    def inc(self, name: str, labels: dict[str, str] | None = None, value: int = 1) -> None:
        """累加一次计数（config.METRICS_ENABLED 关闭时忽略）

        Args:
            name: 计数器名，如 "runtime.start_failed"
            labels: 区分维度，如 {"backend": "server"}
            value: 累加量
        """
        if not config.METRICS_ENABLED:
            return
        key = self._make_key(name, labels)
        self._counters[key] = self._counters.get(key, 0) + value

    def get_counter(self, name: str, labels: dict[str, str] | None = None) -> int:
        """读取单个计数，未出现过的记为 0"""
        key = self._make_key(name, labels)
        return self._counters.get(key, 0)

    def reset(self) -> None:
        """清空全部计数"""
        self._counters.clear()

    def _make_key(self, name: str, labels: dict[str, str] | None) -> str:
        # runtime.start{backend=webview}
        if not labels:
            return name
        label_str = ",".join(f"{k}={v}" for k, v in sorted(labels.items()))
        return f"{name}{{{label_str}}}"

    def get_all_counters(self) -> dict[str, int]:
        """全部计数的快照"""
        return dict(self._counters)


# 进程级计数器
metrics = Metrics()
