"""Bootstrap - 进程入口的启动流程

职责：
- 获取默认 Builder（后端由配置 / 平台决定）
- 原样附加生成的上下文
- 启动 runtime（阻塞，直到 runtime 正常关闭或启动失败）
- 启动失败：输出固定诊断信息并终止进程，不重试、不降级

不负责：
- runtime 启动之后的行为（窗口关闭语义、多窗口生命周期、崩溃重启）

状态流转：
    NOT_STARTED → RUNNING → TERMINATED_SUCCESS | TERMINATED_FATAL
"""

import sys
from enum import Enum
from typing import NoReturn

from .. import config
from ..context import generate_context
from ..target import mobile_entry_point
from ..telemetry import get_logger
from .builder import Builder

logger = get_logger(__name__)


class BootState(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    TERMINATED_SUCCESS = "terminated_success"
    TERMINATED_FATAL = "terminated_fatal"


# 进程内只允许启动一次
_state = BootState.NOT_STARTED


@mobile_entry_point
def run() -> None:
    """启动应用（进程入口，每个进程只调用一次）

    runtime 正常关闭时返回；启动失败时打印 config.FATAL_MESSAGE 到 stderr
    并以 config.FATAL_EXIT_CODE 退出。

    Raises:
        RuntimeError: 如果已经调用过 run()
        SystemExit: runtime 启动失败（任何异常均视为启动失败）
    """
    global _state

    if _state is not BootState.NOT_STARTED:
        raise RuntimeError(f"run() has already been called (state={_state.value})")

    try:
        builder = Builder.default()
        context = generate_context()
        _state = BootState.RUNNING
        builder.run(context)
    except Exception as exc:
        _state = BootState.TERMINATED_FATAL
        _abort(exc)

    _state = BootState.TERMINATED_SUCCESS
    logger.info("[Bootstrap] Shutdown complete")


def _abort(exc: Exception) -> NoReturn:
    logger.error(f"[Bootstrap] Runtime failed to start: {exc!r}")
    print(config.FATAL_MESSAGE, file=sys.stderr)
    raise SystemExit(config.FATAL_EXIT_CODE) from exc


def get_state() -> BootState:
    """获取当前启动状态"""
    return _state


def _reset_for_testing() -> None:
    """重置启动状态（仅用于测试）"""
    global _state
    _state = BootState.NOT_STARTED
