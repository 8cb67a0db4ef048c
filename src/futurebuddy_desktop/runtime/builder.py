"""Runtime Builder - 配置并启动 runtime

Builder.default().run(context) 把生成的上下文原样交给后端，
并阻塞直到后端的事件循环结束。一个 Builder 只能启动一次。
"""

from typing import TYPE_CHECKING

from ..telemetry import get_logger, metrics
from .base import RuntimeBackend
from .factory import create_backend

if TYPE_CHECKING:
    from ..context import Context

logger = get_logger(__name__)


class Builder:
    """Runtime 构建器"""

    def __init__(self, backend: RuntimeBackend):
        self._backend = backend
        self._consumed = False

    @classmethod
    def default(cls) -> "Builder":
        """使用配置的后端（config.RUNTIME_BACKEND）创建 Builder

        Raises:
            UnknownBackendError: 后端类型未知
        """
        return cls(create_backend())

    @property
    def backend(self) -> RuntimeBackend:
        return self._backend

    def run(self, context: "Context") -> None:
        """启动 runtime（阻塞）

        Args:
            context: 生成的运行时上下文，原样传给后端

        Raises:
            RuntimeStartError: runtime 无法启动
            RuntimeError: 该 Builder 已经启动过
        """
        if self._consumed:
            raise RuntimeError("Builder.run() has already been called")
        self._consumed = True

        labels = {"backend": self._backend.name}
        metrics.inc("runtime.start", labels)
        logger.info(f"[Builder] Starting runtime (backend={self._backend.name})")

        try:
            self._backend.run(context)
        except Exception:
            metrics.inc("runtime.start_failed", labels)
            raise

        metrics.inc("runtime.exit", labels)
        logger.info("[Builder] Runtime exited")
