"""Runtime Backend 抽象接口

定义窗口化应用 runtime 的统一接口，支持不同宿主：
- webview: pywebview 原生窗口
- server: 浏览器模式（本地服务 + 默认浏览器）

设计原则：
1. 最小接口：只有一个阻塞的 run()
2. 启动失败统一抛出 RuntimeStartError
3. run() 正常返回即表示 runtime 正常关闭
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..context import Context


class RuntimeBackend(ABC):
    """Runtime 后端抽象接口

    使用示例:
        backend = WebviewRuntime()
        backend.run(generate_context())  # 阻塞直到最后一个窗口关闭
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """后端名称（如 "webview", "server"）"""
        pass

    @abstractmethod
    def run(self, context: "Context") -> None:
        """启动 runtime 并进入其事件循环

        Args:
            context: 生成的运行时上下文（只读）

        Raises:
            RuntimeStartError: runtime 无法启动
        """
        pass
