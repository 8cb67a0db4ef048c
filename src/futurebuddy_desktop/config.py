"""FutureBuddy Desktop 配置

配置分为以下几类：
- 应用标识：名称、致命错误诊断信息
- 构建目标：desktop / mobile（导入时确定，运行期不切换）
- Runtime 配置：后端选择、生成上下文路径
- 资源服务器配置：本地前端静态资源服务
- Webview 配置：原生窗口参数
- 日志 / 指标配置
"""

import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def _env_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


# === 应用标识 ===
APP_NAME = "FutureBuddy Desktop"
FATAL_MESSAGE = f"error while running {APP_NAME}"  # 启动失败时的固定诊断信息
FATAL_EXIT_CODE = 1

# === 构建目标 ===
BUILD_TARGET = os.environ.get("FUTUREBUDDY_BUILD_TARGET", "desktop")  # desktop | mobile

# === Runtime 配置 ===
RUNTIME_BACKEND = os.environ.get("FUTUREBUDDY_RUNTIME", "auto")  # webview | server | auto
CONTEXT_PATH = os.environ.get("FUTUREBUDDY_CONTEXT") or None  # None => 包内 generated/app.conf.json
DEV_MODE = _env_flag("FUTUREBUDDY_DEV", False)  # True => 加载 build.dev_url

# === 资源服务器配置 ===
ASSET_HOST = "127.0.0.1"
ASSET_PORT = _env_int("FUTUREBUDDY_ASSET_PORT", 0)  # 0 => 临时端口；非数字同样回退为 0
ASSET_READY_TIMEOUT = 10.0  # 等待服务就绪（秒）
ASSET_READY_POLL_INTERVAL = 0.1  # 就绪探测间隔（秒）
ASSET_SHUTDOWN_TIMEOUT = 5.0  # 停止服务等待时间（秒）
HEALTH_PATH = "/__futurebuddy/health"

# === Webview 配置 ===
WEBVIEW_GUI = os.environ.get("FUTUREBUDDY_WEBVIEW_GUI") or None  # None => pywebview 自动选择
WEBVIEW_DEBUG = _env_flag("FUTUREBUDDY_WEBVIEW_DEBUG", False)

# === 浏览器模式配置 ===
OPEN_BROWSER = _env_flag("FUTUREBUDDY_OPEN_BROWSER", True)

# === 日志配置 ===
LOG_LEVEL = os.environ.get("FUTUREBUDDY_LOG_LEVEL", "INFO")

# === 指标配置 ===
METRICS_ENABLED = True
