"""Generated Context - 构建期生成的应用配置

构建时生成 generated/app.conf.json（产品名、版本、前端资源位置、窗口定义），
运行时由 generate_context() 读取并校验为不可变的 Context。

Context 对 bootstrap 是不透明的：bootstrap 只负责把它原样交给 Builder，
字段只由 runtime 后端读取。
"""

import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from . import config
from .errors import RuntimeStartError
from .telemetry import get_logger

logger = get_logger(__name__)

GENERATED_PACKAGE = "futurebuddy_desktop.generated"
GENERATED_FILE = "app.conf.json"


class ContextError(RuntimeStartError):
    """生成上下文缺失或损坏"""


class WindowConfig(BaseModel):
    """原生窗口定义"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    label: str = "main"
    title: str
    width: int = Field(default=1280, gt=0)
    height: int = Field(default=800, gt=0)
    min_width: int = Field(default=200, gt=0)
    min_height: int = Field(default=100, gt=0)
    resizable: bool = True
    fullscreen: bool = False
    always_on_top: bool = False


class BuildConfig(BaseModel):
    """前端资源位置

    frontend_dist: 打包好的前端目录（相对于配置文件）
    dev_url: 开发模式下加载的前端开发服务器地址
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    frontend_dist: str | None = None
    dev_url: str | None = None


class AppConfig(BaseModel):
    """应用配置（app.conf.json 的结构）"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    product_name: str
    version: str
    identifier: str
    build: BuildConfig = BuildConfig()
    windows: tuple[WindowConfig, ...]

    @field_validator("windows")
    @classmethod
    def _check_windows(cls, windows: tuple[WindowConfig, ...]) -> tuple[WindowConfig, ...]:
        if not windows:
            raise ValueError("at least one window is required")
        labels = [window.label for window in windows]
        duplicates = sorted({label for label in labels if labels.count(label) > 1})
        if duplicates:
            raise ValueError(f"duplicate window labels: {', '.join(duplicates)}")
        return windows


@dataclass(frozen=True)
class Context:
    """运行时上下文（每个进程生成一次，只被 Builder 消费一次）"""

    config: AppConfig
    source: Path

    @property
    def frontend_dir(self) -> Path | None:
        """前端资源目录（相对路径基于配置文件所在目录）"""
        dist = self.config.build.frontend_dist
        if not dist:
            return None
        path = Path(dist)
        if not path.is_absolute():
            path = self.source.parent / path
        return path.resolve()


def _default_context_path() -> Path:
    return Path(str(resources.files(GENERATED_PACKAGE).joinpath(GENERATED_FILE)))


def generate_context(path: str | Path | None = None) -> Context:
    """读取生成的配置并构造 Context

    Args:
        path: 配置文件路径，None 使用 config.CONTEXT_PATH 或包内默认文件

    Returns:
        不可变的 Context

    Raises:
        ContextError: 文件缺失、JSON 无效或不符合结构
    """
    source = Path(path or config.CONTEXT_PATH or _default_context_path())

    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ContextError(f"generated context not found: {source}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ContextError(f"generated context unreadable: {source}: {exc}") from exc

    try:
        app_config = AppConfig.model_validate(raw)
    except ValidationError as exc:
        raise ContextError(f"generated context invalid: {source}: {exc}") from exc

    logger.debug(
        f"[Context] Loaded {app_config.product_name} {app_config.version} from {source}"
    )
    return Context(config=app_config, source=source)
