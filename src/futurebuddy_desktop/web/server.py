"""前端资源服务器"""

from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from futurebuddy_desktop import config
from futurebuddy_desktop.telemetry import get_logger

if TYPE_CHECKING:
    from futurebuddy_desktop.context import Context

logger = get_logger(__name__)


class AssetServer:
    """本地前端资源服务

    - HEALTH_PATH: 健康检查（用于启动就绪探测）
    - /: 前端打包目录（StaticFiles, html=True）；目录缺失时渲染 fallback 页面
    """

    def __init__(self, context: "Context"):
        self.context = context
        self.app = FastAPI(title=context.config.product_name, docs_url=None, redoc_url=None)

        templates_dir = Path(__file__).parent.parent / "templates"
        self.templates = Jinja2Templates(directory=str(templates_dir))

        self._setup_routes()

    @property
    def frontend_dir(self) -> Path | None:
        """可用的前端目录，不存在时返回 None"""
        path = self.context.frontend_dir
        if path is not None and path.is_dir():
            return path
        return None

    def _setup_routes(self):
        app_config = self.context.config

        @self.app.get(config.HEALTH_PATH)
        async def health():
            return {
                "status": "ok",
                "app": app_config.product_name,
                "version": app_config.version,
            }

        frontend_dir = self.frontend_dir
        if frontend_dir is not None:
            self.app.mount(
                "/", StaticFiles(directory=str(frontend_dir), html=True), name="frontend"
            )
            logger.info(f"[AssetServer] Serving frontend from {frontend_dir}")
            return

        expected = self.context.frontend_dir
        logger.warning(f"[AssetServer] Frontend not built, expected at {expected}")

        @self.app.get("/", response_class=HTMLResponse)
        async def fallback(request: Request):
            return self.templates.TemplateResponse(
                request,
                "fallback.html",
                {
                    "product_name": app_config.product_name,
                    "version": app_config.version,
                    "expected": str(expected) if expected else None,
                },
                status_code=503,
            )
