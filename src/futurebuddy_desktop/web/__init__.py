"""前端资源服务模块"""

from futurebuddy_desktop.web.controller import AssetServerController
from futurebuddy_desktop.web.server import AssetServer

__all__ = ["AssetServer", "AssetServerController"]
