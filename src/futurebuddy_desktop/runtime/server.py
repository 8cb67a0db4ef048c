"""Browser mode runtime.

Serves the bundled frontend locally and opens it in the default browser.
Used where no native window can be created (e.g. Linux without a display).
"""

import webbrowser
from typing import TYPE_CHECKING

from futurebuddy_desktop import config
from futurebuddy_desktop.runtime.base import RuntimeBackend
from futurebuddy_desktop.telemetry import get_logger
from futurebuddy_desktop.web import AssetServer, AssetServerController

if TYPE_CHECKING:
    from futurebuddy_desktop.context import Context

logger = get_logger(__name__)


class ServerRuntime(RuntimeBackend):
    """Serve the frontend until the server stops or the user interrupts."""

    def __init__(self, open_browser: bool | None = None):
        self.open_browser = config.OPEN_BROWSER if open_browser is None else open_browser

    @property
    def name(self) -> str:
        return "server"

    def run(self, context: "Context") -> None:
        controller = AssetServerController(AssetServer(context).app)
        controller.start()
        try:
            controller.wait_ready()
            print(f"{context.config.product_name} running at {controller.url}")
            if self.open_browser:
                webbrowser.open(controller.url, new=1)
            controller.join()
        except KeyboardInterrupt:
            logger.info("[ServerRuntime] Interrupted, shutting down")
        finally:
            controller.stop()
