"""Native window runtime backed by pywebview."""

from typing import TYPE_CHECKING

from futurebuddy_desktop import config
from futurebuddy_desktop.errors import RuntimeStartError
from futurebuddy_desktop.runtime.base import RuntimeBackend
from futurebuddy_desktop.telemetry import get_logger
from futurebuddy_desktop.web import AssetServer, AssetServerController

if TYPE_CHECKING:
    from futurebuddy_desktop.context import Context

logger = get_logger(__name__)


class WebviewRuntime(RuntimeBackend):
    """Open one native window per configured window and block until all close.

    Content comes from ``build.dev_url`` in dev mode, otherwise from the
    local asset server serving the bundled frontend.
    """

    def __init__(self, gui: str | None = None, debug: bool | None = None):
        self.gui = gui if gui is not None else config.WEBVIEW_GUI
        self.debug = config.WEBVIEW_DEBUG if debug is None else debug

    @property
    def name(self) -> str:
        return "webview"

    def run(self, context: "Context") -> None:
        try:
            import webview
        except ImportError as exc:
            raise RuntimeStartError(f"pywebview is unavailable: {exc}") from exc

        controller: AssetServerController | None = None
        dev_url = context.config.build.dev_url
        if config.DEV_MODE and dev_url:
            url = dev_url
            logger.info(f"[Webview] Dev mode, loading {url}")
        else:
            controller = AssetServerController(AssetServer(context).app)
            controller.start()
            url = controller.url

        try:
            if controller is not None:
                controller.wait_ready()

            for window in context.config.windows:
                webview.create_window(
                    window.title,
                    url=url,
                    width=window.width,
                    height=window.height,
                    min_size=(window.min_width, window.min_height),
                    resizable=window.resizable,
                    fullscreen=window.fullscreen,
                    on_top=window.always_on_top,
                )
                logger.debug(f"[Webview] Created window '{window.label}'")

            logger.info(f"[Webview] Starting event loop ({len(context.config.windows)} window(s))")
            webview.start(gui=self.gui, debug=self.debug)
        except RuntimeStartError:
            raise
        except Exception as exc:
            raise RuntimeStartError(f"webview failed to start: {exc}") from exc
        finally:
            if controller is not None:
                controller.stop()

        logger.info("[Webview] All windows closed")
