"""Asset server lifecycle.

Runs uvicorn in a daemon thread so the calling thread stays free for the
native window event loop (pywebview requires the main thread).
"""

import socket
import threading
import time

import httpx
import uvicorn

from futurebuddy_desktop import config
from futurebuddy_desktop.errors import RuntimeStartError
from futurebuddy_desktop.telemetry import get_logger, metrics, resolve_log_level

logger = get_logger(__name__)


class AssetServerController:
    """Manage the bundled asset server.

    The listening socket is bound in the caller's thread so that an
    unavailable port surfaces as :class:`RuntimeStartError` immediately
    instead of dying silently inside the server thread.
    """

    def __init__(self, app, host: str | None = None, port: int | None = None):
        self.app = app
        self.host = host or config.ASSET_HOST
        self.port = config.ASSET_PORT if port is None else port
        self._socket: socket.socket | None = None
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def url(self) -> str:
        return f"http://{self.host}:{self.port}"

    def start(self) -> None:
        """Bind the socket and start serving in a background thread.

        Raises:
            RuntimeStartError: If the socket cannot be bound
        """
        with self._lock:
            if self._thread and self._thread.is_alive():
                return

            sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
            try:
                sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
                sock.bind((self.host, self.port))
            except OSError as exc:
                sock.close()
                raise RuntimeStartError(
                    f"asset server cannot bind {self.host}:{self.port}: {exc}"
                ) from exc

            # port 0 => 系统分配
            self.port = sock.getsockname()[1]
            self._socket = sock

            uvicorn_config = uvicorn.Config(
                self.app,
                log_level=resolve_log_level(config.LOG_LEVEL),
                access_log=False,
            )
            self._server = uvicorn.Server(uvicorn_config)
            self._thread = threading.Thread(
                target=self._run_server, name="asset-server", daemon=True
            )
            self._thread.start()

        metrics.inc("asset_server.started")
        logger.info(f"[AssetServer] Starting at {self.url}")

    def _run_server(self) -> None:
        server = self._server
        if server is None:
            return
        try:
            server.run(sockets=[self._socket])
        except Exception as exc:
            logger.exception(f"[AssetServer] Server exited unexpectedly: {exc}")

    def wait_ready(self, timeout: float | None = None) -> None:
        """Block until the health endpoint answers.

        Raises:
            RuntimeStartError: If the server thread died or the timeout elapsed
        """
        timeout = config.ASSET_READY_TIMEOUT if timeout is None else timeout
        deadline = time.monotonic() + timeout
        health_url = f"{self.url}{config.HEALTH_PATH}"

        with httpx.Client(timeout=config.ASSET_READY_POLL_INTERVAL * 5, trust_env=False) as client:
            while time.monotonic() < deadline:
                if not self.is_running():
                    raise RuntimeStartError("asset server stopped during startup")
                try:
                    response = client.get(health_url)
                    if response.status_code == 200:
                        logger.debug(f"[AssetServer] Ready at {self.url}")
                        return
                except httpx.TransportError:
                    pass
                time.sleep(config.ASSET_READY_POLL_INTERVAL)

        raise RuntimeStartError(f"asset server not ready after {timeout:.1f}s")

    def is_running(self) -> bool:
        thread = self._thread
        return bool(thread and thread.is_alive())

    def join(self) -> None:
        """Block until the server thread exits."""
        thread = self._thread
        if thread:
            thread.join()

    def stop(self) -> None:
        with self._lock:
            if self._server is not None:
                self._server.should_exit = True
            thread = self._thread
        if thread:
            thread.join(timeout=config.ASSET_SHUTDOWN_TIMEOUT)
        if self._socket is not None:
            self._socket.close()
            self._socket = None
        logger.info("[AssetServer] Stopped")
