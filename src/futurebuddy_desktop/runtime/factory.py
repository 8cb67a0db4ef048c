"""Runtime backend factory."""

import os
import platform
from collections.abc import Callable

from futurebuddy_desktop import config
from futurebuddy_desktop.errors import UnknownBackendError
from futurebuddy_desktop.runtime.base import RuntimeBackend
from futurebuddy_desktop.telemetry import get_logger

logger = get_logger(__name__)

_extra_backends: dict[str, Callable[[], RuntimeBackend]] = {}


def detect_backend() -> str:
    """Detect the runtime backend from the platform.

    Returns:
        "webview" on Windows/macOS or when a display server is available,
        otherwise "server"
    """
    if platform.system() in ("Windows", "Darwin"):
        return "webview"
    if os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"):
        return "webview"
    return "server"


def register_backend(name: str, factory: Callable[[], RuntimeBackend]) -> None:
    """Register an additional backend under ``name``.

    Args:
        name: Backend name used in ``FUTUREBUDDY_RUNTIME``
        factory: Zero-argument callable returning a RuntimeBackend
    """
    if name in ("webview", "server", "auto"):
        raise ValueError(f"Backend name is reserved: {name}")
    _extra_backends[name] = factory
    logger.debug(f"Registered runtime backend: {name}")


def unregister_backend(name: str) -> bool:
    """Remove a registered backend, returning whether it existed."""
    return _extra_backends.pop(name, None) is not None


def create_backend(backend_type: str | None = None) -> RuntimeBackend:
    """Create a runtime backend.

    Args:
        backend_type: Backend type ("webview", "server", "auto", or a
                      registered name). Default from config.

    Returns:
        RuntimeBackend instance

    Raises:
        UnknownBackendError: If the backend type is unknown
    """
    if backend_type is None:
        backend_type = config.RUNTIME_BACKEND

    if backend_type == "auto":
        backend_type = detect_backend()
        logger.info(f"Auto-detected runtime backend: {backend_type}")

    if backend_type == "webview":
        from futurebuddy_desktop.runtime.webview import WebviewRuntime

        return WebviewRuntime()

    if backend_type == "server":
        from futurebuddy_desktop.runtime.server import ServerRuntime

        return ServerRuntime()

    factory = _extra_backends.get(backend_type)
    if factory is not None:
        return factory()

    raise UnknownBackendError(f"Unknown runtime backend: {backend_type}")
